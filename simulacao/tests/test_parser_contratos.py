"""
Implements tests for the pasted contract parser.
"""
# built in
import math
from unittest.mock import patch

# thirty
from django.test import SimpleTestCase

# local
from simulacao.parsers.contratos import (
    ContratoColado,
    TipoToken,
    classificar_segmento,
    normalizar_moeda,
    parse_contratos,
    parse_contratos_servico,
)
from simulacao.tests.base_test import (
    CONTRATO_C6,
    CONTRATO_PAN,
    CONTRATO_QI,
    BaseTestContext,
)


class NormalizarMoedaTest(SimpleTestCase):
    def test_brazilian_format(self):
        self.assertEqual(normalizar_moeda('R$ 11.141,19'), 11141.19)
        self.assertEqual(normalizar_moeda('215,49'), 215.49)
        self.assertEqual(normalizar_moeda('1.234.567,8'), 1234567.8)

    def test_plain_decimal_and_numbers(self):
        self.assertEqual(normalizar_moeda('11141.19'), 11141.19)
        self.assertEqual(normalizar_moeda(215), 215.0)
        self.assertEqual(normalizar_moeda('1.500'), 1500.0)

    def test_without_amount(self):
        self.assertIsNone(normalizar_moeda(None))
        self.assertIsNone(normalizar_moeda(''))
        self.assertIsNone(normalizar_moeda('R$'))

    def test_non_finite_amounts(self):
        self.assertIsNone(normalizar_moeda(math.nan))
        self.assertIsNone(normalizar_moeda(math.inf))
        self.assertIsNone(normalizar_moeda('9' * 400))


class ClassificarSegmentoTest(SimpleTestCase):
    def test_token_kinds(self):
        casos = {
            '329 - QI SOCIEDADE DE CREDITO DIRETO S A': TipoToken.BANCO,
            'QUA0001117593': TipoToken.CONTRATO,
            '24/10/2025': TipoToken.DATA,
            '11/2025': TipoToken.DATA,
            'R$ 994,17': TipoToken.MOEDA,
            '1,50%': TipoToken.PERCENTUAL,
            '0/96 - 96 Restantes': TipoToken.PROGRESSO,
            '11.141,19': TipoToken.DECIMAL,
            '96 Restantes': TipoToken.RESTANTES,
        }
        for segmento, tipo in casos.items():
            with self.subTest(segmento=segmento):
                self.assertEqual(classificar_segmento(segmento).tipo, tipo)

    def test_labelled_segment(self):
        token = classificar_segmento('Saldo devedor: R$ 9.000,00')

        self.assertEqual(token.tipo, TipoToken.MOEDA)
        self.assertEqual(token.rotulo, 'saldo devedor')

    def test_unrecognized(self):
        self.assertIsNone(classificar_segmento('   '))
        self.assertIsNone(classificar_segmento('Contratos ativos'))


class ParseContratosTest(SimpleTestCase, BaseTestContext):
    def test_single_block(self):
        # execute
        contratos = parse_contratos(CONTRATO_QI)

        # assert response
        self.assertEqual(len(contratos), 1)
        contrato = contratos[0]
        self.assertEqual(contrato.banco, '329 - QI SOCIEDADE DE CREDITO DIRETO S A')
        self.assertEqual(contrato.codigo_banco, '329')
        self.assertEqual(contrato.contrato, 'QUA0001117593')
        self.assertEqual(contrato.valor_parcela, 215.49)
        self.assertEqual(contrato.taxa_mensal, '1,50%')
        self.assertEqual(contrato.quitacao, 11141.19)
        self.assertEqual(contrato.saldo_devedor, 11141.19)
        self.assertEqual(contrato.parcelas_pagas, 0)
        self.assertEqual(contrato.parcelas_total, 96)
        self.assertEqual(contrato.parcelas_restantes, 96)

    def test_several_blocks_keep_order(self):
        texto = self.texto_contratos(CONTRATO_QI, CONTRATO_C6, CONTRATO_PAN)

        contratos = parse_contratos(texto)

        self.assertEqual(
            [c.contrato for c in contratos],
            ['QUA0001117593', 'CON0002233', 'PAN778899'],
        )
        self.assertEqual(contratos[1].valor_parcela, 35.0)
        self.assertEqual(contratos[1].parcelas_restantes, 74)
        self.assertEqual(contratos[2].quitacao, 8000.0)

    def test_idempotent(self):
        texto = self.texto_contratos(CONTRATO_QI, CONTRATO_PAN)

        self.assertEqual(parse_contratos(texto), parse_contratos(texto))

    def test_blank_lines_and_spaces_are_ignored(self):
        texto = '\n\n' + '\n\n   \n'.join(CONTRATO_QI.splitlines()) + '\n\n'

        self.assertEqual(parse_contratos(texto), parse_contratos(CONTRATO_QI))

    def test_reordered_fields(self):
        texto = '\n'.join(
            [
                '329 - QI SOCIEDADE DE CREDITO DIRETO S A',
                '0/96 - 96 Restantes',
                '11.141,19',
                'QUA0001117593',
                'R$ 994,17',
                '1,50%',
                'R$ 215,49',
                '24/10/2025',
            ]
        )

        contrato = parse_contratos(texto)[0]

        self.assertEqual(contrato.contrato, 'QUA0001117593')
        self.assertEqual(contrato.valor_parcela, 215.49)
        self.assertEqual(contrato.quitacao, 11141.19)
        self.assertEqual(contrato.parcelas_restantes, 96)

    def test_header_with_wide_spacing_around_hyphen(self):
        for cabecalho in (
            '329 -  QI SOCIEDADE DE CREDITO DIRETO S A',
            '329  -  QI SOCIEDADE DE CREDITO DIRETO S A',
            '329-QI SOCIEDADE DE CREDITO DIRETO S A',
        ):
            texto = '\n'.join([cabecalho] + CONTRATO_QI.splitlines()[1:])
            with self.subTest(cabecalho=cabecalho):
                self.assertEqual(parse_contratos(texto), parse_contratos(CONTRATO_QI))

    def test_single_line_with_tabs(self):
        texto = '\t'.join(CONTRATO_QI.splitlines())

        self.assertEqual(parse_contratos(texto), parse_contratos(CONTRATO_QI))

    def test_labelled_balance(self):
        texto = '\n'.join(
            [
                '623 - BANCO PAN S A',
                'Contrato: PAN778899',
                'Parcela: R$ 480,00',
                'Saldo devedor: 9.500,00',
            ]
        )

        contrato = parse_contratos(texto)[0]

        self.assertIsNone(contrato.quitacao)
        self.assertEqual(contrato.saldo_devedor_informado, 9500.0)
        self.assertEqual(contrato.saldo_devedor, 9500.0)
        self.assertEqual(contrato.valor_parcela, 480.0)

    def test_second_bare_decimal_is_informed_balance(self):
        texto = CONTRATO_QI + '\n11.500,00'

        contrato = parse_contratos(texto)[0]

        self.assertEqual(contrato.quitacao, 11141.19)
        self.assertEqual(contrato.saldo_devedor_informado, 11500.0)
        self.assertEqual(contrato.saldo_devedor, 11141.19)

    def test_incomplete_block_is_skipped(self):
        sem_parcela = '\n'.join(
            ['626 - BANCO C6 CONSIGNADO S A', 'CON0002233', '1.500,00']
        )
        texto = self.texto_contratos(sem_parcela, CONTRATO_QI)

        with self.assertLogs('simulacao', level='DEBUG') as logs:
            contratos = parse_contratos(texto)

        self.assertEqual([c.contrato for c in contratos], ['QUA0001117593'])
        self.assertTrue(any('Bloco incompleto' in linha for linha in logs.output))

    def test_text_without_contracts(self):
        self.assertEqual(parse_contratos(''), [])
        self.assertEqual(parse_contratos('texto qualquer\nsem contratos'), [])
        self.assertEqual(parse_contratos('QUA0001117593\nR$ 215,49'), [])


class ParseContratosServicoTest(SimpleTestCase):
    def test_service_dictionaries(self):
        itens = [
            {
                'banco': '329 - QI SOCIEDADE DE CREDITO DIRETO S A',
                'contrato': 'QUA0001117593',
                'quitacao': 11141.19,
                'saldo_devedor': None,
                'valor_parcela': '215,49',
                'parcelas_total': 96,
                'parcelas_pagas': 0,
                'parcelas_restantes': 96,
            },
            {'banco': '', 'contrato': 'SEM-BANCO-1'},
            {
                'banco': '623 - BANCO PAN S A',
                'contrato': 'PAN778899',
                'quitacao': 0,
                'saldo_devedor': '9.500,00',
            },
        ]

        contratos = parse_contratos_servico(itens)

        self.assertEqual(len(contratos), 2)
        self.assertEqual(contratos[0].valor_parcela, 215.49)
        self.assertEqual(contratos[0].codigo_banco, '329')
        self.assertEqual(contratos[1].valor_parcela, 0.0)
        self.assertIsNone(contratos[1].quitacao)
        self.assertEqual(contratos[1].saldo_devedor, 9500.0)

    def test_service_payload_rebuilds_the_record(self):
        contrato = parse_contratos(CONTRATO_QI)[0]

        self.assertEqual(ContratoColado.from_servico(contrato.to_servico()), contrato)

    def test_malformed_numbers_do_not_raise(self):
        item = {
            'banco': '329 - QI SOCIEDADE DE CREDITO DIRETO S A',
            'contrato': 'QUA0001117593',
            'valor_parcela': 215.49,
            'quitacao': math.nan,
            'parcelas_total': '1e999',
            'parcelas_pagas': 0,
            'taxa_mensal': 1.5,
        }

        contrato = ContratoColado.from_servico(item)

        self.assertIsNone(contrato.parcelas_total)
        self.assertIsNone(contrato.quitacao)
        self.assertEqual(contrato.saldo_devedor, 0.0)
        self.assertEqual(contrato.taxa_mensal, '1.5')

    @patch('simulacao.parsers.contratos._to_int', return_value='doze')
    def test_invalid_record_is_skipped(self, _):
        itens = [
            {
                'banco': '623 - BANCO PAN S A',
                'contrato': 'PAN778899',
                'valor_parcela': 480,
                'parcelas_pagas': 12,
            },
        ]

        with self.assertLogs('simulacao', level='DEBUG') as logs:
            contratos = parse_contratos_servico(itens)

        self.assertEqual(contratos, [])
        self.assertTrue(any('PAN778899' in linha for linha in logs.output))
