"""
Implements tests for the recalculation pipeline of the operator screen.
"""
# thirty
from django.test import SimpleTestCase

# local
from simulacao.constants import (
    AVISO_NENHUM_CONTRATO_IDENTIFICADO,
    AVISO_SEM_CONTRATOS,
    ModalidadeEnum,
)
from simulacao.dto import BancoDestino, EstadoSimulacao, PoliticaLiberacao, TaxasSimulacao
from simulacao.parsers.contratos import parse_contratos
from simulacao.services.simulacao import alternar_exclusao, recalcular
from simulacao.tests.base_test import (
    CONTRATO_C6,
    CONTRATO_PAN,
    CONTRATO_QI,
    BaseTestContext,
)


class RecalcularTest(SimpleTestCase, BaseTestContext):
    def setUp(self):
        self.politica = PoliticaLiberacao()
        self.estado = EstadoSimulacao(
            texto=self.texto_contratos(CONTRATO_QI, CONTRATO_C6, CONTRATO_PAN),
            taxas=self.taxas_padrao(),
            prazo=96,
        )

    def test_empty_text(self):
        resultado = recalcular(EstadoSimulacao(texto='  \n'), self.politica)

        self.assertEqual(resultado.avaliados, [])
        self.assertIsNone(resultado.resumo)
        self.assertEqual(resultado.aviso, AVISO_SEM_CONTRATOS)

    def test_text_without_contracts(self):
        resultado = recalcular(EstadoSimulacao(texto='qualquer coisa'), self.politica)

        self.assertEqual(resultado.aviso, AVISO_NENHUM_CONTRATO_IDENTIFICADO)

    def test_classifies_and_aggregates(self):
        resultado = recalcular(self.estado, self.politica)

        self.assertIsNone(resultado.aviso)
        self.assertEqual(len(resultado.avaliados), 3)
        self.assertEqual(
            [a.contrato.contrato for a in resultado.liberam], ['PAN778899']
        )
        self.assertEqual(
            [a.motivo.descricao for a in resultado.nao_liberam],
            ['Não libera (Valor Negativo)', 'Parcela abaixo do minimo'],
        )
        self.assertEqual(
            resultado.resumo.valor_total_liberado,
            resultado.liberam[0].valor_disponivel,
        )

    def test_exclusion_toggle(self):
        alternar_exclusao(self.estado, 2)
        excluido = recalcular(self.estado, self.politica)

        alternar_exclusao(self.estado, 2)
        incluido = recalcular(self.estado, self.politica)

        self.assertEqual(excluido.resumo.contratos, [])
        self.assertEqual(excluido.resumo.valor_total_liberado, 0)
        self.assertEqual(len(incluido.resumo.contratos), 1)
        self.assertEqual(self.estado.excluidos, set())

    def test_bank_rates_when_operator_rates_are_missing(self):
        banco = BancoDestino(
            codigo='626',
            nome='Banco C6 Consignado',
            taxas=TaxasSimulacao(taxa_novo=1.0, taxa_refin=1.0, taxa_portabilidade=1.0),
        )
        estado = EstadoSimulacao(texto=CONTRATO_QI, banco=banco)

        resultado = recalcular(estado, self.politica)

        # at 1% the QI contract releases credit
        self.assertTrue(resultado.avaliados[0].libera)
        self.assertIn('Banco C6 Consignado', resultado.resumo.texto())

    def test_without_bank_or_rates(self):
        resultado = recalcular(EstadoSimulacao(texto=CONTRATO_PAN), self.politica)

        self.assertEqual(resultado.avaliados[0].vp_novo, 0)
        self.assertEqual(resultado.resumo.valor_total_liberado, 0)
        self.assertIn('Banco XP', resultado.resumo.texto())

    def test_portability_rate(self):
        self.estado.taxas = TaxasSimulacao(taxa_portabilidade=10.0)
        self.estado.modalidade = ModalidadeEnum.PORTABILIDADE

        resultado = recalcular(self.estado, self.politica)

        self.assertEqual(resultado.liberam, [])

    def test_records_from_parse_service(self):
        contratos = parse_contratos(CONTRATO_PAN)

        resultado = recalcular(
            EstadoSimulacao(taxas=self.taxas_padrao()), self.politica, contratos
        )

        self.assertEqual(len(resultado.liberam), 1)

    def test_as_dict(self):
        dados = recalcular(self.estado, self.politica).as_dict()

        self.assertEqual(len(dados['contratos']), 3)
        self.assertEqual(dados['contratos'][0]['classificacao'], 'NAO_LIBERA')
        self.assertEqual(dados['contratos'][2]['classificacao'], 'LIBERA')
        self.assertEqual(dados['resumo']['prazo'], 96)
        self.assertIn('texto', dados['resumo'])
        self.assertIsNone(dados['aviso'])
