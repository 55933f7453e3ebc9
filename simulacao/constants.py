import sys
from enum import Enum

if sys.version_info >= (3, 11):
    from enum import StrEnum

    class ModalidadeEnum(StrEnum):
        NOVO = 'NOVO'
        REFIN = 'REFIN'
        PORTABILIDADE = 'PORTABILIDADE'

    class ClassificacaoEnum(StrEnum):
        LIBERA = 'LIBERA'
        NAO_LIBERA = 'NAO_LIBERA'

else:

    class ModalidadeEnum(str, Enum):
        NOVO = 'NOVO'
        REFIN = 'REFIN'
        PORTABILIDADE = 'PORTABILIDADE'

    class ClassificacaoEnum(str, Enum):
        LIBERA = 'LIBERA'
        NAO_LIBERA = 'NAO_LIBERA'


class MotivoNaoLiberaEnum(Enum):
    VALOR_NEGATIVO = 'Não libera (Valor Negativo)'
    ABAIXO_MINIMO = 'Parcela abaixo do minimo'

    @property
    def descricao(self) -> str:
        return self.value


class ChaveTaxaEnum(object):
    TAXA_NOVO = 'rateNew'
    TAXA_REFIN = 'rateRefin'
    TAXA_PORTABILIDADE = 'ratePortability'


TAXA_NOVO_PADRAO = 1.80
TAXA_REFIN_PADRAO = 1.50
TAXA_PORTABILIDADE_PADRAO = 1.50

PRAZO_PADRAO_MESES = 96
PRAZOS_DISPONIVEIS = (96, 84, 72, 60, 48)

VALOR_PARCELA_MINIMA_LIBERACAO = 100
SALDO_DEVEDOR_MINIMO_LIBERACAO = 4000

NOME_BANCO_PADRAO = 'Banco XP'
PRAZO_PAGAMENTO_OFERTA = 'Até 10 dias úteis'

AVISO_SEM_CONTRATOS = 'Nenhum contrato colado.'
AVISO_NENHUM_CONTRATO_IDENTIFICADO = 'Nenhum contrato identificado no texto colado.'
