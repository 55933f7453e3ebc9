import logging
import math
from typing import Optional

from simulacao.calcs import calc_available_amount, calc_present_value
from simulacao.constants import ClassificacaoEnum, ModalidadeEnum, MotivoNaoLiberaEnum
from simulacao.dto import ContratoAvaliado, PoliticaLiberacao, TaxasSimulacao
from simulacao.parsers.contratos import ContratoColado

logger = logging.getLogger('simulacao')


def classificar(
    valor_disponivel: float,
    valor_parcela: float,
    saldo_devedor: float,
    politica: PoliticaLiberacao,
) -> tuple[ClassificacaoEnum, Optional[MotivoNaoLiberaEnum]]:
    """
    Decides whether a contract releases credit. First matching rule wins.

    Returns:
        tuple: classification and, when it does not release, the reason
    """
    # a NaN amount compares false against every threshold
    if not math.isfinite(valor_disponivel) or valor_disponivel <= 0:
        return ClassificacaoEnum.NAO_LIBERA, MotivoNaoLiberaEnum.VALOR_NEGATIVO

    if (
        valor_parcela <= politica.valor_parcela_minima
        and saldo_devedor <= politica.saldo_devedor_minimo
    ):
        return ClassificacaoEnum.NAO_LIBERA, MotivoNaoLiberaEnum.ABAIXO_MINIMO

    return ClassificacaoEnum.LIBERA, None


def avaliar_contrato(
    contrato: ContratoColado,
    taxas: Optional[TaxasSimulacao],
    prazo: int,
    modalidade: ModalidadeEnum = ModalidadeEnum.REFIN,
    politica: Optional[PoliticaLiberacao] = None,
) -> ContratoAvaliado:
    """
    Evaluates a pasted contract against the destination bank rates.

    The new contract keeps the current installment over `prazo` months; the
    amount released is its present value minus the current debt.

    Args:
        contrato: contract identified in the pasted text
        taxas: destination bank rates, None when no bank is selected
        prazo: new term in months
        modalidade: which rate applies (new loan, refin or portability)
        politica: minimum installment and balance thresholds

    Returns:
        ContratoAvaliado
    """
    politica = politica or PoliticaLiberacao()
    saldo_devedor = contrato.saldo_devedor

    if taxas is None:
        vp_novo = 0.0
    else:
        vp_novo = calc_present_value(
            taxas.taxa_mensal(modalidade), prazo, contrato.valor_parcela
        )

    valor_disponivel = calc_available_amount(vp_novo, saldo_devedor)
    classificacao, motivo = classificar(
        valor_disponivel, contrato.valor_parcela, saldo_devedor, politica
    )

    logger.debug(
        f'Contrato {contrato.contrato} avaliado: vp_novo={vp_novo:.2f} '
        f'saldo={saldo_devedor:.2f} classificacao={classificacao.value}'
    )

    return ContratoAvaliado(
        contrato=contrato,
        saldo_devedor=saldo_devedor,
        parcelas_restantes=contrato.parcelas_restantes,
        vp_novo=vp_novo,
        valor_disponivel=valor_disponivel,
        classificacao=classificacao,
        motivo=motivo,
    )


def avaliar_contratos(
    contratos: list[ContratoColado],
    taxas: Optional[TaxasSimulacao],
    prazo: int,
    modalidade: ModalidadeEnum = ModalidadeEnum.REFIN,
    politica: Optional[PoliticaLiberacao] = None,
) -> list[ContratoAvaliado]:
    politica = politica or PoliticaLiberacao()
    return [
        avaliar_contrato(contrato, taxas, prazo, modalidade, politica)
        for contrato in contratos
    ]
