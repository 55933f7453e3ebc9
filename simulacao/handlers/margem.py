import logging
from dataclasses import asdict, dataclass
from typing import Optional

from simulacao.calcs import calc_payment_for_value, calc_value_for_payment
from simulacao.constants import PRAZO_PADRAO_MESES, PRAZOS_DISPONIVEIS, ModalidadeEnum
from simulacao.dto import TaxasSimulacao
from simulacao.exceptions.simulate import PrazoInvalidoException

logger = logging.getLogger('simulacao')


@dataclass
class SimulacaoMargem:
    prazo: int = PRAZO_PADRAO_MESES
    valor_liberado_aproximado: float = 0.0
    valor_por_margem: float = 0.0
    parcela_por_valor: float = 0.0

    def as_dict(self):
        return asdict(self)


def validar_prazo(prazo: int) -> int:
    if prazo not in PRAZOS_DISPONIVEIS:
        raise PrazoInvalidoException(prazo)
    return prazo


def simular_margem(
    taxas: Optional[TaxasSimulacao],
    prazo: int = PRAZO_PADRAO_MESES,
    parcela: Optional[float] = None,
    margem: Optional[float] = None,
    valor_desejado: Optional[float] = None,
) -> SimulacaoMargem:
    """
    Quick conversions used on the margin simulation panel.

    Args:
        taxas: destination bank rates; without them every figure is 0
        prazo: term in months
        parcela: typed installment, converted with the refin rate
        margem: available margin, converted into a new loan value
        valor_desejado: desired new loan value, converted into an installment

    Returns:
        SimulacaoMargem
    """
    validar_prazo(prazo)
    simulacao = SimulacaoMargem(prazo=prazo)

    if taxas is None:
        logger.info('Simulação de margem sem banco selecionado')
        return simulacao

    if parcela:
        simulacao.valor_liberado_aproximado = calc_value_for_payment(
            taxas.taxa_mensal(ModalidadeEnum.REFIN), prazo, parcela
        )

    if margem:
        simulacao.valor_por_margem = calc_value_for_payment(
            taxas.taxa_mensal(ModalidadeEnum.NOVO), prazo, margem
        )

    if valor_desejado:
        simulacao.parcela_por_valor = calc_payment_for_value(
            taxas.taxa_mensal(ModalidadeEnum.NOVO), prazo, valor_desejado
        )

    return simulacao
