import math
from typing import Iterable, Optional

from simulacao.constants import (
    NOME_BANCO_PADRAO,
    PRAZO_PADRAO_MESES,
    PRAZO_PAGAMENTO_OFERTA,
)
from simulacao.dto import BancoDestino, ContratoAvaliado, ResumoOferta


def real_br_money_mask(my_value):
    if my_value is None:
        return '0,00'
    a = '{:,.2f}'.format(float(my_value))
    b = a.replace(',', 'v')
    c = b.replace('.', ',')
    return c.replace('v', '.')


def contratos_incluidos(
    avaliados: Iterable[ContratoAvaliado], excluidos: Optional[set[int]] = None
) -> list[ContratoAvaliado]:
    """Contracts that release credit and were not excluded by the operator (by position)."""
    excluidos = excluidos or set()
    return [
        avaliado
        for posicao, avaliado in enumerate(avaliados)
        if avaliado.libera and posicao not in excluidos
    ]


def agregar_oferta(
    avaliados: Iterable[ContratoAvaliado],
    excluidos: Optional[set[int]] = None,
    banco: Optional[BancoDestino] = None,
    prazo: int = PRAZO_PADRAO_MESES,
) -> ResumoOferta:
    """
    Folds the evaluated contracts into the offer summary.

    The total is the exact sum of the included available amounts; rounding
    happens only when the offer is formatted.
    """
    incluidos = contratos_incluidos(avaliados, excluidos)
    return ResumoOferta(
        banco=banco,
        prazo=prazo,
        contratos=incluidos,
        valor_total_liberado=math.fsum(a.valor_disponivel for a in incluidos),
    )


def formatar_oferta(resumo: ResumoOferta) -> str:
    """
    Text shared with the client (clipboard). Downstream consumers depend on
    this exact layout.
    """
    nome_banco = resumo.nome_banco or NOME_BANCO_PADRAO

    texto = f'*Portabilidade para o {nome_banco} – Renovação em {resumo.prazo} meses!*\n\n'
    texto += f'📅 *Prazo para pagamento: {PRAZO_PAGAMENTO_OFERTA}*\n\n'

    for index, avaliado in enumerate(resumo.contratos):
        texto += f'🔹 {avaliado.contrato.banco.upper()}\n'
        texto += f'▫️ Parcela: R$ {real_br_money_mask(avaliado.valor_parcela)}\n'
        texto += (
            '▫️ *Valor liberado aproximado: '
            f'R$ {real_br_money_mask(avaliado.valor_disponivel)}*\n'
        )
        if index < len(resumo.contratos) - 1:
            texto += '\n'

    texto += (
        '\n💵 *Total aproximado disponível: '
        f'R$ {real_br_money_mask(resumo.valor_total_liberado)}*'
    )
    return texto
