"""
Recalculation pipeline for the operator screen.

pasted text -> parse_contratos -> avaliar_contratos -> agregar_oferta

Nothing is cached between calls: every change to the text, rates, term,
bank or exclusion set must be followed by a new call to `recalcular`.
"""
import logging
from typing import Optional

from simulacao.constants import AVISO_NENHUM_CONTRATO_IDENTIFICADO, AVISO_SEM_CONTRATOS
from simulacao.dto import EstadoSimulacao, PoliticaLiberacao, ResultadoSimulacao
from simulacao.handlers.elegibilidade import avaliar_contratos
from simulacao.handlers.oferta import agregar_oferta
from simulacao.parsers.contratos import ContratoColado, parse_contratos

logger = logging.getLogger('simulacao')


def recalcular(
    estado: EstadoSimulacao,
    politica: Optional[PoliticaLiberacao] = None,
    contratos: Optional[list[ContratoColado]] = None,
) -> ResultadoSimulacao:
    """
    Runs the whole pipeline for the given state.

    Args:
        estado: state owned by the caller
        politica: thresholds; read from settings when omitted
        contratos: records already parsed elsewhere (parse service); when
            omitted the state text is parsed in process

    Returns:
        ResultadoSimulacao
    """
    if contratos is None:
        if not estado.texto.strip():
            return ResultadoSimulacao(aviso=AVISO_SEM_CONTRATOS)
        contratos = parse_contratos(estado.texto)

    if not contratos:
        return ResultadoSimulacao(aviso=AVISO_NENHUM_CONTRATO_IDENTIFICADO)

    politica = politica or PoliticaLiberacao.from_settings()
    taxas = estado.taxas
    if taxas is None and estado.banco is not None:
        taxas = estado.banco.taxas

    avaliados = avaliar_contratos(
        contratos, taxas, estado.prazo, estado.modalidade, politica
    )
    resumo = agregar_oferta(avaliados, estado.excluidos, estado.banco, estado.prazo)

    logger.info(
        f'{len(avaliados)} contrato(s) processado(s), '
        f'{len(resumo.contratos)} incluído(s) na oferta'
    )
    return ResultadoSimulacao(avaliados=avaliados, resumo=resumo)


def alternar_exclusao(estado: EstadoSimulacao, posicao: int) -> EstadoSimulacao:
    """Adds or removes a contract position from the caller's exclusion set."""
    if posicao in estado.excluidos:
        estado.excluidos.discard(posicao)
    else:
        estado.excluidos.add(posicao)
    return estado
