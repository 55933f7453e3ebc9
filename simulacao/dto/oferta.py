from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from simulacao.constants import (
    PRAZO_PADRAO_MESES,
    ClassificacaoEnum,
    ModalidadeEnum,
    MotivoNaoLiberaEnum,
)
from simulacao.dto.taxas import TaxasSimulacao
from simulacao.parsers.contratos import ContratoColado


@dataclass(frozen=True)
class ContratoAvaliado:
    contrato: ContratoColado
    saldo_devedor: float
    parcelas_restantes: Optional[int]
    vp_novo: float
    valor_disponivel: float
    classificacao: ClassificacaoEnum
    motivo: Optional[MotivoNaoLiberaEnum] = None

    @property
    def libera(self) -> bool:
        return self.classificacao == ClassificacaoEnum.LIBERA

    @property
    def valor_parcela(self) -> float:
        return self.contrato.valor_parcela

    def as_dict(self) -> dict[str, Any]:
        return {
            **self.contrato.to_servico(),
            'saldo_devedor': self.saldo_devedor,
            'parcelas_restantes': self.parcelas_restantes,
            'vp_novo': self.vp_novo,
            'valor_disponivel': self.valor_disponivel,
            'classificacao': self.classificacao.value,
            'motivo': self.motivo.descricao if self.motivo else None,
        }


@dataclass(frozen=True)
class BancoDestino:
    codigo: str
    nome: str
    taxas: TaxasSimulacao = field(default_factory=TaxasSimulacao)


@dataclass
class ResumoOferta:
    banco: Optional[BancoDestino]
    prazo: int
    contratos: list[ContratoAvaliado] = field(default_factory=list)
    valor_total_liberado: float = 0.0

    @property
    def nome_banco(self) -> Optional[str]:
        return self.banco.nome if self.banco else None

    def texto(self) -> str:
        from simulacao.handlers.oferta import formatar_oferta

        return formatar_oferta(self)

    def as_dict(self) -> dict[str, Any]:
        return {
            'banco': asdict(self.banco) if self.banco else None,
            'prazo': self.prazo,
            'contratos': [contrato.as_dict() for contrato in self.contratos],
            'valor_total_liberado': self.valor_total_liberado,
            'texto': self.texto(),
        }


@dataclass
class EstadoSimulacao:
    """
    State owned by the caller (operator screen).

    Every change to any field must be followed by a full recalculation;
    only `excluidos` is meant to survive across recalculations.
    """

    texto: str = ''
    taxas: Optional[TaxasSimulacao] = None
    prazo: int = PRAZO_PADRAO_MESES
    banco: Optional[BancoDestino] = None
    modalidade: ModalidadeEnum = ModalidadeEnum.REFIN
    excluidos: set[int] = field(default_factory=set)


@dataclass
class ResultadoSimulacao:
    avaliados: list[ContratoAvaliado] = field(default_factory=list)
    resumo: Optional[ResumoOferta] = None
    aviso: Optional[str] = None

    @property
    def liberam(self) -> list[ContratoAvaliado]:
        return [avaliado for avaliado in self.avaliados if avaliado.libera]

    @property
    def nao_liberam(self) -> list[ContratoAvaliado]:
        return [avaliado for avaliado in self.avaliados if not avaliado.libera]

    def as_dict(self) -> dict[str, Any]:
        return {
            'contratos': [avaliado.as_dict() for avaliado in self.avaliados],
            'resumo': self.resumo.as_dict() if self.resumo else None,
            'aviso': self.aviso,
        }
