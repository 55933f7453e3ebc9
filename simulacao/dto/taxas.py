from dataclasses import field

from pydantic.dataclasses import dataclass

from simulacao.calcs import calc_percentage_interest
from simulacao.constants import (
    SALDO_DEVEDOR_MINIMO_LIBERACAO,
    TAXA_NOVO_PADRAO,
    TAXA_PORTABILIDADE_PADRAO,
    TAXA_REFIN_PADRAO,
    VALOR_PARCELA_MINIMA_LIBERACAO,
    ModalidadeEnum,
)


def valor_configurado(nome: str, padrao: float) -> float:
    """
    Reads a policy value from the Django settings.

    Every default rate and threshold goes through here, so an environment
    override reaches the DTOs, the bank catalog and the stored preferences
    alike. Outside a configured Django project the module constant is used.
    """
    from django.conf import settings

    if not settings.configured:
        return padrao
    return getattr(settings, nome, padrao)


def taxa_novo_padrao() -> float:
    return valor_configurado('TAXA_NOVO_PADRAO', TAXA_NOVO_PADRAO)


def taxa_refin_padrao() -> float:
    return valor_configurado('TAXA_REFIN_PADRAO', TAXA_REFIN_PADRAO)


def taxa_portabilidade_padrao() -> float:
    return valor_configurado('TAXA_PORTABILIDADE_PADRAO', TAXA_PORTABILIDADE_PADRAO)


@dataclass
class TaxasSimulacao:
    """Monthly rates in percent (1.50 means 1.5% a.m.)."""

    taxa_novo: float = field(default_factory=taxa_novo_padrao)
    taxa_refin: float = field(default_factory=taxa_refin_padrao)
    taxa_portabilidade: float = field(default_factory=taxa_portabilidade_padrao)

    def taxa_percentual(self, modalidade: ModalidadeEnum) -> float:
        match modalidade:
            case ModalidadeEnum.NOVO:
                return self.taxa_novo
            case ModalidadeEnum.PORTABILIDADE:
                return self.taxa_portabilidade
            case _:
                return self.taxa_refin

    def taxa_mensal(self, modalidade: ModalidadeEnum) -> float:
        return calc_percentage_interest(self.taxa_percentual(modalidade))

    def as_dict(self) -> dict[str, float]:
        return {
            'taxa_novo': self.taxa_novo,
            'taxa_refin': self.taxa_refin,
            'taxa_portabilidade': self.taxa_portabilidade,
        }


@dataclass
class PoliticaLiberacao:
    """Thresholds below which a contract is not worth refinancing."""

    valor_parcela_minima: float = field(
        default_factory=lambda: valor_configurado(
            'VALOR_PARCELA_MINIMA_LIBERACAO', VALOR_PARCELA_MINIMA_LIBERACAO
        )
    )
    saldo_devedor_minimo: float = field(
        default_factory=lambda: valor_configurado(
            'SALDO_DEVEDOR_MINIMO_LIBERACAO', SALDO_DEVEDOR_MINIMO_LIBERACAO
        )
    )

    @classmethod
    def from_settings(cls) -> 'PoliticaLiberacao':
        return cls()
