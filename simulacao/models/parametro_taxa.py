import logging
from decimal import Decimal

from django.db import models

from simulacao.constants import ChaveTaxaEnum
from simulacao.dto import TaxasSimulacao
from utils.models import SetUpModel

logger = logging.getLogger('simulacao')

CHAVES_TAXA = (
    (ChaveTaxaEnum.TAXA_NOVO, 'Taxa operação nova'),
    (ChaveTaxaEnum.TAXA_REFIN, 'Taxa refinanciamento'),
    (ChaveTaxaEnum.TAXA_PORTABILIDADE, 'Taxa portabilidade'),
)


class ParametroTaxa(SetUpModel):
    """Operator rate preferences, stored as key/value pairs."""

    chave = models.CharField(
        max_length=30, unique=True, choices=CHAVES_TAXA, verbose_name='Chave'
    )
    valor = models.DecimalField(
        verbose_name='Valor (% a.m.)', decimal_places=2, max_digits=5
    )

    def __str__(self):
        return f'{self.chave} = {self.valor}'

    class Meta:
        verbose_name = 'Taxa do operador'
        verbose_name_plural = '2. Taxas do operador'


def carregar_taxas() -> TaxasSimulacao:
    """Loads the saved rates, falling back to the defaults for missing keys."""
    salvas = {
        parametro.chave: float(parametro.valor)
        for parametro in ParametroTaxa.objects.all()
    }
    padrao = TaxasSimulacao()
    return TaxasSimulacao(
        taxa_novo=salvas.get(ChaveTaxaEnum.TAXA_NOVO, padrao.taxa_novo),
        taxa_refin=salvas.get(ChaveTaxaEnum.TAXA_REFIN, padrao.taxa_refin),
        taxa_portabilidade=salvas.get(
            ChaveTaxaEnum.TAXA_PORTABILIDADE, padrao.taxa_portabilidade
        ),
    )


def salvar_taxas(taxas: TaxasSimulacao) -> TaxasSimulacao:
    valores = {
        ChaveTaxaEnum.TAXA_NOVO: taxas.taxa_novo,
        ChaveTaxaEnum.TAXA_REFIN: taxas.taxa_refin,
        ChaveTaxaEnum.TAXA_PORTABILIDADE: taxas.taxa_portabilidade,
    }
    for chave, valor in valores.items():
        ParametroTaxa.objects.update_or_create(
            chave=chave, defaults={'valor': Decimal(str(round(valor, 2)))}
        )

    logger.info(f'Taxas do operador atualizadas: {taxas.as_dict()}')
    return carregar_taxas()
