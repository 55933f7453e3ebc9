from decimal import Decimal

from django.db import models

from simulacao.dto import BancoDestino, TaxasSimulacao


def _decimal(valor: float) -> Decimal:
    return Decimal(str(round(valor, 2)))


def taxa_novo_padrao() -> Decimal:
    return _decimal(TaxasSimulacao().taxa_novo)


def taxa_refin_padrao() -> Decimal:
    return _decimal(TaxasSimulacao().taxa_refin)


def taxa_portabilidade_padrao() -> Decimal:
    return _decimal(TaxasSimulacao().taxa_portabilidade)


class Banco(models.Model):
    codigo = models.CharField(
        max_length=10, unique=True, verbose_name='Código do banco'
    )
    nome = models.CharField(max_length=100, verbose_name='Nome do banco')
    taxa_novo = models.DecimalField(
        verbose_name='Taxa operação nova (% a.m.)',
        decimal_places=2,
        max_digits=5,
        default=taxa_novo_padrao,
    )
    taxa_refin = models.DecimalField(
        verbose_name='Taxa refinanciamento (% a.m.)',
        decimal_places=2,
        max_digits=5,
        default=taxa_refin_padrao,
    )
    taxa_portabilidade = models.DecimalField(
        verbose_name='Taxa portabilidade (% a.m.)',
        decimal_places=2,
        max_digits=5,
        default=taxa_portabilidade_padrao,
    )
    ativo = models.BooleanField(default=True, verbose_name='Banco ativo?')

    def __str__(self):
        return f'{self.codigo} - {self.nome}'

    def taxas(self) -> TaxasSimulacao:
        return TaxasSimulacao(
            taxa_novo=float(self.taxa_novo),
            taxa_refin=float(self.taxa_refin),
            taxa_portabilidade=float(self.taxa_portabilidade),
        )

    def to_destino(self) -> BancoDestino:
        return BancoDestino(codigo=self.codigo, nome=self.nome, taxas=self.taxas())

    class Meta:
        verbose_name = 'Banco destino'
        verbose_name_plural = '1. Bancos destino'
        ordering = ('codigo',)
