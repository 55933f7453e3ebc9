from rest_framework import serializers

from simulacao.constants import PRAZO_PADRAO_MESES, PRAZOS_DISPONIVEIS, ModalidadeEnum
from simulacao.dto import TaxasSimulacao, valor_configurado
from simulacao.exceptions import PrazoInvalidoException
from simulacao.models import Banco

CAMPOS_TAXA = ('taxa_novo', 'taxa_refin', 'taxa_portabilidade')


class BancoSerializer(serializers.ModelSerializer):
    codigo = serializers.CharField(max_length=10)

    class Meta:
        model = Banco
        fields = (
            'codigo',
            'nome',
            'taxa_novo',
            'taxa_refin',
            'taxa_portabilidade',
            'ativo',
        )


class TaxasSerializer(serializers.Serializer):
    taxa_novo = serializers.FloatField(min_value=0)
    taxa_refin = serializers.FloatField(min_value=0)
    taxa_portabilidade = serializers.FloatField(min_value=0)

    def to_taxas(self) -> TaxasSimulacao:
        return TaxasSimulacao(**self.validated_data)


class TaxasOpcionaisMixin(serializers.Serializer):
    taxa_novo = serializers.FloatField(min_value=0, required=False, allow_null=True)
    taxa_refin = serializers.FloatField(min_value=0, required=False, allow_null=True)
    taxa_portabilidade = serializers.FloatField(
        min_value=0, required=False, allow_null=True
    )

    def taxas_informadas(self) -> dict[str, float]:
        return {
            campo: self.validated_data[campo]
            for campo in CAMPOS_TAXA
            if self.validated_data.get(campo) is not None
        }


def prazo_padrao() -> int:
    return valor_configurado('PRAZO_PADRAO_MESES', PRAZO_PADRAO_MESES)


class PrazoMixin(serializers.Serializer):
    prazo = serializers.IntegerField(default=prazo_padrao)

    def validate_prazo(self, prazo: int) -> int:
        if prazo not in PRAZOS_DISPONIVEIS:
            raise PrazoInvalidoException(prazo)
        return prazo


class ParseContratosSerializer(TaxasOpcionaisMixin):
    """
    Request of the parse service.

    texto : str
        Text copied from the benefit statement, one or more contracts.
    taxa_novo, taxa_refin, taxa_portabilidade : float, optional
        Rates forwarded to the remote parse service together with the
        stored defaults. The in-process parser does not use them.
    """

    texto = serializers.CharField(allow_blank=True, trim_whitespace=False)


class SimularOfertaSerializer(PrazoMixin, TaxasOpcionaisMixin):
    """
    Request of the offer simulation.

    texto : str
        Pasted contracts.
    banco : str, optional
        Destination bank code; without it every amount is zero.
    prazo : int
        New term in months (96, 84, 72, 60 or 48).
    modalidade : str
        Which rate applies: NOVO, REFIN or PORTABILIDADE.
    excluidos : list[int]
        Positions (0-based) removed from the offer by the operator.
    taxa_* : float, optional
        Overrides the bank rates.
    """

    texto = serializers.CharField(allow_blank=True, trim_whitespace=False)
    banco = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    modalidade = serializers.ChoiceField(
        choices=[(e.value, e.name) for e in ModalidadeEnum],
        default=ModalidadeEnum.REFIN.value,
    )
    excluidos = serializers.ListField(
        child=serializers.IntegerField(min_value=0), default=list
    )


class SimularMargemSerializer(PrazoMixin, TaxasOpcionaisMixin):
    banco = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    parcela = serializers.FloatField(min_value=0, required=False, allow_null=True)
    margem = serializers.FloatField(min_value=0, required=False, allow_null=True)
    valor_desejado = serializers.FloatField(
        min_value=0, required=False, allow_null=True
    )
