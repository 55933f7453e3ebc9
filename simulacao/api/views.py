import logging
from typing import Optional

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from simulacao.communication.servico_contratos import ServicoContratosClient
from simulacao.constants import ModalidadeEnum
from simulacao.dto import BancoDestino, EstadoSimulacao, TaxasSimulacao
from simulacao.exceptions import BancoNaoEncontradoException
from simulacao.handlers.margem import simular_margem
from simulacao.models import Banco, ParametroTaxa, carregar_taxas, salvar_taxas
from simulacao.parsers.contratos import ContratoColado, parse_contratos
from simulacao.serializers import (
    BancoSerializer,
    ParseContratosSerializer,
    SimularMargemSerializer,
    SimularOfertaSerializer,
    TaxasSerializer,
)
from simulacao.services.simulacao import recalcular

logger = logging.getLogger('simulacao')


def obter_banco_destino(codigo: Optional[str]) -> Optional[BancoDestino]:
    if not codigo:
        return None
    try:
        return Banco.objects.get(codigo=codigo, ativo=True).to_destino()
    except Banco.DoesNotExist as e:
        logger.error(f'Banco destino {codigo} não cadastrado')
        raise BancoNaoEncontradoException(codigo) from e


def montar_taxas(
    banco: Optional[BancoDestino], taxas_informadas: dict[str, float]
) -> Optional[TaxasSimulacao]:
    """Bank rates overridden by the ones typed by the operator."""
    if banco is None and not taxas_informadas:
        return None

    base = banco.taxas.as_dict() if banco else carregar_taxas().as_dict()
    return TaxasSimulacao(**{**base, **taxas_informadas})


def identificar_contratos(
    texto: str, taxas: Optional[TaxasSimulacao] = None
) -> list[ContratoColado]:
    """
    Parses the pasted text in process, or through the remote parse service
    when SERVICO_CONTRATOS_REMOTO is enabled.

    Raises:
        ServicoContratosIndisponivel: remote service failure (HTTP 503)
    """
    if not settings.SERVICO_CONTRATOS_REMOTO:
        return parse_contratos(texto)
    return ServicoContratosClient().parse_contratos(texto, taxas)


class BancosAPIView(APIView):
    permission_classes = (AllowAny,)

    def get(self, request: Request) -> Response:
        if settings.SERVICO_CONTRATOS_REMOTO:
            bancos = ServicoContratosClient().listar_bancos()
            return Response(
                [
                    {'codigo': banco.codigo, 'nome': banco.nome, **banco.taxas.as_dict()}
                    for banco in bancos
                ]
            )

        bancos = Banco.objects.filter(ativo=True)
        return Response(BancoSerializer(bancos, many=True).data)

    def post(self, request: Request) -> Response:
        instance = Banco.objects.filter(codigo=request.data.get('codigo')).first()
        serializer = BancoSerializer(instance, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        logger.info(f'Banco {serializer.instance} salvo no catálogo')
        return Response(
            serializer.data,
            status=status.HTTP_200_OK if instance else status.HTTP_201_CREATED,
        )


class ParseContratosAPIView(APIView):
    permission_classes = (AllowAny,)

    def post(self, request: Request) -> Response:
        serializer = ParseContratosSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        contratos = identificar_contratos(
            serializer.validated_data['texto'],
            montar_taxas(None, serializer.taxas_informadas()),
        )
        return Response([contrato.to_servico() for contrato in contratos])


class TaxasAPIView(APIView):
    permission_classes = (AllowAny,)

    @staticmethod
    def montar_resposta(taxas: TaxasSimulacao) -> dict:
        return {
            **taxas.as_dict(),
            'atualizado_em': ParametroTaxa.ultima_atualizacao(),
        }

    def get(self, request: Request) -> Response:
        return Response(self.montar_resposta(carregar_taxas()))

    def put(self, request: Request) -> Response:
        serializer = TaxasSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        taxas = salvar_taxas(serializer.to_taxas())
        return Response(self.montar_resposta(taxas))


class SimularOfertaAPIView(APIView):
    permission_classes = (AllowAny,)

    def post(self, request: Request) -> Response:
        serializer = SimularOfertaSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        validated_data = serializer.validated_data

        banco = obter_banco_destino(validated_data.get('banco'))
        estado = EstadoSimulacao(
            texto=validated_data['texto'],
            taxas=montar_taxas(banco, serializer.taxas_informadas()),
            prazo=validated_data['prazo'],
            banco=banco,
            modalidade=ModalidadeEnum(validated_data['modalidade']),
            excluidos=set(validated_data['excluidos']),
        )

        contratos = None
        if settings.SERVICO_CONTRATOS_REMOTO and estado.texto.strip():
            contratos = identificar_contratos(estado.texto, estado.taxas)

        resultado = recalcular(estado, contratos=contratos)
        return Response(resultado.as_dict())


class SimularMargemAPIView(APIView):
    permission_classes = (AllowAny,)

    def post(self, request: Request) -> Response:
        serializer = SimularMargemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        validated_data = serializer.validated_data

        banco = obter_banco_destino(validated_data.get('banco'))
        simulacao = simular_margem(
            taxas=montar_taxas(banco, serializer.taxas_informadas()),
            prazo=validated_data['prazo'],
            parcela=validated_data.get('parcela'),
            margem=validated_data.get('margem'),
            valor_desejado=validated_data.get('valor_desejado'),
        )
        return Response(simulacao.as_dict())
