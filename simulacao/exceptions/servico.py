from typing import Optional

from django.utils.translation import gettext as _
from rest_framework import status
from rest_framework.exceptions import APIException


class ServicoContratosIndisponivel(APIException):
    """Transport failure talking to the bank catalog / parse service."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_code = 'servico_indisponivel'

    def __init__(self, endpoint: str, motivo: Optional[str] = None):
        self.endpoint = endpoint
        self.motivo = motivo
        detail = _('Serviço de contratos indisponível (%(endpoint)s).') % {
            'endpoint': endpoint
        }
        super().__init__(detail=detail)
