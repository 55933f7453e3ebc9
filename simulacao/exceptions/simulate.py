from django.utils.translation import gettext as _

from core.common.exceptions import ClientException, ErrorMessage
from simulacao.constants import PRAZOS_DISPONIVEIS


class PrazoInvalidoException(ClientException):
    def __init__(self, prazo: int):
        prazos = ', '.join(str(p) for p in PRAZOS_DISPONIVEIS)
        self.message: ErrorMessage = ErrorMessage(
            error=_('Prazo de %(prazo)s meses inválido. Prazos disponíveis: %(prazos)s.')
            % {'prazo': prazo, 'prazos': prazos}
        )
        super().__init__(message=self.message)


class BancoNaoEncontradoException(ClientException):
    def __init__(self, codigo: str):
        self.message: ErrorMessage = ErrorMessage(
            error=_('Banco %(codigo)s não cadastrado.') % {'codigo': codigo}
        )
        super().__init__(message=self.message)
