import logging
from typing import Any, Optional

import requests
from django.conf import settings

from simulacao.dto import BancoDestino, TaxasSimulacao
from simulacao.exceptions import ServicoContratosIndisponivel
from simulacao.parsers.contratos import ContratoColado, parse_contratos_servico

logger = logging.getLogger('simulacao')

CHAVES_TAXA = ('taxa_novo', 'taxa_refin', 'taxa_portabilidade')


class ServicoContratosClient:
    """
    Client for the remote bank catalog / contract parse service.

    Transport failures are raised as ServicoContratosIndisponivel; no retry
    is attempted and no contract data is made up.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        self.base_url = (base_url or settings.SERVICO_CONTRATOS_URL).rstrip('/')
        self.timeout = timeout or settings.SERVICO_CONTRATOS_TIMEOUT

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        url = f'{self.base_url}{endpoint}'
        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f'Erro ao chamar o serviço de contratos ({url}): {e}')
            raise ServicoContratosIndisponivel(endpoint, str(e)) from e
        except ValueError as e:
            logger.error(f'Resposta inválida do serviço de contratos ({url}): {e}')
            raise ServicoContratosIndisponivel(endpoint, str(e)) from e

    def listar_bancos(self) -> list[BancoDestino]:
        bancos = []
        for item in self._request('GET', '/bancos/') or []:
            bancos.append(
                BancoDestino(
                    codigo=str(item.get('codigo')),
                    nome=item.get('nome') or '',
                    taxas=TaxasSimulacao(
                        **{
                            chave: item[chave]
                            for chave in CHAVES_TAXA
                            if item.get(chave) is not None
                        }
                    ),
                )
            )
        return bancos

    def parse_contratos(
        self, texto: str, taxas: Optional[TaxasSimulacao] = None
    ) -> list[ContratoColado]:
        body: dict[str, Any] = {'texto': texto}
        if taxas is not None:
            body.update(taxas.as_dict())

        itens = self._request('POST', '/parse-contratos/', json=body)
        return parse_contratos_servico(itens or [])
