"""
Parser for contract excerpts pasted from the benefit statement screen.

The pasted text is a sequence of loosely structured blocks. Every block starts
with a bank header (``329 - QI SOCIEDADE DE CREDITO DIRETO S A``) and carries
typed tokens (contract number, dates, R$ amounts, rate, installment progress)
in whatever order the source screen printed them. Tokens are classified by
kind and assigned to fields by kind, so reordered pastes parse the same way.
"""
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger('simulacao')

RE_BANCO = re.compile(r'^(?P<codigo>\d{1,4})\s*-\s*(?P<nome>[^\d\s].*)$')
RE_DATA = re.compile(r'^(?:\d{1,2}/)?\d{1,2}/\d{4}$')
RE_MOEDA = re.compile(r'^R\$\s*(?P<valor>-?[\d.,]+)$', re.IGNORECASE)
RE_PERCENTUAL = re.compile(r'^\d+(?:[.,]\d+)?\s*%(?:\s*a\.?\s*m\.?)?$', re.IGNORECASE)
RE_PROGRESSO = re.compile(
    r'^(?P<pagas>\d{1,3})\s*/\s*(?P<total>\d{1,3})'
    r'(?:\s*-\s*(?P<restantes>\d{1,3})\s*restantes?)?$',
    re.IGNORECASE,
)
RE_RESTANTES = re.compile(
    r'^(?:(?P<antes>\d{1,3})\s*restantes?|restantes?\s*(?P<depois>\d{1,3})|(?P<solto>\d{1,3}))$',
    re.IGNORECASE,
)
RE_DECIMAL = re.compile(r'^-?(?:\d{1,3}(?:\.\d{3})+|\d+),\d{1,2}$')
RE_CONTRATO = re.compile(r'^(?=.*\d)[A-Za-z0-9][A-Za-z0-9\-_]{3,}$')
RE_ROTULO = re.compile(r'^(?P<rotulo>[^\d:][^:]*?)\s*:\s*(?P<valor>.+)$')
RE_SEPARADOR = re.compile(r'\t|\s{2,}|\s*\|\s*|;')
RE_CIFRAO = re.compile(r'R\$\s+', re.IGNORECASE)
RE_CABECALHO_BANCO = re.compile(
    r'(?P<inicio>^|[\t;|])\s*(?P<codigo>\d{1,4})\s*-\s*(?=[^\d\s])'
)


class TipoToken(Enum):
    BANCO = 'banco'
    CONTRATO = 'contrato'
    DATA = 'data'
    MOEDA = 'moeda'
    PERCENTUAL = 'percentual'
    PROGRESSO = 'progresso'
    RESTANTES = 'restantes'
    DECIMAL = 'decimal'


@dataclass(frozen=True)
class Token:
    tipo: TipoToken
    texto: str
    rotulo: str = ''
    match: Optional[re.Match] = None


def normalizar_moeda(valor: Union[str, int, float, None]) -> Optional[float]:
    """
    Converts a Brazilian formatted amount (``R$ 11.141,19``) into a float.

    Plain decimals (``11141.19``) and numbers are accepted as well, so the
    same function handles parse-service payloads.

    Returns:
        float or None when the value carries no amount
    """
    if valor is None or isinstance(valor, bool):
        return None

    if isinstance(valor, (int, float)):
        valor = float(valor)
        return valor if math.isfinite(valor) else None

    texto = re.sub(r'[^\d.,-]', '', str(valor))
    if not re.search(r'\d', texto):
        return None

    if ',' in texto:
        texto = texto.replace('.', '').replace(',', '.')
    elif texto.count('.') > 1 or re.fullmatch(r'-?\d{1,3}\.\d{3}', texto):
        texto = texto.replace('.', '')

    try:
        numero = float(texto)
    except ValueError:
        return None
    return numero if math.isfinite(numero) else None


def _to_int(valor: Any) -> Optional[int]:
    if valor is None or isinstance(valor, bool) or valor == '':
        return None
    try:
        return int(float(str(valor).strip()))
    except (ValueError, OverflowError):
        return None


class ContratoColado(BaseModel):
    """Contract identified in the pasted text (or received from the parse service)."""

    model_config = ConfigDict(frozen=True)

    banco: str
    contrato: str
    valor_parcela: float
    codigo_banco: Optional[str] = None
    taxa_mensal: Optional[str] = None
    quitacao: Optional[float] = None
    saldo_devedor_informado: Optional[float] = None
    parcelas_total: Optional[int] = None
    parcelas_pagas: Optional[int] = None
    parcelas_restantes_informadas: Optional[int] = None

    @property
    def saldo_devedor(self) -> float:
        # quitação has priority over the informed balance
        if self.quitacao is not None:
            return self.quitacao
        if self.saldo_devedor_informado is not None:
            return self.saldo_devedor_informado
        return 0.0

    @property
    def parcelas_restantes(self) -> Optional[int]:
        if self.parcelas_total is not None and self.parcelas_pagas is not None:
            return self.parcelas_total - self.parcelas_pagas
        return self.parcelas_restantes_informadas

    @classmethod
    def from_servico(cls, data: dict) -> Optional['ContratoColado']:
        """
        Builds a record from a parse-service dictionary.

        Dictionaries without bank and contract identification are discarded.
        """
        if not isinstance(data, dict):
            return None

        banco = str(data.get('banco') or '').strip()
        contrato = str(data.get('contrato') or '').strip()
        if not banco or not contrato:
            return None

        codigo_banco = None
        if match := RE_BANCO.match(banco):
            codigo_banco = match.group('codigo')

        taxa_mensal = data.get('taxa_mensal')
        try:
            return cls(
                banco=banco,
                contrato=contrato,
                codigo_banco=codigo_banco,
                valor_parcela=normalizar_moeda(data.get('valor_parcela')) or 0.0,
                taxa_mensal=str(taxa_mensal) if taxa_mensal is not None else None,
                quitacao=normalizar_moeda(data.get('quitacao')) or None,
                saldo_devedor_informado=normalizar_moeda(data.get('saldo_devedor')),
                parcelas_total=_to_int(data.get('parcelas_total')),
                parcelas_pagas=_to_int(data.get('parcelas_pagas')),
                parcelas_restantes_informadas=_to_int(data.get('parcelas_restantes')),
            )
        except ValidationError as e:
            logger.debug(f'Contrato do servico ignorado: {contrato} ({e})')
            return None

    def to_servico(self) -> dict[str, Any]:
        return {
            'banco': self.banco,
            'contrato': self.contrato,
            'quitacao': self.quitacao,
            'saldo_devedor': self.saldo_devedor_informado,
            'valor_parcela': self.valor_parcela,
            'parcelas_total': self.parcelas_total,
            'parcelas_pagas': self.parcelas_pagas,
            'parcelas_restantes': self.parcelas_restantes_informadas,
            'taxa_mensal': self.taxa_mensal,
        }


def classificar_segmento(segmento: str) -> Optional[Token]:
    """Returns the token for a single pasted segment, or None when unrecognized."""
    texto = segmento.strip()
    if not texto:
        return None

    rotulo = ''
    if (match := RE_ROTULO.match(texto)) and not RE_BANCO.match(texto):
        rotulo = match.group('rotulo').strip().lower()
        texto = match.group('valor').strip()

    classificadores = (
        (TipoToken.BANCO, RE_BANCO),
        (TipoToken.DATA, RE_DATA),
        (TipoToken.MOEDA, RE_MOEDA),
        (TipoToken.PERCENTUAL, RE_PERCENTUAL),
        (TipoToken.PROGRESSO, RE_PROGRESSO),
        (TipoToken.DECIMAL, RE_DECIMAL),
        (TipoToken.RESTANTES, RE_RESTANTES),
        (TipoToken.CONTRATO, RE_CONTRATO),
    )
    for tipo, regex in classificadores:
        if match := regex.match(texto):
            return Token(tipo=tipo, texto=texto, rotulo=rotulo, match=match)

    return None


def tokenizar(texto: str) -> list[Token]:
    tokens = []
    for linha in (texto or '').splitlines():
        linha = RE_CIFRAO.sub('R$ ', linha)
        # "329 -  QI" must not be split by the wide-space separator
        linha = RE_CABECALHO_BANCO.sub(r'\g<inicio>\g<codigo> - ', linha)
        for segmento in RE_SEPARADOR.split(linha):
            if token := classificar_segmento(segmento):
                tokens.append(token)
    return tokens


def agrupar_blocos(tokens: Iterable[Token]) -> list[list[Token]]:
    """Splits tokens into blocks, each one starting on a bank header."""
    blocos: list[list[Token]] = []
    atual: Optional[list[Token]] = None

    for token in tokens:
        if token.tipo == TipoToken.BANCO:
            atual = [token]
            blocos.append(atual)
        elif atual is not None:
            atual.append(token)

    return blocos


def _eh_saldo(rotulo: str) -> bool:
    return 'saldo' in rotulo


def _eh_quitacao(rotulo: str) -> bool:
    return 'quita' in rotulo


def _eh_parcela(rotulo: str) -> bool:
    return 'parcela' in rotulo and 'saldo' not in rotulo


def montar_contrato(bloco: list[Token]) -> Optional[ContratoColado]:
    cabecalho = bloco[0]
    campos: dict[str, Any] = {
        'banco': cabecalho.texto,
        'codigo_banco': cabecalho.match.group('codigo'),
    }
    decimais_sem_rotulo = 0

    for posicao, token in enumerate(bloco[1:], start=1):
        proximo = bloco[posicao + 1] if posicao + 1 < len(bloco) else None

        match token.tipo:
            case TipoToken.CONTRATO:
                campos.setdefault('contrato', token.texto)

            case TipoToken.PERCENTUAL:
                campos.setdefault('taxa_mensal', token.texto)

            case TipoToken.PROGRESSO:
                campos.setdefault('parcelas_pagas', int(token.match.group('pagas')))
                campos.setdefault('parcelas_total', int(token.match.group('total')))
                if restantes := token.match.group('restantes'):
                    campos.setdefault('parcelas_restantes_informadas', int(restantes))

            case TipoToken.RESTANTES:
                grupos = token.match.groupdict()
                valor = grupos['antes'] or grupos['depois'] or grupos['solto']
                campos.setdefault('parcelas_restantes_informadas', int(valor))

            case TipoToken.MOEDA | TipoToken.DECIMAL:
                valor = normalizar_moeda(token.texto)
                if valor is None:
                    continue

                if _eh_saldo(token.rotulo):
                    campos.setdefault('saldo_devedor_informado', valor)
                elif _eh_quitacao(token.rotulo):
                    campos.setdefault('quitacao', valor)
                elif _eh_parcela(token.rotulo):
                    campos.setdefault('valor_parcela', valor)
                elif token.tipo == TipoToken.MOEDA:
                    # amount printed right before the rate is the contracted value
                    if proximo is not None and proximo.tipo == TipoToken.PERCENTUAL:
                        continue
                    campos.setdefault('valor_parcela', valor)
                else:
                    decimais_sem_rotulo += 1
                    if decimais_sem_rotulo == 1:
                        campos.setdefault('quitacao', valor)
                    else:
                        campos.setdefault('saldo_devedor_informado', valor)

    if 'contrato' not in campos or 'valor_parcela' not in campos:
        logger.debug(f'Bloco incompleto ignorado: {cabecalho.texto}')
        return None

    return ContratoColado(**campos)


def parse_contratos(texto: str) -> list[ContratoColado]:
    """
    Identifies the contracts present in the pasted text.

    Never raises on malformed input: blocks without bank, contract number or
    installment are skipped.

    Args:
        texto: text copied from the benefit statement

    Returns:
        list[ContratoColado]: contracts in order of appearance
    """
    contratos = []
    for bloco in agrupar_blocos(tokenizar(texto)):
        if contrato := montar_contrato(bloco):
            contratos.append(contrato)

    logger.info(f'{len(contratos)} contrato(s) identificado(s) no texto colado')
    return contratos


def parse_contratos_servico(itens: Iterable[dict]) -> list[ContratoColado]:
    """Same as parse_contratos, for dictionaries returned by the parse service."""
    contratos = []
    for item in itens or []:
        if contrato := ContratoColado.from_servico(item):
            contratos.append(contrato)
    return contratos
