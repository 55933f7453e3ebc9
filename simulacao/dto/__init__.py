from .oferta import (
    BancoDestino,
    ContratoAvaliado,
    EstadoSimulacao,
    ResultadoSimulacao,
    ResumoOferta,
)
from .taxas import PoliticaLiberacao, TaxasSimulacao, valor_configurado
