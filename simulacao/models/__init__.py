from .banco import Banco
from .parametro_taxa import ParametroTaxa, carregar_taxas, salvar_taxas
