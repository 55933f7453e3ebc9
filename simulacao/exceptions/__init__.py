from .servico import ServicoContratosIndisponivel
from .simulate import BancoNaoEncontradoException, PrazoInvalidoException
