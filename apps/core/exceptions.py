# apps/core/exceptions.py

"""
Erros do domínio

As mensagens são exibidas ao usuário sem alteração, por isso ficam aqui
junto com a classe.
"""

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied


class NaoAutenticado(Exception):
    """Operação chamada sem principal autenticado"""

    def __init__(self, mensagem="Usuário não autenticado"):
        super().__init__(mensagem)


class AcessoNegado(PermissionDenied):
    """Principal autenticado, mas sem o papel exigido"""


class DocumentoNaoEncontrado(ObjectDoesNotExist):
    mensagem_padrao = "Documento não encontrado"

    def __init__(self, mensagem=None):
        super().__init__(mensagem or self.mensagem_padrao)


class ProjetoNaoEncontrado(DocumentoNaoEncontrado):
    mensagem_padrao = "Projeto não encontrado"


class BoardNaoEncontrado(DocumentoNaoEncontrado):
    mensagem_padrao = "Board não encontrado"


class ColunaNaoEncontrada(DocumentoNaoEncontrado):
    mensagem_padrao = "Coluna não encontrada"


class TarefaNaoEncontrada(DocumentoNaoEncontrado):
    mensagem_padrao = "Tarefa não encontrada"


class UsuarioNaoEncontrado(DocumentoNaoEncontrado):
    mensagem_padrao = "Usuário não encontrado"


# === PROVEDOR DE IDENTIDADE ===

class ErroIdentidade(Exception):
    """Falha reportada pelo provedor de identidade"""


class EmailJaCadastrado(ErroIdentidade):
    def __init__(self, mensagem="Email já cadastrado no sistema"):
        super().__init__(mensagem)


class CredenciaisInvalidas(ErroIdentidade):
    def __init__(self, mensagem="Credenciais inválidas"):
        super().__init__(mensagem)
