# apps/core/permissions.py

from functools import wraps

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect

from .exceptions import NaoAutenticado


def papel_gerente():
    """Papel de membro autorizado a adicionar/alterar outros membros"""
    return getattr(settings, 'NEXO_MANAGER_ROLE', 'manager')


def esta_autenticado(principal):
    return principal is not None and getattr(principal, 'is_authenticated', False)


class NexoPermissions:
    """
    Verificações de acesso baseadas na coleção projectMembers

    São consultas comuns ao repositório de documentos, não travas atômicas.
    """

    @staticmethod
    def eh_membro(store, principal, projeto_id):
        """Verifica se o principal tem qualquer papel no projeto"""
        if not esta_autenticado(principal):
            return False

        return store.contar(
            'projectMembers',
            projectId=projeto_id,
            userId=principal.uid,
        ) > 0

    @staticmethod
    def eh_gerente(store, principal, projeto_id):
        """Verifica se o principal é gerente do projeto"""
        if not esta_autenticado(principal):
            return False

        return store.contar(
            'projectMembers',
            projectId=projeto_id,
            userId=principal.uid,
            role=papel_gerente(),
        ) > 0


# Decoradores para serviços

def requer_principal(metodo):
    """
    Decorador para métodos de serviço cujo primeiro argumento é o principal

    Falha com NaoAutenticado antes de qualquer acesso ao repositório.
    """

    @wraps(metodo)
    def wrapped(self, principal, *args, **kwargs):
        if not esta_autenticado(principal):
            raise NaoAutenticado()
        return metodo(self, principal, *args, **kwargs)

    return wrapped


# Decoradores para views

def requer_membro_projeto(view_func):
    """
    Decorador que verifica se o usuário participa do projeto
    Espera que a view receba projeto_id como parâmetro
    """

    @wraps(view_func)
    def wrapped_view(request, projeto_id, *args, **kwargs):
        from .document_store import document_store

        if not NexoPermissions.eh_membro(document_store, request.principal, projeto_id):
            messages.error(request, 'Você não tem acesso a este projeto.')
            return redirect('core:painel')

        return view_func(request, projeto_id, *args, **kwargs)

    return wrapped_view
