"""Fixtures compartilhadas: contas, repositório e serviços"""

import pytest
from django.contrib.auth import get_user_model

from apps.board.board_service import BoardService
from apps.core.auth_service import auth_service
from apps.core.document_store import DocumentStore
from apps.core.projeto_service import ProjetoService

SENHA = 'Quadro-Kanban-2024!'


@pytest.fixture
def store(db):
    return DocumentStore()


@pytest.fixture
def projetos(store):
    return ProjetoService(store=store)


@pytest.fixture
def boards(store):
    return BoardService(store=store)


@pytest.fixture
def ana(db):
    return auth_service.registrar_usuario('ana@nexo.dev', SENHA, 'Ana')


@pytest.fixture
def bruno(db):
    return auth_service.registrar_usuario('bruno@nexo.dev', SENHA, 'Bruno')


@pytest.fixture
def projeto_da_ana(projetos, ana):
    return projetos.criar_projeto(ana, {'nome': 'Site institucional', 'cliente': 'ACME'})


@pytest.fixture
def logar(client):
    """Abre a sessão do test client para o principal informado"""

    def _logar(principal):
        usuario = get_user_model().objects.get(uid=principal.uid)
        client.force_login(usuario)
        return client

    return _logar
