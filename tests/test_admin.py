"""Testes do admin de contas"""

import pytest
from django.contrib import admin
from django.test import RequestFactory

from apps.core.admin import UsuarioAdmin
from apps.core.document_store import document_store
from apps.core.models import Usuario
from apps.core.projeto_service import projeto_service

pytestmark = pytest.mark.django_db


def test_conta_criada_no_admin_pode_virar_membro(ana, projeto_da_ana):
    modelo_admin = UsuarioAdmin(Usuario, admin.site)
    usuario = Usuario(username='davi', email='davi@NEXO.DEV', nome_exibicao='Davi')
    usuario.set_password('Quadro-Kanban-2024!')

    modelo_admin.save_model(RequestFactory().post('/admin/'), usuario, form=None, change=False)

    doc = document_store.obter('users', usuario.uid)
    assert doc.get('email') == 'davi@nexo.dev'

    projeto_service.adicionar_membro(ana, projeto_da_ana, 'davi@nexo.dev', 'member')
    assert projeto_service.eh_membro(usuario.como_principal(), projeto_da_ana)
