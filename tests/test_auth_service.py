"""Testes do serviço de autenticação"""

import pytest
from django.contrib.auth import get_user_model
from django.contrib.sessions.backends.cache import SessionStore
from django.core.exceptions import ValidationError
from django.test import RequestFactory

from apps.core.auth_service import Principal, auth_service
from apps.core.document_store import document_store
from apps.core.exceptions import CredenciaisInvalidas, EmailJaCadastrado

from .conftest import SENHA


def requisicao():
    request = RequestFactory().post('/login/')
    request.session = SessionStore()
    return request


class TestRegistro:
    def test_cria_conta_e_documento_do_usuario(self, ana):
        assert isinstance(ana, Principal)
        assert ana.email == 'ana@nexo.dev'
        assert ana.display_name == 'Ana'

        doc = document_store.obter('users', ana.uid)
        assert doc.get('uid') == ana.uid
        assert doc.get('email') == 'ana@nexo.dev'
        assert doc.get('displayName') == 'Ana'
        assert doc.get('createdAt') is not None

    def test_email_duplicado(self, ana):
        with pytest.raises(EmailJaCadastrado) as erro:
            auth_service.registrar_usuario('ana@nexo.dev', SENHA, 'Outra Ana')

        assert str(erro.value) == 'Email já cadastrado no sistema'
        assert get_user_model().objects.count() == 1

    def test_senha_fraca_nao_cria_nada(self, db):
        with pytest.raises(ValidationError):
            auth_service.registrar_usuario('fraca@nexo.dev', '123', 'Fraca')

        assert get_user_model().objects.count() == 0
        assert document_store.consultar('users', email='fraca@nexo.dev') == []


class TestLogin:
    def test_login_devolve_principal(self, ana):
        request = requisicao()

        principal = auth_service.fazer_login(request, 'ana@nexo.dev', SENHA)

        assert principal.uid == ana.uid
        assert request.user.is_authenticated

    def test_lembrar_me_estende_a_sessao(self, ana):
        request = requisicao()

        auth_service.fazer_login(request, 'ana@nexo.dev', SENHA, lembrar_me=True)

        assert request.session.get_expiry_age() == 86400 * 30

    def test_senha_errada(self, ana):
        with pytest.raises(CredenciaisInvalidas):
            auth_service.fazer_login(requisicao(), 'ana@nexo.dev', 'senha-errada')

    def test_principal_de_visitante(self):
        request = RequestFactory().get('/')
        assert auth_service.principal_da_requisicao(request) is None


class TestDominioEmMaiusculas:
    def test_registro_normaliza_e_login_aceita_o_email_digitado(self, db):
        principal = auth_service.registrar_usuario('ana@NEXO.DEV', SENHA, 'Ana')

        assert principal.email == 'ana@nexo.dev'
        assert auth_service.fazer_login(requisicao(), 'ana@NEXO.DEV', SENHA).uid == principal.uid


class TestSincronizarUsuario:
    def test_conta_sem_documento_ganha_um(self, db):
        usuario = get_user_model().objects.create_user(
            username='carla@nexo.dev',
            email='carla@nexo.dev',
            password=SENHA,
            nome_exibicao='Carla',
        )
        assert document_store.obter('users', usuario.uid) is None

        auth_service.sincronizar_usuario(usuario)

        doc = document_store.obter('users', usuario.uid)
        assert doc.get('email') == 'carla@nexo.dev'
        assert doc.get('displayName') == 'Carla'
        assert doc.get('createdAt') is not None

    def test_alteracao_preserva_criacao(self, ana):
        criado_em = document_store.obter('users', ana.uid).get('createdAt')
        usuario = get_user_model().objects.get(uid=ana.uid)
        usuario.nome_exibicao = 'Ana Maria'
        usuario.save()

        auth_service.sincronizar_usuario(usuario)

        doc = document_store.obter('users', ana.uid)
        assert doc.get('displayName') == 'Ana Maria'
        assert doc.get('createdAt') == criado_em
