# apps/core/auth_service.py

"""
Serviço de Autenticação - cliente do provedor de identidade

Registro, login e logout sobre o django.contrib.auth. Cada conta criada
ganha também o documento correspondente na coleção `users`.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.password_validation import validate_password
from django.db import transaction

from .document_store import SERVER_TIMESTAMP, DocumentStore, document_store
from .exceptions import CredenciaisInvalidas, EmailJaCadastrado

logger = logging.getLogger(__name__)

SESSAO_PERSISTENTE_SEGUNDOS = 86400 * 30  # 30 dias


@dataclass(frozen=True)
class Principal:
    """Identidade autenticada que executa uma operação"""

    uid: str
    email: str
    display_name: str = ''

    @property
    def is_authenticated(self) -> bool:
        return True


class AuthenticationService:
    """
    Serviço encapsulado para gerenciar autenticação

    Erros do provedor (email duplicado, senha fraca, credenciais inválidas)
    são propagados para quem chamou, sem nova tentativa.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self._store = store or document_store

    def registrar_usuario(self, email: str, senha: str, nome_exibicao: str) -> Principal:
        """
        Cria a conta e o documento `users/<uid>`

        Raises:
            EmailJaCadastrado: já existe conta com este email
            ValidationError: senha recusada pelos validadores do Django
        """
        Usuario = get_user_model()
        email = Usuario.objects.normalize_email(email)

        if Usuario.objects.filter(email__iexact=email).exists():
            raise EmailJaCadastrado()

        validate_password(senha, user=Usuario(email=email, username=email))

        with transaction.atomic():
            usuario = Usuario.objects.create_user(
                username=email,
                email=email,
                password=senha,
                nome_exibicao=nome_exibicao,
            )

            self.sincronizar_usuario(usuario)

        logger.info(f"👤 Conta criada: {email} ({usuario.uid})")
        return usuario.como_principal()

    def sincronizar_usuario(self, usuario) -> None:
        """
        Grava o documento `users/<uid>` a partir da conta

        Contas criadas fora do registro (admin, shell) também precisam dele
        para serem encontradas por email ao adicionar membros.
        """
        dados = {
            'uid': usuario.uid,
            'email': usuario.email,
            'displayName': usuario.nome_exibicao,
        }

        if self._store.obter('users', usuario.uid) is None:
            self._store.definir('users', usuario.uid, {**dados, 'createdAt': SERVER_TIMESTAMP})
        else:
            self._store.atualizar('users', usuario.uid, dados)

    def fazer_login(self, request, email: str, senha: str, lembrar_me: bool = False) -> Principal:
        """
        Autentica e abre a sessão da requisição

        Raises:
            CredenciaisInvalidas: email ou senha incorretos
        """
        email = get_user_model().objects.normalize_email(email)
        usuario = authenticate(request, username=email, password=senha)

        if usuario is None:
            logger.warning(f"⚠️ Tentativa de login falhada para: {email}")
            raise CredenciaisInvalidas()

        login(request, usuario)

        if lembrar_me:
            request.session.set_expiry(SESSAO_PERSISTENTE_SEGUNDOS)

        return usuario.como_principal()

    def fazer_logout(self, request) -> None:
        """Encerra a sessão da requisição"""
        logout(request)

    def principal_da_requisicao(self, request) -> Optional[Principal]:
        """Principal da sessão atual, ou None para visitantes anônimos"""
        usuario = getattr(request, 'user', None)
        if usuario is None or not usuario.is_authenticated:
            return None
        return usuario.como_principal()


# Instância global do serviço (Singleton pattern)
auth_service = AuthenticationService()
