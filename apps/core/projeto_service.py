# apps/core/projeto_service.py

"""
Serviço de Projetos - projetos e membros

Toda operação recebe o principal explicitamente como primeiro argumento.
"""

import logging
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.contrib.auth.base_user import BaseUserManager
from django.db import transaction

from .document_store import SERVER_TIMESTAMP, DocumentStore, document_store
from .exceptions import AcessoNegado, ProjetoNaoEncontrado, UsuarioNaoEncontrado
from .permissions import NexoPermissions, papel_gerente, requer_principal
from .signals import projeto_criado

logger = logging.getLogger(__name__)


def nome_board_padrao() -> str:
    return getattr(settings, 'NEXO_DEFAULT_BOARD_NAME', 'Kanban')


def colunas_padrao() -> List[str]:
    return list(getattr(settings, 'NEXO_DEFAULT_COLUMNS', ['To do', 'In progress', 'Done']))


class ProjetoService:

    def __init__(self, store: Optional[DocumentStore] = None):
        self._store = store or document_store

    @requer_principal
    def criar_projeto(self, principal, dados: Dict[str, Any]) -> str:
        """
        Cria o projeto com o criador como gerente, um board e as colunas padrão

        Projeto, membro, board e colunas são gravados na mesma transação.

        Returns:
            id do projeto criado
        """
        with transaction.atomic():
            projeto_id = self._store.adicionar('projects', {
                **dados,
                'createdBy': principal.uid,
                'createdAt': SERVER_TIMESTAMP,
                'updatedAt': SERVER_TIMESTAMP,
            })

            self._store.adicionar('projectMembers', {
                'projectId': projeto_id,
                'userId': principal.uid,
                'role': papel_gerente(),
                'addedBy': principal.uid,
                'addedAt': SERVER_TIMESTAMP,
            })

            board_id = self._store.adicionar('boards', {
                'projectId': projeto_id,
                'name': nome_board_padrao(),
                'createdAt': SERVER_TIMESTAMP,
            })

            for ordem, nome in enumerate(colunas_padrao()):
                self._store.adicionar('columns', {
                    'boardId': board_id,
                    'name': nome,
                    'order': ordem,
                    'createdAt': SERVER_TIMESTAMP,
                })

        logger.info(f"✅ Projeto {projeto_id} criado por {principal.email}")
        projeto_criado.send(
            sender=self.__class__,
            principal=principal,
            projeto_id=projeto_id,
            board_id=board_id,
        )
        return projeto_id

    @requer_principal
    def listar_projetos(self, principal) -> List[Dict[str, Any]]:
        """
        Projetos em que o principal é membro

        Cada projeto aparece uma vez, mesmo com membros duplicados.
        Projetos referenciados que não existem mais são ignorados.
        """
        membros = self._store.consultar('projectMembers', userId=principal.uid)

        projeto_ids = list(dict.fromkeys(membro.get('projectId') for membro in membros))
        if not projeto_ids:
            return []

        projetos = self._store.obter_varios('projects', projeto_ids)
        return [
            projetos[projeto_id].to_dict()
            for projeto_id in projeto_ids
            if projeto_id in projetos
        ]

    @requer_principal
    def obter_detalhes_projeto(self, principal, projeto_id: str) -> Dict[str, Any]:
        projeto = self._store.obter('projects', projeto_id)
        if projeto is None:
            raise ProjetoNaoEncontrado()
        return projeto.to_dict()

    @requer_principal
    def adicionar_membro(self, principal, projeto_id: str, email: str, papel: str) -> str:
        """
        Adiciona membro ao projeto ou altera o papel de quem já participa

        Raises:
            AcessoNegado: o principal não é gerente do projeto
            UsuarioNaoEncontrado: nenhum documento em `users` com este email

        Returns:
            id do registro em projectMembers
        """
        email = BaseUserManager.normalize_email(email)

        with transaction.atomic():
            if not NexoPermissions.eh_gerente(self._store, principal, projeto_id):
                raise AcessoNegado("Você não tem permissão para adicionar membros a este projeto")

            usuarios = self._store.consultar('users', email=email)
            if not usuarios:
                raise UsuarioNaoEncontrado()

            usuario_id = usuarios[0].id

            existentes = self._store.consultar(
                'projectMembers',
                projectId=projeto_id,
                userId=usuario_id,
            )

            if existentes:
                membro_id = existentes[0].id
                self._store.atualizar('projectMembers', membro_id, {
                    'role': papel,
                    'addedBy': principal.uid,
                    'addedAt': SERVER_TIMESTAMP,
                })
                logger.info(f"🔁 Papel de {email} no projeto {projeto_id} alterado para {papel}")
            else:
                membro_id = self._store.adicionar('projectMembers', {
                    'projectId': projeto_id,
                    'userId': usuario_id,
                    'role': papel,
                    'addedBy': principal.uid,
                    'addedAt': SERVER_TIMESTAMP,
                })
                logger.info(f"➕ {email} adicionado ao projeto {projeto_id} como {papel}")

        return membro_id

    @requer_principal
    def listar_membros(self, principal, projeto_id: str) -> List[Dict[str, Any]]:
        """Membros do projeto com o documento do usuário em `user`"""
        if not NexoPermissions.eh_membro(self._store, principal, projeto_id):
            raise AcessoNegado("Você não tem acesso a este projeto")

        membros = [m.to_dict() for m in self._store.consultar('projectMembers', projectId=projeto_id)]
        usuarios = self._store.obter_varios('users', (m.get('userId') for m in membros))

        for membro in membros:
            usuario = usuarios.get(membro.get('userId'))
            if usuario is not None:
                membro['user'] = usuario.to_dict()

        return membros

    def eh_membro(self, principal, projeto_id: str) -> bool:
        return NexoPermissions.eh_membro(self._store, principal, projeto_id)


# Instância global do serviço (Singleton pattern)
projeto_service = ProjetoService()
