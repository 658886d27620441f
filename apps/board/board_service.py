# apps/board/board_service.py

"""
Serviço do Board - quadro Kanban, tarefas e comentários
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

from apps.core.document_store import SERVER_TIMESTAMP, DocumentStore, document_store
from apps.core.exceptions import BoardNaoEncontrado, ColunaNaoEncontrada, TarefaNaoEncontrada
from apps.core.permissions import requer_principal
from apps.core.signals import comentario_adicionado, tarefa_criada, tarefa_movida

logger = logging.getLogger(__name__)


def ordenar_por_ordem(documentos: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Ordena pelo campo `order`; empates mantêm a ordem de inserção"""
    return sorted(documentos, key=lambda doc: doc.get('order', 0))


class BoardService:

    def __init__(self, store: Optional[DocumentStore] = None):
        self._store = store or document_store

    @requer_principal
    def obter_board_projeto(self, principal, projeto_id: str) -> Dict[str, Any]:
        """
        Board do projeto com colunas e tarefas embutidas

        Colunas e tarefas vêm ordenadas por `order`. As tarefas de todas as
        colunas são lidas numa única consulta.
        """
        boards = self._store.consultar('boards', projectId=projeto_id)
        if not boards:
            raise BoardNaoEncontrado()

        board = boards[0]

        colunas = ordenar_por_ordem([
            coluna.to_dict()
            for coluna in self._store.consultar('columns', boardId=board.id)
        ])

        tarefas_por_coluna = defaultdict(list)
        if colunas:
            tarefas = self._store.consultar(
                'tasks',
                columnId__in=[coluna['id'] for coluna in colunas],
            )
            for tarefa in tarefas:
                tarefas_por_coluna[tarefa.get('columnId')].append(tarefa.to_dict())

        for coluna in colunas:
            coluna['tasks'] = ordenar_por_ordem(tarefas_por_coluna[coluna['id']])

        return {**board.to_dict(), 'columns': colunas}

    @requer_principal
    def criar_tarefa(self, principal, coluna_id: str, dados: Dict[str, Any]) -> str:
        """
        Cria tarefa no fim da coluna

        A posição é a quantidade de tarefas já existentes na coluna, então
        duas criações simultâneas podem receber o mesmo `order`.
        """
        coluna = self._store.obter('columns', coluna_id)
        if coluna is None:
            raise ColunaNaoEncontrada()

        board_id = coluna.get('boardId')
        board = self._store.obter('boards', board_id)
        if board is None:
            raise BoardNaoEncontrado()

        ordem = self._store.contar('tasks', columnId=coluna_id)

        tarefa_id = self._store.adicionar('tasks', {
            **dados,
            'columnId': coluna_id,
            'projectId': board.get('projectId'),
            'createdBy': principal.uid,
            'createdAt': SERVER_TIMESTAMP,
            'updatedAt': SERVER_TIMESTAMP,
            'order': ordem,
        })

        logger.info(f"📝 Tarefa {tarefa_id} criada na coluna {coluna.get('name')} por {principal.email}")
        tarefa_criada.send(
            sender=self.__class__,
            principal=principal,
            tarefa_id=tarefa_id,
            coluna_id=coluna_id,
            board_id=board_id,
        )
        return tarefa_id

    @requer_principal
    def atualizar_status_tarefa(self, principal, tarefa_id: str, nova_coluna_id: str) -> bool:
        """
        Move a tarefa para o fim de outra coluna

        A coluna de origem não é reordenada.
        """
        tarefa = self._store.obter('tasks', tarefa_id)
        if tarefa is None:
            raise TarefaNaoEncontrada()

        ordem = self._store.contar('tasks', columnId=nova_coluna_id)

        self._store.atualizar('tasks', tarefa_id, {
            'columnId': nova_coluna_id,
            'updatedAt': SERVER_TIMESTAMP,
            'order': ordem,
        })

        logger.info(f"🔀 Tarefa {tarefa_id} movida para a coluna {nova_coluna_id}")
        tarefa_movida.send(
            sender=self.__class__,
            principal=principal,
            tarefa_id=tarefa_id,
            coluna_anterior_id=tarefa.get('columnId'),
            nova_coluna_id=nova_coluna_id,
        )
        return True

    @requer_principal
    def adicionar_comentario(self, principal, tarefa_id: str, conteudo: str) -> str:
        comentario_id = self._store.adicionar('comments', {
            'taskId': tarefa_id,
            'userId': principal.uid,
            'content': conteudo,
            'createdAt': SERVER_TIMESTAMP,
        })

        comentario_adicionado.send(
            sender=self.__class__,
            principal=principal,
            comentario_id=comentario_id,
            tarefa_id=tarefa_id,
        )
        return comentario_id

    @requer_principal
    def listar_comentarios(self, principal, tarefa_id: str) -> List[Dict[str, Any]]:
        """Comentários da tarefa com o autor embutido em `user`"""
        comentarios = [
            comentario.to_dict()
            for comentario in self._store.consultar('comments', taskId=tarefa_id)
        ]

        autores = self._store.obter_varios('users', (c.get('userId') for c in comentarios))

        for comentario in comentarios:
            autor = autores.get(comentario.get('userId'))
            if autor is not None:
                comentario['user'] = autor.to_dict()

        return comentarios

    # =================== PROJETO DONO ===================

    @requer_principal
    def projeto_da_coluna(self, principal, coluna_id: str) -> str:
        """Projeto dono da coluna, resolvido pelo board"""
        coluna = self._store.obter('columns', coluna_id)
        if coluna is None:
            raise ColunaNaoEncontrada()

        board = self._store.obter('boards', coluna.get('boardId'))
        if board is None:
            raise BoardNaoEncontrado()
        return board.get('projectId')

    @requer_principal
    def projeto_da_tarefa(self, principal, tarefa_id: str) -> str:
        tarefa = self._store.obter('tasks', tarefa_id)
        if tarefa is None:
            raise TarefaNaoEncontrada()
        return tarefa.get('projectId')


# Instância global do serviço (Singleton pattern)
board_service = BoardService()
