# apps/board/signals.py

"""
Repassa os eventos do domínio para o grupo WebSocket do board
"""

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.dispatch import receiver
from django.utils import timezone

from apps.core.document_store import document_store
from apps.core.signals import comentario_adicionado, tarefa_criada, tarefa_movida

logger = logging.getLogger(__name__)


def nome_grupo_board(board_id):
    return f'board_{board_id}'


def enviar_para_board(board_id, tipo, mensagem):
    """Envia o evento para todos os conectados ao board"""
    channel_layer = get_channel_layer()
    if channel_layer is None or not board_id:
        return

    try:
        async_to_sync(channel_layer.group_send)(
            nome_grupo_board(board_id),
            {'type': tipo, 'message': mensagem},
        )
    except Exception as e:
        logger.error(f"❌ Erro ao enviar {tipo} para o board {board_id}: {e}")


def _board_da_coluna(coluna_id):
    coluna = document_store.obter('columns', coluna_id)
    return coluna.get('boardId') if coluna else None


def _autor(principal):
    return {
        'usuario': principal.display_name or principal.email,
        'user_id': principal.uid,
        'timestamp': timezone.now().isoformat(),
    }


@receiver(tarefa_criada)
def notificar_tarefa_criada(sender, principal, tarefa_id, coluna_id, board_id, **kwargs):
    enviar_para_board(board_id, 'tarefa_criada', {
        'tarefa_id': tarefa_id,
        'coluna_id': coluna_id,
        **_autor(principal),
    })


@receiver(tarefa_movida)
def notificar_tarefa_movida(sender, principal, tarefa_id, coluna_anterior_id, nova_coluna_id, **kwargs):
    enviar_para_board(_board_da_coluna(nova_coluna_id), 'tarefa_movida', {
        'tarefa_id': tarefa_id,
        'coluna_anterior_id': coluna_anterior_id,
        'nova_coluna_id': nova_coluna_id,
        **_autor(principal),
    })


@receiver(comentario_adicionado)
def notificar_comentario_adicionado(sender, principal, comentario_id, tarefa_id, **kwargs):
    tarefa = document_store.obter('tasks', tarefa_id)
    if tarefa is None:
        return

    enviar_para_board(_board_da_coluna(tarefa.get('columnId')), 'comentario_adicionado', {
        'comentario_id': comentario_id,
        'tarefa_id': tarefa_id,
        **_autor(principal),
    })
