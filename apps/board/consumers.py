# apps/board/consumers.py

import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.utils import timezone

from apps.core.document_store import document_store
from apps.core.exceptions import DocumentoNaoEncontrado
from apps.core.projeto_service import projeto_service

from .board_service import board_service
from .signals import nome_grupo_board

logger = logging.getLogger(__name__)


class BoardConsumer(AsyncWebsocketConsumer):
    """
    Consumer WebSocket para atualizações em tempo real do board Kanban

    Funcionalidades:
    - Notificações de tarefas criadas e movidas
    - Notificações de comentários
    - Entrada e saída de usuários
    - Sincronização do estado do board sob demanda
    """

    async def connect(self):
        """
        Conecta usuário ao grupo do board
        Verifica se é membro do projeto antes de aceitar a conexão
        """
        self.board_id = self.scope['url_route']['kwargs']['board_id']
        self.board_group_name = nome_grupo_board(self.board_id)
        self.user = self.scope.get('user')

        if self.user is None or not self.user.is_authenticated:
            logger.warning("❌ Conexão WebSocket rejeitada - usuário não autenticado")
            await self.close()
            return

        self.principal = self.user.como_principal()
        self.projeto_id = await self.obter_projeto_com_acesso()
        if self.projeto_id is None:
            logger.warning(f"❌ Conexão WebSocket rejeitada - {self.principal.email} sem acesso ao board {self.board_id}")
            await self.close()
            return

        await self.channel_layer.group_add(self.board_group_name, self.channel_name)
        await self.accept()

        await self.channel_layer.group_send(
            self.board_group_name,
            {
                'type': 'user_joined',
                'message': self.mensagem_usuario(),
            }
        )

        logger.info(f"✅ WebSocket conectado - {self.principal.email} no board {self.board_id}")

    async def disconnect(self, close_code):
        if hasattr(self, 'projeto_id') and self.projeto_id is not None:
            await self.channel_layer.group_send(
                self.board_group_name,
                {
                    'type': 'user_left',
                    'message': self.mensagem_usuario(),
                }
            )
            await self.channel_layer.group_discard(self.board_group_name, self.channel_name)
            logger.info(f"🔌 WebSocket desconectado - {self.principal.email} do board {self.board_id}")

    async def receive(self, text_data):
        """
        Recebe mensagens do cliente WebSocket
        Tipos aceitos: ping, sync_board
        """
        try:
            data = json.loads(text_data)
        except json.JSONDecodeError:
            logger.error(f"❌ JSON inválido recebido via WebSocket de {self.principal.email}")
            return

        message_type = data.get('type')

        if message_type == 'ping':
            await self.send(text_data=json.dumps({
                'type': 'pong',
                'timestamp': self.get_timestamp()
            }))

        elif message_type == 'sync_board':
            board_data = await self.get_board_state()
            await self.send(text_data=json.dumps({
                'type': 'board_sync',
                'board_data': board_data,
                'timestamp': self.get_timestamp()
            }, default=str))

    # === Handlers para os eventos do grupo ===

    async def tarefa_criada(self, event):
        await self.send(text_data=json.dumps({
            'type': 'tarefa_criada',
            'message': event['message']
        }))

    async def tarefa_movida(self, event):
        await self.send(text_data=json.dumps({
            'type': 'tarefa_movida',
            'message': event['message']
        }))

    async def comentario_adicionado(self, event):
        await self.send(text_data=json.dumps({
            'type': 'comentario_adicionado',
            'message': event['message']
        }))

    async def user_joined(self, event):
        message = event['message']
        # Não enviar para o próprio usuário
        if message['user_id'] != self.principal.uid:
            await self.send(text_data=json.dumps({
                'type': 'user_joined',
                'message': message
            }))

    async def user_left(self, event):
        message = event['message']
        if message['user_id'] != self.principal.uid:
            await self.send(text_data=json.dumps({
                'type': 'user_left',
                'message': message
            }))

    # === Métodos auxiliares ===

    @database_sync_to_async
    def obter_projeto_com_acesso(self):
        """Projeto do board, se o principal for membro; senão None"""
        board = document_store.obter('boards', self.board_id)
        if board is None:
            return None

        projeto_id = board.get('projectId')
        if not projeto_service.eh_membro(self.principal, projeto_id):
            return None
        return projeto_id

    @database_sync_to_async
    def get_board_state(self):
        """Resumo do board: colunas com a quantidade de tarefas"""
        try:
            board = board_service.obter_board_projeto(self.principal, self.projeto_id)
        except DocumentoNaoEncontrado:
            return {}

        return {
            'board_id': board['id'],
            'name': board.get('name'),
            'colunas': [
                {
                    'id': coluna['id'],
                    'name': coluna.get('name'),
                    'order': coluna.get('order'),
                    'total_tarefas': len(coluna['tasks']),
                }
                for coluna in board['columns']
            ],
        }

    def mensagem_usuario(self):
        return {
            'usuario': self.principal.display_name or self.principal.email,
            'user_id': self.principal.uid,
            'timestamp': self.get_timestamp()
        }

    def get_timestamp(self):
        return timezone.now().isoformat()
