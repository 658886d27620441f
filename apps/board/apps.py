# apps/board/apps.py

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class BoardConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.board'
    verbose_name = 'Board - Kanban'

    def ready(self):
        # Receptores que levam tarefas e comentários aos grupos WebSocket
        from . import signals  # noqa: F401

        logger.debug("🔌 Eventos do board conectados aos grupos WebSocket")
