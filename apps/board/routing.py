# apps/board/routing.py

from django.urls import re_path
from . import consumers

# Rotas WebSocket para a aplicação board
websocket_urlpatterns = [
    # Atualizações em tempo real de um board
    re_path(r'ws/board/(?P<board_id>[\w-]+)/$', consumers.BoardConsumer.as_asgi()),
]
