# apps/board/urls.py

from django.urls import path
from . import views

app_name = 'board'

urlpatterns = [
    # Kanban principal
    path('projeto/<str:projeto_id>/', views.board_kanban_view, name='kanban'),
    path('api/projeto/<str:projeto_id>/', views.api_board, name='api_board'),

    # Tarefas
    path('coluna/<str:coluna_id>/criar-tarefa/', views.criar_tarefa, name='criar_tarefa'),
    path('mover-tarefa/', views.mover_tarefa_ajax, name='mover_tarefa'),

    # Comentários
    path('tarefa/<str:tarefa_id>/comentarios/', views.comentarios_tarefa, name='comentarios'),
]
