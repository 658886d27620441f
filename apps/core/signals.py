# apps/core/signals.py

"""
Eventos do domínio

Enviados pelos serviços depois que a escrita correspondente foi concluída.
Todos recebem `principal` como argumento nomeado.
"""

from django.dispatch import Signal

# projeto_id, board_id
projeto_criado = Signal()

# tarefa_id, coluna_id, board_id
tarefa_criada = Signal()

# tarefa_id, coluna_anterior_id, nova_coluna_id
tarefa_movida = Signal()

# comentario_id, tarefa_id
comentario_adicionado = Signal()
