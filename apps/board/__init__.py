# apps/board/__init__.py

"""
Board - Aplicação Kanban do Nexo

Funcionalidades:
- Board do projeto com colunas e tarefas ordenadas
- Movimentação de tarefas entre colunas
- Comentários em tarefas
- WebSockets para atualizações em tempo real
"""
