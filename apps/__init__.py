# apps/__init__.py

"""
Nexo - Aplicações Django

Este pacote contém as aplicações do sistema:
- core: Autenticação, repositório de documentos, projetos e membros
- board: Kanban, tarefas, comentários e WebSockets
"""

__version__ = '0.1.0'
