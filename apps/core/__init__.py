# apps/core/__init__.py

"""
Core - Base do Nexo

- Provedor de identidade (auth_service)
- Repositório de documentos (document_store)
- Projetos e membros (projeto_service)
"""
