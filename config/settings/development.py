# config/settings/development.py

from .base import *  # noqa: F401,F403

# === DESENVOLVIMENTO ===

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# === BANCO DE DADOS ===

# PostgreSQL local vem do base; SQLite só quando pedido explicitamente
if env('USE_SQLITE', cast=bool, default=False):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DATABASES['default']['ATOMIC_REQUESTS'] = True

# === REDIS OPCIONAL ===

# Sem USE_REDIS tudo roda em memória no próprio processo
if not env('USE_REDIS', cast=bool, default=False):
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'nexo-dev',
        }
    }

    CHANNEL_LAYERS = {
        'default': {
            'BACKEND': 'channels.layers.InMemoryChannelLayer',
        }
    }

# === LOGGING ===

LOGGING['loggers']['apps']['level'] = 'DEBUG'

# === ESTÁTICOS ===

# Sem manifest: dispensa collectstatic a cada alteração
STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# === SHELL_PLUS ===

SHELL_PLUS_IMPORTS = [
    'from apps.core.document_store import document_store, SERVER_TIMESTAMP',
    'from apps.core.auth_service import auth_service',
    'from apps.core.projeto_service import projeto_service',
    'from apps.board.board_service import board_service',
]
