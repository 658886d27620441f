# config/settings/production.py

import dj_database_url

from .base import *  # noqa: F401,F403

# === PRODUÇÃO ===

DEBUG = False

ALLOWED_HOSTS = env('ALLOWED_HOSTS', default=['nexo.dev', 'www.nexo.dev'])

# Origens aceitas para POST com CSRF (atrás de proxy HTTPS)
CSRF_TRUSTED_ORIGINS = env.list(
    'CSRF_TRUSTED_ORIGINS',
    default=[f'https://{host}' for host in ALLOWED_HOSTS],
)

# === SEGURANÇA ===

SECURE_SSL_REDIRECT = env('SECURE_SSL_REDIRECT', cast=bool, default=True)
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True

# HSTS: 1 ano
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

X_FRAME_OPTIONS = 'DENY'

# === BANCO DE DADOS ===

# DATABASE_URL é o caminho preferido; DB_* continua aceito
if env('DATABASE_URL', default=None):
    DATABASES['default'] = dj_database_url.parse(
        env('DATABASE_URL'),
        conn_max_age=600,
        conn_health_checks=True,
        ssl_require=True,
    )
else:
    DATABASES['default'].update({
        'OPTIONS': {'sslmode': 'require'},
        'CONN_MAX_AGE': 600,
        'CONN_HEALTH_CHECKS': True,
    })

# === REDIS: CACHE, SESSÕES E WEBSOCKETS ===

REDIS_URL = env('REDIS_URL', default=None)
if not REDIS_URL:
    raise ValueError("REDIS_URL é obrigatório em produção")

CACHES['default']['LOCATION'] = REDIS_URL
CACHES['default']['KEY_PREFIX'] = 'nexo'
SESSION_CACHE_ALIAS = 'default'

CHANNEL_LAYERS['default']['CONFIG'] = {
    'hosts': [REDIS_URL],
    'prefix': 'nexo',
    'capacity': 1500,  # mensagens pendentes por canal
    'expiry': 10,
}

# === ARQUIVOS ESTÁTICOS ===

WHITENOISE_MAX_AGE = 31536000

# === LOGGING ===

# Em contêiner o console é o destino principal; o arquivo fica como cópia
LOGGING['handlers']['console']['formatter'] = 'verbose'
LOGGING['loggers']['django']['handlers'] = ['console', 'file']
LOGGING['loggers']['django']['level'] = 'WARNING'

# === PERFORMANCE ===

MIDDLEWARE = ['django.middleware.gzip.GZipMiddleware'] + MIDDLEWARE

TEMPLATES[0]['APP_DIRS'] = False
TEMPLATES[0]['OPTIONS']['loaders'] = [
    ('django.template.loaders.cached.Loader', [
        'django.template.loaders.filesystem.Loader',
        'django.template.loaders.app_directories.Loader',
    ]),
]

# === VALIDAÇÕES ===

obrigatorias = ['SECRET_KEY']
if not env('DATABASE_URL', default=None):
    obrigatorias += ['DB_NAME', 'DB_USER', 'DB_PASSWORD', 'DB_HOST']

for variavel in obrigatorias:
    if not env(variavel, default=None):
        raise ValueError(f"Variável de ambiente {variavel} é obrigatória em produção")
