import logging.config
from pathlib import Path

from decouple import config

from core.common.enums import EnvironmentEnum

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# ENVIRONMENT VARIABLES
ENVIRONMENT: str = config('ENVIRONMENT', default=EnvironmentEnum.LOCAL.value)

SECRET_KEY = config('SECRET_KEY', default='django-insecure-simulador-local')

DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1').split(',')
CSRF_TRUSTED_ORIGINS = config(
    'CSRF_TRUSTED_ORIGINS', default='http://localhost'
).split(',')

if ENVIRONMENT in (EnvironmentEnum.STAGE.value, EnvironmentEnum.PROD.value):
    import sentry_sdk

    sentry_sdk.init(
        dsn=config('SENTRY_DSN_URL'),
        enable_tracing=True,
        traces_sample_rate=float(0),
        environment=ENVIRONMENT,
    )

LOGGING_SOURCE_TOKEN = config('LOGGING_SOURCE_TOKEN', default='')

# Bank catalog / contract parse service
SERVICO_CONTRATOS_URL = config('SERVICO_CONTRATOS_URL', default='http://localhost:8001')
SERVICO_CONTRATOS_TIMEOUT = config('SERVICO_CONTRATOS_TIMEOUT', default=10, cast=int)
SERVICO_CONTRATOS_REMOTO = config('SERVICO_CONTRATOS_REMOTO', default=False, cast=bool)

# Simulation policy
PRAZO_PADRAO_MESES = config('PRAZO_PADRAO_MESES', default=96, cast=int)
VALOR_PARCELA_MINIMA_LIBERACAO = config(
    'VALOR_PARCELA_MINIMA_LIBERACAO', default=100, cast=float
)
SALDO_DEVEDOR_MINIMO_LIBERACAO = config(
    'SALDO_DEVEDOR_MINIMO_LIBERACAO', default=4000, cast=float
)
TAXA_NOVO_PADRAO = config('TAXA_NOVO_PADRAO', default=1.80, cast=float)
TAXA_REFIN_PADRAO = config('TAXA_REFIN_PADRAO', default=1.50, cast=float)
TAXA_PORTABILIDADE_PADRAO = config('TAXA_PORTABILIDADE_PADRAO', default=1.50, cast=float)

LANGUAGE_CODE = config('LANGUAGE_CODE', default='pt-br')
TIME_ZONE = config('TIME_ZONE', default='America/Sao_Paulo')
USE_I18N = config('USE_I18N', default=True, cast=bool)
USE_TZ = config('USE_TZ', default=False, cast=bool)

# Application definition

INSTALLED_APPS = [
    # django apps
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.sessions',
    # 3rd party apps
    'corsheaders',
    'rest_framework',
    # local apps
    'simulacao.apps.SimulacaoConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'

# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases

DATABASES = {
    'default': {
        'ENGINE': config('DB_DEFAULT_ENGINE', default='django.db.backends.sqlite3'),
        'NAME': config('DB_DEFAULT_NAME', default=str(BASE_DIR / 'db.sqlite3')),
        'USER': config('DB_DEFAULT_USER', default=''),
        'PASSWORD': config('DB_DEFAULT_PASSWORD', default=''),
        'HOST': config('DB_DEFAULT_HOST', default=''),
        'PORT': config('DB_DEFAULT_PORT', default=''),
    },
}

# Static files (CSS, JavaScript, Images)

STATIC_URL = '/static/'
STATIC_ROOT = config('STATIC_ROOT', default=str(BASE_DIR / 'staticfiles'))

CORS_ORIGIN_ALLOW_ALL = True

X_FRAME_OPTIONS = 'SAMEORIGIN'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (),
    'DEFAULT_PERMISSION_CLASSES': ('rest_framework.permissions.AllowAny',),
    'UNAUTHENTICATED_USER': None,
    'COERCE_DECIMAL_TO_STRING': False,
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING_CONFIG = None
logging.getLogger('requests').setLevel(logging.ERROR)

LOG_HANDLERS = ['console', 'logtail'] if LOGGING_SOURCE_TOKEN else ['console']

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'base': {'format': '{name} ({levelname}) :: {message}', 'style': '{'}
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'base'},
    },
    'loggers': {
        'simulacao': {
            'handlers': LOG_HANDLERS,
            'level': config('LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}

if LOGGING_SOURCE_TOKEN:
    LOGGING['handlers']['logtail'] = {
        'class': 'logtail.LogtailHandler',
        'formatter': 'base',
        'source_token': LOGGING_SOURCE_TOKEN,
    }

logging.config.dictConfig(LOGGING)
