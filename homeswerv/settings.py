"""
Django settings for homeswerv project.

Everything environment-specific is read from the process environment, with a
`.env` file in the repo root loaded first for local development.
"""

from pathlib import Path
import os
from datetime import timedelta
from dotenv import load_dotenv
import dj_database_url

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


def _env_list(name, default=''):
    return [item.strip() for item in os.getenv(name, default).split(',') if item.strip()]


SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-homeswerv-dev-key')
DEBUG = _env_flag('DEBUG', 'True')

# APP_DOMAIN is set by the hosting platform; ALLOWED_HOSTS overrides everything
_default_hosts = ['localhost', '127.0.0.1', 'testserver']
if os.getenv('APP_DOMAIN'):
    _default_hosts.append(os.getenv('APP_DOMAIN'))
ALLOWED_HOSTS = _env_list('ALLOWED_HOSTS') or _default_hosts


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'rest_framework_simplejwt',
    'corsheaders',
    'accounts',
    'marketing',
    'content',
    'projects',
    'guarantees',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'homeswerv.middleware.APICommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'homeswerv.urls'
WSGI_APPLICATION = 'homeswerv.wsgi.application'

# Site-wide layout lives in templates/; each app ships its own page templates
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
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


# Database: DATABASE_URL (hosted), then DB_NAME (local Postgres), then SQLite
if os.getenv('DATABASE_URL'):
    DATABASES = {
        'default': dj_database_url.config(
            conn_max_age=600,
            conn_health_checks=True,
            ssl_require=_env_flag('DB_SSL', 'True'),
        ),
    }
elif os.getenv('DB_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('DB_NAME'),
            'USER': os.getenv('DB_USER', ''),
            'PASSWORD': os.getenv('DB_PASSWORD', ''),
            'HOST': os.getenv('DB_HOST', 'localhost'),
            'PORT': os.getenv('DB_PORT', '5432'),
            'OPTIONS': {'sslmode': 'require'} if os.getenv('DB_SSL') else {},
        },
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        },
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Accounts
AUTH_USER_MODEL = 'accounts.User'

# Registration applies common.validation.is_valid_password on top of these
AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
]

# HTML views (content preview) use a session sign-in open to every role
LOGIN_URL = 'site-login'
LOGIN_REDIRECT_URL = '/'

# The kanban board keeps its working copy in the session
SESSION_COOKIE_AGE = int(os.getenv('SESSION_COOKIE_AGE', str(60 * 60 * 24 * 14)))


LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}


REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'DEFAULT_PARSER_CLASSES': (
        'rest_framework.parsers.JSONParser',
    ),
}

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(days=int(os.getenv('JWT_ACCESS_DAYS', '7'))),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=int(os.getenv('JWT_REFRESH_DAYS', '30'))),
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': SECRET_KEY,
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
}

# Local frontend dev servers; production origins come from CORS_ALLOWED_ORIGINS_EXTRA
CORS_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
] + _env_list('CORS_ALLOWED_ORIGINS_EXTRA')
CORS_ALLOW_CREDENTIALS = True


# Guarantee claims backend (dotted path to a store class)
HOMESWERV_CLAIM_STORE = os.getenv('HOMESWERV_CLAIM_STORE', 'guarantees.store.ClaimStore')

# Hosted row-store used by guarantees.remote.RestClaimStore
HOMESWERV_BACKEND_URL = os.getenv('HOMESWERV_BACKEND_URL', '')
HOMESWERV_BACKEND_KEY = os.getenv('HOMESWERV_BACKEND_KEY', '')
HOMESWERV_BACKEND_TIMEOUT = float(os.getenv('HOMESWERV_BACKEND_TIMEOUT', '10'))


LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    # App loggers only set a level; records reach the console through root
    'loggers': {
        app: {'level': LOG_LEVEL}
        for app in ('accounts', 'common', 'content', 'guarantees', 'projects')
    },
}
