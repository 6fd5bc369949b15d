"""
Django settings for the dispatch backend.

Values come from the environment (or a .env file at the repository root):
DJANGO_SECRET_KEY, DJANGO_DEBUG, DJANGO_ALLOWED_HOSTS, DATABASE_PATH,
DISPATCH_MIN_DELIVERY_DISTANCE, DISPATCH_MAX_DELIVERY_DISTANCE
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR.parent / ".env")

# Using an insecure key for dev if not provided
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-dispatch-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'logistics',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'dispatch_backend.urls'
WSGI_APPLICATION = 'dispatch_backend.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv("DATABASE_PATH", str(BASE_DIR / 'db.sqlite3')),
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# The API is internal; no user accounts
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'UNAUTHENTICATED_USER': None,
}

# Range of the randomly drawn delivery distance
DISPATCH_MIN_DELIVERY_DISTANCE = int(os.getenv("DISPATCH_MIN_DELIVERY_DISTANCE", "0"))
DISPATCH_MAX_DELIVERY_DISTANCE = int(os.getenv("DISPATCH_MAX_DELIVERY_DISTANCE", "20"))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {'format': '%(asctime)s %(levelname)s %(name)s: %(message)s'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'simple'},
    },
    'loggers': {
        'dispatch': {'handlers': ['console'], 'level': os.getenv("DISPATCH_LOG_LEVEL", "INFO")},
        'drivers': {'handlers': ['console'], 'level': os.getenv("DISPATCH_LOG_LEVEL", "INFO")},
        'logistics': {'handlers': ['console'], 'level': os.getenv("DISPATCH_LOG_LEVEL", "INFO")},
    },
}
