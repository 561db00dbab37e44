"""Django settings shared by all environments.

For more information on this file, see
https://docs.djangoproject.com/en/5.1/topics/settings/
"""

from decouple import Csv

from server.settings.components import config

INSTALLED_APPS: tuple[str, ...] = (
    'server.apps.files',
)

MIDDLEWARE: tuple[str, ...] = (
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
)

ROOT_URLCONF = 'server.urls'

WSGI_APPLICATION = 'server.wsgi.application'

# Stored files live on the filesystem, no database is used
DATABASES: dict[str, dict[str, str]] = {}

ALLOWED_HOSTS = config(
    'DJANGO_ALLOWED_HOSTS',
    cast=Csv(),
    default='localhost,127.0.0.1',
)

# Internationalization
LANGUAGE_CODE = 'en-us'
USE_I18N = False
USE_TZ = True
TIME_ZONE = 'UTC'

# Routes have no trailing slash and filenames may not end with one
APPEND_SLASH = False
