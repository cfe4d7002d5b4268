from pathlib import Path

from environs import Env

env = Env()
env.read_env(recurse=False)

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = env.str('SECRET_KEY', 'django-insecure-xmlapi-dev-only-3k1v9q0z!7m2b#t8w')

DEBUG = env.bool('DEBUG', True)

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', [])

INSTALLED_APPS = [
    'xmlapi',
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'xmlapi': {
            'handlers': ['console'],
            'level': env.str('XMLAPI_LOG_LEVEL', 'INFO'),
        },
    },
}

# XML node service
XMLAPI_BASE_URL = env.str('XMLAPI_BASE_URL', 'http://localhost:8080')
XMLAPI_API_KEY = env.str('XMLAPI_API_KEY', 'xmlapi-dev-key')
XMLAPI_TIMEOUT = env.float('XMLAPI_TIMEOUT', 30.0)

# Client implementation, swap via env or override in prod.py
XMLAPI_CLIENT_CLASS = env.str('XMLAPI_CLIENT_CLASS', 'xmlapi.clients.xml_client.XmlApiClient')
