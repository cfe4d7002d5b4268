from .base import *  # noqa: F401,F403
from .base import env

DEBUG = False

SECRET_KEY = env.str('SECRET_KEY')  # required, no default

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', [])

# XML node service, no development fallbacks
XMLAPI_BASE_URL = env.url('XMLAPI_BASE_URL').geturl()
XMLAPI_API_KEY = env.str('XMLAPI_API_KEY')
XMLAPI_TIMEOUT = env.float('XMLAPI_TIMEOUT', 10.0)

LOGGING['loggers']['xmlapi']['level'] = env.str('XMLAPI_LOG_LEVEL', 'WARNING')  # noqa: F405
