"""
Django settings for running the Depot test suite.
"""

SECRET_KEY = 'depot-tests'

USE_TZ = True

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'depot',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

DEPOT = {
    'ENFORCE_AVAILABLE_STOCK': False,
    'REQUIRE_DELETION_COMMENT': True,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'loggers': {
        'depot': {'handlers': ['console'], 'level': 'WARNING'},
    },
}
