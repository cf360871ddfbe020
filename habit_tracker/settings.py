# habit_tracker/settings.py
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('HABITS_SECRET_KEY', 'django-insecure-habit-tracker-dev-key')
DEBUG = env_bool('HABITS_DEBUG', True)
ALLOWED_HOSTS = os.environ.get('HABITS_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'apps.goals.apps.GoalsConfig',
]

MIDDLEWARE = []

ROOT_URLCONF = 'habit_tracker.urls'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('HABITS_DB_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

# Strefa czasowa decyduje tylko o tym, jaki dzień jest "dzisiaj"
LANGUAGE_CODE = 'pl'
TIME_ZONE = os.environ.get('HABITS_TIME_ZONE', 'Europe/Warsaw')
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOG_LEVEL = os.environ.get('HABITS_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'apps.goals': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
