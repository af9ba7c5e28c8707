# fleetlink/settings.py
from pathlib import Path
import os
BASE_DIR = Path(__file__).resolve().parent.parent

from dotenv import load_dotenv
load_dotenv(BASE_DIR / ".env")  # load .env before anything reads os.environ


def _env_bool(name, default="False"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# =========================
# Security
# =========================
SECRET_KEY = os.getenv('SECRET_KEY', 'fleetlink-dev-only-secret-key')
DEBUG = _env_bool('DEBUG', 'True')

ALLOWED_HOSTS = [
    h.strip() for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')
    if h.strip()
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'common.middleware.RequestLogMiddleware',
    'common.middleware.JsonErrorMiddleware',
]

# =========================
# Applications
# =========================
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rangefilter',

    'common',
    'vehicles.apps.VehiclesConfig',
    'bookings.apps.BookingsConfig',
]

ROOT_URLCONF = 'fleetlink.urls'
APPEND_SLASH = False

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

WSGI_APPLICATION = 'fleetlink.wsgi.application'

# =========================
# Database
# =========================
# DB_ENGINE=postgresql for production; anything else falls back to a local SQLite file.
if os.getenv('DB_ENGINE', 'sqlite') == 'postgresql':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('DB_NAME', 'fleetlink'),
            'USER': os.getenv('DB_USER', 'postgres'),
            'PASSWORD': os.getenv('DB_PASS'),
            'HOST': os.getenv('DB_HOST', 'localhost'),
            'PORT': os.getenv('DB_PORT', '5432'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.getenv('DB_NAME', str(BASE_DIR / 'db.sqlite3')),
            # BEGIN IMMEDIATE: every atomic block takes the write lock up front,
            # which is what serialises booking admissions on SQLite.
            'OPTIONS': {
                'transaction_mode': 'IMMEDIATE',
                'timeout': 20,
            },
            'TEST': {
                'NAME': str(BASE_DIR / 'test_fleetlink.sqlite3'),
            },
        }
    }

# =========================
# I18N / time
# =========================
LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.getenv('TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

STATIC_URL = '/static/'
STATIC_ROOT = os.path.join(BASE_DIR, 'staticfiles')

# =========================
# Booking engine
# =========================
FLEETLINK = {
    'BASE_RATE_PER_HOUR': 500,
    'FALLBACK_DURATION_HOURS': 2,
    'CANCELLATION_BUFFER_HOURS': 1,
    'RECENT_BOOKINGS_LIMIT': 5,
    'DEFAULT_PAGE_SIZE': 50,
    'MAX_PAGE_SIZE': 100,
}

BOOKING_SCHEDULER_ENABLED = _env_bool('BOOKING_SCHEDULER_ENABLED', 'False')
BOOKING_LIFECYCLE_INTERVAL_MINUTES = int(os.getenv('BOOKING_LIFECYCLE_INTERVAL_MINUTES', '30'))

# =========================
# Logging
# =========================
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.getenv('LOG_LEVEL', 'INFO'),
    },
    'loggers': {
        'apscheduler': {
            'level': 'WARNING',
        },
    },
}
