from pathlib import Path
import os

from dotenv import load_dotenv

# === Базовые пути ===
BASE_DIR = Path(__file__).resolve().parent.parent

# === .env ===
load_dotenv(BASE_DIR / ".env")

# === Базовые настройки ===
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-unsafe-secret-key")

DEBUG = os.getenv("DJANGO_DEBUG", "False") == "True"

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

# === Приложения ===
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    "rest_framework",
    "corsheaders",
    "django_filters",

    "users",
    "halls",
    "booking",
    "api",
]

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    # авторизации нет: личность вызывающего передаётся в теле запроса
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
    ],
    "UNAUTHENTICATED_USER": None,
    # деньги отдаём числом, а не строкой
    "COERCE_DECIMAL_TO_STRING": False,
    "EXCEPTION_HANDLER": "common.exceptions.custom_exception_handler",
}

# Разрешённые origin’ы для фронта
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# === Middleware ===
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "hallbooking.urls"

# === Шаблоны (нужны только админке) ===
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "hallbooking.wsgi.application"

# === База данных ===
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DJANGO_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# === Валидаторы паролей (для пользователей админки) ===
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]

# === Локализация / время ===

LANGUAGE_CODE = "en-us"

TIME_ZONE = os.getenv("DJANGO_TIME_ZONE", "Asia/Kolkata")

USE_I18N = True
USE_TZ = True

# === Статика ===

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# === Логирование ===

HALLBOOKING_LOG_LEVEL = os.getenv("HALLBOOKING_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "halls": {"handlers": ["console"], "level": HALLBOOKING_LOG_LEVEL, "propagate": False},
        "booking": {"handlers": ["console"], "level": HALLBOOKING_LOG_LEVEL, "propagate": False},
        "users": {"handlers": ["console"], "level": HALLBOOKING_LOG_LEVEL, "propagate": False},
        "api": {"handlers": ["console"], "level": HALLBOOKING_LOG_LEVEL, "propagate": False},
        "common": {"handlers": ["console"], "level": HALLBOOKING_LOG_LEVEL, "propagate": False},
    },
}

# === Правила бронирования ===

# отмена пользователем возможна не позже чем за N часов до события
BOOKING_CANCELLATION_WINDOW_HOURS = int(os.getenv("BOOKING_CANCELLATION_WINDOW_HOURS", "24"))

# окно для счётчика «свежих» броней на дашборде
DASHBOARD_RECENT_DAYS = int(os.getenv("DASHBOARD_RECENT_DAYS", "30"))
