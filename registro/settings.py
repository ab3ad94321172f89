"""
Django settings for registro project.
"""

from pathlib import Path
from os.path import join
import environ

# =========================
# Paths & Env
# =========================
BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(DEBUG=(bool, False))

# Carga opcional del .env (en producción basta con variables de entorno)
env_file = BASE_DIR / ".env"
if env_file.exists():
    environ.Env.read_env(env_file)

# =========================
# Seguridad / Debug
# =========================
SECRET_KEY = env("SECRET_KEY", default="!!!-dev-unsafe-key-change-me-!!!")
DEBUG = env.bool("DEBUG", default=False)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])

CSRF_TRUSTED_ORIGINS = env.list(
    "CSRF_TRUSTED_ORIGINS",
    default=["http://127.0.0.1:8000", "http://localhost:8000"],
)

# =========================
# Apps
# =========================
INSTALLED_APPS = [
    # Django
    "django.contrib.sessions",
    "django.contrib.staticfiles",

    # Proyecto
    "personas.apps.PersonasConfig",
]

# =========================
# Middleware
# =========================
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",

    # WhiteNoise para servir archivos estáticos en producción
    "whitenoise.middleware.WhiteNoiseMiddleware",

    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# =========================
# URLs / Templates / WSGI
# =========================
ROOT_URLCONF = "registro.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [join(BASE_DIR, "plantillas")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "personas.context_processors.ui_flags",
            ],
        },
    },
]

WSGI_APPLICATION = "registro.wsgi.application"

# =========================
# Base de Datos
# =========================
# Los registros viven en la API externa; no hay base local.
DATABASES = {}

# =========================
# Sesiones / Cache
# =========================
# El estado del formulario vive en la sesión; la cache debe ser compartida
# por todos los workers (archivo por defecto, o redis/memcached vía CACHE_URL).
CACHES = {
    "default": env.cache_url("CACHE_URL", default=f"filecache://{BASE_DIR / '.cache' / 'sesiones'}")
}

SESSION_ENGINE = "django.contrib.sessions.backends.cache"
SESSION_COOKIE_AGE = env.int("SESSION_COOKIE_AGE", default=60 * 60 * 8)

# =========================
# API de personas
# =========================
PERSONAS_API_URL = env(
    "PERSONAS_API_URL", default=env("API_URL", default="http://localhost:4000")
)
PERSONAS_API_TIMEOUT = env.float("PERSONAS_API_TIMEOUT", default=10.0)

# Tiempo que permanece visible el aviso de éxito
BANNER_OK_MS = env.int("BANNER_OK_MS", default=1800)

# =========================
# i18n / Zona horaria
# =========================
LANGUAGE_CODE = "es"
TIME_ZONE = "America/Guayaquil"
USE_I18N = True
USE_TZ = True

# =========================
# Archivos estáticos
# =========================
STATIC_URL = "static/"

STATICFILES_DIRS = [join(BASE_DIR, "assets")]

STATIC_ROOT = BASE_DIR / "staticfiles"

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedStaticFilesStorage"},
}

# =========================
# Logging
# =========================
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "personas": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "django": {"handlers": ["console"], "level": "WARNING"},
    },
}
