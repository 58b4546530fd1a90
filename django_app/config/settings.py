# config/settings.py

import os
from pathlib import Path
from dotenv import load_dotenv
# 프로젝트 기본 경로 (django_app 폴더)
BASE_DIR = Path(__file__).resolve().parent.parent
# django_app/.env 파일 자동 로드
load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str = "") -> list:
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


# 개발용 시크릿 키 (실서비스에서는 환경변수로만 사용)
SECRET_KEY = os.environ.get(
    "PUKKAPRICE_SECRET_KEY",
    "django-insecure-temp-key-for-server"
)
DEBUG = _env_bool("PUKKAPRICE_DEBUG", True)

# development / production (health 응답에 그대로 노출)
ENVIRONMENT = os.environ.get("PUKKAPRICE_ENVIRONMENT", "development")
API_VERSION = "1.0.0"

ALLOWED_HOSTS = _env_list("PUKKAPRICE_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")
# 애플리케이션 설정
INSTALLED_APPS = [
    # Django 기본 앱
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # 서드파티 앱
    "rest_framework",
    "corsheaders",

    # 로컬 앱
    "products",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "corsheaders.middleware.CorsMiddleware",  # CORS가 CommonMiddleware보다 먼저
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

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

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# ======================
# Database
# ======================

# 개발용: sqlite3
# 운영 DB(MySQL/PostgreSQL)로 바꾸려면 이 블록을 교체하면 됨.
# (sqlite 에서는 contains 도 대소문자를 구분하지 않는다)
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("PUKKAPRICE_DB_PATH", BASE_DIR / "db.sqlite3"),
    }
}

# ======================
# 국제화
# ======================

LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Kolkata"
USE_I18N = True
USE_TZ = True

# ======================
# Static & Uploads
# ======================

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# 상품 이미지 업로드 위치 / 공개 경로
UPLOADS_ROOT = Path(os.environ.get("PUKKAPRICE_UPLOADS_DIR", BASE_DIR / "uploads"))
UPLOADS_URL = "/uploads/"
MEDIA_ROOT = UPLOADS_ROOT
MEDIA_URL = UPLOADS_URL

# 이미지 URL 에 붙는 호스트 (예: https://api.pukkaprice.com)
PUBLIC_BASE_URL = os.environ.get("PUBLIC_BASE_URL", "http://localhost:8000")

MAX_IMAGE_UPLOAD_SIZE = 5 * 1024 * 1024  # 5MB

# ======================
# 상품 목록
# ======================

PRODUCT_LIST_DEFAULT_LIMIT = 20
PRODUCT_LIST_MAX_LIMIT = 100

# ======================
# Django REST Framework
# ======================

# 인증 모델 없음 (관리자 라우트 포함 전부 공개)
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "config.exceptions.api_exception_handler",
}

# ======================
# CORS
# ======================

FRONTEND_ORIGIN = "https://pukka-price-frontend.vercel.app"

CORS_ALLOWED_ORIGINS = _env_list("CORS_ALLOWED_ORIGINS", "http://localhost:3000")
if FRONTEND_ORIGIN not in CORS_ALLOWED_ORIGINS:
    CORS_ALLOWED_ORIGINS.append(FRONTEND_ORIGIN)
CORS_ALLOW_METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
CORS_ALLOW_CREDENTIALS = True

# ======================
# Logging
# ======================

LOG_LEVEL = os.environ.get("PUKKAPRICE_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "WARNING"},
        "config": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "products": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}

# ======================

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
