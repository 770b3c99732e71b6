"""
Django settings for trying out the prefixes app locally

    django-admin migrate --settings=projects.dev --pythonpath=.
    django-admin prefix_discussion_setup --settings=projects.dev --pythonpath=.
    django-admin runserver --settings=projects.dev --pythonpath=.
"""
from __future__ import annotations
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / {dir_name} /
BASE_DIR = Path(__file__).resolve().parents[1]


DEBUG = True

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "dev.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = (
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    # Admin
    "django.contrib.admin",
    # REST API
    "rest_framework",

    # django-rules based authorization
    'rules.apps.AutodiscoverRulesConfig',
    # Prefix Discussion
    "prefix_discussion.core.prefixes.apps.PrefixesConfig",

    # Stand-in for a real forum until one is wired up here.
    "test_utils.forum.apps.ForumConfig",
)

AUTHENTICATION_BACKENDS = [
    'rules.permissions.ObjectPermissionBackend',
    'django.contrib.auth.backends.ModelBackend',
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ]
        },
    },
]

ROOT_URLCONF = "projects.urls"

SECRET_KEY = "insecure-secret-key"

STATIC_URL = "/static/"
STATICFILES_FINDERS = [
    "django.contrib.staticfiles.finders.FileSystemFinder",
    "django.contrib.staticfiles.finders.AppDirectoriesFinder",
]

USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "prefix_discussion": {"handlers": ["console"], "level": "INFO"},
    },
}

# Prefix Discussion configuration
PREFIX_DISCUSSION = {
    "DISCUSSION_MODEL": "forum.Discussion",
    "PREFIXES": "Question;Solved;Announcement",
    "LIST_SEPARATOR": ";",
}
