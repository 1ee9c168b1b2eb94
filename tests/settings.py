"""Minimal Django settings for the test suite."""

SECRET_KEY = "highlighter-tests"

INSTALLED_APPS = [
    "highlighter",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
    },
]

USE_TZ = True
