from django.apps import AppConfig


class HighlighterConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'highlighter'
    verbose_name = 'Syntax highlighter'
