from django.apps import AppConfig


class DocentesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'docentes'
