from django.apps import AppConfig


class ComportamientoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'comportamiento'
    verbose_name = 'Convivencia escolar'

    def ready(self):
        from django.db.models.signals import post_migrate
        from .signals import sembrar_gravedades

        post_migrate.connect(sembrar_gravedades, sender=self)
