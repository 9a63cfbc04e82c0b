from django.core.management.base import BaseCommand

from comportamiento.models import TipoGravedad
from comportamiento.services import inicializar_gravedades


class Command(BaseCommand):
    help = 'Crea los tipos de gravedad (leve, grave, muy grave) si la tabla está vacía'

    def handle(self, *args, **options):
        creadas = inicializar_gravedades()
        if creadas:
            self.stdout.write(self.style.SUCCESS(f'✓ {creadas} tipos de gravedad creados'))
        else:
            self.stdout.write(
                self.style.WARNING(
                    f'Ya existen {TipoGravedad.objects.count()} tipos de gravedad, no se creó ninguno'
                )
            )
