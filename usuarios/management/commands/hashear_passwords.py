# management/commands/hashear_passwords.py
from django.core.management.base import BaseCommand

from usuarios.services import MODELOS_POR_ROL


class Command(BaseCommand):
    help = 'Convierte las contraseñas guardadas en texto plano a hashes de Django'

    def add_arguments(self, parser):
        parser.add_argument(
            '--solo-reporte',
            action='store_true',
            help='Solo contar las contraseñas pendientes sin modificarlas'
        )

    def handle(self, *args, **options):
        solo_reporte = options['solo_reporte']
        total = 0

        for rol, modelo in MODELOS_POR_ROL.items():
            pendientes = [p for p in modelo.objects.all() if p.tiene_password_legado]
            if not solo_reporte:
                for persona in pendientes:
                    persona.set_password(persona.password)
                    persona.save(update_fields=['password'])
            total += len(pendientes)
            self.stdout.write(f'{rol}: {len(pendientes)} contraseñas en texto plano')

        if solo_reporte:
            self.stdout.write(self.style.WARNING(f'{total} contraseñas pendientes (sin cambios)'))
        else:
            self.stdout.write(self.style.SUCCESS(f'✓ {total} contraseñas convertidas'))
