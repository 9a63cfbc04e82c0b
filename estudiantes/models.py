from django.db import models
from django.db.models import Count
from django.utils import timezone

from usuarios.models import Persona


class EstudianteQuerySet(models.QuerySet):

    def por_grado(self, grado):
        return self.filter(grado=grado)

    def por_grado_y_seccion(self, grado, seccion):
        return self.filter(grado=grado, seccion=seccion)

    def buscar(self, texto):
        return self.filter(
            models.Q(nombres__icontains=texto) |
            models.Q(apellidos__icontains=texto) |
            models.Q(usuario__icontains=texto)
        )

    def con_conteos(self):
        return self.annotate(
            total_incidentes=Count('registros', distinct=True),
            total_observaciones=Count('observaciones', distinct=True),
        )

    def con_mas_incidencias(self, limite=5):
        return self.annotate(
            total_incidentes=Count('registros')
        ).filter(total_incidentes__gt=0).order_by('-total_incidentes', 'apellidos')[:limite]

    def sin_incidencias(self):
        return self.filter(registros__isnull=True)

    def grados(self):
        return list(self.order_by('grado').values_list('grado', flat=True).distinct())

    def secciones(self):
        return list(self.order_by('seccion').values_list('seccion', flat=True).distinct())


class Estudiante(Persona):
    ROL = 'ESTUDIANTE'

    grado = models.CharField(max_length=10)
    seccion = models.CharField(max_length=10, blank=True, default='')
    fecha_nacimiento = models.DateField(null=True, blank=True)

    objects = EstudianteQuerySet.as_manager()

    class Meta(Persona.Meta):
        db_table = 'estudiante'
        verbose_name = 'Estudiante'
        verbose_name_plural = 'Estudiantes'

    @property
    def grado_seccion(self):
        return f"{self.grado}° {self.seccion}".strip()

    @property
    def edad(self):
        if self.fecha_nacimiento:
            today = timezone.now().date()
            return today.year - self.fecha_nacimiento.year - (
                (today.month, today.day) < (self.fecha_nacimiento.month, self.fecha_nacimiento.day)
            )
        return None
