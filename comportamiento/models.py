from django.db import models
from django.db.models import Count, Q
from django.db.models.functions import TruncMonth
from django.utils import timezone

from usuarios.models import Docente
from estudiantes.models import Estudiante


class TipoGravedad(models.Model):
    """Niveles de gravedad de las faltas"""
    LEVE = 'leve'
    GRAVE = 'grave'
    MUY_GRAVE = 'muy grave'

    id = models.BigAutoField(primary_key=True, db_column='id_gravedad')
    nombre_gravedad = models.CharField(max_length=50, unique=True)
    descripcion = models.CharField(max_length=255, blank=True, default='')
    puntos = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'tipogravedad'
        ordering = ['puntos', 'nombre_gravedad']
        verbose_name = 'Tipo de gravedad'
        verbose_name_plural = 'Tipos de gravedad'

    def __str__(self):
        return self.nombre_gravedad


class ConductaQuerySet(models.QuerySet):

    def activas(self):
        return self.filter(activo=True)

    def inactivas(self):
        return self.filter(activo=False)

    def por_gravedad(self, gravedad_id):
        return self.filter(gravedad_id=gravedad_id)

    def buscar(self, texto):
        return self.filter(nombre_conducta__icontains=texto)

    def mas_utilizadas(self):
        """Conductas activas anotadas con su número de registros, de mayor a menor"""
        return self.activas().annotate(
            total_registros=Count('registros')
        ).order_by('-total_registros', 'nombre_conducta')

    def no_utilizadas(self):
        return self.activas().filter(registros__isnull=True).distinct()

    def conteo_por_gravedad(self):
        return self.values('gravedad__nombre_gravedad').annotate(
            total=Count('id')
        ).order_by('gravedad__nombre_gravedad')


class Conducta(models.Model):
    """Catálogo de conductas (faltas) que se pueden registrar"""
    id = models.BigAutoField(primary_key=True, db_column='id_conducta')
    nombre_conducta = models.CharField(max_length=100)
    descripcion = models.TextField(blank=True, default='')
    gravedad = models.ForeignKey(
        TipoGravedad, on_delete=models.PROTECT, db_column='id_gravedad', related_name='conductas'
    )
    activo = models.BooleanField(default=True)

    objects = ConductaQuerySet.as_manager()

    class Meta:
        db_table = 'conducta'
        ordering = ['nombre_conducta']

    def __str__(self):
        return self.nombre_conducta


class RegistroConductaQuerySet(models.QuerySet):

    def con_relaciones(self):
        return self.select_related('estudiante', 'docente', 'conducta', 'conducta__gravedad')

    def por_estudiante(self, estudiante_id):
        return self.filter(estudiante_id=estudiante_id)

    def por_docente(self, docente_id):
        return self.filter(docente_id=docente_id)

    def por_conducta(self, conducta_id):
        return self.filter(conducta_id=conducta_id)

    def por_fecha(self, fecha):
        return self.filter(fecha_registro=fecha)

    def por_rango_fechas(self, inicio, fin):
        return self.filter(fecha_registro__range=(inicio, fin))

    def por_estado(self, estado):
        return self.filter(estado=estado)

    def por_gravedad(self, nombre_gravedad):
        return self.filter(conducta__gravedad__nombre_gravedad__iexact=nombre_gravedad)

    def por_grado(self, grado):
        return self.filter(estudiante__grado=grado)

    def leidos(self):
        return self.filter(leido=True)

    def no_leidos(self):
        return self.filter(leido=False)

    def recientes(self, limite=5):
        return self.order_by('-fecha_registro', '-id')[:limite]

    def conteo_por_gravedad(self):
        return self.values('conducta__gravedad__nombre_gravedad').annotate(
            total=Count('id')
        ).order_by('-total')

    def conteo_por_grado(self):
        return self.values('estudiante__grado').annotate(
            total=Count('id')
        ).order_by('estudiante__grado')

    def conteo_por_mes(self):
        return self.annotate(
            mes=TruncMonth('fecha_registro')
        ).values('mes').annotate(total=Count('id')).order_by('mes')

    def conteo_por_estado(self):
        return dict(self.order_by().values_list('estado').annotate(total=Count('id')))

    def conteo_por_lectura(self):
        return {
            'leidos': self.filter(leido=True).count(),
            'no_leidos': self.filter(leido=False).count(),
        }


class RegistroConducta(models.Model):
    """Incidente: una conducta registrada por un docente sobre un estudiante"""
    ACTIVO = 'ACTIVO'
    RESUELTO = 'RESUELTO'

    ESTADOS = [
        (ACTIVO, 'Activo'),
        (RESUELTO, 'Resuelto'),
    ]

    id = models.BigAutoField(primary_key=True, db_column='id_registro')
    estudiante = models.ForeignKey(
        Estudiante, on_delete=models.PROTECT, db_column='id_estudiante', related_name='registros'
    )
    docente = models.ForeignKey(
        Docente, on_delete=models.PROTECT, db_column='id_docente', related_name='registros'
    )
    conducta = models.ForeignKey(
        Conducta, on_delete=models.PROTECT, db_column='id_conducta', related_name='registros'
    )
    fecha_registro = models.DateField()
    acciones_tomadas = models.TextField(blank=True, default='')
    comentarios = models.TextField(blank=True, default='')
    evidencia_url = models.CharField(max_length=500, blank=True, default='')
    leido = models.BooleanField(default=False)
    fecha_lectura = models.DateField(null=True, blank=True)
    estado = models.CharField(max_length=20, choices=ESTADOS, default=ACTIVO)

    objects = RegistroConductaQuerySet.as_manager()

    class Meta:
        db_table = 'registroconductas'
        ordering = ['-fecha_registro', '-id']
        verbose_name = 'Registro de conducta'
        verbose_name_plural = 'Registros de conducta'

    def __str__(self):
        return f"{self.estudiante} - {self.conducta} - {self.fecha_registro}"

    def save(self, *args, **kwargs):
        if self._state.adding:
            if not self.fecha_registro:
                self.fecha_registro = timezone.localdate()
            if not self.estado:
                self.estado = self.ACTIVO
        super().save(*args, **kwargs)

    @property
    def observaciones(self):
        return self.acciones_tomadas


class ObservacionQuerySet(models.QuerySet):
    POSITIVA = 'positiva'
    NEGATIVA = 'negativa'

    def con_relaciones(self):
        return self.select_related('estudiante', 'docente')

    def por_estudiante(self, estudiante_id):
        return self.filter(estudiante_id=estudiante_id)

    def por_docente(self, docente_id):
        return self.filter(docente_id=docente_id)

    def por_fecha(self, fecha):
        return self.filter(fecha=fecha)

    def por_rango_fechas(self, inicio, fin):
        return self.filter(fecha__range=(inicio, fin))

    def por_tipo(self, tipo):
        return self.filter(tipo_observacion__iexact=tipo)

    def positivas(self):
        return self.por_tipo(self.POSITIVA)

    def negativas(self):
        return self.por_tipo(self.NEGATIVA)

    def otras(self):
        return self.exclude(
            Q(tipo_observacion__iexact=self.POSITIVA) | Q(tipo_observacion__iexact=self.NEGATIVA)
        )

    def no_leidas(self):
        return self.filter(leido=False)

    def recientes(self, limite=5):
        return self.order_by('-fecha', '-id')[:limite]

    def conteo_por_tipo(self):
        return self.values('tipo_observacion').annotate(
            total=Count('id')
        ).order_by('-total')


class Observacion(models.Model):
    """Observación (positiva, negativa u otra) de un docente sobre un estudiante"""
    TIPOS_SUGERIDOS = [
        ('Positiva', 'Positiva'),
        ('Negativa', 'Negativa'),
        ('Informativa', 'Informativa'),
    ]

    id = models.BigAutoField(primary_key=True, db_column='id_observacion')
    estudiante = models.ForeignKey(
        Estudiante, on_delete=models.PROTECT, db_column='id_estudiante', related_name='observaciones'
    )
    docente = models.ForeignKey(
        Docente, on_delete=models.PROTECT, db_column='id_docente', related_name='observaciones'
    )
    tipo_observacion = models.CharField(max_length=50)
    descripcion = models.TextField()
    fecha = models.DateField()
    leido = models.BooleanField(default=False)
    fecha_lectura = models.DateField(null=True, blank=True)

    objects = ObservacionQuerySet.as_manager()

    class Meta:
        db_table = 'observaciones'
        ordering = ['-fecha', '-id']
        verbose_name = 'Observación'
        verbose_name_plural = 'Observaciones'

    def __str__(self):
        return f"{self.estudiante} - {self.tipo_observacion} - {self.fecha}"

    def save(self, *args, **kwargs):
        if self._state.adding and not self.fecha:
            self.fecha = timezone.localdate()
        super().save(*args, **kwargs)
