from django.db import models
from django.contrib.auth.hashers import check_password, identify_hasher, make_password
from django.utils.crypto import constant_time_compare


class Persona(models.Model):
    """Modelo abstracto base para los usuarios que inician sesión (director, docente, estudiante)"""
    ROL = None

    nombres = models.CharField(max_length=100)
    apellidos = models.CharField(max_length=100)
    usuario = models.CharField(max_length=50, unique=True)
    password = models.CharField(max_length=255)

    # Compatibilidad con DRF y plantillas que consultan request.user
    is_authenticated = True
    is_anonymous = False

    class Meta:
        abstract = True
        ordering = ['apellidos', 'nombres']

    def __str__(self):
        return self.get_full_name()

    def get_full_name(self):
        return f"{self.nombres} {self.apellidos}".strip()

    @property
    def display_name(self):
        return self.get_full_name() or self.usuario

    @property
    def rol(self):
        return self.ROL

    @property
    def tiene_password_legado(self):
        """True cuando el valor guardado no es un hash reconocido por Django"""
        if not self.password:
            return False
        try:
            identify_hasher(self.password)
        except ValueError:
            return True
        return False

    def set_password(self, raw_password):
        self.password = make_password(raw_password)

    def check_password(self, raw_password):
        """
        Verifica la contraseña en tiempo constante.
        Las filas con contraseña en texto plano se re-hashean en el primer acceso exitoso.
        """
        if not self.password or raw_password is None:
            return False

        if self.tiene_password_legado:
            valido = constant_time_compare(raw_password, self.password)
            if valido:
                self.set_password(raw_password)
                self.save(update_fields=['password'])
            return valido

        def setter(raw):
            self.set_password(raw)
            self.save(update_fields=['password'])

        return check_password(raw_password, self.password, setter)


class Director(Persona):
    ROL = 'DIRECTOR'

    class Meta(Persona.Meta):
        db_table = 'director'
        verbose_name = 'Director'
        verbose_name_plural = 'Directores'


class DocenteQuerySet(models.QuerySet):

    def materias(self):
        return list(
            self.exclude(materia='').order_by('materia').values_list('materia', flat=True).distinct()
        )

    def con_mas_registros(self, limite=5):
        return self.annotate(
            total_registros=models.Count('registros')
        ).filter(total_registros__gt=0).order_by('-total_registros', 'apellidos')[:limite]


class Docente(Persona):
    ROL = 'DOCENTE'

    materia = models.CharField(max_length=100, blank=True, default='')

    objects = DocenteQuerySet.as_manager()

    class Meta(Persona.Meta):
        db_table = 'docente'
        verbose_name = 'Docente'
        verbose_name_plural = 'Docentes'
