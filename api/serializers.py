from rest_framework import serializers

from comportamiento.models import Conducta, Observacion, RegistroConducta, TipoGravedad
from estudiantes.models import Estudiante


class EstudianteSimpleSerializer(serializers.ModelSerializer):
    grado = serializers.SerializerMethodField()

    class Meta:
        model = Estudiante
        fields = ['id', 'nombres', 'apellidos', 'grado', 'seccion']

    def get_grado(self, obj):
        return f"{obj.grado}°"


class TipoGravedadSerializer(serializers.ModelSerializer):
    idGravedad = serializers.IntegerField(source='id', read_only=True)
    nombreGravedad = serializers.CharField(source='nombre_gravedad', read_only=True)

    class Meta:
        model = TipoGravedad
        fields = ['idGravedad', 'nombreGravedad', 'puntos']


# =============================================
# CONDUCTAS
# =============================================

class ConductaSerializer(serializers.ModelSerializer):
    idConducta = serializers.IntegerField(source='id', read_only=True)
    nombreConducta = serializers.CharField(source='nombre_conducta', max_length=100)
    descripcion = serializers.CharField(required=False, allow_blank=True, default='')
    gravedad = TipoGravedadSerializer(read_only=True)
    idGravedad = serializers.IntegerField(write_only=True)
    activo = serializers.BooleanField(required=False, default=True)

    class Meta:
        model = Conducta
        fields = ['idConducta', 'nombreConducta', 'descripcion', 'gravedad', 'idGravedad', 'activo']


class ConductaSimpleSerializer(serializers.ModelSerializer):
    nombreConducta = serializers.CharField(source='nombre_conducta')
    gravedad = serializers.CharField(source='gravedad.nombre_gravedad')

    class Meta:
        model = Conducta
        fields = ['nombreConducta', 'gravedad']


# =============================================
# REGISTROS DE CONDUCTA
# =============================================

class RegistroConductaRequestSerializer(serializers.Serializer):
    estudianteId = serializers.IntegerField()
    conductaId = serializers.IntegerField()
    docenteId = serializers.IntegerField()
    observaciones = serializers.CharField(required=False, allow_blank=True, default='')
    comentarios = serializers.CharField(required=False, allow_blank=True, default='')
    evidenciaUrl = serializers.CharField(required=False, allow_blank=True, default='', max_length=500)
    estado = serializers.ChoiceField(choices=RegistroConducta.ESTADOS, required=False)


class RegistroConductaResponseSerializer(serializers.ModelSerializer):
    idRegistro = serializers.IntegerField(source='id')
    estudiante = EstudianteSimpleSerializer()
    docenteNombreCompleto = serializers.CharField(source='docente.get_full_name')
    conducta = ConductaSimpleSerializer()
    fechaRegistro = serializers.DateField(source='fecha_registro')
    observaciones = serializers.CharField(source='acciones_tomadas')
    evidenciaUrl = serializers.CharField(source='evidencia_url')
    fechaLectura = serializers.DateField(source='fecha_lectura')

    class Meta:
        model = RegistroConducta
        fields = [
            'idRegistro', 'estudiante', 'docenteNombreCompleto', 'conducta', 'fechaRegistro',
            'observaciones', 'comentarios', 'evidenciaUrl', 'estado', 'leido', 'fechaLectura',
        ]


# =============================================
# OBSERVACIONES
# =============================================

class ObservacionRequestSerializer(serializers.Serializer):
    estudianteId = serializers.IntegerField()
    docenteId = serializers.IntegerField()
    tipoObservacion = serializers.CharField(max_length=50)
    descripcion = serializers.CharField()


class ObservacionSerializer(serializers.ModelSerializer):
    idObservacion = serializers.IntegerField(source='id')
    estudiante = EstudianteSimpleSerializer()
    docenteId = serializers.IntegerField(source='docente_id')
    docenteNombreCompleto = serializers.CharField(source='docente.get_full_name')
    tipoObservacion = serializers.CharField(source='tipo_observacion')
    fechaLectura = serializers.DateField(source='fecha_lectura')

    class Meta:
        model = Observacion
        fields = [
            'idObservacion', 'estudiante', 'docenteId', 'docenteNombreCompleto',
            'tipoObservacion', 'descripcion', 'fecha', 'leido', 'fechaLectura',
        ]
