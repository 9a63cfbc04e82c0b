import logging

from django.utils.dateparse import parse_date
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from comportamiento import services
from comportamiento.models import Conducta, Observacion, RegistroConducta

from .serializers import (
    ConductaSerializer,
    ObservacionRequestSerializer,
    ObservacionSerializer,
    RegistroConductaRequestSerializer,
    RegistroConductaResponseSerializer,
)

logger = logging.getLogger(__name__)


def _fecha_param(request, nombre):
    valor = request.query_params.get(nombre)
    try:
        fecha = parse_date(valor or '')
    except ValueError:
        fecha = None
    if fecha is None:
        raise ValidationError({nombre: "Fecha requerida en formato YYYY-MM-DD."})
    return fecha


class FiltrosPorFechaMixin:
    """Acciones comunes de consulta por estudiante, docente, fecha y rango de fechas"""

    def _responder(self, queryset):
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'], url_path=r'estudiante/(?P<estudiante_id>\d+)')
    def por_estudiante(self, request, estudiante_id=None):
        return self._responder(self.get_queryset().por_estudiante(estudiante_id))

    @action(detail=False, methods=['get'], url_path=r'docente/(?P<docente_id>\d+)')
    def por_docente(self, request, docente_id=None):
        return self._responder(self.get_queryset().por_docente(docente_id))

    @action(detail=False, methods=['get'], url_path='fecha')
    def por_fecha(self, request):
        fecha = _fecha_param(request, 'fecha')
        return self._responder(self.get_queryset().por_fecha(fecha))

    @action(detail=False, methods=['get'], url_path='rango-fechas')
    def por_rango_fechas(self, request):
        inicio = _fecha_param(request, 'fechaInicio')
        fin = _fecha_param(request, 'fechaFin')
        if inicio > fin:
            raise ValidationError({'fechaInicio': "La fecha inicial no puede ser posterior a la final."})
        return self._responder(self.get_queryset().por_rango_fechas(inicio, fin))


# =============================================
# CONDUCTAS
# =============================================

class ConductaViewSet(viewsets.ModelViewSet):
    queryset = Conducta.objects.select_related('gravedad').order_by('nombre_conducta')
    serializer_class = ConductaSerializer
    lookup_value_regex = r'\d+'
    roles_escritura = {'DIRECTOR'}

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        datos = serializer.validated_data
        conducta = services.crear_conducta(
            datos['nombre_conducta'], datos.get('descripcion', ''), datos['idGravedad'], datos.get('activo', True)
        )
        return Response(self.get_serializer(conducta).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=kwargs.pop('partial', False))
        serializer.is_valid(raise_exception=True)
        datos = serializer.validated_data
        conducta = services.actualizar_conducta(
            instance.pk,
            datos.get('nombre_conducta', instance.nombre_conducta),
            datos.get('descripcion', instance.descripcion),
            datos.get('idGravedad', instance.gravedad_id),
            datos.get('activo'),
        )
        return Response(self.get_serializer(conducta).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        services.eliminar_conducta(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'], url_path=r'gravedad/(?P<gravedad_id>\d+)')
    def por_gravedad(self, request, gravedad_id=None):
        serializer = self.get_serializer(self.get_queryset().por_gravedad(gravedad_id), many=True)
        return Response(serializer.data)


# =============================================
# OBSERVACIONES
# =============================================

class ObservacionViewSet(FiltrosPorFechaMixin, viewsets.ModelViewSet):
    queryset = Observacion.objects.con_relaciones().order_by('-fecha', '-id')
    serializer_class = ObservacionSerializer
    lookup_value_regex = r'\d+'
    roles_escritura = {'DIRECTOR', 'DOCENTE'}

    def create(self, request, *args, **kwargs):
        entrada = ObservacionRequestSerializer(data=request.data)
        entrada.is_valid(raise_exception=True)
        datos = entrada.validated_data
        observacion = services.registrar_observacion(
            datos['estudianteId'], datos['docenteId'], datos['tipoObservacion'], datos['descripcion']
        )
        return Response(self.get_serializer(observacion).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        entrada = ObservacionRequestSerializer(data=request.data)
        entrada.is_valid(raise_exception=True)
        datos = entrada.validated_data
        observacion = services.actualizar_observacion(
            instance.pk, datos['estudianteId'], datos['docenteId'], datos['tipoObservacion'], datos['descripcion']
        )
        return Response(self.get_serializer(observacion).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        services.eliminar_observacion(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['patch'], url_path='marcar-leida')
    def marcar_leida(self, request, pk=None):
        observacion = services.marcar_observacion_leida(self.get_object().pk)
        return Response(self.get_serializer(observacion).data)


# =============================================
# REGISTROS DE CONDUCTA
# =============================================

class RegistroConductaViewSet(FiltrosPorFechaMixin, viewsets.ModelViewSet):
    queryset = RegistroConducta.objects.con_relaciones().order_by('-fecha_registro', '-id')
    serializer_class = RegistroConductaResponseSerializer
    lookup_value_regex = r'\d+'
    roles_escritura = {'DIRECTOR', 'DOCENTE'}

    def create(self, request, *args, **kwargs):
        entrada = RegistroConductaRequestSerializer(data=request.data)
        entrada.is_valid(raise_exception=True)
        datos = entrada.validated_data
        registro = services.registrar_incidente(
            estudiante_id=datos['estudianteId'],
            conducta_id=datos['conductaId'],
            docente_id=datos['docenteId'],
            observaciones=datos['observaciones'],
            comentarios=datos['comentarios'],
            evidencia_url=datos['evidenciaUrl'],
        )
        return Response(self.get_serializer(registro).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        entrada = RegistroConductaRequestSerializer(data=request.data)
        entrada.is_valid(raise_exception=True)
        datos = entrada.validated_data
        registro = services.actualizar_incidente(
            instance.pk,
            estudiante_id=datos['estudianteId'],
            conducta_id=datos['conductaId'],
            docente_id=datos['docenteId'],
            observaciones=datos['observaciones'],
            comentarios=datos['comentarios'],
            evidencia_url=datos['evidenciaUrl'],
            estado=datos.get('estado'),
        )
        return Response(self.get_serializer(registro).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        services.eliminar_incidente(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['patch'], url_path='marcar-leido')
    def marcar_leido(self, request, pk=None):
        registro = services.marcar_incidente_leido(self.get_object().pk)
        return Response(self.get_serializer(registro).data)
