"""
Servicios del dominio de convivencia: incidentes, observaciones, catálogo de
conductas, historial y reportes.
comportamiento/services.py
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import ProtectedError
from django.utils import timezone

from estudiantes.models import Estudiante
from usuarios.models import Docente

from .exceptions import ConductaEnUso, EntidadNoEncontrada, RelacionInvalida
from .models import Conducta, Observacion, RegistroConducta, TipoGravedad

logger = logging.getLogger(__name__)

GRAVEDADES_INICIALES = [
    (TipoGravedad.LEVE, 1, 'Faltas menores que no afectan gravemente la convivencia'),
    (TipoGravedad.GRAVE, 3, 'Faltas que afectan significativamente la convivencia escolar'),
    (TipoGravedad.MUY_GRAVE, 5, 'Faltas muy graves que pueden conllevar a sanciones severas'),
]


def _obtener(modelo, pk, mensaje, excepcion=RelacionInvalida):
    try:
        return modelo.objects.get(pk=pk)
    except (modelo.DoesNotExist, ValueError, TypeError):
        raise excepcion(mensaje)


# =============================================
# INCIDENTES
# =============================================

@transaction.atomic
def registrar_incidente(estudiante_id, conducta_id, docente_id, observaciones,
                        comentarios='', evidencia_url=''):
    """
    Registra un incidente de conducta.
    Las observaciones del docente se guardan en ``acciones_tomadas``.
    """
    estudiante = _obtener(Estudiante, estudiante_id, "Estudiante no encontrado")
    docente = _obtener(Docente, docente_id, "Docente no encontrado")
    conducta = _obtener(Conducta, conducta_id, "Conducta no encontrada")

    registro = RegistroConducta.objects.create(
        estudiante=estudiante,
        docente=docente,
        conducta=conducta,
        acciones_tomadas=observaciones or '',
        comentarios=comentarios or '',
        evidencia_url=evidencia_url or '',
        fecha_registro=timezone.localdate(),
        leido=False,
        estado=RegistroConducta.ACTIVO,
    )
    logger.info(
        f"Incidente {registro.id} registrado: estudiante={estudiante.id} "
        f"conducta={conducta.id} docente={docente.id}"
    )
    return registro


@transaction.atomic
def marcar_incidente_leido(registro_id):
    registro = _obtener(RegistroConducta, registro_id, "Incidente no encontrado", EntidadNoEncontrada)
    registro.leido = True
    registro.fecha_lectura = timezone.localdate()
    registro.save(update_fields=['leido', 'fecha_lectura'])
    return registro


@transaction.atomic
def cambiar_estado(registro_id, estado):
    registro = _obtener(RegistroConducta, registro_id, "Incidente no encontrado", EntidadNoEncontrada)
    registro.estado = estado
    registro.save(update_fields=['estado'])
    logger.info(f"Incidente {registro.id} cambió a estado {estado}")
    return registro


def resolver_incidente(registro_id):
    return cambiar_estado(registro_id, RegistroConducta.RESUELTO)


@transaction.atomic
def actualizar_incidente(registro_id, estudiante_id, conducta_id, docente_id, observaciones,
                        comentarios='', evidencia_url='', estado=None):
    registro = _obtener(RegistroConducta, registro_id, "Incidente no encontrado", EntidadNoEncontrada)
    registro.estudiante = _obtener(Estudiante, estudiante_id, "Estudiante no encontrado")
    registro.docente = _obtener(Docente, docente_id, "Docente no encontrado")
    registro.conducta = _obtener(Conducta, conducta_id, "Conducta no encontrada")
    registro.acciones_tomadas = observaciones or ''
    registro.comentarios = comentarios or ''
    registro.evidencia_url = evidencia_url or ''
    if estado:
        registro.estado = estado
    registro.save()
    return registro


@transaction.atomic
def eliminar_incidente(registro_id):
    registro = _obtener(RegistroConducta, registro_id, "Incidente no encontrado", EntidadNoEncontrada)
    registro.delete()
    logger.info(f"Incidente {registro_id} eliminado")


# =============================================
# OBSERVACIONES
# =============================================

@transaction.atomic
def registrar_observacion(estudiante_id, docente_id, tipo_observacion, descripcion):
    estudiante = _obtener(Estudiante, estudiante_id, "Estudiante no encontrado")
    docente = _obtener(Docente, docente_id, "Docente no encontrado")

    observacion = Observacion.objects.create(
        estudiante=estudiante,
        docente=docente,
        tipo_observacion=tipo_observacion,
        descripcion=descripcion,
        fecha=timezone.localdate(),
        leido=False,
    )
    logger.info(f"Observación {observacion.id} ({tipo_observacion}) registrada para estudiante {estudiante.id}")
    return observacion


@transaction.atomic
def actualizar_observacion(observacion_id, estudiante_id, docente_id, tipo_observacion, descripcion):
    observacion = _obtener(Observacion, observacion_id, "Observación no encontrada", EntidadNoEncontrada)
    observacion.estudiante = _obtener(Estudiante, estudiante_id, "Estudiante no encontrado")
    observacion.docente = _obtener(Docente, docente_id, "Docente no encontrado")
    observacion.tipo_observacion = tipo_observacion
    observacion.descripcion = descripcion
    observacion.save()
    return observacion


@transaction.atomic
def marcar_observacion_leida(observacion_id):
    observacion = _obtener(Observacion, observacion_id, "Observación no encontrada", EntidadNoEncontrada)
    observacion.leido = True
    observacion.fecha_lectura = timezone.localdate()
    observacion.save(update_fields=['leido', 'fecha_lectura'])
    return observacion


@transaction.atomic
def eliminar_observacion(observacion_id):
    observacion = _obtener(Observacion, observacion_id, "Observación no encontrada", EntidadNoEncontrada)
    observacion.delete()
    logger.info(f"Observación {observacion_id} eliminada")


def clasificar_observaciones(observaciones):
    """Agrupa observaciones en positivas, negativas y otras según su tipo (sin distinguir mayúsculas)"""
    grupos = {'positivas': [], 'negativas': [], 'otras': []}
    for observacion in observaciones:
        tipo = (observacion.tipo_observacion or '').strip().lower()
        if tipo == 'positiva':
            grupos['positivas'].append(observacion)
        elif tipo == 'negativa':
            grupos['negativas'].append(observacion)
        else:
            grupos['otras'].append(observacion)
    return grupos


# =============================================
# CATÁLOGO DE CONDUCTAS
# =============================================

@transaction.atomic
def crear_conducta(nombre_conducta, descripcion, gravedad_id, activo=True):
    gravedad = _obtener(TipoGravedad, gravedad_id, "Tipo de gravedad no encontrado")
    conducta = Conducta.objects.create(
        nombre_conducta=nombre_conducta,
        descripcion=descripcion or '',
        gravedad=gravedad,
        activo=activo,
    )
    logger.info(f"Conducta '{conducta.nombre_conducta}' creada")
    return conducta


@transaction.atomic
def actualizar_conducta(conducta_id, nombre_conducta, descripcion, gravedad_id, activo=None):
    conducta = _obtener(Conducta, conducta_id, "Conducta no encontrada", EntidadNoEncontrada)
    conducta.gravedad = _obtener(TipoGravedad, gravedad_id, "Tipo de gravedad no encontrado")
    conducta.nombre_conducta = nombre_conducta
    conducta.descripcion = descripcion or ''
    if activo is not None:
        conducta.activo = activo
    conducta.save()
    return conducta


def _cambiar_activo(conducta_id, activo):
    conducta = _obtener(Conducta, conducta_id, "Conducta no encontrada", EntidadNoEncontrada)
    conducta.activo = activo
    conducta.save(update_fields=['activo'])
    return conducta


def activar_conducta(conducta_id):
    return _cambiar_activo(conducta_id, True)


def desactivar_conducta(conducta_id):
    return _cambiar_activo(conducta_id, False)


def eliminar_conducta(conducta_id):
    """Elimina una conducta sin registros; si tiene incidentes asociados lanza ConductaEnUso"""
    conducta = _obtener(Conducta, conducta_id, "Conducta no encontrada", EntidadNoEncontrada)
    try:
        with transaction.atomic():
            conducta.delete()
    except ProtectedError:
        logger.warning(f"Intento de eliminar la conducta {conducta_id} con registros asociados")
        raise ConductaEnUso()
    logger.info(f"Conducta {conducta_id} eliminada")


def inicializar_gravedades(using=DEFAULT_DB_ALIAS):
    """Crea las gravedades canónicas si la tabla está vacía. Devuelve cuántas se crearon."""
    gravedades = TipoGravedad.objects.using(using)
    if gravedades.exists():
        return 0
    with transaction.atomic(using=using):
        gravedades.bulk_create([
            TipoGravedad(nombre_gravedad=nombre, puntos=puntos, descripcion=descripcion)
            for nombre, puntos, descripcion in GRAVEDADES_INICIALES
        ])
    logger.info("Tipos de gravedad inicializados")
    return len(GRAVEDADES_INICIALES)


def clasificar_por_gravedad(registros):
    """Agrupa registros de conducta en leve, grave y muygrave según el nombre de la gravedad"""
    grupos = {'leve': [], 'grave': [], 'muygrave': []}
    for registro in registros:
        nombre = (registro.conducta.gravedad.nombre_gravedad or '').strip().lower()
        if nombre == TipoGravedad.LEVE:
            grupos['leve'].append(registro)
        elif nombre == TipoGravedad.GRAVE:
            grupos['grave'].append(registro)
        elif nombre == TipoGravedad.MUY_GRAVE:
            grupos['muygrave'].append(registro)
    return grupos


# =============================================
# HISTORIAL
# =============================================

@dataclass
class HistorialItem:
    tipo: str
    fecha: Optional[date]
    objeto: Any


def construir_historial(incidentes, observaciones):
    """
    Une incidentes y observaciones en una sola línea de tiempo.
    Orden: fecha descendente, elementos sin fecha al final.
    """
    items = [HistorialItem('incidente', r.fecha_registro, r) for r in incidentes]
    items += [HistorialItem('observacion', o.fecha, o) for o in observaciones]
    # sorted es estable: a igual fecha se conserva el orden de entrada
    return sorted(items, key=lambda item: (item.fecha is not None, item.fecha or date.min), reverse=True)


# =============================================
# REPORTES
# =============================================

def resumen_reportes():
    total_estudiantes = Estudiante.objects.count()
    total_incidentes = RegistroConducta.objects.count()
    registros = RegistroConducta.objects.all()

    return {
        'total_estudiantes': total_estudiantes,
        'total_docentes': Docente.objects.count(),
        'total_incidentes': total_incidentes,
        'total_observaciones': Observacion.objects.count(),
        'total_conductas': Conducta.objects.count(),
        'incidentes_por_gravedad': list(registros.conteo_por_gravedad()),
        'incidentes_por_grado': list(registros.conteo_por_grado()),
        'incidentes_por_mes': list(registros.conteo_por_mes()),
        'observaciones_por_tipo': list(Observacion.objects.conteo_por_tipo()),
        'conductas_mas_utilizadas': list(Conducta.objects.mas_utilizadas()[:5]),
        'conductas_no_utilizadas': list(Conducta.objects.no_utilizadas()),
        'estudiantes_mas_incidencias': list(Estudiante.objects.con_mas_incidencias()),
        'docentes_mas_registros': list(Docente.objects.con_mas_registros()),
        'incidentes_por_estado': registros.conteo_por_estado(),
        'incidentes_no_leidos': registros.no_leidos().count(),
        'observaciones_no_leidas': Observacion.objects.no_leidas().count(),
        'ratio_incidentes': total_incidentes / total_estudiantes if total_estudiantes else 0.0,
    }
