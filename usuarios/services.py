"""
Autenticación y gestión de las personas que usan el sistema
usuarios/services.py
"""
import logging

from django.db import transaction
from django.db.models import ProtectedError

from comportamiento.exceptions import EntidadNoEncontrada
from estudiantes.models import Estudiante

from .exceptions import PasswordIncorrecto, PasswordsNoCoinciden, PersonaConRegistros
from .models import Director, Docente

logger = logging.getLogger(__name__)

# Orden de búsqueda al autenticar
MODELOS_POR_ROL = {
    Director.ROL: Director,
    Docente.ROL: Docente,
    Estudiante.ROL: Estudiante,
}

DASHBOARD_POR_ROL = {
    Director.ROL: 'director:dashboard',
    Docente.ROL: 'docentes:dashboard',
    Estudiante.ROL: 'estudiantes:dashboard',
}


def authenticate(usuario, password):
    """
    Busca al usuario en director, docente y estudiante (en ese orden) y devuelve
    la primera persona cuya contraseña coincida, o None si ninguna coincide.
    """
    logger.info(f"Intento de autenticación: {usuario}")
    for rol, modelo in MODELOS_POR_ROL.items():
        persona = modelo.objects.filter(usuario=usuario).first()
        if persona is not None and persona.check_password(password):
            logger.info(f"{rol} autenticado: {persona.get_full_name()}")
            return persona

    logger.warning(f"Credenciales inválidas para el usuario {usuario}")
    return None


def get_user_role(principal):
    rol = getattr(principal, 'ROL', None)
    return rol if rol in MODELOS_POR_ROL else None


def obtener_principal(rol, principal_id):
    """Devuelve la persona guardada en sesión o None si ya no existe"""
    modelo = MODELOS_POR_ROL.get(rol)
    if modelo is None or principal_id is None:
        return None
    return modelo.objects.filter(pk=principal_id).first()


def actualizar_perfil(principal, nombres, apellidos, materia=None):
    principal.nombres = nombres
    principal.apellidos = apellidos
    campos = ['nombres', 'apellidos']
    if materia is not None and hasattr(principal, 'materia'):
        principal.materia = materia
        campos.append('materia')
    principal.save(update_fields=campos)
    logger.info(f"Perfil actualizado: {principal.usuario}")
    return principal


def cambiar_password(principal, password_actual, password_nuevo, confirmacion):
    if not principal.check_password(password_actual):
        raise PasswordIncorrecto()
    if password_nuevo != confirmacion:
        raise PasswordsNoCoinciden()
    principal.set_password(password_nuevo)
    principal.save(update_fields=['password'])
    logger.info(f"Contraseña actualizada para {principal.usuario}")


def eliminar_persona(modelo, pk):
    persona = modelo.objects.filter(pk=pk).first()
    if persona is None:
        raise EntidadNoEncontrada(f"{modelo._meta.verbose_name} no encontrado")
    try:
        with transaction.atomic():
            persona.delete()
    except ProtectedError:
        logger.warning(f"No se eliminó {modelo._meta.verbose_name} {pk}: tiene registros asociados")
        raise PersonaConRegistros()
    logger.info(f"{modelo._meta.verbose_name} {pk} eliminado")
