import logging

from .services import obtener_principal

logger = logging.getLogger(__name__)

SESION_PRINCIPAL_ID = 'principal_id'
SESION_PRINCIPAL_ROL = 'principal_rol'


class PrincipalMiddleware:
    """Resuelve la persona autenticada de la sesión y la deja en ``request.principal``"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.principal = None
        rol = request.session.get(SESION_PRINCIPAL_ROL)
        principal_id = request.session.get(SESION_PRINCIPAL_ID)

        if rol and principal_id:
            request.principal = obtener_principal(rol, principal_id)
            if request.principal is None:
                logger.warning(f"Sesión con principal inexistente ({rol} {principal_id}), se descarta")
                request.session.pop(SESION_PRINCIPAL_ID, None)
                request.session.pop(SESION_PRINCIPAL_ROL, None)

        return self.get_response(request)


def iniciar_sesion(request, principal):
    request.session.cycle_key()
    request.session[SESION_PRINCIPAL_ID] = principal.pk
    request.session[SESION_PRINCIPAL_ROL] = principal.ROL
    request.principal = principal


def cerrar_sesion(request):
    request.session.flush()
    request.principal = None
