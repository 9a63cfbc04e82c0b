import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from comportamiento.exceptions import ControlEduError, EntidadNoEncontrada

logger = logging.getLogger(__name__)


def manejador_excepciones(exc, context):
    """Traduce las excepciones del dominio a respuestas HTTP; el resto lo resuelve DRF"""
    if isinstance(exc, EntidadNoEncontrada):
        return Response({'detail': exc.mensaje}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, ControlEduError):
        logger.info(f"Solicitud rechazada en {context['view'].__class__.__name__}: {exc.mensaje}")
        return Response({'detail': exc.mensaje}, status=status.HTTP_400_BAD_REQUEST)

    return exception_handler(exc, context)
