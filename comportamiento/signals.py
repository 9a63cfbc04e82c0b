# signals.py en la app comportamiento
import logging

from django.db import DEFAULT_DB_ALIAS

from .services import inicializar_gravedades

logger = logging.getLogger(__name__)


def sembrar_gravedades(sender, using=DEFAULT_DB_ALIAS, **kwargs):
    """Crea los tipos de gravedad canónicos después de migrar, si la tabla está vacía"""
    creadas = inicializar_gravedades(using=using)
    if creadas:
        logger.info(f"{creadas} tipos de gravedad creados en la base '{using}'")
