from .panel import *
from .comportamiento import *

__all__ = [
    'DocenteDashboardView',
    'EstudiantesDocenteView',
    'PerfilDocenteView',
    'RegistrarFaltaView',
    'RegistrarObservacionView',
    'HistorialDocenteView',
]
