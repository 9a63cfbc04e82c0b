from .panel import *
from .gestion import *
from .reportes import *

__all__ = [
    # ============================
    # PANEL
    # ============================
    'DirectorRequeridoMixin',
    'DirectorDashboardView',
    'IncidenteListView',
    'IncidenteDetailView',
    'IncidenteMarcarLeidoView',
    'IncidenteResolverView',
    'ObservacionListView',
    'ObservacionDetailView',
    'ObservacionMarcarLeidaView',
    'ObservacionEliminarView',
    'EstudianteListView',
    'DocenteListView',
    'ConductaListView',
    'PerfilDirectorView',

    # ============================
    # GESTIÓN
    # ============================
    'GestionDocentesView',
    'DocenteCreateView',
    'DocenteUpdateView',
    'DocenteDeleteView',
    'GestionEstudiantesView',
    'EstudianteCreateView',
    'EstudianteUpdateView',
    'EstudianteDeleteView',
    'GestionConductasView',
    'ConductaCreateView',
    'ConductaUpdateView',
    'ConductaDeleteView',
    'ConductaActivarView',
    'ConductaDesactivarView',

    # ============================
    # REPORTES
    # ============================
    'ReportesView',
    'ExportarIncidentesExcelView',
    'ObservadorEstudiantePDFView',
]
