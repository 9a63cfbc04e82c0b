from django.urls import path
from . import views

app_name = 'director'

urlpatterns = [
     # ========================
     # PANEL
     # ========================
     path('dashboard/', views.DirectorDashboardView.as_view(), name='dashboard'),
     path('perfil/', views.PerfilDirectorView.as_view(), name='perfil'),

     # Incidentes
     path('incidentes/', views.IncidenteListView.as_view(), name='incidentes'),
     path('incidentes/<int:pk>/', views.IncidenteDetailView.as_view(), name='incidente_detalle'),
     path('incidentes/<int:pk>/marcar-leido/', views.IncidenteMarcarLeidoView.as_view(), name='incidente_marcar_leido'),
     path('incidentes/<int:pk>/resolver/', views.IncidenteResolverView.as_view(), name='incidente_resolver'),

     # Observaciones
     path('observaciones/', views.ObservacionListView.as_view(), name='observaciones'),
     path('observaciones/<int:pk>/', views.ObservacionDetailView.as_view(), name='observacion_detalle'),
     path('observaciones/<int:pk>/marcar-leida/', views.ObservacionMarcarLeidaView.as_view(), name='observacion_marcar_leida'),
     path('observaciones/<int:pk>/eliminar/', views.ObservacionEliminarView.as_view(), name='observacion_eliminar'),

     # Consultas
     path('estudiantes/', views.EstudianteListView.as_view(), name='estudiantes'),
     path('estudiantes/<int:pk>/observador/', views.ObservadorEstudiantePDFView.as_view(), name='estudiante_observador'),
     path('docentes/', views.DocenteListView.as_view(), name='docentes'),
     path('conductas/', views.ConductaListView.as_view(), name='conductas'),

     # ========================
     # REPORTES
     # ========================
     path('reportes/', views.ReportesView.as_view(), name='reportes'),
     path('reportes/exportar-excel/', views.ExportarIncidentesExcelView.as_view(), name='reportes_exportar_excel'),

     # ========================
     # GESTIÓN
     # ========================
     path('gestion/docentes/', views.GestionDocentesView.as_view(), name='gestion_docentes'),
     path('gestion/docentes/crear/', views.DocenteCreateView.as_view(), name='docente_crear'),
     path('gestion/docentes/<int:pk>/editar/', views.DocenteUpdateView.as_view(), name='docente_editar'),
     path('gestion/docentes/<int:pk>/eliminar/', views.DocenteDeleteView.as_view(), name='docente_eliminar'),

     path('gestion/estudiantes/', views.GestionEstudiantesView.as_view(), name='gestion_estudiantes'),
     path('gestion/estudiantes/crear/', views.EstudianteCreateView.as_view(), name='estudiante_crear'),
     path('gestion/estudiantes/<int:pk>/editar/', views.EstudianteUpdateView.as_view(), name='estudiante_editar'),
     path('gestion/estudiantes/<int:pk>/eliminar/', views.EstudianteDeleteView.as_view(), name='estudiante_eliminar'),

     path('gestion/conductas/', views.GestionConductasView.as_view(), name='gestion_conductas'),
     path('gestion/conductas/crear/', views.ConductaCreateView.as_view(), name='conducta_crear'),
     path('gestion/conductas/<int:pk>/editar/', views.ConductaUpdateView.as_view(), name='conducta_editar'),
     path('gestion/conductas/<int:pk>/eliminar/', views.ConductaDeleteView.as_view(), name='conducta_eliminar'),
     path('gestion/conductas/<int:pk>/activar/', views.ConductaActivarView.as_view(), name='conducta_activar'),
     path('gestion/conductas/<int:pk>/desactivar/', views.ConductaDesactivarView.as_view(), name='conducta_desactivar'),
]
