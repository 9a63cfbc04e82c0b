# urls.py - estudiantes
from django.urls import path
from . import views

app_name = 'estudiantes'

urlpatterns = [
    path('dashboard/', views.EstudianteDashboardView.as_view(), name='dashboard'),
    path('historial/', views.HistorialEstudianteView.as_view(), name='historial'),
    path('conductas/', views.ConductasEstudianteView.as_view(), name='conductas'),
    path('observaciones/', views.ObservacionesEstudianteView.as_view(), name='observaciones'),
    path('observador/', views.ObservadorEstudiantePDFView.as_view(), name='observador'),
    path('perfil/', views.PerfilEstudianteView.as_view(), name='perfil'),
]
