from django.urls import path
from . import views

app_name = 'docentes'

urlpatterns = [
    path('dashboard/', views.DocenteDashboardView.as_view(), name='dashboard'),
    path('estudiantes/', views.EstudiantesDocenteView.as_view(), name='estudiantes'),
    path('registrar-falta/', views.RegistrarFaltaView.as_view(), name='registrar_falta'),
    path('registrar-observacion/', views.RegistrarObservacionView.as_view(), name='registrar_observacion'),
    path('historial/', views.HistorialDocenteView.as_view(), name='historial'),
    path('perfil/', views.PerfilDocenteView.as_view(), name='perfil'),
]
