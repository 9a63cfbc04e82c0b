from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from web.views import custom_404_view, custom_500_view
from usuarios.views import DashboardRedirectView

urlpatterns = [
    # web inicio
    path('', include('web.urls')),
    path('dashboard/', DashboardRedirectView.as_view(), name='dashboard'),

    # autenticación y perfil
    path('auth/', include('usuarios.urls')),

    # Director
    path('director/', include('director.urls')),

    # Docentes
    path('docente/', include('docentes.urls')),

    # Estudiantes
    path('estudiante/', include('estudiantes.urls')),

    # API REST
    path('api/', include('api.urls')),

    # admin
    path('admin/', admin.site.urls),
]

# Handlers de errores
handler404 = custom_404_view
handler500 = custom_500_view

# Servir archivos multimedia en desarrollo
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
