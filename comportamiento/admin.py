from django.contrib import admin
from .models import TipoGravedad, Conducta, RegistroConducta, Observacion


@admin.register(TipoGravedad)
class TipoGravedadAdmin(admin.ModelAdmin):
    list_display = ['nombre_gravedad', 'puntos', 'descripcion']
    search_fields = ['nombre_gravedad']


@admin.register(Conducta)
class ConductaAdmin(admin.ModelAdmin):
    list_display = ['nombre_conducta', 'gravedad', 'activo']
    list_filter = ['activo', 'gravedad']
    search_fields = ['nombre_conducta', 'descripcion']


@admin.register(RegistroConducta)
class RegistroConductaAdmin(admin.ModelAdmin):
    list_display = ['estudiante', 'conducta', 'docente', 'fecha_registro', 'estado', 'leido']
    list_filter = ['estado', 'leido', 'fecha_registro', 'conducta__gravedad']
    search_fields = ['estudiante__nombres', 'estudiante__apellidos', 'acciones_tomadas']
    autocomplete_fields = ['estudiante', 'docente', 'conducta']
    date_hierarchy = 'fecha_registro'


@admin.register(Observacion)
class ObservacionAdmin(admin.ModelAdmin):
    list_display = ['estudiante', 'tipo_observacion', 'docente', 'fecha', 'leido']
    list_filter = ['tipo_observacion', 'leido', 'fecha']
    search_fields = ['estudiante__nombres', 'estudiante__apellidos', 'descripcion']
    autocomplete_fields = ['estudiante', 'docente']
    date_hierarchy = 'fecha'
