from django.contrib import admin
from .models import Estudiante


@admin.register(Estudiante)
class EstudianteAdmin(admin.ModelAdmin):
    list_display = ['usuario', 'get_full_name', 'grado', 'seccion', 'fecha_nacimiento']
    list_filter = ['grado', 'seccion']
    search_fields = ['usuario', 'nombres', 'apellidos']
    exclude = ['password']

    def get_full_name(self, obj):
        return obj.get_full_name()
    get_full_name.short_description = 'Nombre Completo'
