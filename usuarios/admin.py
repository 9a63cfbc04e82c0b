from django.contrib import admin
from .models import Director, Docente


@admin.register(Director)
class DirectorAdmin(admin.ModelAdmin):
    list_display = ['usuario', 'get_full_name']
    search_fields = ['usuario', 'nombres', 'apellidos']
    exclude = ['password']

    def get_full_name(self, obj):
        return obj.get_full_name()
    get_full_name.short_description = 'Nombre Completo'


@admin.register(Docente)
class DocenteAdmin(admin.ModelAdmin):
    list_display = ['usuario', 'get_full_name', 'materia']
    list_filter = ['materia']
    search_fields = ['usuario', 'nombres', 'apellidos', 'materia']
    exclude = ['password']

    def get_full_name(self, obj):
        return obj.get_full_name()
    get_full_name.short_description = 'Nombre Completo'
