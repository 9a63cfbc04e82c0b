from django.http import HttpResponse
from django.views import View
from django.views.generic import TemplateView

from comportamiento.models import Observacion, RegistroConducta
from comportamiento.observador import ObservadorPDF
from comportamiento.services import clasificar_observaciones, clasificar_por_gravedad, construir_historial
from usuarios.mixins import RolRequeridoMixin

# =============================================
# VISTAS BASE Y PRINCIPALES
# =============================================


class BaseEstudianteView(RolRequeridoMixin, TemplateView):
    """Vista base para estudiantes con contexto común"""
    allowed_roles = ['ESTUDIANTE']

    def get_estudiante(self):
        return self.request.principal

    def get_registros(self):
        return RegistroConducta.objects.con_relaciones().por_estudiante(self.get_estudiante().pk)

    def get_observaciones(self):
        return Observacion.objects.con_relaciones().por_estudiante(self.get_estudiante().pk)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['estudiante'] = self.get_estudiante()
        return context


class EstudianteDashboardView(BaseEstudianteView):
    template_name = 'estudiantes/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        registros = self.get_registros()
        observaciones = self.get_observaciones()
        context.update({
            'total_incidentes': registros.count(),
            'incidentes_activos': registros.por_estado(RegistroConducta.ACTIVO).count(),
            'total_observaciones': observaciones.count(),
            'incidentes_recientes': registros.recientes(5),
            'observaciones_recientes': observaciones.recientes(5),
        })
        return context


class HistorialEstudianteView(BaseEstudianteView):
    template_name = 'estudiantes/historial.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['historial_items'] = construir_historial(self.get_registros(), self.get_observaciones())
        return context


class ConductasEstudianteView(BaseEstudianteView):
    """Incidentes del estudiante agrupados por gravedad"""
    template_name = 'estudiantes/conductas.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        grupos = clasificar_por_gravedad(self.get_registros())
        context.update({
            'conductas_leves': grupos['leve'],
            'conductas_graves': grupos['grave'],
            'conductas_muy_graves': grupos['muygrave'],
        })
        return context


class ObservacionesEstudianteView(BaseEstudianteView):
    """Observaciones del estudiante agrupadas por tipo"""
    template_name = 'estudiantes/observaciones.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        grupos = clasificar_observaciones(self.get_observaciones())
        context.update({
            'observaciones_positivas': grupos['positivas'],
            'observaciones_negativas': grupos['negativas'],
            'otras_observaciones': grupos['otras'],
        })
        return context


class PerfilEstudianteView(BaseEstudianteView):
    template_name = 'usuarios/perfil.html'


class ObservadorEstudiantePDFView(RolRequeridoMixin, View):
    """Genera el observador del estudiante autenticado en formato PDF"""
    allowed_roles = ['ESTUDIANTE']

    def get(self, request):
        observador = ObservadorPDF(request.principal)
        response = HttpResponse(observador.generar(), content_type="application/pdf")
        response["Content-Disposition"] = f'inline; filename="{observador.nombre_archivo}"'
        return response
