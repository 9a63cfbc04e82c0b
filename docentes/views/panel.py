# docentes/views/panel.py
from django.views.generic import ListView, TemplateView

from comportamiento.models import Observacion, RegistroConducta
from estudiantes.models import Estudiante
from docentes.mixins import DocenteRequeridoMixin


class DocenteDashboardView(DocenteRequeridoMixin, TemplateView):
    template_name = 'docentes/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        docente = self.get_docente()
        registros = RegistroConducta.objects.por_docente(docente.pk)
        context.update({
            'total_incidentes': registros.count(),
            'total_observaciones': Observacion.objects.por_docente(docente.pk).count(),
            'incidentes_recientes': registros.con_relaciones().recientes(5),
            'observaciones_recientes': Observacion.objects.por_docente(docente.pk).con_relaciones().recientes(5),
        })
        return context


class EstudiantesDocenteView(DocenteRequeridoMixin, ListView):
    """Listado de estudiantes (solo lectura) con sus conteos de incidentes y observaciones"""
    template_name = 'docentes/estudiantes.html'
    context_object_name = 'estudiantes'

    def get_queryset(self):
        queryset = Estudiante.objects.con_conteos()
        search = self.request.GET.get('search')
        if search:
            queryset = queryset.buscar(search)
        return queryset.order_by('grado', 'seccion', 'apellidos', 'nombres')


class PerfilDocenteView(DocenteRequeridoMixin, TemplateView):
    template_name = 'usuarios/perfil.html'
