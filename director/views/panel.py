# views/panel.py
import logging

from django.contrib import messages
from django.shortcuts import redirect
from django.utils.dateparse import parse_date
from django.views import View
from django.views.generic import DetailView, ListView, TemplateView

from comportamiento import services
from comportamiento.exceptions import EntidadNoEncontrada
from comportamiento.models import Conducta, Observacion, RegistroConducta, TipoGravedad
from estudiantes.models import Estudiante
from usuarios.mixins import RolRequeridoMixin
from usuarios.models import Docente

logger = logging.getLogger(__name__)


class DirectorRequeridoMixin(RolRequeridoMixin):
    allowed_roles = ['DIRECTOR']


def leer_fecha(valor):
    """Fecha YYYY-MM-DD del query string; None si falta o es inválida"""
    try:
        return parse_date(valor or '')
    except ValueError:
        return None


# ========================
# PANEL PRINCIPAL
# ========================

class DirectorDashboardView(DirectorRequeridoMixin, TemplateView):
    template_name = 'director/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        registros = RegistroConducta.objects.all()
        context.update({
            'total_estudiantes': Estudiante.objects.count(),
            'total_docentes': Docente.objects.count(),
            'total_incidentes': registros.count(),
            'incidentes_no_leidos': registros.no_leidos().count(),
            'observaciones_no_leidas': Observacion.objects.no_leidas().count(),
            'incidentes_recientes': registros.con_relaciones().recientes(5),
            'observaciones_recientes': Observacion.objects.con_relaciones().recientes(5),
        })
        return context


# ========================
# INCIDENTES
# ========================

class IncidenteListView(DirectorRequeridoMixin, ListView):
    """Listado de incidentes con filtros por query string"""
    template_name = 'director/incidentes_list.html'
    context_object_name = 'incidentes'
    paginate_by = 20

    def get_queryset(self):
        queryset = RegistroConducta.objects.con_relaciones()
        params = self.request.GET

        if params.get('estado'):
            queryset = queryset.por_estado(params['estado'])
        if params.get('leido') in ('true', 'false'):
            queryset = queryset.filter(leido=params['leido'] == 'true')
        if params.get('gravedad'):
            queryset = queryset.por_gravedad(params['gravedad'])
        if params.get('grado'):
            queryset = queryset.por_grado(params['grado'])
        if params.get('estudiante', '').isdigit():
            queryset = queryset.filter(estudiante_id=params['estudiante'])
        if params.get('docente', '').isdigit():
            queryset = queryset.filter(docente_id=params['docente'])

        fecha_inicio = leer_fecha(params.get('fecha_inicio'))
        fecha_fin = leer_fecha(params.get('fecha_fin'))
        if fecha_inicio and fecha_fin:
            queryset = queryset.por_rango_fechas(fecha_inicio, fecha_fin)
        elif fecha_inicio:
            queryset = queryset.filter(fecha_registro__gte=fecha_inicio)
        elif fecha_fin:
            queryset = queryset.filter(fecha_registro__lte=fecha_fin)

        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        todos = RegistroConducta.objects.all()
        context.update({
            'total': todos.count(),
            'no_leidos': todos.no_leidos().count(),
            'resueltos': todos.por_estado(RegistroConducta.RESUELTO).count(),
            'activos': todos.por_estado(RegistroConducta.ACTIVO).count(),
            'gravedades': TipoGravedad.objects.all(),
            'grados': Estudiante.objects.grados(),
            'estados': RegistroConducta.ESTADOS,
            'filtros': self.request.GET,
        })
        return context


class IncidenteDetailView(DirectorRequeridoMixin, DetailView):
    """Detalle de un incidente; al abrirlo queda marcado como leído"""
    template_name = 'director/incidente_detail.html'
    context_object_name = 'incidente'

    def get(self, request, *args, **kwargs):
        try:
            return super().get(request, *args, **kwargs)
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
            return redirect('director:incidentes')

    def get_object(self, queryset=None):
        incidente = RegistroConducta.objects.con_relaciones().filter(pk=self.kwargs['pk']).first()
        if incidente is None:
            raise EntidadNoEncontrada("Incidente no encontrado.")
        if not incidente.leido:
            incidente = services.marcar_incidente_leido(incidente.pk)
        return incidente


class IncidenteMarcarLeidoView(DirectorRequeridoMixin, View):

    def post(self, request, pk):
        try:
            services.marcar_incidente_leido(pk)
            messages.success(request, "Incidente marcado como leído.")
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
        return redirect('director:incidentes')


class IncidenteResolverView(DirectorRequeridoMixin, View):

    def post(self, request, pk):
        try:
            services.resolver_incidente(pk)
            messages.success(request, "Incidente marcado como resuelto.")
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
        return redirect('director:incidentes')


# ========================
# OBSERVACIONES
# ========================

class ObservacionListView(DirectorRequeridoMixin, ListView):
    template_name = 'director/observaciones_list.html'
    context_object_name = 'observaciones'
    paginate_by = 20

    def get_queryset(self):
        queryset = Observacion.objects.con_relaciones()
        tipo = self.request.GET.get('tipo')
        if tipo:
            queryset = queryset.por_tipo(tipo)
        if self.request.GET.get('leido') == 'false':
            queryset = queryset.no_leidas()
        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['conteo_por_tipo'] = Observacion.objects.conteo_por_tipo()
        context['no_leidas'] = Observacion.objects.no_leidas().count()
        context['filtros'] = self.request.GET
        return context


class ObservacionDetailView(DirectorRequeridoMixin, DetailView):
    template_name = 'director/observacion_detail.html'
    context_object_name = 'observacion'

    def get(self, request, *args, **kwargs):
        try:
            return super().get(request, *args, **kwargs)
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
            return redirect('director:observaciones')

    def get_object(self, queryset=None):
        observacion = Observacion.objects.con_relaciones().filter(pk=self.kwargs['pk']).first()
        if observacion is None:
            raise EntidadNoEncontrada("Observación no encontrada.")
        if not observacion.leido:
            observacion = services.marcar_observacion_leida(observacion.pk)
        return observacion


class ObservacionMarcarLeidaView(DirectorRequeridoMixin, View):

    def post(self, request, pk):
        try:
            services.marcar_observacion_leida(pk)
            messages.success(request, "Observación marcada como leída.")
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
        return redirect('director:observaciones')


class ObservacionEliminarView(DirectorRequeridoMixin, View):

    def post(self, request, pk):
        try:
            services.eliminar_observacion(pk)
            messages.success(request, "Observación eliminada exitosamente.")
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
        return redirect('director:observaciones')


# ========================
# CONSULTAS
# ========================

class EstudianteListView(DirectorRequeridoMixin, ListView):
    template_name = 'director/estudiantes_list.html'
    context_object_name = 'estudiantes'
    paginate_by = 20

    def get_queryset(self):
        queryset = Estudiante.objects.con_conteos()
        search = self.request.GET.get('search')
        if search:
            queryset = queryset.buscar(search)
        grado = self.request.GET.get('grado')
        if grado:
            queryset = queryset.por_grado(grado)
        return queryset.order_by('grado', 'seccion', 'apellidos', 'nombres')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['grados'] = Estudiante.objects.grados()
        context['sin_incidencias'] = Estudiante.objects.sin_incidencias().count()
        return context


class DocenteListView(DirectorRequeridoMixin, ListView):
    template_name = 'director/docentes_list.html'
    context_object_name = 'docentes'

    def get_queryset(self):
        return Docente.objects.all().order_by('apellidos', 'nombres')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['materias'] = Docente.objects.materias()
        context['docentes_mas_registros'] = Docente.objects.con_mas_registros()
        return context


class ConductaListView(DirectorRequeridoMixin, ListView):
    template_name = 'director/conductas_list.html'
    context_object_name = 'conductas'

    def get_queryset(self):
        return Conducta.objects.select_related('gravedad')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['mas_utilizadas'] = Conducta.objects.mas_utilizadas()[:5]
        context['no_utilizadas'] = Conducta.objects.no_utilizadas()
        return context


class PerfilDirectorView(DirectorRequeridoMixin, TemplateView):
    template_name = 'usuarios/perfil.html'
