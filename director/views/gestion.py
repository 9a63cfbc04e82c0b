# views/gestion.py
import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.views import View
from django.views.generic import CreateView, ListView, UpdateView

from comportamiento import services
from comportamiento.exceptions import ConductaEnUso, EntidadNoEncontrada, RelacionInvalida
from comportamiento.models import Conducta
from estudiantes.models import Estudiante
from usuarios.exceptions import PersonaConRegistros
from usuarios.models import Docente
from usuarios.services import eliminar_persona

from ..forms import ConductaForm, DocenteForm, EstudianteForm
from .panel import DirectorRequeridoMixin

logger = logging.getLogger(__name__)


# ========================
# BASE CRUD DE PERSONAS
# ========================

class PersonaGestionListView(DirectorRequeridoMixin, ListView):
    """Listado con formulario de creación embebido"""
    form_class = None

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.setdefault('form', self.form_class())
        return context


class PersonaCreateView(DirectorRequeridoMixin, CreateView):
    success_message = ""

    def form_valid(self, form):
        try:
            response = super().form_valid(form)
        except DatabaseError:
            logger.exception(f"Error guardando {self.model._meta.verbose_name}")
            messages.error(self.request, "No fue posible guardar el registro.")
            return self.form_invalid(form)
        messages.success(self.request, self.success_message.format(self.object))
        return response


class PersonaUpdateView(DirectorRequeridoMixin, UpdateView):
    success_message = ""

    def form_valid(self, form):
        try:
            response = super().form_valid(form)
        except DatabaseError:
            logger.exception(f"Error actualizando {self.model._meta.verbose_name}")
            messages.error(self.request, "No fue posible actualizar el registro.")
            return self.form_invalid(form)
        messages.success(self.request, self.success_message.format(self.object))
        return response


class PersonaDeleteView(DirectorRequeridoMixin, View):
    model = None
    success_url = None

    def post(self, request, pk):
        try:
            eliminar_persona(self.model, pk)
            messages.success(request, f"{self.model._meta.verbose_name} eliminado exitosamente.")
        except (EntidadNoEncontrada, PersonaConRegistros) as e:
            messages.error(request, e.mensaje)
        return redirect(self.success_url)


# ========================
# DOCENTES
# ========================

class GestionDocentesView(PersonaGestionListView):
    template_name = 'director/gestion/docentes.html'
    context_object_name = 'docentes'
    form_class = DocenteForm

    def get_queryset(self):
        return Docente.objects.order_by('apellidos', 'nombres')


class DocenteCreateView(PersonaCreateView):
    template_name = 'director/gestion/persona_form.html'
    model = Docente
    form_class = DocenteForm
    success_url = reverse_lazy('director:gestion_docentes')
    success_message = "Docente {} creado exitosamente."


class DocenteUpdateView(PersonaUpdateView):
    template_name = 'director/gestion/persona_form.html'
    model = Docente
    form_class = DocenteForm
    success_url = reverse_lazy('director:gestion_docentes')
    success_message = "Docente {} actualizado exitosamente."


class DocenteDeleteView(PersonaDeleteView):
    model = Docente
    success_url = 'director:gestion_docentes'


# ========================
# ESTUDIANTES
# ========================

class GestionEstudiantesView(PersonaGestionListView):
    template_name = 'director/gestion/estudiantes.html'
    context_object_name = 'estudiantes'
    form_class = EstudianteForm

    def get_queryset(self):
        return Estudiante.objects.order_by('grado', 'seccion', 'apellidos', 'nombres')


class EstudianteCreateView(PersonaCreateView):
    template_name = 'director/gestion/persona_form.html'
    model = Estudiante
    form_class = EstudianteForm
    success_url = reverse_lazy('director:gestion_estudiantes')
    success_message = "Estudiante {} creado exitosamente."


class EstudianteUpdateView(PersonaUpdateView):
    template_name = 'director/gestion/persona_form.html'
    model = Estudiante
    form_class = EstudianteForm
    success_url = reverse_lazy('director:gestion_estudiantes')
    success_message = "Estudiante {} actualizado exitosamente."


class EstudianteDeleteView(PersonaDeleteView):
    model = Estudiante
    success_url = 'director:gestion_estudiantes'


# ========================
# CONDUCTAS
# ========================

class GestionConductasView(DirectorRequeridoMixin, ListView):
    template_name = 'director/gestion/conductas.html'
    context_object_name = 'conductas'

    def get_queryset(self):
        return Conducta.objects.select_related('gravedad')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.setdefault('form', ConductaForm())
        return context


class ConductaCreateView(DirectorRequeridoMixin, View):
    template_name = 'director/gestion/conducta_form.html'

    def get(self, request):
        return render(request, self.template_name, {'form': ConductaForm()})

    def post(self, request):
        form = ConductaForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {'form': form})
        datos = form.cleaned_data
        try:
            conducta = services.crear_conducta(
                datos['nombre_conducta'], datos['descripcion'], datos['gravedad'].pk, datos['activo']
            )
        except RelacionInvalida as e:
            messages.error(request, e.mensaje)
            return render(request, self.template_name, {'form': form})
        except DatabaseError:
            logger.exception("Error creando conducta")
            messages.error(request, "Error al crear la conducta.")
            return render(request, self.template_name, {'form': form})
        messages.success(request, f"Conducta '{conducta.nombre_conducta}' creada exitosamente.")
        return redirect('director:gestion_conductas')


class ConductaUpdateView(DirectorRequeridoMixin, View):
    template_name = 'director/gestion/conducta_form.html'

    def get(self, request, pk):
        conducta = Conducta.objects.filter(pk=pk).first()
        if conducta is None:
            messages.error(request, "Conducta no encontrada")
            return redirect('director:gestion_conductas')
        return render(request, self.template_name, {
            'form': ConductaForm.desde_conducta(conducta),
            'conducta': conducta,
        })

    def post(self, request, pk):
        form = ConductaForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {'form': form})
        datos = form.cleaned_data
        try:
            services.actualizar_conducta(
                pk, datos['nombre_conducta'], datos['descripcion'], datos['gravedad'].pk, datos['activo']
            )
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
            return redirect('director:gestion_conductas')
        except RelacionInvalida as e:
            messages.error(request, e.mensaje)
            return render(request, self.template_name, {'form': form})
        messages.success(request, "Conducta actualizada exitosamente.")
        return redirect('director:gestion_conductas')


class ConductaDeleteView(DirectorRequeridoMixin, View):

    def post(self, request, pk):
        try:
            services.eliminar_conducta(pk)
            messages.success(request, "Conducta eliminada exitosamente.")
        except (EntidadNoEncontrada, ConductaEnUso) as e:
            messages.error(request, e.mensaje)
        return redirect('director:gestion_conductas')


class ConductaActivarView(DirectorRequeridoMixin, View):
    activo = True

    def post(self, request, pk):
        try:
            conducta = (
                services.activar_conducta(pk) if self.activo else services.desactivar_conducta(pk)
            )
            estado = "activada" if conducta.activo else "desactivada"
            messages.success(request, f"Conducta '{conducta.nombre_conducta}' {estado}.")
        except EntidadNoEncontrada as e:
            messages.error(request, e.mensaje)
        return redirect('director:gestion_conductas')


class ConductaDesactivarView(ConductaActivarView):
    activo = False
