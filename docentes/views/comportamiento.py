# docentes/views/comportamiento.py
import logging

from django.contrib import messages
from django.db import DatabaseError
from django.urls import reverse_lazy
from django.views.generic import FormView, TemplateView

from comportamiento import services
from comportamiento.exceptions import RelacionInvalida
from comportamiento.models import Observacion, RegistroConducta
from docentes.forms import RegistrarFaltaForm, RegistrarObservacionForm
from docentes.mixins import DocenteRequeridoMixin

logger = logging.getLogger(__name__)

# =============================================
# REGISTRO DE FALTAS Y OBSERVACIONES
# =============================================


class RegistrarFaltaView(DocenteRequeridoMixin, FormView):
    template_name = 'docentes/registrar_falta.html'
    form_class = RegistrarFaltaForm
    success_url = reverse_lazy('docentes:historial')

    def form_valid(self, form):
        datos = form.cleaned_data
        try:
            services.registrar_incidente(
                estudiante_id=datos['estudiante'].pk,
                conducta_id=datos['conducta'].pk,
                docente_id=self.get_docente().pk,
                observaciones=datos['observaciones'],
                comentarios=datos['comentarios'],
                evidencia_url=datos['evidencia_url'],
            )
        except RelacionInvalida as e:
            messages.error(self.request, e.mensaje)
            return self.form_invalid(form)
        except DatabaseError:
            logger.exception("Error registrando incidente")
            messages.error(self.request, "Error al registrar la falta.")
            return self.form_invalid(form)

        messages.success(self.request, "Falta registrada exitosamente.")
        return super().form_valid(form)


class RegistrarObservacionView(DocenteRequeridoMixin, FormView):
    template_name = 'docentes/registrar_observacion.html'
    form_class = RegistrarObservacionForm
    success_url = reverse_lazy('docentes:historial')

    def form_valid(self, form):
        datos = form.cleaned_data
        try:
            services.registrar_observacion(
                estudiante_id=datos['estudiante'].pk,
                docente_id=self.get_docente().pk,
                tipo_observacion=datos['tipo_observacion'],
                descripcion=datos['descripcion'],
            )
        except RelacionInvalida as e:
            messages.error(self.request, e.mensaje)
            return self.form_invalid(form)
        except DatabaseError:
            logger.exception("Error registrando observación")
            messages.error(self.request, "Error al guardar la observación.")
            return self.form_invalid(form)

        messages.success(self.request, "Observación registrada exitosamente.")
        return super().form_valid(form)


class HistorialDocenteView(DocenteRequeridoMixin, TemplateView):
    """Incidentes y observaciones del docente en una sola línea de tiempo"""
    template_name = 'docentes/historial.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        docente = self.get_docente()
        incidentes = RegistroConducta.objects.con_relaciones().por_docente(docente.pk)
        observaciones = Observacion.objects.con_relaciones().por_docente(docente.pk)
        context['historial_items'] = services.construir_historial(incidentes, observaciones)
        return context
