import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.views import View
from django.views.generic import FormView, TemplateView

from .exceptions import CredencialesInvalidas, PasswordIncorrecto, PasswordsNoCoinciden
from .forms import CambiarPasswordForm, LoginForm, PerfilForm
from .middleware import cerrar_sesion, iniciar_sesion
from .mixins import PrincipalRequeridoMixin
from .services import DASHBOARD_POR_ROL, actualizar_perfil, authenticate, cambiar_password

logger = logging.getLogger(__name__)


class LoginView(View):
    """Inicio de sesión para directores, docentes y estudiantes"""
    template_name = 'usuarios/login.html'

    def get(self, request):
        if request.principal is not None:
            return redirect('dashboard')
        return render(request, self.template_name, {'form': LoginForm()})

    def post(self, request):
        form = LoginForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {'form': form})

        principal = authenticate(form.cleaned_data['usuario'], form.cleaned_data['password'])
        if principal is None:
            return render(request, self.template_name, {
                'form': LoginForm(initial={'usuario': form.cleaned_data['usuario']}),
                'error': CredencialesInvalidas.mensaje,
            })

        iniciar_sesion(request, principal)
        messages.success(request, f"Bienvenido(a), {principal.display_name}")
        return redirect(DASHBOARD_POR_ROL[principal.ROL])


class LogoutView(View):

    def get(self, request):
        return self.post(request)

    def post(self, request):
        cerrar_sesion(request)
        messages.success(request, "Sesión cerrada exitosamente")
        return redirect('usuarios:login')


class AccessDeniedView(TemplateView):
    template_name = 'usuarios/access_denied.html'

    def get(self, request, *args, **kwargs):
        response = super().get(request, *args, **kwargs)
        response.status_code = 403
        return response


class DashboardRedirectView(PrincipalRequeridoMixin, View):
    """Envía a cada rol a su panel"""

    def get(self, request):
        return redirect(DASHBOARD_POR_ROL[request.principal.ROL])


class PerfilView(PrincipalRequeridoMixin, TemplateView):
    template_name = 'usuarios/perfil.html'


class PerfilEditarView(PrincipalRequeridoMixin, FormView):
    template_name = 'usuarios/perfil_form.html'
    form_class = PerfilForm
    success_url = reverse_lazy('usuarios:perfil')

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs['es_docente'] = hasattr(self.request.principal, 'materia')
        return kwargs

    def get_initial(self):
        principal = self.request.principal
        return {
            'nombres': principal.nombres,
            'apellidos': principal.apellidos,
            'materia': getattr(principal, 'materia', None),
        }

    def form_valid(self, form):
        actualizar_perfil(
            self.request.principal,
            form.cleaned_data['nombres'],
            form.cleaned_data['apellidos'],
            form.cleaned_data.get('materia'),
        )
        messages.success(self.request, "Perfil actualizado exitosamente.")
        return super().form_valid(form)


class CambiarPasswordView(PrincipalRequeridoMixin, FormView):
    template_name = 'usuarios/password_form.html'
    form_class = CambiarPasswordForm

    def form_valid(self, form):
        try:
            cambiar_password(
                self.request.principal,
                form.cleaned_data['password_actual'],
                form.cleaned_data['password_nuevo'],
                form.cleaned_data['confirmacion'],
            )
        except (PasswordIncorrecto, PasswordsNoCoinciden) as e:
            messages.error(self.request, e.mensaje)
            return self.form_invalid(form)

        cerrar_sesion(self.request)
        messages.success(self.request, "Contraseña actualizada con éxito. Por favor, inicia sesión de nuevo.")
        return redirect('usuarios:login')
