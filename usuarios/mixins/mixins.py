"""
Mixins de acceso para vistas basadas en clases
usuarios/mixins/mixins.py
"""
from django.contrib import messages
from django.shortcuts import redirect


class PrincipalRequeridoMixin:
    """Redirige al login cuando no hay una persona autenticada en la sesión"""
    login_url = 'usuarios:login'
    login_required_message = "Debes iniciar sesión para continuar."

    def dispatch(self, request, *args, **kwargs):
        if getattr(request, 'principal', None) is None:
            messages.warning(request, self.login_required_message)
            return redirect(self.login_url)
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['principal'] = self.request.principal
        return context


class RolRequeridoMixin(PrincipalRequeridoMixin):
    """
    Mixin para verificar el rol de la persona autenticada
    """
    allowed_roles = []
    redirect_url = 'usuarios:access_denied'

    def dispatch(self, request, *args, **kwargs):
        principal = getattr(request, 'principal', None)
        if principal is not None and principal.ROL not in self.allowed_roles:
            return self.handle_no_permission()
        return super().dispatch(request, *args, **kwargs)

    def handle_no_permission(self):
        return redirect(self.redirect_url)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['allowed_roles'] = self.allowed_roles
        return context
