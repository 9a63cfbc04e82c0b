# docentes/mixins.py
from usuarios.mixins import RolRequeridoMixin


class DocenteRequeridoMixin(RolRequeridoMixin):
    """Mixin para verificar que la persona autenticada es docente"""
    allowed_roles = ['DOCENTE']

    def get_docente(self):
        return self.request.principal

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['docente'] = self.get_docente()
        return context
