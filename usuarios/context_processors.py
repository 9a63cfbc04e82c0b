# usuarios/context_processors.py
from .services import DASHBOARD_POR_ROL


def principal_actual(request):
    """Context processor con la persona autenticada y su rol"""
    principal = getattr(request, 'principal', None)
    return {
        'principal': principal,
        'rol_usuario': principal.ROL if principal else None,
        'dashboard_url_name': DASHBOARD_POR_ROL.get(principal.ROL) if principal else None,
    }
