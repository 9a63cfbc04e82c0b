from rest_framework.permissions import BasePermission, SAFE_METHODS


class RolPermitido(BasePermission):
    """
    Lectura para cualquier persona autenticada; escritura solo para los roles
    listados en ``roles_escritura`` de la vista.
    """
    message = "No tienes permisos para realizar esta acción."

    def has_permission(self, request, view):
        rol = getattr(request.user, 'ROL', None)
        if rol is None:
            return False
        if request.method in SAFE_METHODS:
            return True
        return rol in getattr(view, 'roles_escritura', ())
