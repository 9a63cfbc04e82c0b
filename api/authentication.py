from rest_framework.authentication import SessionAuthentication


class SesionPrincipalAuthentication(SessionAuthentication):
    """
    Autentica con la persona guardada en la sesión web (``request.principal``).
    Igual que la autenticación de sesión de DRF, exige el token CSRF.
    """

    def authenticate(self, request):
        principal = getattr(request._request, 'principal', None)
        if principal is None:
            return None

        self.enforce_csrf(request)
        return (principal, None)
