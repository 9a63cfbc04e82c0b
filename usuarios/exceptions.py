from comportamiento.exceptions import ControlEduError


class CredencialesInvalidas(ControlEduError):
    mensaje = "Credenciales inválidas"


class PasswordIncorrecto(ControlEduError):
    mensaje = "La contraseña actual es incorrecta."


class PasswordsNoCoinciden(ControlEduError):
    mensaje = "La nueva contraseña y su confirmación no coinciden."


class PersonaConRegistros(ControlEduError):
    """Eliminación bloqueada: la persona tiene incidentes u observaciones asociados"""
    mensaje = "No se puede eliminar porque tiene incidentes u observaciones asociados."
