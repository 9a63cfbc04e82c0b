"""
Excepciones del dominio de convivencia
comportamiento/exceptions.py
"""


class ControlEduError(Exception):
    """Error base de la aplicación"""
    mensaje = "Error en la operación."

    def __init__(self, mensaje=None):
        self.mensaje = mensaje or self.mensaje
        super().__init__(self.mensaje)


class EntidadNoEncontrada(ControlEduError):
    mensaje = "El registro solicitado no existe."


class RelacionInvalida(ControlEduError):
    """Una referencia (estudiante, docente, conducta, gravedad) no existe"""
    mensaje = "La relación indicada no es válida."


class ConductaEnUso(ControlEduError):
    """Se intentó eliminar un registro referenciado por otros registros"""
    mensaje = "No se puede eliminar la conducta porque tiene registros asociados."
