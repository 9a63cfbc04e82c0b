from .mixins import PrincipalRequeridoMixin, RolRequeridoMixin

__all__ = ['PrincipalRequeridoMixin', 'RolRequeridoMixin']
