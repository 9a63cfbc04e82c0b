import logging

from django.shortcuts import render
from django.views.generic import RedirectView

logger = logging.getLogger(__name__)


class InicioView(RedirectView):
    """La raíz del sitio lleva al inicio de sesión"""
    pattern_name = 'usuarios:login'
    permanent = False


def custom_404_view(request, exception):
    return render(request, '404.html', status=404)


def custom_500_view(request):
    logger.error(f"Error interno atendiendo {request.path}")
    return render(request, '500.html', status=500)
