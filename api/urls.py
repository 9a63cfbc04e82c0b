from rest_framework.routers import DefaultRouter

from .views import ConductaViewSet, ObservacionViewSet, RegistroConductaViewSet

app_name = 'api'

router = DefaultRouter(trailing_slash=False)
router.register(r'conductas', ConductaViewSet, basename='conducta')
router.register(r'observaciones', ObservacionViewSet, basename='observacion')
router.register(r'registro-conductas', RegistroConductaViewSet, basename='registro-conducta')

urlpatterns = router.urls
