from django.urls import path
from . import views

app_name = 'usuarios'

urlpatterns = [
    path('login/', views.LoginView.as_view(), name='login'),
    path('logout/', views.LogoutView.as_view(), name='logout'),
    path('access-denied/', views.AccessDeniedView.as_view(), name='access_denied'),
    path('profile/', views.PerfilView.as_view(), name='perfil'),
    path('profile/edit/', views.PerfilEditarView.as_view(), name='perfil_editar'),
    path('profile/password/', views.CambiarPasswordView.as_view(), name='cambiar_password'),
]
