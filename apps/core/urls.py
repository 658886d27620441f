# apps/core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),
    path('registro/', views.registro_view, name='registro'),

    # === PAINEL PRINCIPAL ===
    path('painel/', views.painel_principal, name='painel'),
    path('', views.painel_principal, name='home'),

    # === PROJETOS ===
    path('projetos/salvar/', views.salvar_projeto, name='salvar_projeto'),

    # === APIs JSON ===
    path('api/projetos/', views.api_projetos, name='api_projetos'),
    path('api/projetos/<str:projeto_id>/', views.api_projeto_detalhes, name='api_projeto_detalhes'),
    path('api/projetos/<str:projeto_id>/membros/', views.api_membros, name='api_membros'),

    # === MONITORAMENTO ===
    path('health/', views.health_check, name='health'),
]
