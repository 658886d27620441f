# config/urls.py

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Aplicações principais
    path('', include('apps.core.urls')),
    path('board/', include('apps.board.urls')),

    # Redirecionamentos úteis
    path('dashboard/', RedirectView.as_view(pattern_name='core:painel', permanent=False)),
]

# Customizar títulos do admin
admin.site.site_header = 'Nexo Admin'
admin.site.site_title = 'Nexo'
admin.site.index_title = 'Administração do Sistema'
