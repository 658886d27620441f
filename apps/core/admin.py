# apps/core/admin.py

import json

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html

from .auth_service import auth_service
from .models import Documento, Usuario


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    list_display = ['email', 'nome_exibicao', 'uid', 'is_active', 'date_joined']
    list_filter = ['is_staff', 'is_active', 'date_joined']
    search_fields = ['email', 'nome_exibicao', 'uid']
    ordering = ['-date_joined']
    readonly_fields = ['uid']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Identidade', {
            'fields': ('uid', 'nome_exibicao')
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Identidade', {
            'fields': ('email', 'nome_exibicao')
        }),
    )

    def save_model(self, request, obj, form, change):
        obj.email = Usuario.objects.normalize_email(obj.email)
        super().save_model(request, obj, form, change)

        # Conta nova ou email/nome alterados refletem em users/<uid>
        auth_service.sincronizar_usuario(obj)


@admin.register(Documento)
class DocumentoAdmin(admin.ModelAdmin):
    """Documentos de todas as coleções, somente leitura"""

    list_display = ['doc_id', 'colecao_badge', 'resumo', 'criado_em', 'atualizado_em']
    list_filter = ['colecao']
    search_fields = ['doc_id']
    ordering = ['-criado_em']
    readonly_fields = ['colecao', 'doc_id', 'dados_formatados', 'campos_timestamp', 'criado_em', 'atualizado_em']
    exclude = ['dados']

    CORES_COLECAO = {
        'users': '#3B82F6',
        'projects': '#10B981',
        'projectMembers': '#F59E0B',
        'boards': '#8B5CF6',
        'columns': '#6B7280',
        'tasks': '#EF4444',
        'comments': '#14B8A6',
    }

    def colecao_badge(self, obj):
        cor = self.CORES_COLECAO.get(obj.colecao, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.colecao
        )

    colecao_badge.short_description = 'Coleção'

    def resumo(self, obj):
        for campo in ('name', 'nome', 'titulo', 'email', 'content'):
            if obj.dados.get(campo):
                return str(obj.dados[campo])[:60]
        return '-'

    def dados_formatados(self, obj):
        texto = json.dumps(obj.dados, indent=2, ensure_ascii=False, cls=DjangoJSONEncoder)
        return format_html('<pre>{}</pre>', texto)

    dados_formatados.short_description = 'Dados'

    def has_add_permission(self, request):
        return False
