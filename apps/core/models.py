# apps/core/models.py

import uuid

from django.contrib.auth.models import AbstractUser
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models


def gerar_uid():
    """Identificador estável do principal, independente da chave primária"""
    return uuid.uuid4().hex


class Usuario(AbstractUser):
    """
    Conta do provedor de identidade

    O email é único e também é usado como username. O uid é o identificador
    exposto para o resto do sistema (documentos, membros, comentários).
    """

    uid = models.CharField(max_length=64, unique=True, default=gerar_uid, editable=False)
    email = models.EmailField(unique=True)
    nome_exibicao = models.CharField(max_length=150, blank=True)

    # === METADADOS ===
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'usuario'

    def como_principal(self):
        """Retorna o principal autenticado correspondente a esta conta"""
        from .auth_service import Principal

        return Principal(
            uid=self.uid,
            email=self.email,
            display_name=self.nome_exibicao or self.email,
        )

    def __str__(self):
        if self.nome_exibicao:
            return f"{self.nome_exibicao} ({self.email})"
        return self.email


class Documento(models.Model):
    """
    Documento de uma coleção nomeada (users, projects, tasks...)

    Os campos do documento ficam em `dados`. `campos_timestamp` lista as
    chaves gravadas com o timestamp do servidor, para que voltem como datetime.
    """

    colecao = models.CharField(max_length=64, db_index=True)
    doc_id = models.CharField(max_length=64)
    dados = models.JSONField(default=dict, encoder=DjangoJSONEncoder)
    campos_timestamp = models.JSONField(default=list)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'documento'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['colecao', 'doc_id'], name='documento_colecao_doc_id_unico'),
        ]

    def __str__(self):
        return f"{self.colecao}/{self.doc_id}"
