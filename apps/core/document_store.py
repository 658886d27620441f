# apps/core/document_store.py

"""
Cliente do repositório de documentos

Coleções nomeadas de documentos sem esquema fixo, identificados por um id
opaco gerado na inserção. Os documentos são persistidos pelo ORM do Django
no model Documento, com os campos em JSON.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .exceptions import DocumentoNaoEncontrado
from .models import Documento

logger = logging.getLogger(__name__)


class _ServerTimestamp:
    """Marcador substituído pela hora do servidor no momento da escrita"""

    def __repr__(self):
        return 'SERVER_TIMESTAMP'


SERVER_TIMESTAMP = _ServerTimestamp()


@dataclass(frozen=True)
class DocumentoSnapshot:
    """Leitura de um documento: id atribuído na inserção + campos"""

    id: str
    dados: Dict[str, Any] = field(default_factory=dict)

    def get(self, campo: str, default=None):
        return self.dados.get(campo, default)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, **self.dados}


class DocumentStore:
    """
    Operações genéricas sobre coleções nomeadas

    Não há integridade referencial entre coleções: relações são apenas
    strings com o id de outro documento.
    """

    def adicionar(self, colecao: str, dados: Dict[str, Any]) -> str:
        """Insere um documento novo e retorna o id gerado"""
        doc_id = self._gerar_id()
        valores, campos_timestamp = self._resolver_timestamps(dados)

        Documento.objects.create(
            colecao=colecao,
            doc_id=doc_id,
            dados=valores,
            campos_timestamp=campos_timestamp,
        )
        logger.debug(f"➕ {colecao}/{doc_id} criado")
        return doc_id

    def definir(self, colecao: str, doc_id: str, dados: Dict[str, Any]) -> None:
        """Grava o documento com id conhecido, substituindo o anterior"""
        valores, campos_timestamp = self._resolver_timestamps(dados)

        Documento.objects.update_or_create(
            colecao=colecao,
            doc_id=doc_id,
            defaults={'dados': valores, 'campos_timestamp': campos_timestamp},
        )
        logger.debug(f"💾 {colecao}/{doc_id} gravado")

    def obter(self, colecao: str, doc_id: str) -> Optional[DocumentoSnapshot]:
        """Leitura pontual; None se o documento não existir"""
        documento = Documento.objects.filter(colecao=colecao, doc_id=doc_id).first()
        if documento is None:
            return None
        return self._hidratar(documento)

    def obter_varios(self, colecao: str, ids: Iterable[str]) -> Dict[str, DocumentoSnapshot]:
        """Leitura em lote por id; ids inexistentes ficam fora do resultado"""
        ids = list(set(ids))
        if not ids:
            return {}

        documentos = Documento.objects.filter(colecao=colecao, doc_id__in=ids)
        return {doc.doc_id: self._hidratar(doc) for doc in documentos}

    def consultar(self, colecao: str, **filtros) -> List[DocumentoSnapshot]:
        """
        Consulta por igualdade nos campos do documento

        Exemplo: consultar('tasks', columnId='abc') ou
        consultar('tasks', columnId__in=['abc', 'def']).
        Resultados na ordem de inserção.
        """
        return [self._hidratar(doc) for doc in self._queryset(colecao, filtros)]

    def contar(self, colecao: str, **filtros) -> int:
        """Tamanho do resultado da consulta equivalente"""
        return self._queryset(colecao, filtros).count()

    def atualizar(self, colecao: str, doc_id: str, campos: Dict[str, Any]) -> None:
        """Atualiza apenas os campos informados de um documento existente"""
        documento = Documento.objects.filter(colecao=colecao, doc_id=doc_id).first()
        if documento is None:
            raise DocumentoNaoEncontrado(f"Documento {colecao}/{doc_id} não encontrado")

        valores, novos_timestamps = self._resolver_timestamps(campos)

        # Campo sobrescrito com valor comum deixa de ser timestamp
        campos_timestamp = [
            campo for campo in documento.campos_timestamp
            if campo not in valores
        ]
        campos_timestamp.extend(novos_timestamps)

        documento.dados = {**documento.dados, **valores}
        documento.campos_timestamp = campos_timestamp
        documento.save(update_fields=['dados', 'campos_timestamp', 'atualizado_em'])
        logger.debug(f"✏️ {colecao}/{doc_id} atualizado: {sorted(valores)}")

    # =================== MÉTODOS PRIVADOS ===================

    def _gerar_id(self) -> str:
        return uuid.uuid4().hex[:20]

    def _queryset(self, colecao: str, filtros: Dict[str, Any]):
        lookups = {f'dados__{campo}': valor for campo, valor in filtros.items()}
        return Documento.objects.filter(colecao=colecao, **lookups)

    def _resolver_timestamps(self, dados: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
        """Troca SERVER_TIMESTAMP pela hora atual e devolve as chaves trocadas"""
        agora = timezone.now()
        valores = {}
        campos_timestamp = []

        for campo, valor in dados.items():
            if valor is SERVER_TIMESTAMP:
                valores[campo] = agora
                campos_timestamp.append(campo)
            else:
                valores[campo] = valor

        return valores, campos_timestamp

    def _hidratar(self, documento: Documento) -> DocumentoSnapshot:
        dados = dict(documento.dados)

        for campo in documento.campos_timestamp:
            valor = dados.get(campo)
            if isinstance(valor, str):
                dados[campo] = parse_datetime(valor)

        return DocumentoSnapshot(id=documento.doc_id, dados=dados)


# Instância global do cliente (Singleton pattern)
document_store = DocumentStore()
