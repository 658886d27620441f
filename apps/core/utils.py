# apps/core/utils.py

import hashlib
import json
from functools import wraps

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from django.http import JsonResponse

from .exceptions import ErroIdentidade, NaoAutenticado


class CorpoInvalido(Exception):
    """Corpo da requisição que não é JSON válido"""


def gerar_cor_usuario(identificador: str) -> str:
    """
    Gera uma cor consistente baseada no identificador do usuário
    Útil para avatares quando não há foto
    """
    hash_hex = hashlib.md5(identificador.encode()).hexdigest()
    return f"#{hash_hex[:6]}"


def ler_dados(request) -> dict:
    """Dados do corpo da requisição: JSON quando declarado, senão o POST do form"""
    if request.content_type == 'application/json':
        try:
            dados = json.loads(request.body or b'{}')
        except json.JSONDecodeError:
            raise CorpoInvalido("JSON inválido")
        if not isinstance(dados, dict):
            raise CorpoInvalido("JSON inválido")
        return dados
    return request.POST.dict()


def mensagem_erro(erro: Exception) -> str:
    if isinstance(erro, ValidationError):
        return ' '.join(erro.messages)
    return str(erro)


def status_do_erro(erro: Exception) -> int:
    if isinstance(erro, NaoAutenticado):
        return 401
    if isinstance(erro, PermissionDenied):
        return 403
    if isinstance(erro, ObjectDoesNotExist):
        return 404
    return 400


def api_json(view_func):
    """
    Decorador para views JSON

    Erros do domínio viram {'success': False, 'error': <mensagem>} com o
    status correspondente; a mensagem é repassada sem alteração.
    """

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except (NaoAutenticado, PermissionDenied, ObjectDoesNotExist,
                ValidationError, ErroIdentidade, CorpoInvalido) as e:
            return JsonResponse(
                {'success': False, 'error': mensagem_erro(e)},
                status=status_do_erro(e),
            )

    return wrapped_view
