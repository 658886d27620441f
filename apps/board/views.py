# apps/board/views.py

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from apps.core.exceptions import AcessoNegado, NaoAutenticado
from apps.core.permissions import requer_membro_projeto
from apps.core.projeto_service import projeto_service
from apps.core.utils import api_json, ler_dados

from .board_service import board_service
from .forms import ComentarioForm, TarefaForm
from .signals import nome_grupo_board


def _exigir_membro(principal, projeto_id):
    if principal is None:
        raise NaoAutenticado()
    if not projeto_service.eh_membro(principal, projeto_id):
        raise AcessoNegado("Você não tem acesso a este projeto")


@login_required
@requer_membro_projeto
def board_kanban_view(request, projeto_id):
    """
    View principal do Kanban Board
    Carrega colunas com as tarefas já ordenadas
    """
    principal = request.principal
    projeto = projeto_service.obter_detalhes_projeto(principal, projeto_id)
    board = board_service.obter_board_projeto(principal, projeto_id)

    total_tarefas = sum(len(coluna['tasks']) for coluna in board['columns'])

    context = {
        'title': f"{projeto.get('nome', 'Projeto')} - Kanban",
        'projeto': projeto,
        'board': board,
        'colunas': board['columns'],
        'stats': {
            'total_tarefas': total_tarefas,
            'total_colunas': len(board['columns']),
        },
        'form_tarefa': TarefaForm(),
        'websocket_group': nome_grupo_board(board['id']),
    }

    return render(request, 'board/kanban.html', context)


@api_json
@require_GET
def api_board(request, projeto_id):
    """Board do projeto em JSON, com colunas e tarefas"""
    _exigir_membro(request.principal, projeto_id)
    board = board_service.obter_board_projeto(request.principal, projeto_id)
    return JsonResponse({'success': True, 'board': board})


@api_json
@require_POST
def criar_tarefa(request, coluna_id):
    """Cria tarefa no fim da coluna"""
    _exigir_membro(request.principal, board_service.projeto_da_coluna(request.principal, coluna_id))

    form = TarefaForm(ler_dados(request))
    if not form.is_valid():
        return JsonResponse({'success': False, 'error': 'Preencha os campos obrigatórios'}, status=400)

    tarefa_id = board_service.criar_tarefa(request.principal, coluna_id, form.cleaned_data)
    return JsonResponse({'success': True, 'tarefa_id': tarefa_id})


@csrf_exempt  # Para HTMX/AJAX requests
@api_json
@require_POST
def mover_tarefa_ajax(request):
    """
    Move tarefa entre colunas via AJAX
    Usado pelo drag-and-drop
    """
    data = ler_dados(request)
    tarefa_id = data.get('tarefa_id')
    nova_coluna_id = data.get('nova_coluna_id')

    if not all([tarefa_id, nova_coluna_id]):
        return JsonResponse({'success': False, 'error': 'Parâmetros inválidos'}, status=400)

    projeto_id = board_service.projeto_da_tarefa(request.principal, tarefa_id)
    _exigir_membro(request.principal, projeto_id)

    # Destino precisa ser do mesmo projeto
    if board_service.projeto_da_coluna(request.principal, nova_coluna_id) != projeto_id:
        raise AcessoNegado("Coluna de destino pertence a outro projeto")

    board_service.atualizar_status_tarefa(request.principal, tarefa_id, nova_coluna_id)
    return JsonResponse({'success': True})


@api_json
@require_http_methods(["GET", "POST"])
def comentarios_tarefa(request, tarefa_id):
    """
    GET lista os comentários com os autores
    POST adiciona comentário do usuário logado
    """
    _exigir_membro(request.principal, board_service.projeto_da_tarefa(request.principal, tarefa_id))

    if request.method == 'GET':
        comentarios = board_service.listar_comentarios(request.principal, tarefa_id)
        return JsonResponse({'success': True, 'comentarios': comentarios})

    form = ComentarioForm(ler_dados(request))
    if not form.is_valid():
        return JsonResponse({'success': False, 'error': 'Comentário vazio'}, status=400)

    comentario_id = board_service.adicionar_comentario(
        request.principal,
        tarefa_id,
        form.cleaned_data['conteudo'],
    )
    return JsonResponse({'success': True, 'comentario_id': comentario_id})
