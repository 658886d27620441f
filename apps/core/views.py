# apps/core/views.py

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.db import connection
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods, require_POST
from django_htmx.http import HttpResponseClientRedirect

from .auth_service import auth_service
from .exceptions import CredenciaisInvalidas, ErroIdentidade
from .forms import LoginForm, MembroForm, ProjetoForm, RegistroForm
from .projeto_service import projeto_service
from .utils import api_json, gerar_cor_usuario, ler_dados, mensagem_erro


def login_view(request):
    """
    View de login usando o serviço de autenticação
    """
    if request.user.is_authenticated:
        return redirect('core:painel')

    form = LoginForm()

    if request.method == 'POST':
        form = LoginForm(request.POST)

        if form.is_valid():
            try:
                principal = auth_service.fazer_login(
                    request,
                    form.cleaned_data['email'],
                    form.cleaned_data['password'],
                    form.cleaned_data['lembrar_me'],
                )
            except CredenciaisInvalidas as e:
                messages.error(request, str(e))
            else:
                messages.success(request, f"Bem-vindo, {principal.display_name or principal.email}!")
                next_url = request.GET.get('next', 'core:painel')
                return redirect(next_url)

    context = {
        'title': 'Login - Nexo',
        'form': form,
        'show_registro_link': True
    }

    return render(request, 'core/login.html', context)


def registro_view(request):
    """
    View de registro

    Em caso de sucesso já abre a sessão e vai para o painel; em caso de erro
    mostra a mensagem do provedor de identidade como veio.
    """
    if request.user.is_authenticated:
        return redirect('core:painel')

    form = RegistroForm()
    erro = None

    if request.method == 'POST':
        form = RegistroForm(request.POST)

        if form.is_valid():
            email = form.cleaned_data['email']
            senha = form.cleaned_data['password']

            try:
                principal = auth_service.registrar_usuario(email, senha, form.cleaned_data['nome_exibicao'])
                auth_service.fazer_login(request, principal.email, senha)
            except (ErroIdentidade, ValidationError) as e:
                erro = mensagem_erro(e)
            else:
                return redirect('core:painel')

    context = {
        'title': 'Registro - Nexo',
        'form': form,
        'erro': erro,
    }

    return render(request, 'core/registro.html', context)


def logout_view(request):
    auth_service.fazer_logout(request)
    messages.info(request, 'Você foi desconectado com sucesso.')
    return redirect('core:login')


@login_required
def painel_principal(request):
    """
    Painel principal: saudação e projetos em que o usuário participa
    """
    principal = request.principal
    projetos = projeto_service.listar_projetos(principal)

    context = {
        'title': 'Painel Principal',
        'principal': principal,
        'cor_avatar': gerar_cor_usuario(principal.uid),
        'projetos': projetos,
        'form_projeto': ProjetoForm(),
    }

    return render(request, 'core/painel.html', context)


@login_required
@require_POST
def salvar_projeto(request):
    """
    Cria projeto a partir do formulário do painel
    Com HTMX responde com redirecionamento no cliente
    """
    form = ProjetoForm(request.POST)

    if not form.is_valid():
        messages.error(request, 'Preencha os campos obrigatórios')
        return redirect('core:painel')

    projeto_id = projeto_service.criar_projeto(request.principal, form.cleaned_data)
    messages.success(request, f"Projeto {form.cleaned_data['nome']} criado com sucesso!")

    destino = reverse('board:kanban', args=[projeto_id])
    if request.htmx:
        return HttpResponseClientRedirect(destino)
    return redirect(destino)


# === APIs JSON ===

@api_json
@require_GET
def api_projetos(request):
    projetos = projeto_service.listar_projetos(request.principal)
    return JsonResponse({'success': True, 'projetos': projetos})


@api_json
@require_GET
def api_projeto_detalhes(request, projeto_id):
    projeto = projeto_service.obter_detalhes_projeto(request.principal, projeto_id)
    return JsonResponse({'success': True, 'projeto': projeto})


@api_json
@require_http_methods(["GET", "POST"])
def api_membros(request, projeto_id):
    """
    GET lista os membros do projeto
    POST adiciona membro (ou altera o papel) - apenas gerentes
    """
    if request.method == 'GET':
        membros = projeto_service.listar_membros(request.principal, projeto_id)
        return JsonResponse({'success': True, 'membros': membros})

    form = MembroForm(ler_dados(request))
    if not form.is_valid():
        return JsonResponse({'success': False, 'error': 'Parâmetros inválidos'}, status=400)

    membro_id = projeto_service.adicionar_membro(
        request.principal,
        projeto_id,
        form.cleaned_data['email'],
        form.cleaned_data['papel'],
    )
    return JsonResponse({'success': True, 'membro_id': membro_id})


# === MONITORAMENTO ===

def health_check(request):
    """Verifica se a aplicação e o banco respondem"""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        banco = 'ok'
    except Exception as e:
        banco = f'erro: {e}'

    status = 200 if banco == 'ok' else 503
    return JsonResponse({
        'status': 'ok' if status == 200 else 'degradado',
        'banco': banco,
        'timestamp': timezone.now().isoformat(),
    }, status=status)
