# apps/core/management/commands/seed.py

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.board.board_service import board_service
from apps.core.auth_service import auth_service
from apps.core.exceptions import ErroIdentidade
from apps.core.projeto_service import projeto_service

TAREFAS_DEMO = [
    ('Definir escopo do projeto', 0),
    ('Desenhar o quadro Kanban', 0),
    ('Configurar ambiente de desenvolvimento', 1),
    ('Publicar primeira versão', 2),
]


class Command(BaseCommand):
    help = 'Cria uma conta demo com um projeto, board e tarefas'

    def add_arguments(self, parser):
        parser.add_argument('--email', default='demo@nexo.dev')
        parser.add_argument('--senha', default='nexo-demo-2024')
        parser.add_argument('--nome', default='Usuário Demo')

    def handle(self, *args, **options):
        Usuario = get_user_model()
        email = Usuario.objects.normalize_email(options['email'])

        self.stdout.write('🌱 Populando o banco com dados demo...')

        usuario = Usuario.objects.filter(email__iexact=email).first()

        if usuario is None:
            try:
                principal = auth_service.registrar_usuario(email, options['senha'], options['nome'])
            except (ErroIdentidade, ValidationError) as e:
                raise CommandError(f'Não foi possível criar a conta demo: {e}')
            self.stdout.write(f'  👤 Conta criada: {email}')
        else:
            principal = usuario.como_principal()
            self.stdout.write(f'  👤 Conta já existente: {email}')

        projeto_id = projeto_service.criar_projeto(principal, {
            'nome': 'Projeto Demo',
            'cliente': 'Interno',
            'descricao': 'Projeto criado pelo comando seed',
        })
        self.stdout.write(f'  📁 Projeto criado: {projeto_id}')

        board = board_service.obter_board_projeto(principal, projeto_id)
        colunas = board['columns']

        for titulo, indice_coluna in TAREFAS_DEMO:
            board_service.criar_tarefa(principal, colunas[indice_coluna]['id'], {
                'titulo': titulo,
                'prioridade': 'media',
            })
        self.stdout.write(f'  📝 {len(TAREFAS_DEMO)} tarefas criadas')

        self.stdout.write(
            self.style.SUCCESS(
                f'\n✅ Dados demo prontos! Acesse com: {email}\n'
            )
        )
