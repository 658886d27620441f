"""Testes do serviço do board: colunas, tarefas e comentários"""

from unittest.mock import MagicMock

import pytest

from apps.board.board_service import BoardService, ordenar_por_ordem
from apps.core.document_store import DocumentStore
from apps.core.exceptions import (
    BoardNaoEncontrado,
    ColunaNaoEncontrada,
    NaoAutenticado,
    TarefaNaoEncontrada,
)
from apps.core.signals import tarefa_movida


@pytest.fixture
def colunas(boards, ana, projeto_da_ana):
    return boards.obter_board_projeto(ana, projeto_da_ana)['columns']


def test_ordenar_por_ordem_mantem_empates():
    docs = [{'id': 'b', 'order': 1}, {'id': 'a', 'order': 0}, {'id': 'c', 'order': 1}]
    assert [d['id'] for d in ordenar_por_ordem(docs)] == ['a', 'b', 'c']


class TestSemPrincipal:
    def test_nenhuma_operacao_toca_o_repositorio(self):
        store = MagicMock(spec=DocumentStore)
        servico = BoardService(store=store)

        chamadas = [
            lambda: servico.obter_board_projeto(None, 'p1'),
            lambda: servico.criar_tarefa(None, 'c1', {'titulo': 'X'}),
            lambda: servico.atualizar_status_tarefa(None, 't1', 'c2'),
            lambda: servico.adicionar_comentario(None, 't1', 'Oi'),
            lambda: servico.listar_comentarios(None, 't1'),
            lambda: servico.projeto_da_coluna(None, 'c1'),
            lambda: servico.projeto_da_tarefa(None, 't1'),
        ]
        for chamada in chamadas:
            with pytest.raises(NaoAutenticado):
                chamada()

        assert store.method_calls == []


class TestObterBoard:
    def test_board_com_colunas_ordenadas(self, boards, ana, projeto_da_ana):
        board = boards.obter_board_projeto(ana, projeto_da_ana)

        assert board['projectId'] == projeto_da_ana
        assert board['name'] == 'Kanban'
        assert [c['name'] for c in board['columns']] == ['To do', 'In progress', 'Done']
        assert all(c['tasks'] == [] for c in board['columns'])

    def test_colunas_ordenadas_pelo_campo_order(self, store, boards, ana):
        board_id = store.adicionar('boards', {'projectId': 'p1', 'name': 'Manual'})
        store.adicionar('columns', {'boardId': board_id, 'name': 'Terceira', 'order': 2})
        store.adicionar('columns', {'boardId': board_id, 'name': 'Primeira', 'order': 0})
        store.adicionar('columns', {'boardId': board_id, 'name': 'Segunda', 'order': 1})

        board = boards.obter_board_projeto(ana, 'p1')
        assert [c['name'] for c in board['columns']] == ['Primeira', 'Segunda', 'Terceira']

    def test_tarefas_embutidas_na_coluna(self, boards, ana, projeto_da_ana, colunas):
        todo, andamento, _ = colunas
        boards.criar_tarefa(ana, todo['id'], {'titulo': 'A'})
        boards.criar_tarefa(ana, andamento['id'], {'titulo': 'B'})
        boards.criar_tarefa(ana, todo['id'], {'titulo': 'C'})

        board = boards.obter_board_projeto(ana, projeto_da_ana)

        assert [t['titulo'] for t in board['columns'][0]['tasks']] == ['A', 'C']
        assert [t['titulo'] for t in board['columns'][1]['tasks']] == ['B']
        assert board['columns'][2]['tasks'] == []

    def test_tarefas_ordenadas_pelo_campo_order(self, store, boards, ana, projeto_da_ana, colunas):
        coluna_id = colunas[1]['id']
        store.adicionar('tasks', {'columnId': coluna_id, 'titulo': 'Última', 'order': 5})
        store.adicionar('tasks', {'columnId': coluna_id, 'titulo': 'Primeira', 'order': 0})
        store.adicionar('tasks', {'columnId': coluna_id, 'titulo': 'Meio', 'order': 2})

        board = boards.obter_board_projeto(ana, projeto_da_ana)

        assert [t['titulo'] for t in board['columns'][1]['tasks']] == ['Primeira', 'Meio', 'Última']

    def test_projeto_sem_board(self, boards, ana):
        with pytest.raises(BoardNaoEncontrado) as erro:
            boards.obter_board_projeto(ana, 'nao-existe')
        assert str(erro.value) == 'Board não encontrado'


class TestTarefas:
    def test_criar_tarefa_no_fim_da_coluna(self, store, boards, ana, projeto_da_ana, colunas):
        coluna_id = colunas[0]['id']

        primeira = boards.criar_tarefa(ana, coluna_id, {'titulo': 'A', 'prioridade': 'alta'})
        segunda = boards.criar_tarefa(ana, coluna_id, {'titulo': 'B'})

        tarefa = store.obter('tasks', primeira)
        assert tarefa.get('order') == 0
        assert tarefa.get('prioridade') == 'alta'
        assert tarefa.get('columnId') == coluna_id
        assert tarefa.get('projectId') == projeto_da_ana
        assert tarefa.get('createdBy') == ana.uid
        assert store.obter('tasks', segunda).get('order') == 1

    def test_coluna_inexistente(self, boards, ana):
        with pytest.raises(ColunaNaoEncontrada):
            boards.criar_tarefa(ana, 'nao-existe', {'titulo': 'A'})

    def test_coluna_sem_board(self, store, boards, ana):
        coluna_id = store.adicionar('columns', {'boardId': 'apagado', 'name': 'Solta', 'order': 0})

        with pytest.raises(BoardNaoEncontrado):
            boards.criar_tarefa(ana, coluna_id, {'titulo': 'A'})

    def test_mover_tarefa_para_o_fim(self, store, boards, ana, colunas):
        todo, andamento, _ = colunas
        boards.criar_tarefa(ana, andamento['id'], {'titulo': 'Já lá'})
        tarefa_id = boards.criar_tarefa(ana, todo['id'], {'titulo': 'Mover'})

        assert boards.atualizar_status_tarefa(ana, tarefa_id, andamento['id']) is True

        tarefa = store.obter('tasks', tarefa_id)
        assert tarefa.get('columnId') == andamento['id']
        assert tarefa.get('order') == 1
        assert tarefa.get('titulo') == 'Mover'

    def test_mover_envia_coluna_anterior(self, boards, ana, colunas):
        todo, andamento, _ = colunas
        tarefa_id = boards.criar_tarefa(ana, todo['id'], {'titulo': 'Mover'})
        recebidos = []

        def receptor(sender, **kwargs):
            recebidos.append(kwargs)

        tarefa_movida.connect(receptor)
        try:
            boards.atualizar_status_tarefa(ana, tarefa_id, andamento['id'])
        finally:
            tarefa_movida.disconnect(receptor)

        assert recebidos[0]['coluna_anterior_id'] == todo['id']
        assert recebidos[0]['nova_coluna_id'] == andamento['id']

    def test_mover_tarefa_inexistente(self, boards, ana, colunas):
        with pytest.raises(TarefaNaoEncontrada):
            boards.atualizar_status_tarefa(ana, 'nao-existe', colunas[1]['id'])


class TestProjetoDono:
    def test_projeto_da_coluna(self, boards, ana, projeto_da_ana, colunas):
        assert boards.projeto_da_coluna(ana, colunas[0]['id']) == projeto_da_ana

    def test_projeto_da_tarefa(self, boards, ana, projeto_da_ana, colunas):
        tarefa_id = boards.criar_tarefa(ana, colunas[0]['id'], {'titulo': 'A'})
        assert boards.projeto_da_tarefa(ana, tarefa_id) == projeto_da_ana

    def test_inexistentes(self, boards, ana):
        with pytest.raises(ColunaNaoEncontrada):
            boards.projeto_da_coluna(ana, 'nao-existe')
        with pytest.raises(TarefaNaoEncontrada):
            boards.projeto_da_tarefa(ana, 'nao-existe')


class TestComentarios:
    def test_comentarios_com_autor(self, boards, ana, bruno, colunas):
        tarefa_id = boards.criar_tarefa(ana, colunas[0]['id'], {'titulo': 'A'})
        boards.adicionar_comentario(ana, tarefa_id, 'Primeiro')
        boards.adicionar_comentario(bruno, tarefa_id, 'Segundo')

        comentarios = boards.listar_comentarios(ana, tarefa_id)

        assert [c['content'] for c in comentarios] == ['Primeiro', 'Segundo']
        assert comentarios[0]['taskId'] == tarefa_id
        assert comentarios[0]['user']['displayName'] == 'Ana'
        assert comentarios[1]['user']['email'] == 'bruno@nexo.dev'
        assert comentarios[1]['createdAt'] is not None

    def test_autor_sem_documento(self, store, boards, ana):
        store.adicionar('comments', {'taskId': 't1', 'userId': 'sumiu', 'content': 'Oi'})

        comentarios = boards.listar_comentarios(ana, 't1')
        assert comentarios[0]['content'] == 'Oi'
        assert 'user' not in comentarios[0]

    def test_tarefa_sem_comentarios(self, boards, ana):
        assert boards.listar_comentarios(ana, 't1') == []
