# apps/board/forms.py

from django import forms

INPUT_CLASS = 'form-input w-full px-4 py-2 border rounded-lg'


class TarefaForm(forms.Form):
    """Campos livres da tarefa"""

    PRIORIDADE_CHOICES = [
        ('baixa', '🟢 Baixa'),
        ('media', '🟡 Média'),
        ('alta', '🟠 Alta'),
        ('critica', '🔴 Crítica'),
    ]

    titulo = forms.CharField(
        label='Título',
        max_length=200,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS})
    )

    descricao = forms.CharField(
        label='Descrição',
        required=False,
        widget=forms.Textarea(attrs={'class': INPUT_CLASS, 'rows': 3})
    )

    prioridade = forms.ChoiceField(
        label='Prioridade',
        choices=PRIORIDADE_CHOICES,
        initial='media',
        required=False,
    )

    def clean_prioridade(self):
        return self.cleaned_data.get('prioridade') or 'media'


class ComentarioForm(forms.Form):
    conteudo = forms.CharField(
        label='Comentário',
        max_length=5000,
        widget=forms.Textarea(attrs={'class': INPUT_CLASS, 'rows': 2})
    )
