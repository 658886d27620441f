# apps/core/forms.py

from django import forms
from django.core.exceptions import ValidationError

INPUT_CLASS = 'form-input w-full px-4 py-2 border rounded-lg'


class LoginForm(forms.Form):
    """Formulário de login por email"""

    email = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'seu@email.com',
            'autofocus': True
        })
    )

    password = forms.CharField(
        label='Senha',
        widget=forms.PasswordInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Sua senha'
        })
    )

    lembrar_me = forms.BooleanField(
        label='Lembrar-me',
        required=False,
        widget=forms.CheckboxInput(attrs={
            'class': 'form-checkbox h-4 w-4 text-blue-600'
        })
    )


class RegistroForm(forms.Form):
    """
    Formulário de registro

    Só confere o formato dos campos; email duplicado e força da senha são
    verificados pelo provedor de identidade e exibidos como vierem.
    """

    nome_exibicao = forms.CharField(
        label='Nome',
        max_length=150,
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Como você quer ser chamado'
        })
    )

    email = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'seu@email.com'
        })
    )

    password = forms.CharField(
        label='Senha',
        widget=forms.PasswordInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Mínimo 8 caracteres'
        })
    )

    confirmar_password = forms.CharField(
        label='Confirmar Senha',
        widget=forms.PasswordInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Digite a senha novamente'
        })
    )

    def clean_confirmar_password(self):
        """Valida se senhas coincidem"""
        password = self.cleaned_data.get('password')
        confirmar_password = self.cleaned_data.get('confirmar_password')

        if password and confirmar_password and password != confirmar_password:
            raise ValidationError("As senhas não coincidem")

        return confirmar_password


class ProjetoForm(forms.Form):
    """Campos livres do projeto; o serviço grava tudo que vier aqui"""

    nome = forms.CharField(
        label='Nome do Projeto',
        max_length=200,
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Ex: Site institucional'
        })
    )

    cliente = forms.CharField(
        label='Cliente',
        max_length=200,
        required=False,
        widget=forms.TextInput(attrs={'class': INPUT_CLASS})
    )

    descricao = forms.CharField(
        label='Descrição',
        required=False,
        widget=forms.Textarea(attrs={'class': INPUT_CLASS, 'rows': 3})
    )


class MembroForm(forms.Form):
    email = forms.EmailField(label='Email do membro')
    papel = forms.CharField(label='Papel', max_length=50, initial='member')
