from django import forms


class LoginForm(forms.Form):
    usuario = forms.CharField(
        max_length=50,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Usuario',
            'autofocus': 'autofocus',
        })
    )
    password = forms.CharField(
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': 'Contraseña',
        })
    )


class PerfilForm(forms.Form):
    nombres = forms.CharField(max_length=100)
    apellidos = forms.CharField(max_length=100)
    materia = forms.CharField(max_length=100, required=False)

    def __init__(self, *args, **kwargs):
        self.es_docente = kwargs.pop('es_docente', False)
        super().__init__(*args, **kwargs)
        if not self.es_docente:
            del self.fields['materia']
        for field in self.fields.values():
            field.widget.attrs.update({'class': 'form-control'})


class CambiarPasswordForm(forms.Form):
    password_actual = forms.CharField(label='Contraseña actual', widget=forms.PasswordInput)
    password_nuevo = forms.CharField(label='Nueva contraseña', min_length=6, widget=forms.PasswordInput)
    confirmacion = forms.CharField(label='Confirmar contraseña', widget=forms.PasswordInput)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.widget.attrs.update({'class': 'form-control'})
