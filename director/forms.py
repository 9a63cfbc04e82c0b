# director/forms.py
from django import forms

from comportamiento.models import Conducta, TipoGravedad
from estudiantes.models import Estudiante
from usuarios.models import Docente


class PersonaFormMixin:
    """
    Agrega el campo de contraseña a los formularios de docentes y estudiantes.
    Es obligatoria al crear; al editar, vacía significa conservar la actual.
    """

    def _agregar_password(self):
        creando = self.instance.pk is None
        self.fields['password'] = forms.CharField(
            label='Contraseña',
            required=creando,
            min_length=6,
            widget=forms.PasswordInput(render_value=False),
            help_text='' if creando else 'Déjala vacía para conservar la contraseña actual.',
        )

    def _aplicar_estilos(self):
        for field in self.fields.values():
            field.widget.attrs.update({'class': 'form-control'})

    def save(self, commit=True):
        persona = super().save(commit=False)
        password = self.cleaned_data.get('password')
        if password:
            persona.set_password(password)
        if commit:
            persona.save()
        return persona


class DocenteForm(PersonaFormMixin, forms.ModelForm):
    class Meta:
        model = Docente
        fields = ['nombres', 'apellidos', 'materia', 'usuario']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._agregar_password()
        self._aplicar_estilos()


class EstudianteForm(PersonaFormMixin, forms.ModelForm):
    class Meta:
        model = Estudiante
        fields = ['nombres', 'apellidos', 'grado', 'seccion', 'fecha_nacimiento', 'usuario']
        widgets = {
            'fecha_nacimiento': forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._agregar_password()
        self._aplicar_estilos()


class ConductaForm(forms.Form):
    nombre_conducta = forms.CharField(label='Nombre', max_length=100)
    descripcion = forms.CharField(label='Descripción', required=False, widget=forms.Textarea(attrs={'rows': 3}))
    gravedad = forms.ModelChoiceField(label='Gravedad', queryset=TipoGravedad.objects.all())
    activo = forms.BooleanField(label='Activa', required=False, initial=True)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name, field in self.fields.items():
            if name == 'gravedad':
                field.widget.attrs.update({'class': 'form-select'})
            elif name == 'activo':
                field.widget.attrs.update({'class': 'form-check-input'})
            else:
                field.widget.attrs.update({'class': 'form-control'})

    @classmethod
    def desde_conducta(cls, conducta: Conducta):
        return cls(initial={
            'nombre_conducta': conducta.nombre_conducta,
            'descripcion': conducta.descripcion,
            'gravedad': conducta.gravedad_id,
            'activo': conducta.activo,
        })
