# docentes/forms.py
from django import forms

from comportamiento.models import Conducta, Observacion
from estudiantes.models import Estudiante


class RegistrarFaltaForm(forms.Form):
    estudiante = forms.ModelChoiceField(
        queryset=Estudiante.objects.order_by('grado', 'seccion', 'apellidos', 'nombres'),
        empty_label='Seleccione un estudiante',
    )
    conducta = forms.ModelChoiceField(
        queryset=Conducta.objects.activas().select_related('gravedad'),
        empty_label='Seleccione una conducta',
    )
    observaciones = forms.CharField(
        label='Observaciones / acciones tomadas',
        required=False,
        widget=forms.Textarea(attrs={'rows': 4}),
    )
    comentarios = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}))
    evidencia_url = forms.URLField(label='Enlace a evidencia', required=False, assume_scheme='https')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name, field in self.fields.items():
            if name in ('estudiante', 'conducta'):
                field.widget.attrs.update({'class': 'form-select'})
            else:
                field.widget.attrs.update({'class': 'form-control'})


class RegistrarObservacionForm(forms.Form):
    estudiante = forms.ModelChoiceField(
        queryset=Estudiante.objects.order_by('grado', 'seccion', 'apellidos', 'nombres'),
        empty_label='Seleccione un estudiante',
    )
    tipo_observacion = forms.CharField(
        label='Tipo de observación',
        max_length=50,
        widget=forms.TextInput(attrs={'list': 'tipos-observacion'}),
    )
    descripcion = forms.CharField(label='Descripción', widget=forms.Textarea(attrs={'rows': 4}))

    tipos_sugeridos = [valor for valor, _ in Observacion.TIPOS_SUGERIDOS]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['estudiante'].widget.attrs.update({'class': 'form-select'})
        self.fields['tipo_observacion'].widget.attrs.update({'class': 'form-control'})
        self.fields['descripcion'].widget.attrs.update({'class': 'form-control'})
