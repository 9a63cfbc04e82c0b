from django.contrib.auth.hashers import make_password
from django.test import TestCase
from django.urls import reverse

from comportamiento import services
from comportamiento.models import Conducta, Observacion, RegistroConducta, TipoGravedad
from estudiantes.models import Estudiante
from usuarios.models import Docente


class DocenteViewsTests(TestCase):
    def setUp(self):
        self.leve, _ = TipoGravedad.objects.get_or_create(
            nombre_gravedad=TipoGravedad.LEVE, defaults={'puntos': 1}
        )
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("clave123")
        )
        self.estudiante = Estudiante.objects.create(
            nombres="Ana", apellidos="Pérez", usuario="ana", password="x", grado="5", seccion="A"
        )
        self.tardanza = Conducta.objects.create(nombre_conducta="Tardanza", gravedad=self.leve)
        self.inactiva = Conducta.objects.create(nombre_conducta="Antigua", gravedad=self.leve, activo=False)

        self.client.post(reverse('usuarios:login'), {'usuario': 'lgomez', 'password': 'clave123'})

    def test_registrar_falta(self):
        response = self.client.post(reverse('docentes:registrar_falta'), {
            'estudiante': self.estudiante.id,
            'conducta': self.tardanza.id,
            'observaciones': 'Llegó 20 minutos tarde',
            'comentarios': '',
            'evidencia_url': '',
        })
        self.assertRedirects(response, reverse('docentes:historial'))

        registro = RegistroConducta.objects.get()
        self.assertEqual(registro.docente, self.docente)
        self.assertEqual(registro.acciones_tomadas, 'Llegó 20 minutos tarde')
        self.assertEqual(registro.estado, RegistroConducta.ACTIVO)

    def test_evidencia_sin_esquema_usa_https(self):
        self.client.post(reverse('docentes:registrar_falta'), {
            'estudiante': self.estudiante.id,
            'conducta': self.tardanza.id,
            'observaciones': '',
            'evidencia_url': 'fotos.colegio.edu/incidente1.jpg',
        })
        self.assertEqual(RegistroConducta.objects.get().evidencia_url, 'https://fotos.colegio.edu/incidente1.jpg')

    def test_conducta_inactiva_no_se_puede_registrar(self):
        response = self.client.post(reverse('docentes:registrar_falta'), {
            'estudiante': self.estudiante.id,
            'conducta': self.inactiva.id,
            'observaciones': '',
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn('conducta', response.context['form'].errors)
        self.assertFalse(RegistroConducta.objects.exists())

    def test_registrar_observacion(self):
        response = self.client.post(reverse('docentes:registrar_observacion'), {
            'estudiante': self.estudiante.id,
            'tipo_observacion': 'Positiva',
            'descripcion': 'Participación destacada',
        })
        self.assertRedirects(response, reverse('docentes:historial'))
        self.assertEqual(Observacion.objects.get().docente, self.docente)

    def test_historial_solo_muestra_registros_propios(self):
        otro = Docente.objects.create(nombres="Otro", apellidos="Docente", usuario="otro", password="x")
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        services.registrar_observacion(self.estudiante.id, otro.id, "Negativa", "No trajo tareas")
        services.registrar_observacion(self.estudiante.id, self.docente.id, "Positiva", "Buen trabajo")

        response = self.client.get(reverse('docentes:historial'))

        items = response.context['historial_items']
        self.assertEqual(len(items), 2)
        self.assertEqual({item.tipo for item in items}, {'incidente', 'observacion'})

    def test_listado_de_estudiantes_con_conteos(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        response = self.client.get(reverse('docentes:estudiantes'))
        estudiante = response.context['estudiantes'][0]
        self.assertEqual(estudiante.total_incidentes, 1)
        self.assertEqual(estudiante.total_observaciones, 0)

    def test_estudiante_no_accede(self):
        Estudiante.objects.filter(pk=self.estudiante.pk).update(password=make_password("clave123"))
        self.client.post(reverse('usuarios:logout'))
        self.client.post(reverse('usuarios:login'), {'usuario': 'ana', 'password': 'clave123'})
        response = self.client.get(reverse('docentes:registrar_falta'))
        self.assertRedirects(response, reverse('usuarios:access_denied'), target_status_code=403)
