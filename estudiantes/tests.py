from django.contrib.auth.hashers import make_password
from django.test import TestCase
from django.urls import reverse

from comportamiento import services
from comportamiento.models import Conducta, TipoGravedad
from usuarios.models import Docente

from .models import Estudiante


class EstudianteQuerySetTests(TestCase):
    def setUp(self):
        Estudiante.objects.create(nombres="Ana", apellidos="Pérez", usuario="ana", password="x", grado="5", seccion="A")
        Estudiante.objects.create(nombres="Juan", apellidos="Díaz", usuario="juan", password="x", grado="5", seccion="B")
        Estudiante.objects.create(nombres="Eva", apellidos="Sol", usuario="eva", password="x", grado="7", seccion="A")

    def test_filtros_por_grado_y_seccion(self):
        self.assertEqual(Estudiante.objects.por_grado("5").count(), 2)
        self.assertEqual(Estudiante.objects.por_grado_y_seccion("5", "B").get().usuario, "juan")
        self.assertEqual(Estudiante.objects.grados(), ["5", "7"])
        self.assertEqual(Estudiante.objects.secciones(), ["A", "B"])

    def test_buscar(self):
        self.assertEqual(Estudiante.objects.buscar("díaz").get().usuario, "juan")

    def test_grado_seccion(self):
        self.assertEqual(Estudiante.objects.get(usuario="ana").grado_seccion, "5° A")


class EstudianteViewsTests(TestCase):
    def setUp(self):
        leve, _ = TipoGravedad.objects.get_or_create(nombre_gravedad=TipoGravedad.LEVE, defaults={'puntos': 1})
        grave, _ = TipoGravedad.objects.get_or_create(nombre_gravedad=TipoGravedad.GRAVE, defaults={'puntos': 3})
        self.docente = Docente.objects.create(nombres="Luis", apellidos="Gómez", usuario="lgomez", password="x")
        self.estudiante = Estudiante.objects.create(
            nombres="Ana", apellidos="Pérez", usuario="ana", password=make_password("clave123"), grado="5"
        )
        self.otro = Estudiante.objects.create(nombres="Juan", apellidos="Díaz", usuario="juan", password="x", grado="5")

        tardanza = Conducta.objects.create(nombre_conducta="Tardanza", gravedad=leve)
        uniforme = Conducta.objects.create(nombre_conducta="Uniforme", gravedad=leve)
        pelea = Conducta.objects.create(nombre_conducta="Pelea", gravedad=grave)
        for conducta in (tardanza, uniforme, pelea):
            services.registrar_incidente(self.estudiante.id, conducta.id, self.docente.id, "")
        services.registrar_incidente(self.otro.id, pelea.id, self.docente.id, "")

        services.registrar_observacion(self.estudiante.id, self.docente.id, "POSITIVA", "Ayudó en clase")
        services.registrar_observacion(self.estudiante.id, self.docente.id, "Informativa", "Cambio de puesto")

        self.client.post(reverse('usuarios:login'), {'usuario': 'ana', 'password': 'clave123'})

    def test_dashboard_solo_cuenta_lo_propio(self):
        response = self.client.get(reverse('estudiantes:dashboard'))
        self.assertEqual(response.context['total_incidentes'], 3)
        self.assertEqual(response.context['total_observaciones'], 2)

    def test_conductas_agrupadas_por_gravedad(self):
        response = self.client.get(reverse('estudiantes:conductas'))
        self.assertEqual(len(response.context['conductas_leves']), 2)
        self.assertEqual(len(response.context['conductas_graves']), 1)
        self.assertEqual(len(response.context['conductas_muy_graves']), 0)

    def test_observaciones_agrupadas_por_tipo(self):
        response = self.client.get(reverse('estudiantes:observaciones'))
        self.assertEqual(len(response.context['observaciones_positivas']), 1)
        self.assertEqual(len(response.context['observaciones_negativas']), 0)
        self.assertEqual(len(response.context['otras_observaciones']), 1)

    def test_historial(self):
        response = self.client.get(reverse('estudiantes:historial'))
        self.assertEqual(len(response.context['historial_items']), 5)

    def test_observador_pdf(self):
        response = self.client.get(reverse('estudiantes:observador'))
        self.assertEqual(response['Content-Type'], 'application/pdf')

    def test_sin_sesion_redirige_al_login(self):
        self.client.post(reverse('usuarios:logout'))
        response = self.client.get(reverse('estudiantes:historial'))
        self.assertRedirects(response, reverse('usuarios:login'))
