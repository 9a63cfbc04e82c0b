from datetime import date

from django.contrib.auth.hashers import make_password
from django.test import TestCase
from django.urls import reverse

from comportamiento import services
from comportamiento.models import Conducta, Observacion, RegistroConducta, TipoGravedad
from estudiantes.models import Estudiante
from usuarios.models import Director, Docente


class DirectorBaseTestCase(TestCase):
    def setUp(self):
        self.leve, _ = TipoGravedad.objects.get_or_create(
            nombre_gravedad=TipoGravedad.LEVE, defaults={'puntos': 1}
        )
        self.grave, _ = TipoGravedad.objects.get_or_create(
            nombre_gravedad=TipoGravedad.GRAVE, defaults={'puntos': 3}
        )
        self.director = Director.objects.create(
            nombres="Marta", apellidos="Ruiz", usuario="mruiz", password=make_password("clave123")
        )
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("clave123")
        )
        self.estudiante = Estudiante.objects.create(
            nombres="Ana", apellidos="Pérez", usuario="ana", password="x", grado="5", seccion="A"
        )
        self.otro_estudiante = Estudiante.objects.create(
            nombres="Juan", apellidos="Díaz", usuario="juan", password="x", grado="7", seccion="B"
        )
        self.tardanza = Conducta.objects.create(nombre_conducta="Tardanza", gravedad=self.leve)
        self.pelea = Conducta.objects.create(nombre_conducta="Pelea", gravedad=self.grave)

        self.client.post(reverse('usuarios:login'), {'usuario': 'mruiz', 'password': 'clave123'})


class PanelDirectorTests(DirectorBaseTestCase):

    def test_dashboard(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        response = self.client.get(reverse('director:dashboard'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['total_estudiantes'], 2)
        self.assertEqual(response.context['incidentes_no_leidos'], 1)

    def test_docente_no_accede_al_panel_del_director(self):
        self.client.post(reverse('usuarios:logout'))
        self.client.post(reverse('usuarios:login'), {'usuario': 'lgomez', 'password': 'clave123'})
        response = self.client.get(reverse('director:incidentes'))
        self.assertRedirects(response, reverse('usuarios:access_denied'), target_status_code=403)


class IncidentesDirectorTests(DirectorBaseTestCase):

    def setUp(self):
        super().setUp()
        self.leve_registro = services.registrar_incidente(
            self.estudiante.id, self.tardanza.id, self.docente.id, "Llegó tarde"
        )
        self.grave_registro = services.registrar_incidente(
            self.otro_estudiante.id, self.pelea.id, self.docente.id, "Pelea en el recreo"
        )

    def test_listado_con_filtros(self):
        response = self.client.get(reverse('director:incidentes'), {'gravedad': 'GRAVE'})
        self.assertEqual(list(response.context['incidentes']), [self.grave_registro])
        self.assertEqual(response.context['total'], 2)

        response = self.client.get(reverse('director:incidentes'), {'grado': '5'})
        self.assertEqual(list(response.context['incidentes']), [self.leve_registro])

    def test_filtro_con_fecha_invalida_se_ignora(self):
        response = self.client.get(reverse('director:incidentes'), {'fecha_inicio': '2024-13-45'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context['incidentes']), 2)

    def test_detalle_marca_como_leido(self):
        response = self.client.get(reverse('director:incidente_detalle', args=[self.leve_registro.id]))
        self.assertEqual(response.status_code, 200)
        self.leve_registro.refresh_from_db()
        self.assertTrue(self.leve_registro.leido)
        self.assertIsNotNone(self.leve_registro.fecha_lectura)

    def test_detalle_inexistente_redirige_con_mensaje(self):
        response = self.client.get(reverse('director:incidente_detalle', args=[9999]), follow=True)
        self.assertRedirects(response, reverse('director:incidentes'))
        self.assertContains(response, "Incidente no encontrado.")

    def test_detalle_ya_leido_conserva_fecha_de_lectura(self):
        RegistroConducta.objects.filter(pk=self.leve_registro.id).update(
            leido=True, fecha_lectura=date(2024, 1, 1)
        )
        response = self.client.get(reverse('director:incidente_detalle', args=[self.leve_registro.id]))
        self.assertEqual(response.status_code, 200)
        self.leve_registro.refresh_from_db()
        self.assertEqual(self.leve_registro.fecha_lectura, date(2024, 1, 1))

    def test_resolver_incidente(self):
        response = self.client.post(reverse('director:incidente_resolver', args=[self.grave_registro.id]))
        self.assertRedirects(response, reverse('director:incidentes'))
        self.grave_registro.refresh_from_db()
        self.assertEqual(self.grave_registro.estado, RegistroConducta.RESUELTO)

    def test_exportar_excel(self):
        response = self.client.get(reverse('director:reportes_exportar_excel'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response['Content-Type'],
            'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        )
        self.assertIn('attachment;', response['Content-Disposition'])

    def test_observador_pdf(self):
        response = self.client.get(reverse('director:estudiante_observador', args=[self.estudiante.id]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_reportes(self):
        response = self.client.get(reverse('director:reportes'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['ratio_incidentes'], 1.0)


class ObservacionesDirectorTests(DirectorBaseTestCase):

    def setUp(self):
        super().setUp()
        self.observacion = services.registrar_observacion(
            self.estudiante.id, self.docente.id, "Positiva", "Ayudó a organizar el salón"
        )

    def test_detalle_marca_como_leida(self):
        self.client.get(reverse('director:observacion_detalle', args=[self.observacion.id]))
        self.observacion.refresh_from_db()
        self.assertTrue(self.observacion.leido)

    def test_detalle_ya_leida_conserva_fecha_de_lectura(self):
        Observacion.objects.filter(pk=self.observacion.id).update(leido=True, fecha_lectura=date(2024, 1, 1))
        self.client.get(reverse('director:observacion_detalle', args=[self.observacion.id]))
        self.observacion.refresh_from_db()
        self.assertEqual(self.observacion.fecha_lectura, date(2024, 1, 1))

    def test_detalle_inexistente_redirige_con_mensaje(self):
        response = self.client.get(reverse('director:observacion_detalle', args=[9999]), follow=True)
        self.assertRedirects(response, reverse('director:observaciones'))
        self.assertContains(response, "Observación no encontrada.")

    def test_eliminar_observacion(self):
        response = self.client.post(reverse('director:observacion_eliminar', args=[self.observacion.id]))
        self.assertRedirects(response, reverse('director:observaciones'))
        self.assertFalse(Observacion.objects.exists())


class GestionDirectorTests(DirectorBaseTestCase):

    def test_crear_docente_hashea_password(self):
        response = self.client.post(reverse('director:docente_crear'), {
            'nombres': 'Carla', 'apellidos': 'Mora', 'materia': 'Inglés',
            'usuario': 'cmora', 'password': 'segura123',
        })
        self.assertRedirects(response, reverse('director:gestion_docentes'))
        docente = Docente.objects.get(usuario='cmora')
        self.assertNotEqual(docente.password, 'segura123')
        self.assertTrue(docente.check_password('segura123'))

    def test_editar_estudiante_sin_password_conserva_la_actual(self):
        self.estudiante.set_password('original1')
        self.estudiante.save()
        response = self.client.post(reverse('director:estudiante_editar', args=[self.estudiante.id]), {
            'nombres': 'Ana María', 'apellidos': 'Pérez', 'grado': '6', 'seccion': 'A',
            'fecha_nacimiento': '', 'usuario': 'ana', 'password': '',
        })
        self.assertRedirects(response, reverse('director:gestion_estudiantes'))
        self.estudiante.refresh_from_db()
        self.assertEqual(self.estudiante.grado, '6')
        self.assertTrue(self.estudiante.check_password('original1'))

    def test_eliminar_estudiante_con_registros_muestra_error(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        response = self.client.post(
            reverse('director:estudiante_eliminar', args=[self.estudiante.id]), follow=True
        )
        self.assertTrue(Estudiante.objects.filter(pk=self.estudiante.id).exists())
        self.assertContains(response, "tiene incidentes u observaciones asociados")

    def test_crear_conducta(self):
        response = self.client.post(reverse('director:conducta_crear'), {
            'nombre_conducta': 'Uso de celular', 'descripcion': '', 'gravedad': self.leve.id, 'activo': 'on',
        })
        self.assertRedirects(response, reverse('director:gestion_conductas'))
        self.assertTrue(Conducta.objects.filter(nombre_conducta='Uso de celular', activo=True).exists())

    def test_eliminar_conducta_en_uso_muestra_error(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        response = self.client.post(
            reverse('director:conducta_eliminar', args=[self.tardanza.id]), follow=True
        )
        self.assertTrue(Conducta.objects.filter(pk=self.tardanza.id).exists())
        self.assertContains(response, "tiene registros asociados")

    def test_desactivar_conducta(self):
        self.client.post(reverse('director:conducta_desactivar', args=[self.pelea.id]))
        self.pelea.refresh_from_db()
        self.assertFalse(self.pelea.activo)
