from django.contrib.auth.hashers import make_password
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from comportamiento import services
from comportamiento.models import Conducta, Observacion, RegistroConducta, TipoGravedad
from estudiantes.models import Estudiante
from usuarios.models import Director, Docente


class ApiBaseTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.leve, _ = TipoGravedad.objects.get_or_create(
            nombre_gravedad=TipoGravedad.LEVE, defaults={'puntos': 1}
        )
        self.director = Director.objects.create(
            nombres="Marta", apellidos="Ruiz", usuario="mruiz", password=make_password("clave123")
        )
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("clave123")
        )
        self.estudiante = Estudiante.objects.create(
            nombres="Ana", apellidos="Pérez", usuario="ana", password=make_password("clave123"),
            grado="5", seccion="A",
        )
        self.tardanza = Conducta.objects.create(nombre_conducta="Tardanza", gravedad=self.leve)

    def login(self, usuario):
        response = self.client.post("/auth/login/", {"usuario": usuario, "password": "clave123"})
        self.assertEqual(response.status_code, 302)


class PermisosApiTests(ApiBaseTestCase):

    def test_sin_sesion_es_rechazado(self):
        response = self.client.get("/api/conductas")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_estudiante_puede_leer_pero_no_escribir(self):
        self.login("ana")
        response = self.client.get("/api/conductas")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(
            "/api/registro-conductas",
            {"estudianteId": self.estudiante.id, "conductaId": self.tardanza.id, "docenteId": self.docente.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_docente_no_modifica_el_catalogo(self):
        self.login("lgomez")
        response = self.client.post(
            "/api/conductas", {"nombreConducta": "Grafiti", "idGravedad": self.leve.id}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class ConductaApiTests(ApiBaseTestCase):

    def setUp(self):
        super().setUp()
        self.login("mruiz")

    def test_crear_conducta(self):
        response = self.client.post(
            "/api/conductas",
            {"nombreConducta": "Grafiti", "descripcion": "Rayar paredes", "idGravedad": self.leve.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["nombreConducta"], "Grafiti")
        self.assertEqual(response.data["gravedad"]["nombreGravedad"], "leve")
        self.assertTrue(response.data["activo"])

    def test_crear_conducta_con_gravedad_inexistente(self):
        response = self.client.post(
            "/api/conductas", {"nombreConducta": "Grafiti", "idGravedad": 9999}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Conducta.objects.filter(nombre_conducta="Grafiti").exists())

    def test_por_gravedad(self):
        response = self.client.get(f"/api/conductas/gravedad/{self.leve.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([c["idConducta"] for c in response.data], [self.tardanza.id])

    def test_eliminar_conducta_en_uso(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        response = self.client.delete(f"/api/conductas/{self.tardanza.id}")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("registros asociados", response.data["detail"])

    def test_eliminar_conducta_sin_uso(self):
        response = self.client.delete(f"/api/conductas/{self.tardanza.id}")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_conducta_inexistente(self):
        response = self.client.get("/api/conductas/9999")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class RegistroConductaApiTests(ApiBaseTestCase):

    def setUp(self):
        super().setUp()
        self.login("lgomez")

    def test_crear_registro(self):
        response = self.client.post(
            "/api/registro-conductas",
            {
                "estudianteId": self.estudiante.id,
                "conductaId": self.tardanza.id,
                "docenteId": self.docente.id,
                "observaciones": "Llegó tarde",
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["estudiante"]["grado"], "5°")
        self.assertEqual(response.data["docenteNombreCompleto"], "Luis Gómez")
        self.assertEqual(response.data["conducta"], {"nombreConducta": "Tardanza", "gravedad": "leve"})
        self.assertEqual(response.data["observaciones"], "Llegó tarde")
        self.assertEqual(response.data["estado"], RegistroConducta.ACTIVO)
        self.assertFalse(response.data["leido"])
        self.assertIsNone(response.data["fechaLectura"])

    def test_crear_registro_estudiante_inexistente(self):
        response = self.client.post(
            "/api/registro-conductas",
            {"estudianteId": 9999, "conductaId": self.tardanza.id, "docenteId": self.docente.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Estudiante no encontrado")
        self.assertFalse(RegistroConducta.objects.exists())

    def test_marcar_leido(self):
        registro = services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        response = self.client.patch(f"/api/registro-conductas/{registro.id}/marcar-leido")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["leido"])

        response = self.client.patch("/api/registro-conductas/9999/marcar-leido")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_consultas_por_estudiante_y_fecha(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        hoy = timezone.localdate().isoformat()

        response = self.client.get(f"/api/registro-conductas/estudiante/{self.estudiante.id}")
        self.assertEqual(len(response.data), 1)

        response = self.client.get("/api/registro-conductas/fecha", {"fecha": hoy})
        self.assertEqual(len(response.data), 1)

        response = self.client.get(
            "/api/registro-conductas/rango-fechas", {"fechaInicio": hoy, "fechaFin": hoy}
        )
        self.assertEqual(len(response.data), 1)

    def test_fecha_invalida(self):
        response = self.client.get("/api/registro-conductas/fecha", {"fecha": "10/05/2024"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_eliminar_registro(self):
        registro = services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        response = self.client.delete(f"/api/registro-conductas/{registro.id}")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(RegistroConducta.objects.exists())


class ObservacionApiTests(ApiBaseTestCase):

    def setUp(self):
        super().setUp()
        self.login("lgomez")

    def test_crear_y_marcar_leida(self):
        response = self.client.post(
            "/api/observaciones",
            {
                "estudianteId": self.estudiante.id,
                "docenteId": self.docente.id,
                "tipoObservacion": "Positiva",
                "descripcion": "Excelente exposición",
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["docenteId"], self.docente.id)
        self.assertEqual(response.data["fecha"], timezone.localdate().isoformat())

        observacion_id = response.data["idObservacion"]
        response = self.client.patch(f"/api/observaciones/{observacion_id}/marcar-leida")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(Observacion.objects.get(pk=observacion_id).leido)

    def test_por_docente(self):
        services.registrar_observacion(self.estudiante.id, self.docente.id, "Negativa", "No trajo materiales")
        response = self.client.get(f"/api/observaciones/docente/{self.docente.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["tipoObservacion"], "Negativa")
