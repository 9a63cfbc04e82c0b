from io import StringIO

from django.contrib.auth.hashers import make_password
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse

from comportamiento.exceptions import EntidadNoEncontrada
from comportamiento.models import Conducta, RegistroConducta, TipoGravedad
from estudiantes.models import Estudiante

from .exceptions import PasswordIncorrecto, PasswordsNoCoinciden, PersonaConRegistros
from .models import Director, Docente
from .services import authenticate, cambiar_password, eliminar_persona, get_user_role


class AuthenticateTests(TestCase):
    def setUp(self):
        self.director = Director.objects.create(
            nombres="Marta", apellidos="Ruiz", usuario="mruiz", password=make_password("clave123")
        )
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("clave123")
        )
        self.estudiante = Estudiante.objects.create(
            nombres="Ana", apellidos="Pérez", usuario="ana", password=make_password("clave123"), grado="5"
        )

    def test_autentica_cada_rol(self):
        self.assertEqual(get_user_role(authenticate("mruiz", "clave123")), 'DIRECTOR')
        self.assertEqual(get_user_role(authenticate("lgomez", "clave123")), 'DOCENTE')
        self.assertEqual(get_user_role(authenticate("ana", "clave123")), 'ESTUDIANTE')

    def test_director_tiene_prioridad_sobre_docente(self):
        Docente.objects.create(
            nombres="Otro", apellidos="Docente", usuario="mruiz", password=make_password("clave123")
        )
        self.assertIsInstance(authenticate("mruiz", "clave123"), Director)

    def test_password_incorrecto_en_tabla_anterior_continua_la_busqueda(self):
        Docente.objects.create(
            nombres="Homónimo", apellidos="Docente", usuario="mruiz", password=make_password("otra456")
        )
        self.assertIsInstance(authenticate("mruiz", "otra456"), Docente)

    def test_credenciales_invalidas(self):
        self.assertIsNone(authenticate("mruiz", "incorrecta"))
        self.assertIsNone(authenticate("nadie", "clave123"))

    def test_password_legado_se_rehashea(self):
        legado = Docente.objects.create(nombres="Eva", apellidos="Sol", usuario="eva", password="plano1")
        self.assertTrue(legado.tiene_password_legado)

        self.assertEqual(authenticate("eva", "plano1"), legado)

        legado.refresh_from_db()
        self.assertFalse(legado.tiene_password_legado)
        self.assertNotEqual(legado.password, "plano1")
        self.assertTrue(legado.check_password("plano1"))

    def test_password_legado_incorrecto_no_se_modifica(self):
        Docente.objects.create(nombres="Eva", apellidos="Sol", usuario="eva", password="plano1")
        self.assertIsNone(authenticate("eva", "plano2"))
        self.assertEqual(Docente.objects.get(usuario="eva").password, "plano1")


class CambiarPasswordServiceTests(TestCase):
    def setUp(self):
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("clave123")
        )

    def test_password_actual_incorrecto(self):
        with self.assertRaises(PasswordIncorrecto):
            cambiar_password(self.docente, "mala", "nueva123", "nueva123")

    def test_confirmacion_distinta(self):
        with self.assertRaises(PasswordsNoCoinciden):
            cambiar_password(self.docente, "clave123", "nueva123", "nueva124")

    def test_cambio_exitoso(self):
        cambiar_password(self.docente, "clave123", "nueva123", "nueva123")
        self.docente.refresh_from_db()
        self.assertTrue(self.docente.check_password("nueva123"))


class EliminarPersonaTests(TestCase):

    def test_persona_con_registros_no_se_elimina(self):
        gravedad, _ = TipoGravedad.objects.get_or_create(nombre_gravedad=TipoGravedad.LEVE, defaults={'puntos': 1})
        docente = Docente.objects.create(nombres="Luis", apellidos="Gómez", usuario="lgomez", password="x")
        estudiante = Estudiante.objects.create(nombres="Ana", apellidos="Pérez", usuario="ana", password="x", grado="5")
        conducta = Conducta.objects.create(nombre_conducta="Tardanza", gravedad=gravedad)
        RegistroConducta.objects.create(estudiante=estudiante, docente=docente, conducta=conducta)

        with self.assertRaises(PersonaConRegistros):
            eliminar_persona(Docente, docente.pk)
        self.assertTrue(Docente.objects.filter(pk=docente.pk).exists())

    def test_persona_inexistente(self):
        with self.assertRaises(EntidadNoEncontrada):
            eliminar_persona(Estudiante, 9999)


class LoginViewTests(TestCase):
    def setUp(self):
        self.director = Director.objects.create(
            nombres="Marta", apellidos="Ruiz", usuario="mruiz", password=make_password("clave123")
        )
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("clave123")
        )

    def test_login_redirige_al_panel_del_rol(self):
        response = self.client.post(reverse('usuarios:login'), {'usuario': 'lgomez', 'password': 'clave123'})
        self.assertRedirects(response, reverse('docentes:dashboard'))
        self.assertEqual(self.client.session['principal_rol'], 'DOCENTE')

        response = self.client.get(reverse('dashboard'))
        self.assertRedirects(response, reverse('docentes:dashboard'))

    def test_login_fallido_muestra_error(self):
        response = self.client.post(reverse('usuarios:login'), {'usuario': 'mruiz', 'password': 'mala'})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Credenciales inválidas")
        self.assertNotIn('principal_id', self.client.session)

    def test_logout_limpia_la_sesion(self):
        self.client.post(reverse('usuarios:login'), {'usuario': 'mruiz', 'password': 'clave123'})
        response = self.client.post(reverse('usuarios:logout'))
        self.assertRedirects(response, reverse('usuarios:login'))
        self.assertNotIn('principal_id', self.client.session)

    def test_sin_sesion_redirige_al_login(self):
        response = self.client.get(reverse('director:dashboard'))
        self.assertRedirects(response, reverse('usuarios:login'))

    def test_rol_equivocado_va_a_acceso_denegado(self):
        self.client.post(reverse('usuarios:login'), {'usuario': 'lgomez', 'password': 'clave123'})
        response = self.client.get(reverse('director:dashboard'))
        self.assertRedirects(response, reverse('usuarios:access_denied'), target_status_code=403)


class PerfilViewTests(TestCase):
    def setUp(self):
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("clave123"), materia="Física"
        )
        self.client.post(reverse('usuarios:login'), {'usuario': 'lgomez', 'password': 'clave123'})

    def test_editar_perfil(self):
        response = self.client.post(reverse('usuarios:perfil_editar'), {
            'nombres': 'Luis Alberto', 'apellidos': 'Gómez', 'materia': 'Química',
        })
        self.assertRedirects(response, reverse('usuarios:perfil'))
        self.docente.refresh_from_db()
        self.assertEqual(self.docente.nombres, 'Luis Alberto')
        self.assertEqual(self.docente.materia, 'Química')

    def test_cambiar_password_cierra_la_sesion(self):
        response = self.client.post(reverse('usuarios:cambiar_password'), {
            'password_actual': 'clave123', 'password_nuevo': 'nueva123', 'confirmacion': 'nueva123',
        })
        self.assertRedirects(response, reverse('usuarios:login'))
        self.assertNotIn('principal_id', self.client.session)
        self.docente.refresh_from_db()
        self.assertTrue(self.docente.check_password('nueva123'))

    def test_cambiar_password_con_confirmacion_distinta(self):
        response = self.client.post(reverse('usuarios:cambiar_password'), {
            'password_actual': 'clave123', 'password_nuevo': 'nueva123', 'confirmacion': 'otra1234',
        })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "no coinciden")
        self.assertIn('principal_id', self.client.session)


class HashearPasswordsCommandTests(TestCase):

    def test_convierte_passwords_en_texto_plano(self):
        Director.objects.create(nombres="Marta", apellidos="Ruiz", usuario="mruiz", password="plano1")
        Docente.objects.create(nombres="Luis", apellidos="Gómez", usuario="lgomez", password=make_password("x"))

        out = StringIO()
        call_command('hashear_passwords', '--solo-reporte', stdout=out)
        self.assertIn('1 contraseñas pendientes', out.getvalue())
        self.assertEqual(Director.objects.get().password, "plano1")

        out = StringIO()
        call_command('hashear_passwords', stdout=out)
        self.assertIn('1 contraseñas convertidas', out.getvalue())
        director = Director.objects.get()
        self.assertFalse(director.tiene_password_legado)
        self.assertTrue(director.check_password("plano1"))
