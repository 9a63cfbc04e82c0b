from datetime import date, timedelta
from io import StringIO
from types import SimpleNamespace

from django.core.management import call_command
from django.test import TestCase
from django.utils import timezone

from estudiantes.models import Estudiante
from usuarios.models import Docente

from . import services
from .exceptions import ConductaEnUso, EntidadNoEncontrada, RelacionInvalida
from .models import Conducta, Observacion, RegistroConducta, TipoGravedad
from .observador import ObservadorPDF
from .signals import sembrar_gravedades


class ComportamientoBaseTestCase(TestCase):
    def setUp(self):
        self.leve, _ = TipoGravedad.objects.get_or_create(
            nombre_gravedad=TipoGravedad.LEVE, defaults={'puntos': 1}
        )
        self.grave, _ = TipoGravedad.objects.get_or_create(
            nombre_gravedad=TipoGravedad.GRAVE, defaults={'puntos': 3}
        )
        self.muy_grave, _ = TipoGravedad.objects.get_or_create(
            nombre_gravedad=TipoGravedad.MUY_GRAVE, defaults={'puntos': 5}
        )

        self.estudiante = Estudiante.objects.create(
            nombres="Ana", apellidos="Pérez", usuario="ana", password="x", grado="5", seccion="A"
        )
        self.docente = Docente.objects.create(
            nombres="Luis", apellidos="Gómez", usuario="lgomez", password="x", materia="Matemáticas"
        )
        self.tardanza = Conducta.objects.create(nombre_conducta="Tardanza", gravedad=self.leve)
        self.pelea = Conducta.objects.create(nombre_conducta="Pelea", gravedad=self.grave)


class RegistrarIncidenteTests(ComportamientoBaseTestCase):

    def test_registro_con_valores_por_defecto(self):
        registro = services.registrar_incidente(
            self.estudiante.id, self.tardanza.id, self.docente.id, "Llegó 15 minutos tarde"
        )

        registro.refresh_from_db()
        self.assertEqual(registro.fecha_registro, timezone.localdate())
        self.assertFalse(registro.leido)
        self.assertIsNone(registro.fecha_lectura)
        self.assertEqual(registro.estado, RegistroConducta.ACTIVO)
        self.assertEqual(registro.acciones_tomadas, "Llegó 15 minutos tarde")
        self.assertEqual(registro.observaciones, "Llegó 15 minutos tarde")

    def test_estudiante_inexistente_no_guarda_nada(self):
        with self.assertRaises(RelacionInvalida) as ctx:
            services.registrar_incidente(9999, self.tardanza.id, self.docente.id, "x")

        self.assertEqual(ctx.exception.mensaje, "Estudiante no encontrado")
        self.assertEqual(RegistroConducta.objects.count(), 0)

    def test_docente_y_conducta_inexistentes(self):
        with self.assertRaises(RelacionInvalida) as ctx:
            services.registrar_incidente(self.estudiante.id, self.tardanza.id, 9999, "x")
        self.assertEqual(ctx.exception.mensaje, "Docente no encontrado")

        with self.assertRaises(RelacionInvalida) as ctx:
            services.registrar_incidente(self.estudiante.id, 9999, self.docente.id, "x")
        self.assertEqual(ctx.exception.mensaje, "Conducta no encontrada")
        self.assertEqual(RegistroConducta.objects.count(), 0)


class EstadoIncidenteTests(ComportamientoBaseTestCase):

    def setUp(self):
        super().setUp()
        self.registro = services.registrar_incidente(
            self.estudiante.id, self.tardanza.id, self.docente.id, "Primera vez"
        )

    def test_marcar_leido_es_idempotente(self):
        primero = services.marcar_incidente_leido(self.registro.id)
        segundo = services.marcar_incidente_leido(self.registro.id)

        self.assertTrue(segundo.leido)
        self.assertEqual(primero.fecha_lectura, timezone.localdate())
        self.assertEqual(segundo.fecha_lectura, timezone.localdate())

    def test_marcar_leido_inexistente(self):
        with self.assertRaises(EntidadNoEncontrada):
            services.marcar_incidente_leido(9999)

    def test_cambiar_estado_solo_modifica_estado(self):
        services.cambiar_estado(self.registro.id, RegistroConducta.RESUELTO)

        registro = RegistroConducta.objects.get(pk=self.registro.id)
        self.assertEqual(registro.estado, RegistroConducta.RESUELTO)
        self.assertFalse(registro.leido)
        self.assertEqual(registro.acciones_tomadas, "Primera vez")
        self.assertEqual(registro.conducta, self.tardanza)

    def test_actualizar_incidente_reemplaza_relaciones(self):
        registro = services.actualizar_incidente(
            self.registro.id,
            self.estudiante.id,
            self.pelea.id,
            self.docente.id,
            "Se citó al acudiente",
            estado=RegistroConducta.RESUELTO,
        )
        self.assertEqual(registro.conducta, self.pelea)
        self.assertEqual(registro.acciones_tomadas, "Se citó al acudiente")
        self.assertEqual(registro.estado, RegistroConducta.RESUELTO)

    def test_eliminar_incidente(self):
        services.eliminar_incidente(self.registro.id)
        self.assertFalse(RegistroConducta.objects.exists())
        with self.assertRaises(EntidadNoEncontrada):
            services.eliminar_incidente(self.registro.id)


class ObservacionServiceTests(ComportamientoBaseTestCase):

    def test_registrar_observacion(self):
        observacion = services.registrar_observacion(
            self.estudiante.id, self.docente.id, "Positiva", "Ayudó a un compañero"
        )
        self.assertEqual(observacion.fecha, timezone.localdate())
        self.assertFalse(observacion.leido)

    def test_registrar_observacion_estudiante_inexistente(self):
        with self.assertRaises(RelacionInvalida):
            services.registrar_observacion(9999, self.docente.id, "Positiva", "x")
        self.assertEqual(Observacion.objects.count(), 0)

    def test_marcar_observacion_leida(self):
        observacion = services.registrar_observacion(self.estudiante.id, self.docente.id, "Neutral", "x")
        services.marcar_observacion_leida(observacion.id)
        observacion.refresh_from_db()
        self.assertTrue(observacion.leido)
        self.assertEqual(observacion.fecha_lectura, timezone.localdate())

    def test_clasificar_observaciones_sin_distinguir_mayusculas(self):
        observaciones = [
            SimpleNamespace(tipo_observacion="POSITIVA"),
            SimpleNamespace(tipo_observacion="Negativa"),
            SimpleNamespace(tipo_observacion="positiva"),
            SimpleNamespace(tipo_observacion="Neutral"),
        ]
        grupos = services.clasificar_observaciones(observaciones)

        self.assertEqual(len(grupos['positivas']), 2)
        self.assertEqual(len(grupos['negativas']), 1)
        self.assertEqual(len(grupos['otras']), 1)

    def test_queryset_filtra_por_tipo(self):
        services.registrar_observacion(self.estudiante.id, self.docente.id, "positiva", "a")
        services.registrar_observacion(self.estudiante.id, self.docente.id, "Negativa", "b")

        self.assertEqual(Observacion.objects.por_tipo("POSITIVA").count(), 1)
        self.assertEqual(Observacion.objects.negativas().count(), 1)


class CatalogoConductasTests(ComportamientoBaseTestCase):

    def test_crear_conducta_con_gravedad_inexistente(self):
        with self.assertRaises(RelacionInvalida):
            services.crear_conducta("Grafiti", "", 9999)

    def test_activar_y_desactivar(self):
        services.desactivar_conducta(self.tardanza.id)
        self.assertNotIn(self.tardanza, Conducta.objects.activas())
        services.activar_conducta(self.tardanza.id)
        self.assertIn(self.tardanza, Conducta.objects.activas())

    def test_eliminar_conducta_sin_registros(self):
        services.eliminar_conducta(self.pelea.id)
        self.assertFalse(Conducta.objects.filter(pk=self.pelea.id).exists())

    def test_eliminar_conducta_con_registros_se_rechaza(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "x")

        with self.assertRaises(ConductaEnUso):
            services.eliminar_conducta(self.tardanza.id)
        self.assertTrue(Conducta.objects.filter(pk=self.tardanza.id).exists())
        self.assertEqual(RegistroConducta.objects.count(), 1)

    def test_mas_utilizadas_y_no_utilizadas(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "x")
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "y")

        primera = Conducta.objects.mas_utilizadas().first()
        self.assertEqual(primera, self.tardanza)
        self.assertEqual(primera.total_registros, 2)
        self.assertEqual(list(Conducta.objects.no_utilizadas()), [self.pelea])


class ClasificarPorGravedadTests(ComportamientoBaseTestCase):

    def test_agrupa_por_nombre_de_gravedad(self):
        otra_leve = Conducta.objects.create(nombre_conducta="Uniforme incompleto", gravedad=self.leve)
        for conducta in (self.tardanza, otra_leve, self.pelea):
            services.registrar_incidente(self.estudiante.id, conducta.id, self.docente.id, "")

        grupos = services.clasificar_por_gravedad(
            RegistroConducta.objects.con_relaciones().por_estudiante(self.estudiante.id)
        )
        self.assertEqual(len(grupos['leve']), 2)
        self.assertEqual(len(grupos['grave']), 1)
        self.assertEqual(len(grupos['muygrave']), 0)

    def test_gravedad_desconocida_no_se_agrupa(self):
        extra = TipoGravedad.objects.create(nombre_gravedad="gravísima", puntos=10)
        conducta = Conducta.objects.create(nombre_conducta="Otra", gravedad=extra)
        services.registrar_incidente(self.estudiante.id, conducta.id, self.docente.id, "")

        grupos = services.clasificar_por_gravedad(RegistroConducta.objects.con_relaciones())
        self.assertEqual(sum(len(grupo) for grupo in grupos.values()), 0)


class HistorialTests(TestCase):

    def test_orden_descendente_con_fechas_nulas_al_final(self):
        hoy = date(2024, 5, 10)
        incidentes = [
            SimpleNamespace(fecha_registro=hoy - timedelta(days=2)),
            SimpleNamespace(fecha_registro=None),
        ]
        observaciones = [
            SimpleNamespace(fecha=hoy),
            SimpleNamespace(fecha=hoy - timedelta(days=5)),
        ]

        historial = services.construir_historial(incidentes, observaciones)

        self.assertEqual(
            [item.fecha for item in historial],
            [hoy, hoy - timedelta(days=2), hoy - timedelta(days=5), None],
        )
        self.assertEqual(historial[0].tipo, 'observacion')
        self.assertEqual(historial[-1].tipo, 'incidente')

    def test_misma_fecha_incidente_antes_que_observacion(self):
        hoy = date(2024, 5, 10)
        incidente = SimpleNamespace(fecha_registro=hoy)
        observacion = SimpleNamespace(fecha=hoy)

        historial = services.construir_historial([incidente], [observacion])

        self.assertEqual([item.tipo for item in historial], ['incidente', 'observacion'])
        self.assertIs(historial[0].objeto, incidente)

    def test_historial_vacio(self):
        self.assertEqual(services.construir_historial([], []), [])


class InicializarGravedadesTests(TestCase):

    def test_crea_las_tres_gravedades_solo_una_vez(self):
        TipoGravedad.objects.all().delete()

        self.assertEqual(services.inicializar_gravedades(), 3)
        self.assertEqual(services.inicializar_gravedades(), 0)
        self.assertEqual(
            set(TipoGravedad.objects.values_list('nombre_gravedad', flat=True)),
            {'leve', 'grave', 'muy grave'},
        )

    def test_no_modifica_tabla_con_datos(self):
        TipoGravedad.objects.all().delete()
        TipoGravedad.objects.create(nombre_gravedad="leve", puntos=2)

        self.assertEqual(services.inicializar_gravedades(), 0)
        self.assertEqual(TipoGravedad.objects.count(), 1)

    def test_senal_post_migrate_usa_la_base_indicada(self):
        TipoGravedad.objects.all().delete()
        sembrar_gravedades(sender=None, using='default')
        self.assertEqual(TipoGravedad.objects.using('default').count(), 3)

    def test_comando_inicializar_gravedades(self):
        TipoGravedad.objects.all().delete()
        out = StringIO()
        call_command('inicializar_gravedades', stdout=out)
        self.assertIn('3 tipos de gravedad creados', out.getvalue())

        out = StringIO()
        call_command('inicializar_gravedades', stdout=out)
        self.assertIn('Ya existen 3', out.getvalue())


class ResumenReportesTests(ComportamientoBaseTestCase):

    def test_ratio_sin_estudiantes(self):
        Estudiante.objects.all().delete()
        resumen = services.resumen_reportes()
        self.assertEqual(resumen['ratio_incidentes'], 0.0)
        self.assertEqual(resumen['total_estudiantes'], 0)

    def test_totales_y_agrupaciones(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        services.registrar_incidente(self.estudiante.id, self.pelea.id, self.docente.id, "")
        services.registrar_observacion(self.estudiante.id, self.docente.id, "Positiva", "a")

        resumen = services.resumen_reportes()

        self.assertEqual(resumen['total_incidentes'], 2)
        self.assertEqual(resumen['total_observaciones'], 1)
        self.assertEqual(resumen['ratio_incidentes'], 2.0)
        self.assertEqual(resumen['incidentes_por_estado'], {RegistroConducta.ACTIVO: 2})
        self.assertEqual(resumen['incidentes_no_leidos'], 2)
        self.assertEqual(resumen['incidentes_por_grado'], [{'estudiante__grado': '5', 'total': 2}])
        self.assertEqual(resumen['estudiantes_mas_incidencias'][0], self.estudiante)
        self.assertEqual(
            sorted((fila['conducta__gravedad__nombre_gravedad'], fila['total'])
                   for fila in resumen['incidentes_por_gravedad']),
            [('grave', 1), ('leve', 1)],
        )

    def test_conteos_por_mes_y_gravedad(self):
        enero = services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        marzo = services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "")
        otro_marzo = services.registrar_incidente(self.estudiante.id, self.pelea.id, self.docente.id, "")
        RegistroConducta.objects.filter(pk=enero.pk).update(fecha_registro=date(2024, 1, 15))
        RegistroConducta.objects.filter(pk=marzo.pk).update(fecha_registro=date(2024, 3, 2))
        RegistroConducta.objects.filter(pk=otro_marzo.pk).update(fecha_registro=date(2024, 3, 20))

        resumen = services.resumen_reportes()

        self.assertEqual(
            [(fila['mes'], fila['total']) for fila in resumen['incidentes_por_mes']],
            [(date(2024, 1, 1), 1), (date(2024, 3, 1), 2)],
        )
        self.assertEqual(
            [(fila['conducta__gravedad__nombre_gravedad'], fila['total'])
             for fila in resumen['incidentes_por_gravedad']],
            [('leve', 2), ('grave', 1)],
        )


class ObservadorPDFTests(ComportamientoBaseTestCase):

    def test_genera_pdf(self):
        services.registrar_incidente(self.estudiante.id, self.tardanza.id, self.docente.id, "<b>x</b>")
        services.registrar_observacion(self.estudiante.id, self.docente.id, "Positiva", "Buen trabajo & más")

        pdf = ObservadorPDF(self.estudiante).generar()

        self.assertTrue(pdf.startswith(b'%PDF'))
