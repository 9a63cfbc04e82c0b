"""
Observador del estudiante en PDF (reportlab)
comportamiento/observador.py
"""
from io import BytesIO

from django.utils import timezone
from django.utils.html import escape
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .models import Observacion, RegistroConducta
from .services import clasificar_observaciones, clasificar_por_gravedad


class ObservadorPDF:
    """Genera el observador de un estudiante con sus incidentes y observaciones."""

    MARGINS = {
        'left': 2 * cm,
        'right': 2 * cm,
        'top': 1.5 * cm,
        'bottom': 1.5 * cm
    }

    def __init__(self, estudiante):
        self.estudiante = estudiante
        self.incidentes = list(
            RegistroConducta.objects.con_relaciones().por_estudiante(estudiante.pk)
        )
        self.observaciones = list(
            Observacion.objects.con_relaciones().por_estudiante(estudiante.pk)
        )

    @property
    def nombre_archivo(self):
        nombre = self.estudiante.nombres.replace(' ', '_')
        return f"observador_{nombre}_{timezone.now().strftime('%Y%m%d')}.pdf"

    def generar(self):
        """Devuelve los bytes del PDF"""
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=letter,
            rightMargin=self.MARGINS['right'],
            leftMargin=self.MARGINS['left'],
            topMargin=self.MARGINS['top'],
            bottomMargin=self.MARGINS['bottom'],
            title="Observador del estudiante",
        )

        styles = self._crear_estilos()
        elements = []
        elements.extend(self._crear_titulo(styles))
        elements.extend(self._crear_info_estudiante(styles))
        elements.extend(self._crear_resumen(styles))
        elements.extend(self._crear_listado_incidentes(styles))
        elements.extend(self._crear_listado_observaciones(styles))
        elements.extend(self._crear_pie_pagina(styles))

        doc.build(elements)
        pdf = buffer.getvalue()
        buffer.close()
        return pdf

    # -------------------- ESTILOS --------------------
    def _crear_estilos(self):
        styles = getSampleStyleSheet()
        styles.add(ParagraphStyle(name="TituloDocumento", fontSize=14, alignment=1, spaceAfter=15, fontName="Helvetica-Bold"))
        styles.add(ParagraphStyle(name="Seccion", fontSize=12, alignment=0, spaceBefore=10, spaceAfter=8, fontName="Helvetica-Bold"))
        styles.add(ParagraphStyle(name="InfoEstudiante", fontSize=11, alignment=0, fontName="Helvetica-Bold"))
        styles.add(ParagraphStyle(name="InfoTexto", fontSize=11, alignment=0))
        styles.add(ParagraphStyle(name="ItemTitulo", fontSize=10, alignment=0, fontName="Helvetica-Bold", spaceAfter=3))
        styles.add(ParagraphStyle(name="ItemTexto", fontSize=10, alignment=4, leading=13))
        styles.add(ParagraphStyle(name="ItemDetalle", fontSize=9, alignment=0, textColor=colors.HexColor("#666")))
        styles.add(ParagraphStyle(name="PiePagina", fontSize=9, alignment=1, textColor=colors.HexColor("#444")))
        return styles

    # -------------------- SECCIONES --------------------
    def _crear_titulo(self, styles):
        linea = Table([[""]], colWidths=[16 * cm])
        linea.setStyle(TableStyle([("LINEBELOW", (0, 0), (-1, -1), 2, colors.black)]))
        return [Paragraph("OBSERVADOR DEL ESTUDIANTE", styles["TituloDocumento"]), linea, Spacer(1, 15)]

    def _crear_info_estudiante(self, styles):
        estudiante = self.estudiante
        info_data = [
            [Paragraph("ESTUDIANTE:", styles["InfoEstudiante"]),
             Paragraph(escape(estudiante.get_full_name()), styles["InfoTexto"])],
            [Paragraph("GRADO:", styles["InfoEstudiante"]),
             Paragraph(escape(estudiante.grado_seccion), styles["InfoTexto"])],
            [Paragraph("USUARIO:", styles["InfoEstudiante"]),
             Paragraph(escape(estudiante.usuario), styles["InfoTexto"])],
        ]
        if estudiante.fecha_nacimiento:
            info_data.append([
                Paragraph("FECHA DE NACIMIENTO:", styles["InfoEstudiante"]),
                Paragraph(estudiante.fecha_nacimiento.strftime("%d/%m/%Y"), styles["InfoTexto"]),
            ])

        tabla_info = Table(info_data, colWidths=[5 * cm, 11 * cm])
        tabla_info.setStyle(TableStyle([
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
        ]))
        return [tabla_info, Spacer(1, 15)]

    def _crear_resumen(self, styles):
        """Tabla resumen por gravedad y por tipo de observación"""
        por_gravedad = clasificar_por_gravedad(self.incidentes)
        por_tipo = clasificar_observaciones(self.observaciones)

        datos = [
            ["Concepto", "Cantidad"],
            ["Incidentes leves", len(por_gravedad['leve'])],
            ["Incidentes graves", len(por_gravedad['grave'])],
            ["Incidentes muy graves", len(por_gravedad['muygrave'])],
            ["Observaciones positivas", len(por_tipo['positivas'])],
            ["Observaciones negativas", len(por_tipo['negativas'])],
            ["Otras observaciones", len(por_tipo['otras'])],
        ]
        tabla = Table(datos, colWidths=[10 * cm, 4 * cm])
        tabla.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#366092")),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("ALIGN", (1, 0), (1, -1), "CENTER"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.whitesmoke]),
        ]))
        return [Paragraph("RESUMEN", styles["Seccion"]), tabla, Spacer(1, 15)]

    def _crear_listado_incidentes(self, styles):
        elements = [Paragraph("INCIDENTES REGISTRADOS", styles["Seccion"])]
        if not self.incidentes:
            return elements + [Paragraph("No se registran incidentes.", styles["ItemTexto"]), Spacer(1, 10)]

        for i, registro in enumerate(self.incidentes, 1):
            gravedad = registro.conducta.gravedad.nombre_gravedad
            color_hex = "#2E7D32" if registro.estado == RegistroConducta.RESUELTO else "#C62828"
            titulo = (
                f"Incidente #{i} - {registro.fecha_registro.strftime('%d/%m/%Y')} - "
                f"{escape(registro.conducta.nombre_conducta)} ({escape(gravedad)}) - "
                f"<font color='{color_hex}'>{registro.estado}</font>"
            )
            elements.append(Paragraph(titulo, styles["ItemTitulo"]))
            if registro.acciones_tomadas:
                elements.append(Paragraph(escape(registro.acciones_tomadas), styles["ItemTexto"]))
            elements.append(Paragraph(
                f"Registrado por: {escape(registro.docente.get_full_name())}", styles["ItemDetalle"]
            ))
            elements.append(Spacer(1, 8))
        return elements

    def _crear_listado_observaciones(self, styles):
        elements = [Paragraph("OBSERVACIONES", styles["Seccion"])]
        if not self.observaciones:
            return elements + [Paragraph("No se registran observaciones.", styles["ItemTexto"]), Spacer(1, 10)]

        for i, observacion in enumerate(self.observaciones, 1):
            tipo = observacion.tipo_observacion.lower()
            color_hex = "#2E7D32" if tipo == 'positiva' else "#C62828" if tipo == 'negativa' else "#444444"
            titulo = (
                f"Observación #{i} - {observacion.fecha.strftime('%d/%m/%Y')} - "
                f"<font color='{color_hex}'>{escape(observacion.tipo_observacion)}</font>"
            )
            elements.append(Paragraph(titulo, styles["ItemTitulo"]))
            elements.append(Paragraph(escape(observacion.descripcion), styles["ItemTexto"]))
            elements.append(Paragraph(
                f"Docente: {escape(observacion.docente.get_full_name())}", styles["ItemDetalle"]
            ))
            elements.append(Spacer(1, 8))
        return elements

    def _crear_pie_pagina(self, styles):
        fecha = timezone.localtime().strftime("%d/%m/%Y %H:%M")
        return [Spacer(1, 20), Paragraph(f"Documento generado el {fecha}", styles["PiePagina"])]
