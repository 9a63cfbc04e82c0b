"""
Módulo de Reportes - Director
"""
import logging

import openpyxl
from django.http import HttpResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.views import View
from django.views.generic import TemplateView
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from comportamiento.models import RegistroConducta
from comportamiento.observador import ObservadorPDF
from comportamiento.services import resumen_reportes
from estudiantes.models import Estudiante

from .panel import DirectorRequeridoMixin

logger = logging.getLogger(__name__)


class ReportesView(DirectorRequeridoMixin, TemplateView):
    """Estadísticas generales de convivencia"""
    template_name = 'director/reportes.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(resumen_reportes())
        return context


class ExportarIncidentesExcelView(DirectorRequeridoMixin, View):
    """Exporta el listado de incidentes a un libro de Excel"""

    headers = [
        'N°', 'Fecha', 'Estudiante', 'Grado', 'Conducta', 'Gravedad',
        'Docente', 'Acciones tomadas', 'Estado', 'Leído',
    ]

    def get(self, request):
        registros = RegistroConducta.objects.con_relaciones().order_by('-fecha_registro', '-id')

        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Incidentes"

        # Estilos
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")
        cell_fill_even = PatternFill(start_color="F2F2F2", end_color="F2F2F2", fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        for col_num, header in enumerate(self.headers, 1):
            cell = ws.cell(row=1, column=col_num, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment
            cell.border = thin_border

        for idx, registro in enumerate(registros, 1):
            data = [
                idx,
                registro.fecha_registro.strftime('%d/%m/%Y'),
                registro.estudiante.get_full_name(),
                registro.estudiante.grado_seccion,
                registro.conducta.nombre_conducta,
                registro.conducta.gravedad.nombre_gravedad,
                registro.docente.get_full_name(),
                registro.acciones_tomadas,
                registro.estado,
                'Sí' if registro.leido else 'No',
            ]
            for col_num, value in enumerate(data, 1):
                cell = ws.cell(row=idx + 1, column=col_num, value=value)
                cell.border = thin_border
                if idx % 2 == 0:
                    cell.fill = cell_fill_even

        for col_num in range(1, len(self.headers) + 1):
            ws.column_dimensions[get_column_letter(col_num)].width = 18
        ws.freeze_panes = 'A2'

        response = HttpResponse(
            content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        nombre = f"incidentes_{timezone.now().strftime('%Y%m%d')}.xlsx"
        response['Content-Disposition'] = f'attachment; filename="{nombre}"'
        wb.save(response)
        logger.info(f"Exportados {registros.count()} incidentes a Excel")
        return response


class ObservadorEstudiantePDFView(DirectorRequeridoMixin, View):
    """Observador de un estudiante en PDF"""

    def get(self, request, pk):
        estudiante = get_object_or_404(Estudiante, pk=pk)
        observador = ObservadorPDF(estudiante)
        response = HttpResponse(observador.generar(), content_type="application/pdf")
        response["Content-Disposition"] = f'inline; filename="{observador.nombre_archivo}"'
        return response
