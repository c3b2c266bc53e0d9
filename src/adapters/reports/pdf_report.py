"""Paginated PDF report of an investor's financial position.

The document is described as a list of layout blocks (see ``layout``),
paginated by a pure layout pass and only then drawn with fpdf2.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from fpdf import FPDF
from fpdf.errors import FPDFException

from src.adapters.reports.layout import (
    Block,
    Layout,
    PageGeometry,
    PlacedBlock,
    layout_blocks,
)
from src.domain.constants import DEFAULT_COMPANY_NAME, TRANSACTION_INCOME
from src.domain.models import (
    ExportResult,
    InvestorFinancialSummary,
    InvestorVehicleFinancials,
    MonthlyBucket,
    TransactionRow,
)
from src.domain.services.normalization import (
    normalize_filename_part,
    normalize_transaction_type,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import quantize_money

FONT_FAMILY = "helvetica"

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
POSITIVE: Color = (0, 128, 0)
NEGATIVE: Color = (200, 0, 0)
POSITIVE_DARK: Color = (0, 100, 0)
NEGATIVE_DARK: Color = (150, 0, 0)
MUTED: Color = (100, 100, 100)
FAINT: Color = (150, 150, 150)
HEADER_FILL: Color = (45, 45, 45)
MONTHLY_HEADER_FILL: Color = (60, 60, 60)
STRIPE_FILL: Color = (245, 245, 245)
SUMMARY_FILL: Color = (240, 240, 240)
CARD_FILL: Color = (248, 248, 248)
CARD_BORDER: Color = (220, 220, 220)
FOOTER_RULE: Color = (240, 240, 240)

MONTH_NAMES_ES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


@dataclass(frozen=True)
class SectionTitle:
    text: str
    font_size: float = 14


@dataclass(frozen=True)
class TableRow:
    """One row of a table block.

    Attributes:
        cells: Text of every cell.
        widths: Width of every column.
        aligns: fpdf2 alignment per column (L, C, R).
        header: Whether the row is a header row.
        font_size: Font size of the row.
        bold_columns: Column indexes rendered in bold.
        fill: Background color, None for transparent.
        text_color: Text color of the row.
        cell_colors: (column, color) overrides for individual cells.
        border: Whether cells are outlined.
    """

    cells: tuple[str, ...]
    widths: tuple[float, ...]
    aligns: tuple[str, ...]
    header: bool = False
    font_size: float = 9
    bold_columns: frozenset[int] = frozenset()
    fill: Color | None = None
    text_color: Color = BLACK
    cell_colors: tuple[tuple[int, Color], ...] = field(default_factory=tuple)
    border: bool = False


def format_money(amount: Decimal) -> str:
    """Return an amount as ``$1,234.50``."""
    return f"${quantize_money(amount):,.2f}"


def format_month_label(month: str) -> str:
    """Return ``OCTUBRE DE 2026`` for ``2026-10``."""
    year, month_number = month.split("-")
    return f"{MONTH_NAMES_ES[int(month_number) - 1]} de {year}".upper()


def build_pdf_filename(
    investor_name: str | None,
    generated_at: datetime,
) -> str:
    """Return the download filename for an investor report."""
    name_part = normalize_filename_part(investor_name, "Inversor")
    return f"Reporte_Completo_{name_part}_{generated_at.date().isoformat()}.pdf"


def _table_blocks(
    headers: Sequence[str],
    rows: Sequence[TableRow],
    widths: tuple[float, ...],
    aligns: tuple[str, ...],
    header_fill: Color,
    header_font_size: float,
    row_height: float,
    border: bool = False,
    space_after: float = 15.0,
) -> list[Block]:
    header = Block(
        kind="table_row",
        height=row_height + 1,
        payload=TableRow(
            cells=tuple(headers),
            widths=widths,
            aligns=tuple("C" if align == "C" else "L" for align in aligns),
            header=True,
            font_size=header_font_size,
            bold_columns=frozenset(range(len(headers))),
            fill=header_fill,
            text_color=(255, 255, 255),
            border=border,
        ),
    )
    blocks = [header]
    for index, row in enumerate(rows):
        is_last = index == len(rows) - 1
        blocks.append(
            Block(
                kind="table_row",
                height=row_height,
                payload=row,
                space_after=space_after if is_last else 0.0,
                repeat_header=header,
            )
        )
    if not rows:
        blocks[0] = Block(
            kind=header.kind,
            height=header.height,
            payload=header.payload,
            space_after=space_after,
        )
    return blocks


def build_report_blocks(
    summary: InvestorFinancialSummary,
    transactions: Sequence[TransactionRow],
    monthly_buckets: Sequence[MonthlyBucket],
    generated_at: datetime,
    company_name: str = DEFAULT_COMPANY_NAME,
) -> list[Block]:
    """Describe the whole report as layout blocks, in reading order.

    Args:
        summary: Investor summary to report on.
        transactions: Flat transaction history, newest first.
        monthly_buckets: Monthly evolution buckets.
        generated_at: Generation timestamp shown in the document.
        company_name: Company shown in the title and footer.

    Returns:
        list[Block]: Title, identity, summary box, consolidated table,
        vehicle cards, monthly table and transaction table blocks.
    """
    blocks = [
        Block("title", 18, company_name, space_after=4),
        Block(
            "identity",
            20,
            (
                summary.investor_name or "Sin nombre",
                summary.investor_email,
                generated_at.strftime("%d/%m/%Y"),
            ),
            space_after=5,
        ),
        Block("summary_box", 35, summary, space_after=10),
        Block("section_title", 7, SectionTitle("RESUMEN CONSOLIDADO", 12)),
    ]

    consolidated_widths = (110.0, 60.0)
    consolidated_aligns = ("L", "R")
    consolidated = [
        ("Vehículos Gestionados", str(summary.vehicle_count)),
        ("Total Ingresos Históricos", format_money(summary.total_income)),
        ("Total Gastos Históricos", format_money(summary.total_expenses)),
        ("Balance Neto Actual", format_money(summary.net_balance)),
    ]
    blocks.extend(
        _table_blocks(
            ("Concepto", "Total"),
            [
                TableRow(
                    cells=cells,
                    widths=consolidated_widths,
                    aligns=consolidated_aligns,
                    font_size=10,
                    bold_columns=frozenset({1}),
                    fill=STRIPE_FILL if index % 2 == 0 else None,
                )
                for index, cells in enumerate(consolidated)
            ],
            consolidated_widths,
            consolidated_aligns,
            header_fill=HEADER_FILL,
            header_font_size=10,
            row_height=10,
        )
    )

    if summary.vehicles:
        blocks.append(
            Block(
                "section_title",
                8,
                SectionTitle("ESTADO POR VEHÍCULO"),
                min_space=20,
            )
        )
        blocks.extend(
            Block("vehicle_card", 35, vehicle, space_after=7, min_space=45)
            for vehicle in summary.vehicles
        )

    if monthly_buckets:
        monthly_widths = (62.0, 36.0, 36.0, 36.0)
        monthly_aligns = ("L", "R", "R", "R")
        blocks.append(
            Block(
                "section_title",
                7,
                SectionTitle("EVOLUCIÓN MENSUAL"),
                min_space=30,
            )
        )
        blocks.extend(
            _table_blocks(
                ("Mes", "Ingresos", "Gastos", "Resultado Neto"),
                [
                    TableRow(
                        cells=(
                            format_month_label(bucket.month),
                            format_money(bucket.income),
                            format_money(bucket.expenses),
                            format_money(bucket.net),
                        ),
                        widths=monthly_widths,
                        aligns=monthly_aligns,
                        font_size=8.5,
                        bold_columns=frozenset({3}),
                        border=True,
                    )
                    for bucket in monthly_buckets
                ],
                monthly_widths,
                monthly_aligns,
                header_fill=MONTHLY_HEADER_FILL,
                header_font_size=9,
                row_height=7,
                border=True,
            )
        )

    if transactions:
        blocks.append(
            Block(
                "section_title",
                7,
                SectionTitle("HISTORIAL COMPLETO DE MOVIMIENTOS"),
                min_space=30,
            )
        )
        transaction_widths = (20.0, 35.0, 25.0, 45.0, 20.0, 25.0)
        transaction_aligns = ("L", "L", "L", "L", "C", "R")
        blocks.extend(
            _table_blocks(
                ("Fecha", "Vehículo", "Categoría", "Descripción", "Tipo", "Monto"),
                [
                    _transaction_row(
                        transaction,
                        transaction_widths,
                        transaction_aligns,
                        striped=index % 2 == 0,
                    )
                    for index, transaction in enumerate(transactions)
                ],
                transaction_widths,
                transaction_aligns,
                header_fill=HEADER_FILL,
                header_font_size=8,
                row_height=6,
                space_after=0,
            )
        )

    return blocks


def _transaction_row(
    transaction: TransactionRow,
    widths: tuple[float, ...],
    aligns: tuple[str, ...],
    striped: bool,
) -> TableRow:
    is_income = normalize_transaction_type(transaction.type) == TRANSACTION_INCOME
    sign = "+" if is_income else "-"
    amount = f"{sign}{format_money(transaction.amount)}"
    return TableRow(
        cells=(
            transaction.date.strftime("%d/%m/%Y"),
            transaction.vehicle_name or "N/A",
            transaction.category.upper(),
            transaction.description or "-",
            "INGRESO" if is_income else "GASTO",
            amount,
        ),
        widths=widths,
        aligns=aligns,
        font_size=7.5,
        bold_columns=frozenset({5}),
        fill=STRIPE_FILL if striped else None,
        cell_colors=((5, POSITIVE if is_income else NEGATIVE),),
    )


class InvestorPdfRenderer:
    """Render investor reports as A4 PDF documents with fpdf2."""

    def __init__(
        self,
        company_name: str = DEFAULT_COMPANY_NAME,
        geometry: PageGeometry | None = None,
        logger=None,
    ) -> None:
        """Initialize the renderer.

        Args:
            company_name: Company shown in the title and footer.
            geometry: Page geometry, A4 portrait by default.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._company_name = company_name
        self._geometry = geometry or PageGeometry()
        self._logger = logger or get_app_logger()

    def render(
        self,
        summary: InvestorFinancialSummary,
        transactions: Sequence[TransactionRow],
        monthly_buckets: Sequence[MonthlyBucket],
        generated_at: datetime | None = None,
    ) -> ExportResult:
        """Render the report and return the PDF bytes.

        Args:
            summary: Investor summary to report on.
            transactions: Flat transaction history, newest first.
            monthly_buckets: Monthly evolution buckets.
            generated_at: Generation timestamp, now by default.

        Returns:
            ExportResult: PDF content and its download filename.
        """
        moment = generated_at or datetime.now()
        blocks = build_report_blocks(
            summary,
            transactions,
            monthly_buckets,
            moment,
            company_name=self._company_name,
        )
        layout = layout_blocks(blocks, self._geometry)
        try:
            content = self._draw(layout, moment)
        except FPDFException as exc:
            self._logger.error(f"Error generating PDF report: {exc}")
            return ExportResult(
                success=False,
                message="Error al generar el reporte.",
            )
        filename = build_pdf_filename(summary.investor_name, moment)
        self._logger.info(
            f"PDF report {filename} rendered: {layout.page_count} pages, "
            f"{len(transactions)} transactions"
        )
        return ExportResult(
            success=True,
            content=content,
            filename=filename,
            message="Reporte PDF generado exitosamente.",
        )

    def _draw(self, layout: Layout, generated_at: datetime) -> bytes:
        pdf = FPDF(orientation="P", unit="mm", format="A4")
        pdf.set_auto_page_break(auto=False)
        pdf.set_title("Reporte Financiero")
        pdf.set_author(self._company_name)
        for page_number, placements in enumerate(layout.pages(), start=1):
            pdf.add_page()
            for placement in placements:
                drawer = getattr(self, f"_draw_{placement.block.kind}")
                drawer(pdf, placement)
            self._draw_footer(pdf, page_number, layout.page_count, generated_at)
        return bytes(pdf.output())

    def _text(
        self,
        pdf: FPDF,
        x: float,
        y: float,
        text: str,
        align: str = "L",
    ) -> None:
        safe = _latin1(text)
        if align == "C":
            x = (self._geometry.width - pdf.get_string_width(safe)) / 2
        pdf.text(x, y, safe)

    def _draw_title(self, pdf: FPDF, placement: PlacedBlock) -> None:
        y = placement.y
        pdf.set_text_color(*BLACK)
        pdf.set_font(FONT_FAMILY, style="B", size=20)
        self._text(pdf, 0, y + 6, "REPORTE FINANCIERO", align="C")
        pdf.set_font(FONT_FAMILY, size=12)
        self._text(pdf, 0, y + 14, placement.block.payload, align="C")

    def _draw_identity(self, pdf: FPDF, placement: PlacedBlock) -> None:
        name, email, generated_on = placement.block.payload
        x = self._geometry.side_margin
        y = placement.y
        pdf.set_text_color(*BLACK)
        pdf.set_font(FONT_FAMILY, style="B", size=14)
        self._text(pdf, x, y + 5, f"Inversor: {name}")
        pdf.set_font(FONT_FAMILY, size=10)
        self._text(pdf, x, y + 12, f"Email: {email}")
        self._text(pdf, x, y + 18, f"Fecha: {generated_on}")

    def _draw_summary_box(self, pdf: FPDF, placement: PlacedBlock) -> None:
        summary: InvestorFinancialSummary = placement.block.payload
        x = self._geometry.side_margin
        y = placement.y
        pdf.set_fill_color(*SUMMARY_FILL)
        pdf.rect(x, y, self._geometry.content_width, placement.block.height, style="F")
        pdf.set_text_color(*BLACK)
        pdf.set_font(FONT_FAMILY, style="B", size=10)
        self._text(pdf, x + 5, y + 7, "RESUMEN FINANCIERO")
        pdf.set_font(FONT_FAMILY, size=10)
        self._text(pdf, x + 5, y + 15, f"Vehículos: {summary.vehicle_count}")
        self._text(pdf, x + 5, y + 22, f"Ingresos: {format_money(summary.total_income)}")
        self._text(pdf, x + 5, y + 29, f"Gastos: {format_money(summary.total_expenses)}")
        pdf.set_font(FONT_FAMILY, style="B", size=10)
        pdf.set_text_color(*(POSITIVE if summary.net_balance >= 0 else (255, 0, 0)))
        self._text(pdf, x + 80, y + 22, f"Balance Neto: {format_money(summary.net_balance)}")
        pdf.set_text_color(*BLACK)

    def _draw_section_title(self, pdf: FPDF, placement: PlacedBlock) -> None:
        title: SectionTitle = placement.block.payload
        pdf.set_text_color(*BLACK)
        pdf.set_font(FONT_FAMILY, style="B", size=title.font_size)
        self._text(pdf, self._geometry.side_margin, placement.y + 5, title.text)

    def _draw_vehicle_card(self, pdf: FPDF, placement: PlacedBlock) -> None:
        vehicle: InvestorVehicleFinancials = placement.block.payload
        x = self._geometry.side_margin
        y = placement.y
        pdf.set_fill_color(*CARD_FILL)
        pdf.set_draw_color(*CARD_BORDER)
        pdf.rect(
            x,
            y,
            self._geometry.content_width,
            placement.block.height,
            style="FD",
        )
        pdf.set_font(FONT_FAMILY, style="B", size=11)
        pdf.set_text_color(*BLACK)
        self._text(pdf, x + 8, y + 10, vehicle.display_name)
        pdf.set_font(FONT_FAMILY, size=9)
        pdf.set_text_color(*MUTED)
        self._text(pdf, x + 8, y + 16, f"Patente/ID: {vehicle.license_plate or 'N/A'}")
        pdf.set_text_color(*BLACK)
        self._text(pdf, x + 8, y + 26, f"Ingresos: +{format_money(vehicle.total_income)}")
        self._text(pdf, x + 60, y + 26, f"Gastos: -{format_money(vehicle.total_expenses)}")
        pdf.set_font(FONT_FAMILY, style="B", size=9)
        pdf.set_text_color(
            *(POSITIVE_DARK if vehicle.net_balance >= 0 else NEGATIVE_DARK)
        )
        self._text(pdf, x + 120, y + 26, f"Balance: {format_money(vehicle.net_balance)}")
        pdf.set_font(FONT_FAMILY, size=8)
        pdf.set_text_color(*FAINT)
        self._text(
            pdf,
            x + 8,
            y + 31,
            f"{vehicle.transaction_count} transacciones registradas",
        )
        pdf.set_text_color(*BLACK)

    def _draw_table_row(self, pdf: FPDF, placement: PlacedBlock) -> None:
        row: TableRow = placement.block.payload
        overrides = dict(row.cell_colors)
        x = self._geometry.side_margin
        if row.fill is not None:
            pdf.set_fill_color(*row.fill)
        pdf.set_draw_color(*CARD_BORDER)
        for index, (text, width, align) in enumerate(
            zip(row.cells, row.widths, row.aligns)
        ):
            style = "B" if index in row.bold_columns else ""
            pdf.set_font(FONT_FAMILY, style=style, size=row.font_size)
            pdf.set_text_color(*overrides.get(index, row.text_color))
            pdf.set_xy(x, placement.y)
            pdf.cell(
                width,
                placement.block.height,
                _fit(pdf, _latin1(text), width - 2),
                border=1 if row.border else 0,
                align=align,
                fill=row.fill is not None,
            )
            x += width
        pdf.set_text_color(*BLACK)

    def _draw_footer(
        self,
        pdf: FPDF,
        page_number: int,
        page_count: int,
        generated_at: datetime,
    ) -> None:
        footer_y = self._geometry.height - 10
        rule_y = footer_y - 5
        pdf.set_draw_color(*FOOTER_RULE)
        pdf.line(10, rule_y, self._geometry.width - 10, rule_y)
        pdf.set_font(FONT_FAMILY, style="I", size=8)
        pdf.set_text_color(*FAINT)
        stamp = generated_at.strftime("%d/%m/%Y, %H:%M:%S")
        self._text(
            pdf,
            0,
            footer_y,
            f"{self._company_name} Corporate Report - Página {page_number} "
            f"de {page_count} - Generado el {stamp}",
            align="C",
        )
        pdf.set_text_color(*BLACK)


def render_investor_pdf(
    summary: InvestorFinancialSummary,
    transactions: Sequence[TransactionRow],
    monthly_buckets: Sequence[MonthlyBucket],
    generated_at: datetime | None = None,
    company_name: str = DEFAULT_COMPANY_NAME,
) -> ExportResult:
    """Render an investor report with the default geometry."""
    renderer = InvestorPdfRenderer(company_name=company_name)
    return renderer.render(summary, transactions, monthly_buckets, generated_at)


def _latin1(text: str) -> str:
    # Core PDF fonts only cover latin-1.
    return text.encode("latin-1", "replace").decode("latin-1")


def _fit(pdf: FPDF, text: str, width: float) -> str:
    if pdf.get_string_width(text) <= width:
        return text
    ellipsis = "..."
    while text and pdf.get_string_width(text + ellipsis) > width:
        text = text[:-1]
    return text + ellipsis


__all__ = [
    "InvestorPdfRenderer",
    "SectionTitle",
    "TableRow",
    "build_pdf_filename",
    "build_report_blocks",
    "format_money",
    "format_month_label",
    "render_investor_pdf",
]
