"""Tests for the investor PDF report."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters.reports.layout import layout_blocks
from src.adapters.reports.pdf_report import (
    NEGATIVE,
    POSITIVE,
    InvestorPdfRenderer,
    build_pdf_filename,
    build_report_blocks,
    format_money,
    format_month_label,
)
from src.domain.models import (
    InvestorFinancialSummary,
    InvestorVehicleFinancials,
    MonthlyBucket,
    TransactionRow,
)

GENERATED_AT = datetime(2026, 10, 19, 9, 15, 0)


def _vehicle() -> InvestorVehicleFinancials:
    return InvestorVehicleFinancials(
        vehicle_id="v1",
        make="Ford",
        model="Mustang",
        license_plate="ABC123",
        image_url=None,
        total_income=Decimal("1000"),
        total_expenses=Decimal("200"),
        net_balance=Decimal("800"),
        transaction_count=2,
    )


def _summary(vehicles=None) -> InvestorFinancialSummary:
    vehicles = vehicles or []
    return InvestorFinancialSummary(
        investor_id="ana",
        investor_name="Ana Gómez",
        investor_email="ana@example.com",
        vehicle_count=len(vehicles),
        total_income=Decimal("1000"),
        total_expenses=Decimal("200"),
        net_balance=Decimal("800"),
        vehicles=vehicles,
        last_transaction_date=None,
    )


def _transactions(count: int) -> list[TransactionRow]:
    return [
        TransactionRow(
            id=f"t{index}",
            vehicle_id="v1",
            type="income" if index % 2 == 0 else "expense",
            category="rental",
            amount=Decimal("100"),
            date=datetime(2026, 9, 1 + index % 28),
            description="Movimiento",
            vehicle_make="Ford",
            vehicle_model="Mustang",
        )
        for index in range(count)
    ]


def _section_titles(blocks) -> list[str]:
    return [block.payload.text for block in blocks if block.kind == "section_title"]


def test_minimal_report_has_only_consolidated_section() -> None:
    """Without vehicles, buckets or transactions only the summary remains."""
    blocks = build_report_blocks(_summary(), [], [], GENERATED_AT)

    assert [block.kind for block in blocks[:4]] == [
        "title",
        "identity",
        "summary_box",
        "section_title",
    ]
    assert _section_titles(blocks) == ["RESUMEN CONSOLIDADO"]
    consolidated = [block.payload.cells for block in blocks[4:]]
    assert consolidated == [
        ("Concepto", "Total"),
        ("Vehículos Gestionados", "0"),
        ("Total Ingresos Históricos", "$1,000.00"),
        ("Total Gastos Históricos", "$200.00"),
        ("Balance Neto Actual", "$800.00"),
    ]


def test_full_report_sections_in_order() -> None:
    """Optional sections appear in a fixed order when data exists."""
    blocks = build_report_blocks(
        _summary([_vehicle()]),
        _transactions(2),
        [MonthlyBucket("2026-09", Decimal("100"), Decimal("100"))],
        GENERATED_AT,
    )

    assert _section_titles(blocks) == [
        "RESUMEN CONSOLIDADO",
        "ESTADO POR VEHÍCULO",
        "EVOLUCIÓN MENSUAL",
        "HISTORIAL COMPLETO DE MOVIMIENTOS",
    ]
    assert sum(1 for block in blocks if block.kind == "vehicle_card") == 1


def test_transaction_amounts_are_signed_and_colored() -> None:
    """Income rows get +$ in green, expense rows -$ in red."""
    blocks = build_report_blocks(_summary(), _transactions(2), [], GENERATED_AT)
    rows = [
        block.payload
        for block in blocks
        if block.kind == "table_row"
        and not block.payload.header
        and len(block.payload.cells) == 6
    ]

    income_row, expense_row = rows
    assert income_row.cells[4:] == ("INGRESO", "+$100.00")
    assert dict(income_row.cell_colors)[5] == POSITIVE
    assert expense_row.cells[4:] == ("GASTO", "-$100.00")
    assert dict(expense_row.cell_colors)[5] == NEGATIVE


def test_long_history_repeats_table_header_on_each_page() -> None:
    """Pages continuing the movements table start with its header."""
    blocks = build_report_blocks(_summary(), _transactions(120), [], GENERATED_AT)

    layout = layout_blocks(blocks)

    assert layout.page_count > 2
    for page in layout.pages()[1:]:
        first = page[0]
        assert first.block.kind == "section_title" or first.block.payload.header


def test_render_produces_pdf_with_page_numbers() -> None:
    """Every page gets a footer with its number and the final total."""
    renderer = InvestorPdfRenderer(logger=MagicMock())
    footers = []
    renderer._draw_footer = lambda pdf, page, total, stamp: footers.append(
        (page, total)
    )

    result = renderer.render(
        _summary([_vehicle()]),
        _transactions(120),
        [MonthlyBucket("2026-09", Decimal("100"), Decimal("50"))],
        generated_at=GENERATED_AT,
    )

    assert result.success
    assert result.content.startswith(b"%PDF")
    assert result.filename == "Reporte_Completo_Ana_Gómez_2026-10-19.pdf"
    total = footers[0][1]
    assert footers == [(page, total) for page in range(1, total + 1)]


def test_render_real_footer_produces_pdf() -> None:
    renderer = InvestorPdfRenderer(company_name="Acme Fleet", logger=MagicMock())

    result = renderer.render(_summary(), [], [], generated_at=GENERATED_AT)

    assert result.success
    assert result.message == "Reporte PDF generado exitosamente."
    assert result.content.startswith(b"%PDF")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Juan Pérez", "Reporte_Completo_Juan_Pérez_2026-10-19.pdf"),
        (None, "Reporte_Completo_Inversor_2026-10-19.pdf"),
    ],
)
def test_build_pdf_filename(name, expected) -> None:
    assert build_pdf_filename(name, GENERATED_AT) == expected


def test_formatting_helpers() -> None:
    assert format_money(Decimal("1234.5")) == "$1,234.50"
    assert format_money(Decimal("-20")) == "$-20.00"
    assert format_month_label("2026-10") == "OCTUBRE DE 2026"
