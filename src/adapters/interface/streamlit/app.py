"""Streamlit admin dashboard for investor financial reports."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.adapters.reports.csv_report import render_transactions_csv
from src.adapters.reports.pdf_report import InvestorPdfRenderer
from src.application.use_cases.request_cache import RequestCache
from src.domain.models import (
    CategoryTotal,
    InvestorFinancialSummary,
    MonthlyBucket,
    ReportResult,
    TransactionRow,
)
from src.domain.services.finance import compute_category_totals, select_month
from src.infrastructure.container import (
    build_monthly_use_case,
    build_record_store,
    build_summary_use_case,
    build_transactions_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import ReportSettings


def _fetch_summaries(
    record_store,
    cache: RequestCache,
) -> ReportResult[list[InvestorFinancialSummary]]:
    """Fetch every investor summary for the current run."""
    use_case = build_summary_use_case(record_store)
    return use_case.execute(cache=cache)


def _fetch_investor_detail(
    record_store,
    cache: RequestCache,
    summary: InvestorFinancialSummary,
    window_months: int,
) -> tuple[ReportResult[list[MonthlyBucket]], ReportResult[list[TransactionRow]]]:
    """Fetch monthly buckets and the transaction history of one investor."""
    monthly = build_monthly_use_case(record_store).execute(
        summary.investor_id,
        window_months=window_months,
        cache=cache,
    )
    transactions = build_transactions_use_case(record_store).execute(
        summary.investor_id,
        vehicle_ids=[vehicle.vehicle_id for vehicle in summary.vehicles],
        cache=cache,
    )
    return monthly, transactions


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"${value:,.2f}"


def _investor_label(summary: InvestorFinancialSummary) -> str:
    return f"{summary.investor_name or 'Sin nombre'} ({summary.investor_email})"


def _build_summary_rows(
    summaries: Sequence[InvestorFinancialSummary],
) -> list[dict[str, str | int]]:
    """Return table rows for the investors overview."""
    return [
        {
            "Inversor": summary.investor_name or "Sin nombre",
            "Email": summary.investor_email,
            "Vehículos": summary.vehicle_count,
            "Ingresos": _format_currency(summary.total_income),
            "Gastos": _format_currency(summary.total_expenses),
            "Balance Neto": _format_currency(summary.net_balance),
            "Último movimiento": (
                summary.last_transaction_date.strftime("%d/%m/%Y")
                if summary.last_transaction_date
                else "—"
            ),
        }
        for summary in summaries
    ]


def _prepare_monthly_chart_data(
    buckets: Sequence[MonthlyBucket],
) -> list[dict[str, str | float]]:
    """Return long-form Altair data: one point per month and series."""
    data: list[dict[str, str | float]] = []
    for bucket in buckets:
        data.append(
            {"month": bucket.month, "series": "Ingresos", "amount": float(bucket.income)}
        )
        data.append(
            {"month": bucket.month, "series": "Gastos", "amount": float(bucket.expenses)}
        )
    return data


def _build_category_rows(
    totals: Sequence[CategoryTotal],
) -> list[dict[str, str]]:
    return [
        {
            "Tipo": "Ingreso" if total.type == "income" else "Gasto",
            "Categoría": total.category,
            "Monto": _format_currency(total.amount),
        }
        for total in totals
    ]


def _render_monthly_chart(buckets: Sequence[MonthlyBucket]) -> None:
    """Render grouped bars of income and expenses per month."""
    if not buckets:
        st.info("Sin movimientos en el período seleccionado.")
        return
    chart = alt.Chart(alt.Data(values=_prepare_monthly_chart_data(buckets))).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("month:N", title=None),
        xOffset="series:N",
        y=alt.Y("amount:Q", title="Monto"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Ingresos", "Gastos"],
                range=["#2e7d32", "#c62828"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.subheader("Evolución mensual")
    st.altair_chart(chart, width="stretch")


def _render_downloads(
    summary: InvestorFinancialSummary,
    transactions: Sequence[TransactionRow],
    buckets: Sequence[MonthlyBucket],
    settings: ReportSettings,
) -> None:
    """Render the PDF and monthly CSV download buttons."""
    usage_logger = get_usage_logger()
    pdf_col, csv_col = st.columns(2)

    pdf = InvestorPdfRenderer(company_name=settings.company_name).render(
        summary,
        transactions,
        buckets,
    )
    if pdf.success:
        if pdf_col.download_button(
            "Exportar PDF",
            data=pdf.content,
            file_name=pdf.filename,
            mime="application/pdf",
        ):
            usage_logger.info(
                f"PDF report downloaded for investor {summary.investor_id}"
            )
    else:
        pdf_col.error(pdf.message)

    csv = render_transactions_csv(select_month(transactions, date.today()))
    if csv.success:
        if csv_col.download_button(
            "Descargar Reporte Mes",
            data=csv.content,
            file_name=csv.filename,
            mime="text/csv",
        ):
            usage_logger.info(
                f"CSV report downloaded for investor {summary.investor_id}"
            )
    else:
        csv_col.info(csv.message)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Fleet Investors", layout="wide")
    st.title("Inversores")

    settings = ReportSettings.from_env()
    record_store = build_record_store()
    cache = RequestCache()

    summaries_result = _fetch_summaries(record_store, cache)
    for warning in summaries_result.warnings:
        st.warning(warning)
    summaries = summaries_result.value
    if not summaries:
        st.warning("No se encontraron inversores.")
        return

    st.caption(f"{len(summaries)} inversores")
    st.dataframe(
        _build_summary_rows(summaries),
        width="stretch",
        hide_index=True,
    )

    labels = [_investor_label(summary) for summary in summaries]
    selected_label = st.sidebar.selectbox("Inversor", labels)
    summary = summaries[labels.index(selected_label)]

    vehicles_col, income_col, expenses_col, net_col = st.columns(4)
    vehicles_col.metric("Vehículos", summary.vehicle_count)
    income_col.metric("Ingresos", _format_currency(summary.total_income))
    expenses_col.metric("Gastos", _format_currency(summary.total_expenses))
    net_col.metric("Balance Neto", _format_currency(summary.net_balance))

    monthly_result, transactions_result = _fetch_investor_detail(
        record_store,
        cache,
        summary,
        settings.monthly_window,
    )
    for warning in (*monthly_result.warnings, *transactions_result.warnings):
        st.warning(warning)

    _render_monthly_chart(monthly_result.value)

    category_totals = compute_category_totals(transactions_result.value)
    if category_totals:
        st.subheader("Por categoría")
        st.dataframe(
            _build_category_rows(category_totals),
            width="stretch",
            hide_index=True,
        )

    _render_downloads(
        summary,
        transactions_result.value,
        monthly_result.value,
        settings,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
