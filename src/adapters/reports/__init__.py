"""Report renderers producing CSV and PDF artifacts."""

from .csv_report import render_transactions_csv
from .pdf_report import InvestorPdfRenderer, render_investor_pdf

__all__ = [
    "render_transactions_csv",
    "InvestorPdfRenderer",
    "render_investor_pdf",
]
