"""Application ports package."""

from .database import DatabaseEnginePort
from .record_store import RecordStoreError, RecordStorePort
from .report_renderer import InvestorReportRendererPort

__all__ = [
    "DatabaseEnginePort",
    "RecordStoreError",
    "RecordStorePort",
    "InvestorReportRendererPort",
]
