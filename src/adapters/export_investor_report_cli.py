"""CLI adapter writing an investor PDF report to disk.

The investor is read from REPORT_INVESTOR_ID; the destination directory
comes from ReportSettings (REPORT_OUTPUT_DIR).
"""

import os

from src.infrastructure.container import build_report_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def main() -> None:
    """Build the report of one investor and save it."""
    logger = get_app_logger()
    investor_id = os.getenv("REPORT_INVESTOR_ID", "").strip()
    if not investor_id:
        logger.warning("REPORT_INVESTOR_ID is required to export a report.")
        return

    settings = ReportSettings.from_env()
    use_case = build_report_use_case(settings=settings)
    outcome = use_case.execute(investor_id)
    for warning in outcome.warnings:
        logger.warning(f"Report data degraded: {warning}")

    export = outcome.export
    if not export.success:
        logger.error(f"Report not generated: {export.message}")
        return

    settings.output_dir.mkdir(parents=True, exist_ok=True)
    destination = settings.output_dir / export.filename
    destination.write_bytes(export.content)
    print(f"Report written to {destination}")


if __name__ == "__main__":  # pragma: no cover
    main()
