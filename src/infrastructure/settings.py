"""Settings helpers for report generation."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from src.domain.constants import DEFAULT_COMPANY_NAME, DEFAULT_MONTHLY_WINDOW
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class ReportSettings:
    """Settings for investor reports.

    Attributes:
        company_name: Company shown in report titles and footers.
        monthly_window: Months covered by the monthly evolution.
        output_dir: Directory where CLI exports are written.
    """

    company_name: str = DEFAULT_COMPANY_NAME
    monthly_window: int = DEFAULT_MONTHLY_WINDOW
    output_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        company_name = (
            os.getenv("REPORT_COMPANY_NAME", "").strip() or DEFAULT_COMPANY_NAME
        )
        monthly_window = cls._parse_window(
            os.getenv("REPORT_MONTHLY_WINDOW"),
            logger=logger,
        )
        raw_output = os.getenv("REPORT_OUTPUT_DIR")
        output_dir = (
            Path(raw_output).expanduser().resolve()
            if raw_output
            else get_project_root() / "reports"
        )
        return cls(
            company_name=company_name,
            monthly_window=monthly_window,
            output_dir=output_dir,
        )

    @staticmethod
    def _parse_window(raw_value: str | None, logger) -> int:
        """Parse the monthly window, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Window in months, at least 1.
        """
        if not raw_value:
            return DEFAULT_MONTHLY_WINDOW
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid REPORT_MONTHLY_WINDOW '{raw_value}'; "
                f"using {DEFAULT_MONTHLY_WINDOW}"
            )
            return DEFAULT_MONTHLY_WINDOW
        if value < 1:
            logger.warning(
                f"REPORT_MONTHLY_WINDOW must be at least 1, got {value}; "
                f"using {DEFAULT_MONTHLY_WINDOW}"
            )
            return DEFAULT_MONTHLY_WINDOW
        return value


__all__ = ["ReportSettings"]
