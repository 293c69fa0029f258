"""CSV logger for per-request summarization timings."""

import csv
import threading
from dataclasses import astuple, dataclass, fields
from datetime import UTC, datetime
from pathlib import Path

from docsummarizer.config import get_settings


@dataclass
class SummaryMetrics:
    """Timing and size figures for one summarize request."""

    document_name: str
    media_type: str
    summary_type: str
    input_chars: int = 0
    extraction_ms: float = 0.0
    generation_ms: float = 0.0
    word_count: int = 0


HEADER = ["timestamp", *(f.name for f in fields(SummaryMetrics))]


class SummaryMetricsLogger:
    """Thread-safe CSV logger appending one row per summarize request."""

    def __init__(self, filepath: str | Path) -> None:
        """Initialize metrics logger.

        Args:
            filepath: Path to CSV file (will be created if doesn't exist)
        """
        self.filepath = Path(filepath)
        self._lock = threading.Lock()
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def _write_header_if_needed(self) -> None:
        if not self.filepath.exists() or self.filepath.stat().st_size == 0:
            with open(self.filepath, "w", newline="") as f:
                csv.writer(f).writerow(HEADER)

    def log(self, metrics: SummaryMetrics) -> None:
        """Append a metrics row, formatting durations to two decimals."""
        row = [
            f"{value:.2f}" if isinstance(value, float) else value
            for value in astuple(metrics)
        ]
        with self._lock:
            self._write_header_if_needed()
            with open(self.filepath, "a", newline="") as f:
                csv.writer(f).writerow([datetime.now(UTC).isoformat(), *row])


_metrics_logger: SummaryMetricsLogger | None = None


def get_metrics_logger() -> SummaryMetricsLogger | None:
    """Get the configured metrics logger, or None when metrics are disabled."""
    global _metrics_logger
    path = get_settings().metrics_csv_path
    if not path:
        return None
    if _metrics_logger is None or _metrics_logger.filepath != Path(path):
        _metrics_logger = SummaryMetricsLogger(path)
    return _metrics_logger
