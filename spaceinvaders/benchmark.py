"""Frame-time recording and CSV logging of benchmark scores."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .mathutils import percentile
from .utils import timestamp_str

CSV_FILE_NAME = "benchmark_scores.csv"
HEADER_FIELDS = ("timestamp", "avg_fps", "min_fps", "p95_fps", "p99_fps", "mem_usage")


def memory_usage_mb() -> float:
    """Peak resident memory of this process in megabytes; 0.0 if unknown."""
    try:
        import resource
    except ImportError:
        return 0.0
    try:
        usage = resource.getrusage(resource.RUSAGE_SELF)
    except OSError:
        return 0.0
    return usage.ru_maxrss / 1024.0


def _fps(frame_time_ms: float) -> float:
    return 1000.0 / frame_time_ms if frame_time_ms > 0 else 0.0


class PerformanceBenchmark:
    """Collects frame times and appends FPS statistics to a CSV file."""

    def __init__(
        self,
        log_interval_ms: int = 0,
        game_object_threshold: int = 50,
        csv_delimiter: str = ";",
        directory: Path | str | None = None,
        timestamp: Callable[[], str] = timestamp_str,
    ) -> None:
        self.log_interval_ms = log_interval_ms
        self.game_object_threshold = game_object_threshold
        self.csv_delimiter = csv_delimiter
        self._timestamp = timestamp
        self._frame_times_ms: list[float] = []

        performance_dir = Path(directory) if directory is not None else Path.cwd() / "performance"
        performance_dir.mkdir(parents=True, exist_ok=True)
        self.file_path = performance_dir / CSV_FILE_NAME
        if not self.file_path.exists():
            with self.file_path.open("a", encoding="utf-8") as out:
                out.write(self.csv_delimiter.join(HEADER_FIELDS) + "\n")

    def filtered_frame_times(
        self, max_allowed_ms: float = 1000.0, skip_first_n: int = 100
    ) -> list[float]:
        """Frame times after the first ``skip_first_n``, within (0, max_allowed_ms]."""
        return [
            ft for ft in self._frame_times_ms[skip_first_n:] if 0.0 < ft <= max_allowed_ms
        ]

    def record_frame_time(self, frame_time_ms: int) -> None:
        self._frame_times_ms.append(float(frame_time_ms))

    def log_performance_score(self) -> None:
        """Append one line of FPS statistics and forget the recorded frames."""
        filtered = self.filtered_frame_times()
        if filtered:
            avg_ft = sum(filtered) / len(filtered)
            max_ft = max(filtered)
            p95_ft = percentile(filtered, 0.95)
            p99_ft = percentile(filtered, 0.99)
        else:
            avg_ft = max_ft = p95_ft = p99_ft = 0.0

        values = (_fps(avg_ft), _fps(max_ft), _fps(p95_ft), _fps(p99_ft), memory_usage_mb())
        line = self.csv_delimiter.join(
            [self._timestamp(), *(f"{value:g}" for value in values)]
        )
        with self.file_path.open("a", encoding="utf-8") as out:
            out.write(line + "\n")
        self._frame_times_ms.clear()