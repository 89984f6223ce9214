"""Metrics logging utilities."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import csv
import os
from datetime import datetime


class MetricsLogger:
    """CSV logger for search statistics, one row per logged step."""

    def __init__(self, log_dir: str = "data/logs", prefix: str = "search"):
        """
        Initialize metrics logger.

        Args:
            log_dir: Directory to save logs
            prefix: File name prefix of the CSV file
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        self.metrics = defaultdict(list)
        self.current_step = 0

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.csv_path = os.path.join(log_dir, f"{prefix}_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_fieldnames = ["step"]
        self._rows: List[Dict[str, Any]] = []
        self._writer = None

    def log(self, key: str, value: Any, step: Optional[int] = None) -> None:
        """Log a single metric value."""
        self.log_dict({key: value}, step=step)

    def log_dict(self, metrics_dict: Dict[str, Any], step: Optional[int] = None) -> None:
        """
        Log multiple metrics as one CSV row.

        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step number (uses current_step if None)
        """
        if step is None:
            step = self.current_step

        new_fields = [key for key in metrics_dict if key not in self.csv_fieldnames]
        row = {"step": step, **metrics_dict}
        self._rows.append(row)
        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))

        if new_fields or self._writer is None:
            # header changed: rewrite the whole file
            self.csv_fieldnames.extend(new_fields)
            self.csv_file.seek(0)
            self.csv_file.truncate()
            self._writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
            self._writer.writeheader()
            self._writer.writerows(self._rows)
        else:
            self._writer.writerow(row)
        self.csv_file.flush()

    def increment_step(self) -> None:
        self.current_step += 1

    def get_metric(self, key: str) -> List[tuple]:
        """
        Get all logged values for a metric.

        Returns:
            List of (step, value) tuples
        """
        return self.metrics.get(key, [])

    def close(self) -> None:
        """Close the CSV file."""
        if not self.csv_file.closed:
            self.csv_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
