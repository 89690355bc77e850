"""CSV report writer."""

import csv
from pathlib import Path

from readme_survey.core import Report, ReportWriter


class CsvReportWriter(ReportWriter):
    """Write each report to `<destination>/<name>.csv` with a header row."""

    def write(self, reports: list[Report], destination: Path) -> list[Path]:
        destination.mkdir(parents=True, exist_ok=True)
        paths = []

        for report in reports:
            path = destination / f"{report.name}.csv"
            with open(path, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(report.columns)
                writer.writerows(report.rows)
            paths.append(path)

        return paths
