"""
Warden Report Generator
========================

JSON reports from Warden scan results. The output is machine-readable
structured data suitable for CI pipelines and other tooling. Raw
passwords never appear in a report: the target is always a placeholder
and analyses carry only the masked form.

References:
    - OWASP Reporting Guidelines. https://owasp.org/www-community/
    - SARIF v2.1.0 Specification (OASIS, 2020).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shared.models import ScanResult

REPORT_VERSION = "1.0.0"


class WardenReportGenerator:
    """Builds and writes JSON reports from :class:`ScanResult` objects.

    Usage::

        generator = WardenReportGenerator()
        text = generator.render_json(scan_result)
        generator.generate_json(scan_result, Path("report.json"))
    """

    def build_report(self, result: ScanResult) -> dict[str, Any]:
        """Plain-dict report for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": REPORT_VERSION,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "highest_severity": (
                    result.highest_severity.value if result.highest_severity else None
                ),
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "risk": result.risk.model_dump(mode="json") if result.risk else None,
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "metadata": result.metadata,
        }

    def render_json(self, result: ScanResult) -> str:
        return json.dumps(self.build_report(result), indent=2, ensure_ascii=False, default=str)

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the JSON report for *result* to *output_path*.

        Parent directories are created as needed.

        Returns:
            The path written.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path
