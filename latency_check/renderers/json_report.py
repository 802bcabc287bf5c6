"""Renderer printing a machine-readable JSON report."""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from latency_check.models.outcome import Failure, ProbeRecord, Success
from latency_check.models.result_set import ResultSet
from latency_check.renderers.base import Renderer
from latency_check.renderers.manifest import RendererManifest


def format_record(record: ProbeRecord) -> dict[str, Any]:
    """Format a single record for JSON output."""
    entry: dict[str, Any] = {
        "index": record.index,
        "url": record.target,
        "attempts": record.attempts,
    }
    match record.outcome:
        case Success() as success:
            entry.update(
                status="success",
                latency_ms=round(success.latency_ms, 3),
                band=success.band,
                detail=None,
            )
        case Failure(kind=kind, detail=detail):
            entry.update(status=kind, latency_ms=None, band=None, detail=detail)
    return entry


def format_report(result_set: ResultSet) -> dict[str, Any]:
    """Format a result set as a JSON-serializable report."""
    results = [format_record(record) for record in result_set.records()]
    return {
        "total": len(results),
        "succeeded": sum(1 for r in results if r["status"] == "success"),
        "timeouts": sum(1 for r in results if r["status"] == "timeout"),
        "errors": sum(
            1 for r in results if r["status"] not in {"success", "timeout"}
        ),
        "results": results,
    }


@dataclass(kw_only=True)
class JsonReportRenderer(Renderer):
    """Renderer emitting a single JSON document after the run."""

    def start(self, targets: Sequence[str]) -> None:
        """Nothing is shown while probes are in flight."""

    def finalize(self, record: ProbeRecord) -> None:
        """Nothing is shown while probes are in flight."""

    def finish(self, result_set: ResultSet) -> None:
        """Print the report."""
        self.write(json.dumps(format_report(result_set), indent=2) + "\n")


json_manifest = RendererManifest(
    description="print a JSON report once all probes complete",
    renderer_factory=JsonReportRenderer,
)
