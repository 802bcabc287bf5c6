"""Renderer printing an ordered report once every probe has completed."""

from collections.abc import Sequence
from dataclasses import dataclass

from latency_check.models.outcome import ProbeRecord
from latency_check.models.result_set import ResultSet
from latency_check.renderers.base import Renderer
from latency_check.renderers.manifest import RendererManifest
from latency_check.renderers.styles import describe_record


@dataclass(kw_only=True)
class SummaryRenderer(Renderer):
    """Renderer printing placeholders up front and results at the end."""

    def start(self, targets: Sequence[str]) -> None:
        """Print an in-progress line for every target."""
        self.write(
            "".join(
                f"{index + 1}. {target}... in progress\n"
                for index, target in enumerate(targets)
            )
        )

    def finalize(self, record: ProbeRecord) -> None:
        """Results are only shown by ``finish``."""

    def finish(self, result_set: ResultSet) -> None:
        """Print one line per target in configured order."""
        if not len(result_set):
            return
        lines = ["", "Results:"]
        lines.extend(
            f"{record.index + 1}. {record.target}: "
            f"{describe_record(record, color=self.color)}"
            for record in result_set.records()
        )
        self.write("\n".join(lines) + "\n")


summary_manifest = RendererManifest(
    description="print an ordered summary once all probes complete",
    renderer_factory=SummaryRenderer,
)
