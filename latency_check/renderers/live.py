"""Incremental renderer rewriting each target's line in place."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from colorama import Cursor
from colorama.ansi import clear_line

from latency_check.models.outcome import ProbeRecord
from latency_check.models.result_set import ResultSet
from latency_check.renderers.base import Renderer
from latency_check.renderers.manifest import RendererManifest
from latency_check.renderers.styles import describe_record


def line_prefix(index: int, target: str) -> str:
    """Return the text shared by the placeholder and the final line."""
    return f"{index + 1}. Testing {target}... "


@dataclass(kw_only=True)
class LiveRenderer(Renderer):
    """Renderer updating one terminal line per target as probes complete.

    ``start`` prints one placeholder line per target and leaves the cursor at
    column 0 below the last one. Each ``finalize`` moves up to its own row,
    rewrites it and moves back down, so the cursor always returns to the same
    place and no other row is touched.
    """

    _line_count: int = field(default=0, init=False)

    def start(self, targets: Sequence[str]) -> None:
        """Print a placeholder line for every target."""
        self._line_count = len(targets)
        self.write(
            "".join(
                f"{line_prefix(index, target)}\n"
                for index, target in enumerate(targets)
            )
        )

    def finalize(self, record: ProbeRecord) -> None:
        """Rewrite the line of the completed target."""
        rows_up = self._line_count - record.index
        self.write(
            Cursor.UP(rows_up)
            + clear_line()
            + "\r"
            + line_prefix(record.index, record.target)
            + describe_record(record, color=self.color)
            + Cursor.DOWN(rows_up)
            + "\r"
        )

    def finish(self, result_set: ResultSet) -> None:
        """Leave the cursor below all output."""
        self.write("\n")


live_manifest = RendererManifest(
    description="update each target's line in place as probes complete",
    renderer_factory=LiveRenderer,
    holds_terminal=True,
)
