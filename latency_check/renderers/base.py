"""Abstract base class for result renderers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from latency_check.models.outcome import ProbeRecord
from latency_check.models.result_set import ResultSet


@dataclass(kw_only=True)
class Renderer(ABC):
    """Abstract base for renderers.

    The coordinator calls ``start`` once before probing, ``finalize`` once per
    target as its probe completes (in completion order), and ``finish`` once
    after every probe has completed. Calls are never concurrent.
    """

    stream: TextIO = field(repr=False)
    color: bool = True

    @abstractmethod
    def start(self, targets: Sequence[str]) -> None:
        """Emit the initial view for the targets about to be probed."""

    @abstractmethod
    def finalize(self, record: ProbeRecord) -> None:
        """Show the outcome of a single completed target."""

    @abstractmethod
    def finish(self, result_set: ResultSet) -> None:
        """Emit whatever remains once every target has completed."""

    def write(self, text: str) -> None:
        """Write text to the stream and flush it."""
        self.stream.write(text)
        self.stream.flush()
