"""Models for the outcome of probing a single target."""

from dataclasses import dataclass
from typing import Literal

FailureKind = Literal["timeout", "network_error", "request_build_error"]
LatencyBand = Literal["fast", "moderate", "slow"]

FAST_THRESHOLD_MS = 500.0
SLOW_THRESHOLD_MS = 1000.0


def latency_band(latency: float) -> LatencyBand:
    """Classify a latency (in seconds) into one of three bands.

    Below 500ms is fast, 500ms to 1000ms inclusive is moderate, anything
    above 1000ms is slow.
    """
    milliseconds = latency * 1000
    if milliseconds < FAST_THRESHOLD_MS:
        return "fast"
    if milliseconds <= SLOW_THRESHOLD_MS:
        return "moderate"
    return "slow"


@dataclass(frozen=True, kw_only=True)
class Success:
    """A probe that received response headers in time."""

    latency: float

    def __post_init__(self) -> None:
        if self.latency < 0:
            raise ValueError(f"Latency must not be negative, got {self.latency}")

    @property
    def band(self) -> LatencyBand:
        """Latency band of this result."""
        return latency_band(self.latency)

    @property
    def latency_ms(self) -> float:
        """Latency in milliseconds."""
        return self.latency * 1000


@dataclass(frozen=True, kw_only=True)
class Failure:
    """A probe that did not produce a response."""

    kind: FailureKind
    detail: str = ""


ProbeOutcome = Success | Failure


@dataclass(frozen=True, kw_only=True)
class ProbeRecord:
    """Outcome of probing the target at a given position.

    Targets are identified by index, so duplicated URLs get separate records.
    """

    index: int
    target: str
    outcome: ProbeOutcome
    attempts: int = 1

    @property
    def succeeded(self) -> bool:
        """Whether the probe succeeded."""
        return isinstance(self.outcome, Success)
