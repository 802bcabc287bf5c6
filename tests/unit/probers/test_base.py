"""Tests for Prober base class."""

import itertools
from unittest.mock import patch

import pytest

from latency_check.models.outcome import Failure, Success
from latency_check.probers.base import NetworkError, RequestBuildError
from latency_check.testing.fakes import ScriptedProber


class TestProbe:
    """Tests for probe method."""

    async def test_returns_success_with_latency(self) -> None:
        """Returns the measured latency when the transport answers."""
        prober = ScriptedProber(delays={"https://fast.example": 0.05})

        outcome = await prober.probe("https://fast.example", timeout=1.0)

        assert isinstance(outcome, Success)
        assert outcome.latency >= 0.05
        assert outcome.band == "fast"

    async def test_success_just_below_timeout(self) -> None:
        """A response arriving just before the timeout succeeds."""
        prober = ScriptedProber(delays={"https://edge.example": 0.15})

        outcome = await prober.probe("https://edge.example", timeout=0.3)

        assert isinstance(outcome, Success)

    async def test_timeout_just_above_timeout(self) -> None:
        """A response arriving after the timeout is a timeout failure."""
        prober = ScriptedProber(delays={"https://edge.example": 0.4})

        outcome = await prober.probe("https://edge.example", timeout=0.3)

        assert outcome == Failure(kind="timeout", detail="No response within 0.3s")

    async def test_latency_equal_to_timeout_is_timeout(self) -> None:
        """A response measured exactly at the timeout is not a success."""
        prober = ScriptedProber()
        clock = itertools.chain([10.0, 10.5], itertools.repeat(10.5))

        with patch("latency_check.probers.base.time.perf_counter") as perf_counter:
            perf_counter.side_effect = clock
            outcome = await prober.probe("https://edge.example", timeout=0.5)

        assert outcome == Failure(kind="timeout", detail="No response within 0.5s")

    async def test_transport_timeout_is_timeout(self) -> None:
        """TimeoutError raised by the transport is a timeout failure."""
        prober = ScriptedProber(errors={"https://t.example": TimeoutError()})

        outcome = await prober.probe("https://t.example", timeout=2.0)

        assert isinstance(outcome, Failure)
        assert outcome.kind == "timeout"

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (NetworkError("Connection refused"), "network_error"),
            (RequestBuildError("Invalid URL: nope"), "request_build_error"),
        ],
    )
    async def test_classifies_transport_errors(
        self, error: Exception, kind: str
    ) -> None:
        """Transport errors become failures carrying their message."""
        prober = ScriptedProber(errors={"https://dead.example": error})

        outcome = await prober.probe("https://dead.example", timeout=2.0)

        assert outcome == Failure(kind=kind, detail=str(error))  # type: ignore[arg-type]

    async def test_unexpected_errors_propagate(self) -> None:
        """Errors outside the transport contract are not swallowed."""
        prober = ScriptedProber(errors={"https://bug.example": KeyError("boom")})

        with pytest.raises(KeyError):
            await prober.probe("https://bug.example", timeout=2.0)

    async def test_transient_failures_counted_per_url(self) -> None:
        """Repeated calls for one URL draw on the same failure budget."""
        prober = ScriptedProber(transient_failures={"https://flaky.example": 1})

        first = await prober.probe("https://flaky.example", timeout=1.0)
        second = await prober.probe("https://flaky.example", timeout=1.0)

        assert first == Failure(
            kind="network_error", detail="transient failure for https://flaky.example"
        )
        assert isinstance(second, Success)
