"""Tests for the final-summary renderer."""

import io

from latency_check.coordinator import ProbeCoordinator
from latency_check.models.result_set import ResultSet
from latency_check.probers.base import NetworkError
from latency_check.renderers.summary import SummaryRenderer
from latency_check.testing.factories import ProbeRecordFactory
from latency_check.testing.fakes import ScriptedProber


def test_start_prints_in_progress_lines() -> None:
    """Prints a static placeholder per target."""
    stream = io.StringIO()
    renderer = SummaryRenderer(stream=stream)

    renderer.start(["https://a.example", "https://b.example"])

    assert stream.getvalue() == (
        "1. https://a.example... in progress\n2. https://b.example... in progress\n"
    )


def test_finalize_prints_nothing() -> None:
    """Completed probes are not shown until the end."""
    stream = io.StringIO()
    renderer = SummaryRenderer(stream=stream)

    renderer.finalize(ProbeRecordFactory.build())

    assert stream.getvalue() == ""


def test_finish_with_no_targets_prints_nothing() -> None:
    """An empty run renders no result lines."""
    stream = io.StringIO()
    renderer = SummaryRenderer(stream=stream)
    renderer.start([])

    renderer.finish(ResultSet(0))

    assert stream.getvalue() == ""


async def test_results_follow_configured_order() -> None:
    """Results are listed in input order, not completion order."""
    stream = io.StringIO()
    prober = ScriptedProber(
        delays={"https://fast.example": 0.1, "https://slow.example": 0.8},
        errors={"https://dead.example": NetworkError("no such host")},
    )
    renderer = SummaryRenderer(stream=stream, color=False)

    await ProbeCoordinator(prober=prober).run(
        ["https://fast.example", "https://slow.example", "https://dead.example"],
        timeout=2.0,
        renderer=renderer,
    )

    output = stream.getvalue().splitlines()
    assert output[:4] == [
        "1. https://fast.example... in progress",
        "2. https://slow.example... in progress",
        "3. https://dead.example... in progress",
        "",
    ]
    assert output[4] == "Results:"
    assert output[5].startswith("1. https://fast.example: ")
    assert output[5].endswith("ms")
    assert output[6].startswith("2. https://slow.example: ")
    assert output[7] == "3. https://dead.example: ERROR: no such host"
    assert len(output) == 8
