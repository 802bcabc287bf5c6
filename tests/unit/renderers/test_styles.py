"""Tests for shared status text."""

import pytest
from colorama import Fore, Style

from latency_check.models.outcome import Failure, Success
from latency_check.renderers.styles import describe_record, format_latency, paint
from latency_check.testing.factories import ProbeRecordFactory


def test_format_latency() -> None:
    """Formats seconds as milliseconds with three decimals."""
    assert format_latency(0.0123456) == "12.346ms"


def test_paint_without_color_returns_text() -> None:
    """Leaves text alone when color is disabled."""
    assert paint("x", Fore.RED, color=False) == "x"


@pytest.mark.parametrize(
    ("latency", "style"),
    [
        (0.499, Fore.GREEN),
        (0.5, Fore.YELLOW),
        (1.0, Fore.YELLOW),
        (1.2, Fore.RED),
    ],
)
def test_latency_color_follows_band(latency: float, style: str) -> None:
    """Colors latency by band and resets formatting afterwards."""
    record = ProbeRecordFactory.build(outcome=Success(latency=latency))

    text = describe_record(record, color=True)

    assert text == f"{style}{format_latency(latency)}{Style.RESET_ALL}"


def test_timeout_label() -> None:
    """Timeouts get a distinct label."""
    record = ProbeRecordFactory.build(
        outcome=Failure(kind="timeout", detail="No response within 5s")
    )

    assert describe_record(record, color=False) == "TIMEOUT"


@pytest.mark.parametrize("kind", ["network_error", "request_build_error"])
def test_error_label_includes_detail(kind: str) -> None:
    """Other failures show their detail."""
    record = ProbeRecordFactory.build(
        outcome=Failure(kind=kind, detail="boom")  # type: ignore[arg-type]
    )

    assert describe_record(record, color=True) == (
        f"{Fore.RED}ERROR: boom{Style.RESET_ALL}"
    )


def test_attempts_are_shown_after_retries() -> None:
    """Records that needed retries mention the attempt count."""
    record = ProbeRecordFactory.build(outcome=Success(latency=0.1), attempts=2)

    assert describe_record(record, color=False) == "100.000ms (2 attempts)"
