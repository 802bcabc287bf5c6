"""Status text shared by the terminal renderers."""

from collections.abc import Mapping

from colorama import Fore, Style

from latency_check.models.outcome import Failure, LatencyBand, ProbeRecord, Success

BAND_COLORS: Mapping[LatencyBand, str] = {
    "fast": Fore.GREEN,
    "moderate": Fore.YELLOW,
    "slow": Fore.RED,
}
FAILURE_COLOR = Fore.RED


def paint(text: str, style: str, *, color: bool) -> str:
    """Wrap text in a style, resetting afterwards."""
    if not color:
        return text
    return f"{style}{text}{Style.RESET_ALL}"


def format_latency(latency: float) -> str:
    """Format a latency in seconds as milliseconds."""
    return f"{latency * 1000:.3f}ms"


def describe_record(record: ProbeRecord, *, color: bool) -> str:
    """Return the status text for a completed target."""
    match record.outcome:
        case Success() as success:
            status = paint(
                format_latency(success.latency), BAND_COLORS[success.band], color=color
            )
        case Failure(kind="timeout"):
            status = paint("TIMEOUT", FAILURE_COLOR, color=color)
        case Failure(detail=detail):
            status = paint(f"ERROR: {detail}", FAILURE_COLOR, color=color)

    if record.attempts > 1:
        status += f" ({record.attempts} attempts)"
    return status
