"""CLI entry point for the URL latency checker."""

import argparse
import asyncio
import contextlib
import logging
import logging.handlers
import sys
from collections.abc import Iterator
from pathlib import Path

from colorama import just_fix_windows_console

from latency_check.config import DEFAULT_CONFIG_PATH, ConfigError, load_settings
from latency_check.coordinator import ProbeCoordinator
from latency_check.models.outcome import Failure, Success
from latency_check.models.result_set import ResultSet
from latency_check.probers.http import HttpProber
from latency_check.renderers.loading import (
    available_renderers,
    load_renderer_manifest,
)

DEFAULT_MODE = "live"

STATUS_SYMBOLS = {
    "success": "✓",
    "timeout": "⏱",
    "network_error": "✗",
    "request_build_error": "!",
}


def log_results_summary(log: logging.Logger, result_set: ResultSet) -> None:
    """Log a formatted summary of probe results."""
    log.info("=" * 80)
    log.info("Probe Results Summary:")
    log.info("=" * 80)

    for record in result_set.records():
        match record.outcome:
            case Success(latency=latency):
                log.info(
                    "%s %s: success (%.3fms, %d attempt(s))",
                    STATUS_SYMBOLS["success"],
                    record.target,
                    latency * 1000,
                    record.attempts,
                )
            case Failure(kind=kind, detail=detail):
                log.info(
                    "%s %s: %s (%d attempt(s))",
                    STATUS_SYMBOLS.get(kind, "?"),
                    record.target,
                    kind,
                    record.attempts,
                )
                if detail:
                    log.info("  Detail: %s", detail)


@contextlib.contextmanager
def deferred_log_output() -> Iterator[None]:
    """Hold back log records until the block exits.

    The root handlers are detached while the block runs and every record
    emitted meanwhile is replayed through them, in order, afterwards.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    buffer = logging.handlers.MemoryHandler(
        capacity=sys.maxsize, flushLevel=logging.CRITICAL + 1
    )
    for handler in handlers:
        root.removeHandler(handler)
    root.addHandler(buffer)
    try:
        yield
    finally:
        root.removeHandler(buffer)
        for handler in handlers:
            root.addHandler(handler)
        for record in buffer.buffer:
            for handler in handlers:
                if record.levelno >= handler.level:
                    handler.handle(record)
        buffer.close()


async def run(config_path: Path, mode: str, *, color: bool = True) -> int:
    """Probe the configured URLs and return exit code."""
    log = logging.getLogger("latency_check")

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        print(f"Error loading config: {exc}", file=sys.stderr)
        return 2

    log.info("Loading renderer: %s", mode)
    manifest = load_renderer_manifest(mode)
    renderer = manifest.renderer_factory(stream=sys.stdout, color=color)

    async with HttpProber.from_session_config() as prober:
        coordinator = ProbeCoordinator(prober=prober, max_retries=settings.max_retries)
        hold = (
            deferred_log_output()
            if manifest.holds_terminal
            else contextlib.nullcontext()
        )
        with hold:
            result_set = await coordinator.run(
                settings.urls, settings.timeout, renderer
            )

    log_results_summary(log, result_set)

    has_failures = any(not record.succeeded for record in result_set.records())
    return 1 if has_failures else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Measure HTTP response latency of configured URLs"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to the JSON configuration file (default: %(default)s)",
    )
    parser.add_argument(
        "--mode",
        default=DEFAULT_MODE,
        choices=available_renderers(),
        help="How to render results (default: %(default)s)",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Disable colored output",
    )
    parser.add_argument(
        "--wait",
        action="store_true",
        help="Wait for Enter before exiting",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    just_fix_windows_console()

    exit_code = asyncio.run(run(args.config, args.mode, color=args.color))

    if args.wait:
        with contextlib.suppress(EOFError):
            input("Press Enter to exit...")
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
