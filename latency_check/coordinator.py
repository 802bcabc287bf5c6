"""Probe coordinator fanning out one probe per target."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from latency_check.models.outcome import Failure, ProbeOutcome, ProbeRecord
from latency_check.models.result_set import ResultSet
from latency_check.probers.base import Prober
from latency_check.renderers.base import Renderer

log = logging.getLogger(__name__)

NON_RETRYABLE_FAILURES = frozenset({"request_build_error"})


@dataclass(frozen=True, kw_only=True)
class ProbeCoordinator:
    """Runs one concurrent probe per target and collects the outcomes.

    Probe tasks never touch shared state: each sends its record over a queue
    to a single collector task, which is the only writer of the result set and
    the only caller of the renderer.
    """

    prober: Prober
    max_retries: int = 0

    async def run(
        self,
        targets: Sequence[str],
        timeout: float,
        renderer: Renderer,
    ) -> ResultSet:
        """Probe all targets concurrently.

        Args:
            targets: URLs to probe, in display order
            timeout: Maximum seconds per probe attempt
            renderer: Renderer presenting the results

        Returns:
            Sealed result set holding one record per target

        """
        result_set = ResultSet(len(targets))
        renderer.start(targets)

        if not targets:
            log.info("No targets to probe")
        else:
            log.info(
                "Probing %d target(s) with timeout=%gs, max_retries=%d",
                len(targets),
                timeout,
                self.max_retries,
            )
            queue: asyncio.Queue[ProbeRecord | None] = asyncio.Queue()
            collector = asyncio.create_task(
                self._collect(queue, result_set, renderer), name="probe-collector"
            )
            tasks = [
                asyncio.create_task(
                    self._probe_target(index, target, timeout, queue),
                    name=f"probe-{index}",
                )
                for index, target in enumerate(targets)
            ]
            await asyncio.gather(*tasks)
            await queue.put(None)
            await collector
            log.info("Probing completed")

        result_set.seal()
        renderer.finish(result_set)
        return result_set

    async def _collect(
        self,
        queue: asyncio.Queue[ProbeRecord | None],
        result_set: ResultSet,
        renderer: Renderer,
    ) -> None:
        """Record and render completed probes until the sentinel arrives."""
        while (record := await queue.get()) is not None:
            result_set.record(record)
            renderer.finalize(record)

    async def _probe_target(
        self,
        index: int,
        target: str,
        timeout: float,
        queue: asyncio.Queue[ProbeRecord | None],
    ) -> None:
        """Probe a single target and send its record to the collector."""
        try:
            outcome, attempts = await self._probe_with_retries(target, timeout)
        except Exception as exc:
            log.error("Probe of %s failed unexpectedly: %s", target, exc, exc_info=exc)
            outcome, attempts = Failure(kind="network_error", detail=str(exc)), 1

        log.info(
            "Probe completed: index=%d target=%s outcome=%s", index, target, outcome
        )
        await queue.put(
            ProbeRecord(index=index, target=target, outcome=outcome, attempts=attempts)
        )

    async def _probe_with_retries(
        self, target: str, timeout: float
    ) -> tuple[ProbeOutcome, int]:
        """Probe a target, retrying failures up to max_retries times.

        Request build errors are returned straight away since retrying them
        cannot succeed.
        """
        attempt = 1
        while True:
            outcome = await self.prober.probe(target, timeout)
            if not isinstance(outcome, Failure):
                return outcome, attempt
            if outcome.kind in NON_RETRYABLE_FAILURES or attempt > self.max_retries:
                return outcome, attempt

            log.info(
                "Retrying %s after %s (attempt %d of %d)",
                target,
                outcome.kind,
                attempt + 1,
                self.max_retries + 1,
            )
            attempt += 1
