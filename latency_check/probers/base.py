"""Abstract base class for target probers."""

import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from latency_check.models.outcome import Failure, ProbeOutcome, Success

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class NetworkError(Exception):
    """Raised by transports when a request fails in transit."""


class RequestBuildError(Exception):
    """Raised by transports when a request cannot be constructed."""


@dataclass(frozen=True, kw_only=True)
class Prober(ABC):
    """Abstract base for probers.

    Subclasses implement the transport in ``send_request``; ``probe`` adds the
    timeout bound, latency measurement and failure classification.
    """

    @abstractmethod
    async def send_request(self, target: str) -> None:
        """Send one GET request and return once response headers arrive.

        Args:
            target: URL to request

        Raises:
            RequestBuildError: If the request cannot be built for the target
            NetworkError: If the request fails in transit
            TimeoutError: If the transport gives up waiting

        """

    async def probe(self, target: str, timeout: float) -> ProbeOutcome:
        """Probe a target once, bounded by timeout.

        Args:
            target: URL to probe
            timeout: Maximum seconds to wait for response headers

        Returns:
            Success with the measured latency, or a classified Failure

        """
        start = time.perf_counter()
        try:
            async with asyncio.timeout(timeout):
                await self.send_request(target)
        except TimeoutError:
            return Failure(kind="timeout", detail=f"No response within {timeout:g}s")
        except RequestBuildError as exc:
            return Failure(kind="request_build_error", detail=str(exc))
        except NetworkError as exc:
            return Failure(kind="network_error", detail=str(exc))

        latency = time.perf_counter() - start
        if latency >= timeout:
            return Failure(kind="timeout", detail=f"No response within {timeout:g}s")
        return Success(latency=latency)
