"""HTTP prober backed by aiohttp."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from latency_check.probers.base import (
    USER_AGENT,
    NetworkError,
    Prober,
    RequestBuildError,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpProber(Prober):
    """Prober issuing real HTTP GET requests."""

    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_session_config(cls) -> AsyncGenerator["HttpProber", None]:
        """Create prober with managed session lifecycle.

        The connector is unbounded so every target gets its own connection
        immediately, and aiohttp timeouts are disabled so the bound applied by
        ``probe`` is the only one.
        """
        connector = aiohttp.TCPConnector(limit=0)
        timeout = aiohttp.ClientTimeout(total=None, sock_connect=None)
        async with aiohttp.ClientSession(
            connector=connector, timeout=timeout
        ) as session:
            yield cls(session=session)

    async def send_request(self, target: str) -> None:
        """Send GET to target and release the response without reading it."""
        headers = {"User-Agent": USER_AGENT}
        try:
            async with self.session.get(target, headers=headers) as response:
                log.debug("GET %s -> %d", target, response.status)
        except aiohttp.InvalidURL as exc:
            raise RequestBuildError(f"Invalid URL: {exc}") from exc
        except TimeoutError:
            raise
        except aiohttp.ClientError as exc:
            raise NetworkError(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise RequestBuildError(str(exc)) from exc
        except OSError as exc:
            raise NetworkError(str(exc) or type(exc).__name__) from exc
