"""Probers measuring the latency of a single target."""

from latency_check.probers.base import (
    USER_AGENT,
    NetworkError,
    Prober,
    RequestBuildError,
)
from latency_check.probers.http import HttpProber

__all__ = ["USER_AGENT", "HttpProber", "NetworkError", "Prober", "RequestBuildError"]
