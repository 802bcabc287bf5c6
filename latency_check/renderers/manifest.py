"""Renderer manifest definition for the plugin system."""

from dataclasses import dataclass
from typing import Protocol, TextIO

from latency_check.renderers.base import Renderer


class RendererFactory(Protocol):
    """Protocol for callables building a renderer."""

    def __call__(self, *, stream: TextIO, color: bool) -> Renderer:
        """Create a renderer writing to stream."""


@dataclass(frozen=True, kw_only=True)
class RendererManifest:
    """Manifest describing a renderer plugin.

    The manifest holds a short description for the CLI help and the factory
    used to build the renderer once its key has been selected. Renderers that
    move the cursor over their own output set ``holds_terminal`` so nothing
    else is written to the terminal while they run.
    """

    description: str
    renderer_factory: RendererFactory
    holds_terminal: bool = False
