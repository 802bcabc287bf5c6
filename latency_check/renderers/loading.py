"""Loading of renderers from entry points."""

from collections.abc import Sequence
from importlib.metadata import entry_points

from latency_check.renderers.manifest import RendererManifest

ENTRY_POINT_GROUP = "latency_check.renderers"


class RendererNotFoundError(Exception):
    """Raised when a renderer is not found."""


def available_renderers() -> Sequence[str]:
    """Return the keys of all registered renderers, sorted."""
    return sorted(entry.name for entry in entry_points(group=ENTRY_POINT_GROUP))


def load_renderer_manifest(key: str) -> RendererManifest:
    """Load a renderer manifest by key.

    Args:
        key: The renderer key as registered in pyproject.toml
             (e.g., "live", "summary")

    Returns:
        The renderer manifest instance

    Raises:
        RendererNotFoundError: If no renderer with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: RendererManifest = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise RendererNotFoundError(
        f"Renderer '{key}' not found. Available renderers: {available}"
    )
