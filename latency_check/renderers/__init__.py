"""Renderers presenting probe results."""

from latency_check.renderers.base import Renderer
from latency_check.renderers.json_report import JsonReportRenderer
from latency_check.renderers.live import LiveRenderer
from latency_check.renderers.summary import SummaryRenderer

__all__ = ["JsonReportRenderer", "LiveRenderer", "Renderer", "SummaryRenderer"]
