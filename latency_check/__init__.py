"""Concurrent HTTP latency checker with live terminal rendering."""
