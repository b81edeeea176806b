"""Summaries of Phalanx evaluator timings from Teuchos TimeMonitor reports."""

from __future__ import annotations

__version__ = "0.1.0"
