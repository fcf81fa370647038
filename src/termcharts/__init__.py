"""termcharts - character-grid charts for text-mode dashboards."""

from __future__ import annotations

__version__ = "0.1.0"
