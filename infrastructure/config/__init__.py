"""
Configuration management: models, loading, and validation.

Handles:
- DashboardConfig: input file, column names, output location, heatmap threshold
- YAML loading with environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_dashboard_config
from infrastructure.config.models import DashboardConfig

__all__ = [
    "DashboardConfig",
    "load_dashboard_config",
]
