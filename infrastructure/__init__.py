"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Coverage file reading and artifact writing
- Observability (logging)

This is the only layer that performs I/O operations.
"""

from infrastructure.config import DashboardConfig, load_dashboard_config
from infrastructure.io import read_coverage_text

__all__ = [
    "load_dashboard_config",
    "DashboardConfig",
    "read_coverage_text",
]
