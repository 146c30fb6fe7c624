from pathlib import Path

# Repo-root conventional directories/files (overrideable via dashboard.yaml)
CONFIG_DIR = Path("configs")
DASHBOARD_FILE = CONFIG_DIR / "dashboard.yaml"

DATA_DIR = Path("data")

# Environment variable overrides
ENV_INPUT_FILE = "COVERAGE_INPUT_FILE"
ENV_CONFIG_FILE = "COVERAGE_CONFIG_FILE"
