"""
Configuration for the Trajectory client.

Settings come from three places, later ones winning:
    1. Built-in defaults
    2. YAML file (TRAJECTORY_CONFIG, default ./trajectory.yaml)
    3. Environment variables (a local .env is loaded on import)
"""

import os
import yaml
from pathlib import Path
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv

from .models.errors import ConfigurationError

# Load environment variables
load_dotenv()

DEFAULT_BASE_URL = "https://www.apptrajectory.com/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONFIG_FILE = Path("trajectory.yaml")


@dataclass
class TrajectorySettings:
    """Connection settings for the Trajectory API."""
    api_key: Optional[str] = None
    account_keyword: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def account_url(self) -> str:
        """Base URI every account-scoped request is built on."""
        self.require_credentials()
        return f"{self.base_url.rstrip('/')}/{self.api_key}/accounts/{self.account_keyword}"

    def require_credentials(self) -> None:
        """Raise ConfigurationError if the API key or account is missing."""
        missing = []
        if not self.api_key:
            missing.append("TRAJECTORY_API_KEY")
        if not self.account_keyword:
            missing.append("TRAJECTORY_ACCOUNT_KEYWORD")
        if missing:
            raise ConfigurationError(f"Missing Trajectory settings: {', '.join(missing)}")


def load_config_file(path: Optional[Path] = None) -> dict:
    """Load settings overrides from YAML. Missing file means no overrides."""
    if path is None:
        path = Path(os.environ.get("TRAJECTORY_CONFIG", DEFAULT_CONFIG_FILE))
    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(path: Optional[Path] = None) -> TrajectorySettings:
    """Build settings from defaults, the YAML file and the environment."""
    file_cfg = load_config_file(path)

    timeout = os.environ.get("TRAJECTORY_TIMEOUT", file_cfg.get("timeout", DEFAULT_TIMEOUT))
    try:
        timeout = float(timeout)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid timeout: {timeout!r}")

    return TrajectorySettings(
        api_key=os.environ.get("TRAJECTORY_API_KEY", file_cfg.get("api_key")),
        account_keyword=os.environ.get("TRAJECTORY_ACCOUNT_KEYWORD", file_cfg.get("account_keyword")),
        base_url=os.environ.get("TRAJECTORY_BASE_URL", file_cfg.get("base_url", DEFAULT_BASE_URL)),
        timeout=timeout,
    )
