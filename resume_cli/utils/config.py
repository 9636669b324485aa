"""
Client settings for talking to the compilation service.

Settings are layered with OmegaConf, later sources overriding earlier ones:

    ClientSettings defaults
    -> YAML file (--config or RESUME_CLI_CONFIG)
    -> environment (RESUME_API_BASE, RESUME_API_TIMEOUT, RESUME_LOGS_PATH)
    -> explicit overrides (CLI flags)

Example config file:

    api_base: https://resume.example.com
    timeout: 10
    log_dir: outs/logs
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from resume_cli.exceptions import ConfigError

load_dotenv()

DEFAULT_API_BASE = "http://localhost:3001"
DEFAULT_TIMEOUT = 30.0

# Environment variable -> settings field
ENV_OVERRIDES = {
    "RESUME_API_BASE": "api_base",
    "RESUME_API_TIMEOUT": "timeout",
    "RESUME_LOGS_PATH": "log_dir",
}


@dataclass
class ClientSettings:
    """
    Explicit HTTP client configuration.

    Attributes:
        api_base: Service base URL; requests go to <api_base>/jobs
        timeout: Seconds to wait for connect/read/write before giving up
        follow_redirects: Whether 3xx responses are followed (off: a 3xx is a service error)
        log_dir: Directory for the DEBUG log file (None disables file logging)
    """

    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = False
    log_dir: Optional[str] = None


def _env_overrides() -> Dict[str, Any]:
    """Collect settings from environment variables that are set and non-empty."""
    overrides = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            overrides[field_name] = value
    return overrides


def load_settings(
    config_path: Optional[Path] = None,
    **overrides: Any,
) -> ClientSettings:
    """
    Resolve client settings from defaults, file, environment and overrides.

    Args:
        config_path: YAML file with settings (defaults to RESUME_CLI_CONFIG if set)
        **overrides: Field values taking precedence over everything else; None values are ignored

    Returns:
        ClientSettings instance

    Raises:
        ConfigError: If the file cannot be loaded, has unknown keys or ill-typed values
    """
    if config_path is None and os.getenv("RESUME_CLI_CONFIG"):
        config_path = Path(os.getenv("RESUME_CLI_CONFIG"))

    schema = OmegaConf.structured(ClientSettings)
    layers = [schema]

    if config_path is not None:
        try:
            layers.append(OmegaConf.load(config_path))
        except OSError as e:
            raise ConfigError(f"cannot read config file: {e.strerror or e}", config_path) from e
        except Exception as e:  # YAML syntax errors surface as several yaml exception types
            raise ConfigError(f"cannot parse config file: {e}", config_path) from e

    layers.append(OmegaConf.create(_env_overrides()))
    layers.append(OmegaConf.create({k: v for k, v in overrides.items() if v is not None}))

    try:
        merged = OmegaConf.merge(*layers)
        settings = OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ConfigError(f"invalid settings: {e}", config_path) from e

    if not settings.timeout > 0:
        raise ConfigError(f"timeout must be positive, got {settings.timeout}", config_path)

    return settings
