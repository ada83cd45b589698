"""Read-only access to the tool's home directory and `set-config.yml`"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

ROOT_HOME_ENV = "SERVERLESS_DEVS_CONFIG_HOME"
CONFIG_FILENAME = "set-config.yml"


def default_root_home() -> Path:
    """Root home from the environment, falling back to `~/.s`."""
    env_home = os.environ.get(ROOT_HOME_ENV)
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".s"


def get_config(key: str, default: Any = None, root_home: Optional[Path] = None) -> Any:
    """Return a value from `<root_home>/set-config.yml`, or `default`."""
    root_home = Path(root_home) if root_home else default_root_home()
    config_file = root_home / CONFIG_FILENAME

    if not config_file.exists():
        return default

    try:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.debug("Ignoring unreadable %s: %s", config_file, e)
        return default

    if not isinstance(data, dict):
        return default

    value = data.get(key)
    return default if value is None else value
