import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "COLORFUL_LOGGER_NAME": "colorful_logger",
    "COLORFUL_LOGGER_DEBUG": "true",
    "COLORFUL_LOGGER_FORMAT": "[%(asctime)s] [%(threadName)s/%(levelname)s] (%(name)s) %(message)s",
}

# File Paths
COLORFUL_LOGGER_DIR = Path(os.getenv("COLORFUL_LOGGER_DIR", str(Path.home() / ".colorful_logger")))
CONFIG_FILE = Path(os.getenv("COLORFUL_LOGGER_CONFIG_FILE", str(COLORFUL_LOGGER_DIR / "config.json")))


def load_config(config_file: Path = CONFIG_FILE) -> dict[str, Any]:
    """Load configuration from file"""
    if config_file.exists():
        try:
            with open(config_file) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except Exception as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, config_file: Path = CONFIG_FILE) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config(config_file)
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_bool_setting(key: str, default: bool, config_file: Path = CONFIG_FILE) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower(), config_file)
    return value.lower() in ("true", "1", "yes", "on")


# Initialize Configuration
LOGGER_NAME = get_setting("COLORFUL_LOGGER_NAME", DEFAULT_CONFIG["COLORFUL_LOGGER_NAME"]).strip()
DEBUG = get_bool_setting("COLORFUL_LOGGER_DEBUG", True)
LOG_FORMAT = get_setting("COLORFUL_LOGGER_FORMAT", DEFAULT_CONFIG["COLORFUL_LOGGER_FORMAT"])
