"""
Configuration for dualtodo.

Settings live in a plain key=value file (one setting per line, '#' starts a
comment), by default ~/.config/dualtodo/dualtodo.conf. Anything missing or
unreadable falls back to the defaults below.
"""
import os
from dataclasses import dataclass, fields
from typing import Optional

from dualtodo import logger

DEFAULT_DATA_DIR = "data"
DEFAULT_DATA_FILE = "2022_09_27.todo"
DEFAULT_LOG_FILE = "dualtodo.log"
CONFIG_FILENAME = "dualtodo.conf"

@dataclass
class Config:
    data_dir: str = DEFAULT_DATA_DIR
    data_file: str = DEFAULT_DATA_FILE
    log_file: str = DEFAULT_LOG_FILE

def default_config_path() -> str:
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return os.path.join(config_home, "dualtodo", CONFIG_FILENAME)

def load_config(path: Optional[str] = None) -> Config:
    """
    Load settings from `path` (or the default location).
    Malformed lines and unknown keys are logged and skipped.
    """
    config_path = path or default_config_path()
    config = Config()
    if not os.path.isfile(config_path):
        return config

    known = {f.name for f in fields(Config)}
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.log(f"error reading config {config_path}: {e}")
        return config

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            logger.log(f"{config_path}:{lineno}: ignoring malformed line")
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if key not in known:
            logger.log(f"{config_path}:{lineno}: unknown setting '{key}'")
            continue
        if value:
            setattr(config, key, os.path.expanduser(value))
    return config
