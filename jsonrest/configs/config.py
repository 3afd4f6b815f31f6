from dataclasses import dataclass, field
import os
import logging
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

logger = logging.getLogger(__name__)


@dataclass
class Config:
    base_url: str = ""
    keep_alive: bool = False
    default_headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None
    max_workers: int = 4
    debug: bool = False
    rich_logging: bool = True


def setup_logging(config: "Config") -> None:
    """Configure logging level based on ``config.debug``."""
    level = logging.DEBUG if config.debug else logging.INFO
    if config.rich_logging:
        install_rich_traceback()
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[RichHandler(rich_tracebacks=True)],
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    # Suppress noisy connection pool output from the transport
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def parse_header_string(value: str) -> Dict[str, str]:
    """Parse ``"Name: value;Other: value"`` into a header mapping."""
    headers: Dict[str, str] = {}
    for item in value.split(";"):
        if not item.strip():
            continue
        name, sep, val = item.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header {item.strip()!r}, expected 'Name: value'")
        headers[name.strip()] = val.strip()
    return headers


def load_config(path: str = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    load_dotenv()
    logger.debug("Loading configuration from %s", path or "default config.yml")

    # If no path provided, use default relative to this config.py file
    if path is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(config_dir, "config.yml")

    data = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("Loaded YAML configuration from %s", path)

    def _env_bool(name: str, default: bool) -> bool:
        val = os.getenv(name)
        if val is None:
            return bool(default)
        return val.lower() in {"1", "true", "yes", "on"}

    def _env_int(name: str, default: int) -> int:
        val = os.getenv(name)
        if val is None:
            return int(default)
        try:
            return int(val)
        except ValueError:
            return default

    def _env_float(name: str, default: Optional[float]) -> Optional[float]:
        val = os.getenv(name)
        if val is None or not val.strip():
            return float(default) if default is not None else None
        try:
            return float(val)
        except ValueError:
            return default

    headers = {str(k): str(v) for k, v in (data.get("default_headers") or {}).items()}
    env_headers = os.getenv("JSONREST_HEADERS")
    if env_headers:
        headers.update(parse_header_string(env_headers))

    return Config(
        base_url=os.getenv("JSONREST_BASE_URL", data.get("base_url") or ""),
        keep_alive=_env_bool("JSONREST_KEEP_ALIVE", data.get("keep_alive", False)),
        default_headers=headers,
        timeout=_env_float("JSONREST_TIMEOUT", data.get("timeout")),
        max_workers=_env_int("JSONREST_MAX_WORKERS", data.get("max_workers", 4)),
        debug=_env_bool("DEBUG", data.get("debug", False)),
        rich_logging=_env_bool("RICH_LOGGING", data.get("rich_logging", True)),
    )
