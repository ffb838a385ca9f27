"""Configuration module for the social graph engine."""

import os
import sys
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_GRAPH_FILE = Path(__file__).parent.parent / "data" / "social_graph.json"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class DataSourceConfig:
    """Where graph data is read from."""
    # "file" (JSON snapshot loaded into a GraphStore) or "api" (remote service)
    backend: str = field(default_factory=lambda: os.getenv("SOCIALGRAPH_BACKEND", "file").lower())
    graph_file: Path = field(default_factory=lambda: Path(os.getenv("SOCIALGRAPH_GRAPH_FILE", str(DEFAULT_GRAPH_FILE))))
    api_base_url: str = field(default_factory=lambda: os.getenv("SOCIALGRAPH_API_URL", "http://localhost:8080/api/v1"))
    api_timeout: float = field(default_factory=lambda: float(os.getenv("SOCIALGRAPH_API_TIMEOUT", "30")))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv("SOCIALGRAPH_LOG_LEVEL", "INFO").upper())
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("SOCIALGRAPH_LOG_FILE") or None)


@dataclass
class Config:
    """Main configuration container."""
    data: DataSourceConfig = field(default_factory=DataSourceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config() -> Config:
    """Load configuration from environment variables."""
    return Config()


def setup_logging(config: Optional[LoggingConfig] = None, verbose: bool = False):
    """Configure logging."""
    config = config or LoggingConfig()
    level = logging.DEBUG if verbose else getattr(logging, config.level, logging.INFO)

    handlers = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers
    )
