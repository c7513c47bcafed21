"""Common configuration classes."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Any, TypeVar

from omegaconf import OmegaConf
from path import Path
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class BaseConfig(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        from_attributes=True,
    )


class RootConfig(BaseConfig):
    """Root configuration."""

    dictionary: dict[str, Any] = Field(
        default_factory=dict,
        description="Pictogram dictionary configuration",
    )
    tagger: dict[str, Any] = Field(
        default_factory=dict,
        description="Grammatical tagger configuration",
    )
    translator: dict[str, Any] = Field(
        default_factory=dict,
        description="Translation pipeline configuration",
    )
    server: dict[str, Any] = Field(
        default_factory=dict,
        description="HTTP server configuration",
    )
    logging: dict[str, Any] | None = Field(
        default=None,
        description="Logging configuration",
    )

    def __init__(self, **data):
        """Initialize root config."""
        super().__init__(**data)
        if self.logging:
            self.setup_logging(self.logging)

    @classmethod
    def from_dict(cls, **config: Any) -> RootConfig:
        """Create RootConfig from dictionary."""
        try:
            return cls(**config)
        except ValidationError as e:
            raise ValueError(f"Invalid root configuration: {e}") from e

    @classmethod
    def from_yaml(cls, path: str | Path) -> RootConfig:
        """Load, resolve and validate a YAML configuration file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        logger.info(f"Loading config from {path}")
        conf = OmegaConf.load(path)
        data = OmegaConf.to_container(conf, resolve=True) or {}
        return cls.from_dict(**data)

    @classmethod
    def setup_logging(cls, config: dict[str, Any]) -> None:
        """Setup logging based on configuration."""
        level = config.get("level", "INFO")
        format = config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        filename = config.get("filename")

        # Configure root logger
        logging.basicConfig(level=level, format=format)

        # Add file handler if filename specified
        if filename:
            handler = RotatingFileHandler(
                filename=filename,
                maxBytes=config.get("max_bytes", 10 * 1024 * 1024),  # Default 10MB
                backupCount=config.get("backup_count", 5),
            )
            handler.setFormatter(logging.Formatter(format))
            logging.getLogger().addHandler(handler)


TConf = TypeVar("TConf", bound=BaseConfig)
