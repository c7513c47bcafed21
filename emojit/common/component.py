from __future__ import annotations

from typing import Any, Generic

from emojit.common.config import TConf


class ComponentFactory(Generic[TConf]):
    """Base class for components built from a config section."""

    _config_type: type[TConf]
    _instance_config: TConf

    def __init__(self, config: TConf) -> None:
        self._instance_config = config

    @classmethod
    def from_config(cls, config: dict[str, Any] | TConf | None = None) -> ComponentFactory:
        """Create a component from a config section or a validated config.

        An empty or missing section gives the component its defaults.
        """
        if isinstance(config, cls._config_type):
            return cls(config)
        return cls(cls._config_type(**(config or {})))

    @property
    def config(self) -> TConf:
        """Validated component configuration."""
        return self._instance_config
