from .component import ComponentFactory
from .config import BaseConfig, RootConfig
from .exceptions import ResourceLoadError

__all__ = ["BaseConfig", "ComponentFactory", "ResourceLoadError", "RootConfig"]
