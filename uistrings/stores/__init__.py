"""Resource stores backing the string catalog."""

from .base import ResourceStore
from .memory import DictResourceStore
from .yaml_store import YamlResourceStore

__all__ = [
    "ResourceStore",
    "DictResourceStore",
    "YamlResourceStore",
]
