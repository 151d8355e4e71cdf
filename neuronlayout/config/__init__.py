"""Layout seed configuration and YAML helpers."""

from .schema import LayoutConfig, LayoutGridConfig
from .yaml_utils import load_layout_yaml

__all__ = ["LayoutConfig", "LayoutGridConfig", "load_layout_yaml"]
