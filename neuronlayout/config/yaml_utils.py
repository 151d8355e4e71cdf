"""YAML loading for layout seed descriptions."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Dict, TextIO, Union

import yaml


class LayoutYamlLoader(yaml.SafeLoader):
    """Safe loader that refuses a mapping key given twice.

    A seed listing ``active:`` twice would otherwise keep only the last list
    and drop half of the layout without a trace.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> Dict[Any, Any]:
        seen = {}
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise ValueError(
                    f"Duplicate key '{key}' at line {key_node.start_mark.line + 1} "
                    f"(first given at line {seen[key]})"
                )
            seen[key] = key_node.start_mark.line + 1
        return super().construct_mapping(node, deep=deep)


def load_layout_yaml(source: Union[str, TextIO]) -> Dict[str, Any]:
    """Parse a layout seed document.

    Args:
        source: YAML text or a file-like object supplied by the loader.

    Returns:
        The top-level mapping.

    Raises:
        ValueError: If a key repeats or the document is not a mapping.
    """
    data = yaml.load(source, Loader=LayoutYamlLoader)
    if not isinstance(data, dict):
        kind = "empty document" if data is None else type(data).__name__
        raise ValueError(f"Layout YAML must be a mapping, got {kind}")
    return data
