"""YAML reading and writing with string keys throughout."""

from __future__ import annotations

from typing import Any

import yaml

__all__ = ["unmarshal", "unmarshal_strict", "to_yaml"]

_STR_TAG = "tag:yaml.org,2002:str"


def _key(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def _transform(value: Any) -> Any:
    # Every container is rebuilt, so the output never shares nodes and
    # the dumper has no reason to emit anchors or aliases.
    if isinstance(value, dict):
        return {_key(k): _transform(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_transform(v) for v in value]
    return value


class _StrictLoader(yaml.SafeLoader):
    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    continue
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        None, None, f"key {key!r} already set in map", key_node.start_mark
                    )
                seen.add(key)
        return super().construct_mapping(node, deep)


class _Dumper(yaml.SafeDumper):
    pass


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    style = None
    if "\n" in data:
        style = "|"
    elif dumper.resolve(yaml.ScalarNode, data, (True, False)) != _STR_TAG:
        style = '"'
    return dumper.represent_scalar(_STR_TAG, data, style=style)


_Dumper.add_representer(str, _represent_str)
_Dumper.add_representer(tuple, lambda dumper, data: dumper.represent_list(list(data)))


def _prepare(data: bytes | str) -> str:
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    # Tabs are not valid YAML indentation.
    return text.replace("\t", "    ")


def unmarshal(data: bytes | str) -> Any:
    """Parse a YAML document; mapping keys become strings. Raise ValueError on bad YAML."""
    try:
        loaded = yaml.safe_load(_prepare(data))
    except yaml.YAMLError as error:
        raise ValueError(str(error)) from error
    return _transform(loaded)


def unmarshal_strict(data: bytes | str) -> dict:
    """Parse a YAML mapping, rejecting duplicate keys and documents that are not mappings."""
    try:
        loaded = yaml.load(_prepare(data), Loader=_StrictLoader)
    except yaml.YAMLError as error:
        raise ValueError(str(error)) from error
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"cannot unmarshal {type(loaded).__name__} into a mapping")
    return _transform(loaded)


def to_yaml(value: Any) -> str:
    """Render a value as block-style YAML with sorted string keys."""
    text = yaml.dump(
        _transform(value),
        Dumper=_Dumper,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )
    if text.endswith("\n...\n"):
        text = text[:-4]
    return text