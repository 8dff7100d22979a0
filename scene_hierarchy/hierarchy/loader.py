"""Scene description loading."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import SceneFormatError
from ..models import Component, PrinterSettings, Scene, SceneNode


def load_scene(scene_file: Path) -> Scene:
    """Load a Scene from a JSON scene description file."""
    data = read_scene_file(scene_file)
    return scene_from_dict(data, str(scene_file))


def load_settings_file(scene_file: Path) -> PrinterSettings:
    """Read printer settings stored alongside the scene in a description file."""
    return load_settings(read_scene_file(scene_file), str(scene_file))


def scene_from_dict(data: dict, source: str = "scene") -> Scene:
    """Build a Scene from parsed scene description data."""
    if not isinstance(data, dict):
        raise SceneFormatError(source, f"expected an object at top level, got {type(data).__name__}")

    roots_data = data.get("roots", [])
    if not isinstance(roots_data, list):
        raise SceneFormatError(f"{source}:roots", "must be a list")

    return Scene(
        roots=[
            _create_node(node_data, f"{source}:roots[{i}]")
            for i, node_data in enumerate(roots_data)
        ]
    )


def load_settings(data: dict, source: str = "scene") -> PrinterSettings:
    """Read ``printOnStart`` and ``announceTweens`` from scene description data."""
    if not isinstance(data, dict):
        raise SceneFormatError(source, f"expected an object at top level, got {type(data).__name__}")

    settings = PrinterSettings()
    for key, attr in (("printOnStart", "print_on_start"), ("announceTweens", "announce_tweens")):
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, bool):
            raise SceneFormatError(f"{source}:{key}", f"must be true or false, got {value!r}")
        setattr(settings, attr, value)
    return settings


def read_scene_file(scene_file: Path):
    """Parse a JSON scene description file without interpreting it."""
    try:
        with open(scene_file, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SceneFormatError(str(scene_file), f"invalid JSON ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SceneFormatError(str(scene_file), f"cannot read file ({e})") from e


def _create_node(node_data, location: str) -> SceneNode:
    """Create a SceneNode (and its subtree) from a node description."""
    if not isinstance(node_data, dict):
        raise SceneFormatError(location, f"node must be an object, got {type(node_data).__name__}")

    name = node_data.get("name")
    if not isinstance(name, str):
        raise SceneFormatError(location, f"node 'name' must be a string, got {name!r}")

    components_data = node_data.get("components", [])
    if not isinstance(components_data, list):
        raise SceneFormatError(f"{location}.components", "must be a list")

    children_data = node_data.get("children", [])
    if not isinstance(children_data, list):
        raise SceneFormatError(f"{location}.children", "must be a list")

    return SceneNode(
        name=name,
        components=[
            _create_component(comp_data, f"{location}.components[{i}]")
            for i, comp_data in enumerate(components_data)
        ],
        children=[
            _create_node(child_data, f"{location}.children[{i}]")
            for i, child_data in enumerate(children_data)
        ],
    )


def _create_component(comp_data, location: str) -> Component:
    # A bare string is shorthand for a generic component
    if isinstance(comp_data, str):
        comp_data = {"type": comp_data}
    if not isinstance(comp_data, dict):
        raise SceneFormatError(location, f"component must be an object or string, got {type(comp_data).__name__}")

    type_name = comp_data.get("type")
    if not isinstance(type_name, str) or not type_name:
        raise SceneFormatError(location, f"component 'type' must be a non-empty string, got {type_name!r}")

    tween_type = comp_data.get("tweenType")
    tween_name = comp_data.get("tweenName")
    if tween_type is None and tween_name is None:
        return Component.generic(type_name)

    if tween_type is None or tween_name is None:
        missing = "tweenName" if tween_name is None else "tweenType"
        raise SceneFormatError(location, f"tween component '{type_name}' is missing '{missing}'")

    for key, value in (("tweenType", tween_type), ("tweenName", tween_name)):
        if not isinstance(value, str):
            raise SceneFormatError(location, f"'{key}' must be a string, got {value!r}")

    return Component.tween(type_name, tween_type, tween_name)
