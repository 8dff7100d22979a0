"""Scene hierarchy loading and rendering."""

from .loader import load_scene, load_settings, load_settings_file, read_scene_file, scene_from_dict
from .printer import (
    format_component,
    format_node_line,
    print_hierarchy,
    render_ascii,
    render_json,
    visit,
)

__all__ = [
    "format_component",
    "format_node_line",
    "load_scene",
    "load_settings",
    "load_settings_file",
    "print_hierarchy",
    "read_scene_file",
    "render_ascii",
    "render_json",
    "scene_from_dict",
    "visit",
]
