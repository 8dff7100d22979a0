"""Indented text and JSON rendering for scene hierarchies."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from ..errors import CycleDetectedError, MalformedComponentError, MalformedNodeError
from ..models import ComponentKind, PrinterSettings
from ..utils.sinks import ListSink

START_MARKER = "--- Scene Hierarchy Start ---"
END_MARKER = "--- Scene Hierarchy End ---"
INDENT_UNIT = "  "
NODE_MARKER = "|-- "
TWEEN_NOTICE = "Found tween component"


def print_hierarchy(scene, sink, settings: PrinterSettings | None = None) -> None:
    """Emit the whole scene, one line per node, between start/end markers."""
    settings = settings or PrinterSettings()
    sink.emit(START_MARKER)
    for i in range(scene.root_count()):
        visit(scene.root_at(i), 0, sink, settings)
    sink.emit(END_MARKER)


def visit(
    node,
    depth: int,
    sink,
    settings: PrinterSettings | None = None,
    ancestors: set[int] | None = None,
) -> None:
    """Emit ``node`` at ``depth`` followed by its descendants in pre-order."""
    settings = settings or PrinterSettings()
    if ancestors is None:
        ancestors = set()

    line = format_node_line(node, depth)
    if settings.announce_tweens:
        for component in _node_components(node):
            if _component_kind(component, node) == ComponentKind.TWEEN:
                sink.emit(TWEEN_NOTICE)
    sink.emit(line)

    node_id = id(node)
    ancestors.add(node_id)
    try:
        for i in range(node.child_count()):
            child = node.child_at(i)
            if settings.detect_cycles and id(child) in ancestors:
                raise CycleDetectedError(_node_name(child), depth + 1)
            visit(child, depth + 1, sink, settings, ancestors)
    finally:
        ancestors.discard(node_id)


def format_node_line(node, depth: int) -> str:
    """Format a single node line: indentation, marker, name, component summary."""
    return INDENT_UNIT * depth + NODE_MARKER + _node_name(node) + format_component_summary(node)


def format_component_summary(node) -> str:
    """Format the parenthesized component list, or '' when there are none."""
    descriptors = [format_component(c, node) for c in _node_components(node)]
    if not descriptors:
        return ""
    return " (" + ", ".join(descriptors) + ")"


def format_component(component, node=None) -> str:
    """Format one component descriptor."""
    type_name = _component_type_name(component, node)
    kind = _component_kind(component, node)
    if kind == ComponentKind.TWEEN:
        return f"{type_name}-TweenScript (type:{component.tween_type}, name:{component.tween_name})"
    if kind == ComponentKind.GENERIC:
        return type_name
    raise MalformedComponentError(f"unknown component kind {kind!r}", _safe_name(node))


def render_ascii(scene, settings: PrinterSettings | None = None) -> str:
    """Render the full hierarchy as a single string."""
    sink = ListSink()
    print_hierarchy(scene, sink, settings)
    return sink.text()


def render_json(scene) -> str:
    """Render the scene hierarchy as a JSON string."""
    roots = [_node_to_dict(scene.root_at(i), set()) for i in range(scene.root_count())]
    output = {
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "root_count": len(roots),
        "node_count": sum(_dict_size(r) for r in roots),
        "max_depth": max((_dict_depth(r) for r in roots), default=-1),
        "roots": roots,
    }
    return json.dumps(output, indent=2)


def _node_to_dict(node, ancestors: set[int]) -> dict:
    """Convert a node and its subtree to a JSON-serializable dictionary."""
    node_id = id(node)
    if node_id in ancestors:
        raise CycleDetectedError(_node_name(node), len(ancestors))
    ancestors.add(node_id)
    try:
        return {
            "name": _node_name(node),
            "components": [_component_to_dict(c, node) for c in _node_components(node)],
            "children": [
                _node_to_dict(node.child_at(i), ancestors) for i in range(node.child_count())
            ],
        }
    finally:
        ancestors.discard(node_id)


def _component_to_dict(component, node) -> dict:
    """Convert a component to a JSON-serializable dictionary."""
    result = {"type": _component_type_name(component, node)}
    if _component_kind(component, node) == ComponentKind.TWEEN:
        result["tweenType"] = component.tween_type
        result["tweenName"] = component.tween_name
    return result


def _dict_size(node: dict) -> int:
    """Count the nodes in a converted subtree."""
    return 1 + sum(_dict_size(c) for c in node["children"])


def _dict_depth(node: dict) -> int:
    """Depth of the deepest descendant below a converted node."""
    return max((1 + _dict_depth(c) for c in node["children"]), default=0)


def _node_name(node) -> str:
    """Return the node's name, failing if it is not a string."""
    name = getattr(node, "name", None)
    if not isinstance(name, str):
        raise MalformedNodeError(node, f"name must be a string, got {name!r}")
    return name


def _safe_name(node) -> str | None:
    """Return the node's name for error messages, or None if unusable."""
    name = getattr(node, "name", None)
    return name if isinstance(name, str) else None


def _node_components(node) -> list:
    """Fetch the node's components in attachment order."""
    get_components = getattr(node, "get_components", None)
    if get_components is None:
        raise MalformedNodeError(node, "no get_components() accessor")
    return list(get_components() or [])


def _component_type_name(component, node) -> str:
    """Return the component's type name, failing if it is missing or empty."""
    get_type_name = getattr(component, "get_type_name", None)
    if get_type_name is None:
        raise MalformedComponentError(f"{component!r} has no get_type_name() accessor", _safe_name(node))
    type_name = get_type_name()
    if not isinstance(type_name, str) or not type_name:
        raise MalformedComponentError(f"type name must be a non-empty string, got {type_name!r}", _safe_name(node))
    return type_name


def _component_kind(component, node) -> ComponentKind:
    """Resolve the component variant, inferring it from the tween fields when untagged."""
    tween_type = getattr(component, "tween_type", None)
    tween_name = getattr(component, "tween_name", None)
    if (tween_type is None) != (tween_name is None):
        raise MalformedComponentError(
            f"component '{_component_type_name(component, node)}' has only one of tween_type and tween_name "
            f"(got tween_type={tween_type!r}, tween_name={tween_name!r})",
            _safe_name(node),
        )

    kind = getattr(component, "kind", None)
    if kind is None:
        return ComponentKind.TWEEN if tween_type is not None else ComponentKind.GENERIC
    if kind == ComponentKind.TWEEN and tween_type is None:
        raise MalformedComponentError(
            f"tween component '{_component_type_name(component, node)}' is missing tween_type and tween_name",
            _safe_name(node),
        )
    return kind
