"""
Exceptions raised while reading or printing a scene hierarchy.
"""

from typing import Optional


class SceneHierarchyError(ValueError):
    """Base class for all scene hierarchy errors."""


class MalformedNodeError(SceneHierarchyError):
    """A node is missing its name or cannot be traversed."""

    def __init__(self, node: object, reason: str):
        self.node = node
        self.reason = reason
        super().__init__(f"Malformed node {node!r}: {reason}")


class MalformedComponentError(SceneHierarchyError):
    """A component has no usable type name or inconsistent tween fields."""

    def __init__(self, reason: str, node_name: Optional[str] = None):
        self.reason = reason
        self.node_name = node_name
        where = f" on node '{node_name}'" if node_name is not None else ""
        super().__init__(f"Malformed component{where}: {reason}")


class CycleDetectedError(SceneHierarchyError):
    """A node was reached again while it was still one of its own ancestors."""

    def __init__(self, node_name: str, depth: int):
        self.node_name = node_name
        self.depth = depth
        super().__init__(f"Cycle detected: node '{node_name}' is its own ancestor (depth {depth})")


class SceneFormatError(SceneHierarchyError):
    """A scene description could not be turned into a Scene."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"{location}: {reason}")
