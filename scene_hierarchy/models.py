#!/usr/bin/env python3
"""
Data models for scene hierarchy printing.

Contains the scene graph structures walked by the printer and the settings
that control how (and when) the hierarchy is printed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import MalformedComponentError


class ComponentKind(Enum):
    """Variants of component attached to a scene node."""
    GENERIC = "generic"
    TWEEN = "tween"


@dataclass
class Component:
    """A typed attachment on a scene node.

    TWEEN components describe a configured animation and always carry both
    ``tween_type`` and ``tween_name``; GENERIC components carry neither.
    """
    type_name: str
    kind: ComponentKind = ComponentKind.GENERIC
    tween_type: Optional[str] = None
    tween_name: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.type_name, str) or not self.type_name:
            raise MalformedComponentError(f"type name must be a non-empty string, got {self.type_name!r}")

        if self.kind == ComponentKind.TWEEN:
            if self.tween_type is None or self.tween_name is None:
                raise MalformedComponentError(
                    f"tween component '{self.type_name}' needs both tween_type and tween_name "
                    f"(got tween_type={self.tween_type!r}, tween_name={self.tween_name!r})"
                )
        elif self.tween_type is not None or self.tween_name is not None:
            raise MalformedComponentError(
                f"generic component '{self.type_name}' must not carry tween fields"
            )

    @classmethod
    def generic(cls, type_name: str) -> "Component":
        """Create a plain component identified only by its type name."""
        return cls(type_name=type_name)

    @classmethod
    def tween(cls, type_name: str, tween_type: str, tween_name: str) -> "Component":
        """Create a tween component with its animation type and name."""
        return cls(
            type_name=type_name,
            kind=ComponentKind.TWEEN,
            tween_type=tween_type,
            tween_name=tween_name,
        )

    def get_type_name(self) -> str:
        return self.type_name


@dataclass
class SceneNode:
    """A named entry in the scene graph."""
    name: str
    children: List["SceneNode"] = field(default_factory=list)
    components: List[Component] = field(default_factory=list)

    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> "SceneNode":
        return self.children[index]

    def get_components(self) -> List[Component]:
        return list(self.components)

    def add_child(self, child: "SceneNode") -> "SceneNode":
        """Append a child and return it, for building scenes inline."""
        self.children.append(child)
        return child


@dataclass
class Scene:
    """A rooted forest of scene nodes."""
    roots: List[SceneNode] = field(default_factory=list)

    def root_count(self) -> int:
        return len(self.roots)

    def root_at(self, index: int) -> SceneNode:
        return self.roots[index]


@dataclass
class PrinterSettings:
    """Settings controlling when and how the hierarchy is printed."""
    print_on_start: bool = False
    announce_tweens: bool = False
    detect_cycles: bool = True

