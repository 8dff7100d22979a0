"""Scene hierarchy printing package."""

from .errors import (
    CycleDetectedError,
    MalformedComponentError,
    MalformedNodeError,
    SceneFormatError,
    SceneHierarchyError,
)
from .host import HierarchyScript
from .models import Component, ComponentKind, PrinterSettings, Scene, SceneNode

__all__ = [
    "Component",
    "ComponentKind",
    "CycleDetectedError",
    "HierarchyScript",
    "MalformedComponentError",
    "MalformedNodeError",
    "PrinterSettings",
    "Scene",
    "SceneFormatError",
    "SceneHierarchyError",
    "SceneNode",
]
