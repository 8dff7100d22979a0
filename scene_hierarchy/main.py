"""CLI entry point for the scene hierarchy dump utility."""

import argparse
import sys
from pathlib import Path

from .errors import SceneHierarchyError
from .hierarchy.loader import load_settings, read_scene_file, scene_from_dict
from .hierarchy.printer import render_json
from .host import HierarchyScript


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="scene-hierarchy",
        description="Dump a scene graph as an indented tree or JSON."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="scene.json",
        help="JSON scene description to print (default: scene.json)",
    )
    parser.add_argument(
        "--format",
        choices=["ascii", "json"],
        default="ascii",
        help="Output format (default: ascii)",
    )
    parser.add_argument(
        "--announce-tweens",
        action="store_true",
        help="Log a notice line for every tween component found",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Load the scene and print its hierarchy."""
    args = parse_args(argv)
    scene_path = Path(args.path)

    if not scene_path.exists():
        print(f"Error: path '{scene_path}' does not exist", file=sys.stderr)
        return 1

    try:
        data = read_scene_file(scene_path)
        scene = scene_from_dict(data, str(scene_path))
        settings = load_settings(data, str(scene_path))
        if args.announce_tweens:
            settings.announce_tweens = True

        if args.format == "json":
            print(render_json(scene))
        else:
            HierarchyScript(scene, settings).print_hierarchy()
    except SceneHierarchyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
