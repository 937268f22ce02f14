"""
Test utilities for cmdref tests.

Helpers for building command nodes by hand and looking nodes up in a
wrapped tree.
"""

from cmdref.models import CommandNode, FlagInfo


def find(node: CommandNode, command_path: str) -> CommandNode:
    """Return the node with the given space-joined path."""
    for candidate in node.iter_tree():
        if candidate.command_path == command_path:
            return candidate
    raise KeyError(command_path)


def make_node(path: str, parent: CommandNode | None = None, **kwargs) -> CommandNode:
    """Build a bare CommandNode by hand (no Click involved).

    Hand-built nodes are runnable unless told otherwise so they count as
    available.
    """
    kwargs.setdefault("runnable", True)
    node = CommandNode(name=path.split()[-1], path=tuple(path.split()), parent=parent, **kwargs)
    if parent is not None:
        parent.children.append(node)
    return node


def flag(name: str, shorthand: str = "", description: str = "") -> FlagInfo:
    """Build a FlagInfo with a Click-style help record."""
    opts = f"{shorthand}, {name}" if shorthand else name
    return FlagInfo(
        name=name, shorthand=shorthand, description=description, help_record=(opts, description)
    )
