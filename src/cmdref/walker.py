"""Post-order traversal of a command tree.

Children are rendered before their parent. The first failure aborts the
whole walk: there is no retry and no partial-failure mode.
"""

import logging
from pathlib import Path

from .models import CommandNode
from .renderers import Renderer

logger = logging.getLogger(__name__)


def walk(node: CommandNode, renderer: Renderer) -> list[Path]:
    """Render a node and every visible descendant.

    Args:
        node: Root of the (sub)tree to document
        renderer: Renderer that writes each node

    Returns:
        Paths written, in write order

    Raises:
        RenderError: From the renderer, on the first node that fails
    """
    written: list[Path] = []

    for child in node.children:
        if not child.is_available or child.is_help_topic:
            logger.debug(f"Skipping {child.command_path}")
            continue
        written.extend(walk(child, renderer))

    logger.debug(f"Rendering {node.command_path}")
    written.append(renderer.render(node))
    return written


__all__ = ["walk"]
