"""Documentation run orchestration.

Ties the pieces together for one run: prepare the output directory, pick
the renderer for the configured format, then walk the tree.
"""

import logging
from pathlib import Path

from .config import DocsConfig
from .errors import ConfigError, RenderError
from .models import CommandNode
from .renderers import MarkdownRenderer, Renderer, YamlRenderer
from .walker import walk

logger = logging.getLogger(__name__)


def make_renderer(config: DocsConfig) -> Renderer:
    """Build the renderer selected by ``config.format``.

    Raises:
        ConfigError: If the format is unknown
    """
    if config.format == "markdown":
        return MarkdownRenderer(
            config.output_dir,
            index_url=config.index_url,
            comment_marker=config.comment_marker,
        )
    if config.format == "yaml":
        return YamlRenderer(config.output_dir, filename=config.yaml_file)
    raise ConfigError(f"Unknown output format: {config.format}")


def generate_docs(
    root: CommandNode, config: DocsConfig, renderer: Renderer | None = None
) -> list[Path]:
    """Document the whole tree under ``root``.

    Args:
        root: Root node, as returned by build_tree
        config: Run settings
        renderer: Renderer to use instead of the one ``config`` selects

    Returns:
        Paths written, in write order

    Raises:
        RenderError: If the output directory or any file cannot be written
        ConfigError: If the configured format is unknown
    """
    renderer = renderer or make_renderer(config)

    try:
        renderer.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RenderError(f"Failed to create output directory {renderer.output_dir}: {e}") from e

    renderer.start()
    written = walk(root, renderer)
    renderer.finish()

    logger.debug(f"Rendered {len(written)} commands into {renderer.output_dir}")
    return written


__all__ = ["generate_docs", "make_renderer"]
