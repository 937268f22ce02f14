"""Command reference generator for Click applications.

This package walks a Click command tree and writes one markdown page per
visible command, each starting with a front-matter block for static-site
publishing. A secondary renderer writes one shared YAML file of command
records instead.

Public API:
    - build_tree: Wrap a Click command tree into CommandNode objects
    - load_command: Resolve a "module:attribute" reference to a Click command
    - walk: Post-order traversal that feeds every visible node to a renderer
    - generate_docs: Full run (output dir, renderer, traversal)
    - MarkdownRenderer / YamlRenderer: The two output formats
    - prepender / link_handler: Front-matter and link rules

Example Usage:
    >>> from cmdref import build_tree, generate_docs
    >>> from cmdref.config import DocsConfig
    >>> from myapp.cli import main
    >>> written = generate_docs(build_tree(main, name="myapp"), DocsConfig())
    >>> print(f"Generated {len(written)} files")
"""

from .command_tree import build_tree, load_command
from .config import ConfigManager, DocsConfig
from .errors import CmdrefError, CommandLoadError, ConfigError, RenderError
from .frontmatter import link_handler, prepender
from .generator import generate_docs
from .models import CommandNode, CommandRecord, FlagInfo, FrontMatter
from .renderers import MarkdownRenderer, Renderer, YamlRenderer
from .walker import walk

__version__ = "1.0.0"

__all__ = [
    "CmdrefError",
    "CommandLoadError",
    "CommandNode",
    "CommandRecord",
    "ConfigError",
    "ConfigManager",
    "DocsConfig",
    "FlagInfo",
    "FrontMatter",
    "MarkdownRenderer",
    "RenderError",
    "Renderer",
    "YamlRenderer",
    "build_tree",
    "generate_docs",
    "link_handler",
    "load_command",
    "prepender",
    "walk",
]
