"""Data models for the command reference generator.

This module defines the read-only view of a Click command tree that the
walker and renderers work on, plus the small records each renderer emits.

Philosophy:
- Ruthlessly simple dataclasses
- Nodes are built once and never mutated by rendering
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FlagInfo:
    """Represents one option of a command.

    Attributes:
        name: Long option name (e.g., "--output"), or the only name given
        shorthand: Short option name (e.g., "-o"), empty if none
        default: Default value declared on the option
        description: Help text of the option
        help_record: (options, help) pair exactly as Click prints it in --help
    """

    name: str
    shorthand: str = ""
    default: Any = None
    description: str = ""
    help_record: tuple[str, str] = ("", "")


@dataclass(eq=False)
class CommandNode:
    """One command or subcommand of the documented CLI.

    Attributes:
        name: Command name as invoked (e.g., "start")
        path: Names from the root down to this command
        short: Short description
        long: Long description, empty when the command has none
        example: Example text, empty when the command has none
        usage: Invocation line (e.g., "app service start [OPTIONS] NAME")
        runnable: Whether the command does something when invoked directly
        hidden: Whether the command is hidden from help output
        deprecated: Whether the command is deprecated
        local_flags: Options declared on this command
        inherited_flags: Options declared on ancestor groups
        children: Wrapped subcommands, in listing order
        parent: Parent node, None for the root
        disable_autogen_tag: Suppress the generated-on footer
    """

    name: str
    path: tuple[str, ...]
    short: str = ""
    long: str = ""
    example: str = ""
    usage: str = ""
    runnable: bool = False
    hidden: bool = False
    deprecated: bool = False
    local_flags: list[FlagInfo] = field(default_factory=list)
    inherited_flags: list[FlagInfo] = field(default_factory=list)
    children: list["CommandNode"] = field(default_factory=list)
    parent: "CommandNode | None" = field(default=None, repr=False)
    disable_autogen_tag: bool = False

    @property
    def command_path(self) -> str:
        """Space-joined path, used for display."""
        return " ".join(self.path)

    @property
    def file_stem(self) -> str:
        """Dash-joined path, used for file names."""
        return self.command_path.replace(" ", "-")

    @property
    def has_parent(self) -> bool:
        return self.parent is not None

    @property
    def is_help_topic(self) -> bool:
        """Placeholder that neither runs nor groups anything visible."""
        return not self.runnable and not any(c.is_available for c in self.children)

    @property
    def is_available(self) -> bool:
        """Whether this node gets documented."""
        if self.hidden or self.deprecated:
            return False
        return self.runnable or any(c.is_available for c in self.children)

    @property
    def visible_children(self) -> list["CommandNode"]:
        """Children that are available.

        An available child is never a help-topic placeholder: it either runs
        or has an available child of its own.
        """
        return [c for c in self.children if c.is_available]

    def iter_tree(self) -> Iterator["CommandNode"]:
        """Yield this node and every descendant, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()


@dataclass(frozen=True)
class FrontMatter:
    """Metadata block placed at the top of each generated page.

    Attributes:
        title: Page title (the file stem)
        permalink: Site-relative URL of the page
        command: Command name shown by the site
        subcommand: Subcommand name, "nil" when there is none
    """

    title: str
    permalink: str
    command: str
    subcommand: str = "nil"
    layout: str = "default"
    type: str = "reference"
    display_title: str = "false"
    language: str = "en"

    @property
    def redirect_from(self) -> str:
        return f"{self.permalink}/"

    def render(self) -> str:
        """Return the `---` delimited block, followed by one blank line."""
        return (
            "---\n"
            f"layout: {self.layout}\n"
            f"title: {self.title}\n"
            f"permalink: {self.permalink}\n"
            f"redirect_from: {self.redirect_from}\n"
            f"type: {self.type}\n"
            f'display-title: "{self.display_title}"\n'
            f"language: {self.language}\n"
            f"command: {self.command}\n"
            f"subcommand: {self.subcommand}\n"
            "---\n"
            "\n"
        )


@dataclass
class CommandRecord:
    """Structured record written by the YAML renderer.

    Attributes:
        name: Space-joined command path
        description: Short description
        usage: Invocation line
        example: Example text, empty when the command has none
    """

    name: str
    description: str
    usage: str
    example: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "usage": self.usage,
            "example": self.example,
        }


__all__ = ["CommandNode", "CommandRecord", "FlagInfo", "FrontMatter"]
