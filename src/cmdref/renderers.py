"""Document renderers for command nodes.

Two renderers share one interface so a single traversal can drive either:

- MarkdownRenderer writes one markdown page per command, front-matter first.
- YamlRenderer appends one record per command to a single shared file.

Philosophy:
- Simple string formatting (no Jinja2)
- Errors propagate, nothing is cleaned up on failure
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date
from pathlib import Path

import click
import yaml

from .errors import RenderError
from .frontmatter import link_handler, prepender
from .models import CommandNode, CommandRecord, FlagInfo

logger = logging.getLogger(__name__)

CODEBLOCK_OPEN = "<pre class='codeblock-pre'>\n<div class='codeblock'>\n"
CODEBLOCK_CLOSE = "\n</div>\n</pre>"

# Fixed width so output does not depend on the terminal running the build
FLAG_LIST_WIDTH = 78

FOOTER_TOOL = "cmdref"


class Renderer(ABC):
    """Turns command nodes into files under an output directory."""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)

    def start(self) -> None:  # noqa: B027
        """Called once before the traversal."""

    def finish(self) -> None:  # noqa: B027
        """Called once after a successful traversal."""

    @abstractmethod
    def render(self, node: CommandNode) -> Path:
        """Render one node and return the path written."""


class MarkdownRenderer(Renderer):
    """Writes one markdown page per command.

    Each page is the front-matter block followed by the body: title, short
    description, synopsis, usage, examples, options, see also and footer.
    """

    def __init__(
        self,
        output_dir: str | Path,
        index_url: str | None = None,
        comment_marker: str = "#",
        today: Callable[[], date] = date.today,
    ):
        """Initialize markdown renderer.

        Args:
            output_dir: Directory the pages are written to
            index_url: Target of the "See Also" back-link
                (defaults to /reference/<root name>/)
            comment_marker: Example lines starting with this are prose
            today: Clock used for the footer date
        """
        super().__init__(output_dir)
        self.index_url = index_url
        self.comment_marker = comment_marker
        self.today = today

    def filename_for(self, node: CommandNode) -> Path:
        return self.output_dir / f"{node.file_stem}.md"

    def render(self, node: CommandNode) -> Path:
        filename = self.filename_for(node)
        content = prepender(str(filename)) + self.render_body(node)

        try:
            with open(filename, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise RenderError(f"Failed to write {filename}: {e}") from e

        logger.debug(f"Wrote {filename}")
        return filename

    def render_body(self, node: CommandNode) -> str:
        """Return the markdown body for one command."""
        parts = [f"# {node.command_path}\n\n", f"{node.short}\n\n"]

        if node.long:
            parts.append("## Synopsis\n\n")
            parts.append(f"{node.long}\n\n")

        if node.runnable:
            parts.append(_codeblock(node.usage))

        if node.example:
            parts.append("## Examples\n\n")
            parts.append(self._render_examples(node.example))

        parts.append(self._render_options(node))

        if node.has_parent or node.visible_children:
            parts.append(self._render_see_also(node))

        if not node.disable_autogen_tag:
            parts.append(f"###### Auto generated by {FOOTER_TOOL} on {_footer_date(self.today())}\n")

        return "".join(parts)

    def _render_examples(self, example: str) -> str:
        out = []
        for line in example.split("\n"):
            if not line.strip():
                continue
            if line.startswith(self.comment_marker):
                out.append(line[len(self.comment_marker) :].lstrip() + "\n")
            else:
                out.append(_codeblock(line))
        return "".join(out)

    def _render_options(self, node: CommandNode) -> str:
        out = []
        if node.local_flags:
            out.append("## Options\n\n")
            out.append(f"{CODEBLOCK_OPEN}{format_flags(node.local_flags)}{CODEBLOCK_CLOSE}\n\n")
        if node.inherited_flags:
            out.append("## Options inherited from parent commands\n\n")
            out.append(
                f"{CODEBLOCK_OPEN}{format_flags(node.inherited_flags)}{CODEBLOCK_CLOSE}\n\n"
            )
        return "".join(out)

    def _render_see_also(self, node: CommandNode) -> str:
        root = node
        while root.parent is not None:
            root = root.parent
        index_url = self.index_url or f"/reference/{root.name}/"

        lines = ["## See Also\n\n"]
        for child in node.visible_children:
            link = link_handler(f"{child.file_stem}.md")
            lines.append(f"* [{child.command_path}]({link}) - {child.short}\n")
        if node.visible_children:
            lines.append("\n")
        lines.append(f"Go back to [command reference index]({index_url}) \n")
        return "".join(lines)


class YamlRenderer(Renderer):
    """Appends one YAML record per command to a single shared file.

    Records are written as list items so the finished file is one YAML list
    in traversal order.
    """

    def __init__(self, output_dir: str | Path, filename: str = "cmds.yml"):
        super().__init__(output_dir)
        self.path = self.output_dir / filename

    def start(self) -> None:
        """Truncate the shared file so every run starts empty."""
        try:
            self.path.write_text("", encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Failed to create {self.path}: {e}") from e

    def render(self, node: CommandNode) -> Path:
        record = CommandRecord(
            name=node.command_path,
            description=node.short,
            usage=node.usage,
            example=node.example,
        )

        try:
            text = yaml.safe_dump(
                [record.to_dict()], default_flow_style=False, sort_keys=False, allow_unicode=True
            )
        except yaml.YAMLError as e:
            raise RenderError(f"Failed to serialize {node.command_path}: {e}") from e

        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise RenderError(f"Failed to write {self.path}: {e}") from e

        logger.debug(f"Appended {node.command_path} to {self.path}")
        return self.path


def format_flags(flags: list[FlagInfo]) -> str:
    """Format flags the way Click lists options in --help output."""
    formatter = click.HelpFormatter(width=FLAG_LIST_WIDTH)
    with formatter.indentation():
        formatter.write_dl([flag.help_record for flag in flags])
    return formatter.getvalue()


def _codeblock(text: str) -> str:
    return f"{CODEBLOCK_OPEN}{text}\n{CODEBLOCK_CLOSE} \n\n"


def _footer_date(day: date) -> str:
    # 2-Jan-2006 style, no zero padding on the day
    return f"{day.day}-{day.strftime('%b-%Y')}"


__all__ = ["MarkdownRenderer", "Renderer", "YamlRenderer", "format_flags"]
