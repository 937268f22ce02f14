"""Command tree extraction from Click commands.

This module loads the documented Click application and wraps its command
tree into CommandNode objects. It uses runtime inspection only: a chain of
click.Context objects is built alongside the tree so that usage lines and
option help records are exactly what Click itself prints for --help.

Philosophy:
- Runtime inspection of Click commands
- Standard library + Click only
- Read-only: the Click objects are never modified
"""

import importlib
import inspect
import logging
import re

import click

from .errors import CommandLoadError
from .models import CommandNode, FlagInfo

logger = logging.getLogger(__name__)

# Paragraph header that starts the example section of a help text
EXAMPLES_HEADER = re.compile(r"^examples?:\s*$", re.IGNORECASE)

# Any other unindented "Header:" paragraph ends the example section
SECTION_HEADER = re.compile(r"^[A-Za-z][A-Za-z0-9 _-]*:\s*$")


def load_command(reference: str) -> click.Command:
    """Resolve a "module:attribute" reference to a Click command.

    Args:
        reference: Import reference (e.g., "myapp.cli:main")

    Returns:
        The Click command or group

    Raises:
        CommandLoadError: If the module or attribute cannot be resolved

    Example:
        >>> command = load_command("myapp.cli:main")
        >>> command.name
        'main'
    """
    module_path, sep, attr_path = reference.partition(":")
    if not sep or not module_path or not attr_path:
        raise CommandLoadError(
            f"Invalid CLI reference '{reference}': expected 'module:attribute'"
        )

    try:
        target = importlib.import_module(module_path)
    except ImportError as e:
        raise CommandLoadError(f"Cannot import module '{module_path}': {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise CommandLoadError(f"'{module_path}' has no attribute '{attr_path}'") from e

    if not isinstance(target, click.Command):
        raise CommandLoadError(f"'{reference}' is not a Click command")

    return target


def build_tree(
    command: click.Command,
    name: str | None = None,
    disable_autogen_tag: bool = False,
) -> CommandNode:
    """Wrap a Click command tree into CommandNode objects.

    Args:
        command: Root Click command or group
        name: Program name for the root (defaults to the command's name)
        disable_autogen_tag: Suppress the generated-on footer for the whole tree

    Returns:
        Root CommandNode

    Example:
        >>> root = build_tree(cli, name="app")
        >>> [c.name for c in root.children]
        ['config', 'service']
    """
    root_name = name or command.name or "cli"
    ctx = _make_context(command, root_name, None)
    return _build_node(command, ctx, (root_name,), None, disable_autogen_tag)


def _build_node(
    command: click.Command,
    ctx: click.Context,
    path: tuple[str, ...],
    parent: CommandNode | None,
    disable_autogen_tag: bool,
) -> CommandNode:
    logger.debug(f"Inspecting command: {' '.join(path)}")

    short, long, example = split_help(command)
    local_flags = _extract_flags(command, ctx)

    inherited_flags: list[FlagInfo] = []
    if parent is not None:
        inherited_flags = [
            flag
            for flag in parent.local_flags + parent.inherited_flags
            if not _is_help_flag(flag, ctx)
        ]

    node = CommandNode(
        name=path[-1],
        path=path,
        short=short,
        long=long,
        example=example,
        usage=_usage_line(command, ctx),
        runnable=is_runnable(command),
        hidden=bool(command.hidden),
        deprecated=bool(command.deprecated),
        local_flags=local_flags,
        inherited_flags=inherited_flags,
        parent=parent,
        disable_autogen_tag=disable_autogen_tag
        or bool(getattr(command, "disable_autogen_tag", False)),
    )

    if isinstance(command, click.Group):
        for sub_name in command.list_commands(ctx):
            sub_command = command.get_command(ctx, sub_name)
            if sub_command is None:
                continue
            sub_ctx = _make_context(sub_command, sub_name, ctx)
            node.children.append(
                _build_node(
                    sub_command, sub_ctx, path + (sub_name,), node, node.disable_autogen_tag
                )
            )

    return node


def _make_context(
    command: click.Command, info_name: str, parent: click.Context | None
) -> click.Context:
    """Build the context Click would use for the command, without parsing.

    The command's context_settings (help_option_names, max_content_width,
    ...) apply as they do in Command.make_context. Defaults are shown unless
    the command says otherwise.
    """
    settings = dict(command.context_settings)
    if parent is None:
        settings.setdefault("show_default", True)
    return click.Context(command, info_name=info_name, parent=parent, **settings)


def is_runnable(command: click.Command) -> bool:
    """Whether invoking the command directly does something.

    A group only counts when it was declared with invoke_without_command.
    """
    if command.callback is None:
        return False
    if isinstance(command, click.Group):
        return bool(command.invoke_without_command)
    return True


def split_help(command: click.Command) -> tuple[str, str, str]:
    """Split a command's help text into short, long and example text.

    The first paragraph is the short description unless the command sets
    short_help, in which case every paragraph belongs to the long text.
    An "Examples:" header starts the example text. When the first example
    line is indented, the examples end at the next flush-left paragraph;
    otherwise they end at the next flush-left "Header:" paragraph.

    Returns:
        (short, long, example); long and example may be empty
    """
    text = inspect.cleandoc(command.help or "")
    text = text.split("\f", 1)[0]

    paragraphs = []
    for block in re.split(r"\n\s*\n", text):
        lines = [line.rstrip() for line in block.split("\n") if line.strip() != "\b"]
        if any(line.strip() for line in lines):
            paragraphs.append(lines)

    prose: list[list[str]] = []
    example_lines: list[str] = []
    in_examples = False
    # None until the first non-blank example line is seen
    indented_examples: bool | None = None

    for lines in paragraphs:
        first = lines[0]
        if EXAMPLES_HEADER.match(first.strip()):
            in_examples = True
            body = [line for line in lines[1:] if line.strip()]
            indented_examples = body[0].startswith((" ", "\t")) if body else None
            example_lines.extend(_dedent(lines[1:]))
            continue
        if in_examples and not first.startswith((" ", "\t")):
            # Indented example blocks end at the first flush-left paragraph,
            # flush-left ones at the next "Header:" paragraph.
            if indented_examples or SECTION_HEADER.match(first):
                in_examples = False
        if in_examples and indented_examples is None:
            indented_examples = first.startswith((" ", "\t"))
        if in_examples:
            if example_lines:
                example_lines.append("")
            example_lines.extend(_dedent(lines))
        else:
            prose.append(lines)

    if command.short_help:
        short = command.short_help.strip()
        long_paragraphs = prose
    elif prose:
        short = " ".join(line.strip() for line in prose[0])
        long_paragraphs = prose[1:]
    else:
        short = ""
        long_paragraphs = []

    long = "\n\n".join("\n".join(lines) for lines in long_paragraphs)
    example = "\n".join(example_lines).strip("\n")
    return short, long, example


def _dedent(lines: list[str]) -> list[str]:
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    cut = min(indents) if indents else 0
    return [line[cut:] for line in lines]


def _usage_line(command: click.Command, ctx: click.Context) -> str:
    pieces = command.collect_usage_pieces(ctx)
    return " ".join([ctx.command_path, *pieces]).strip()


def _extract_flags(command: click.Command, ctx: click.Context) -> list[FlagInfo]:
    flags = []

    for param in command.get_params(ctx):
        if not isinstance(param, click.Option):
            continue

        record = param.get_help_record(ctx)
        if record is None:
            # hidden option
            continue

        names = list(param.opts) + list(param.secondary_opts)
        long_names = [n for n in names if n.startswith("--")]
        short_names = [n for n in names if len(n) == 2 and n.startswith("-")]
        default = param.default if not callable(param.default) else None

        flags.append(
            FlagInfo(
                name=long_names[0] if long_names else names[0],
                shorthand=short_names[0] if short_names else "",
                default=default,
                description=param.help or "",
                help_record=(record[0], record[1]),
            )
        )

    return flags


def _is_help_flag(flag: FlagInfo, ctx: click.Context) -> bool:
    return flag.name in ctx.help_option_names or flag.shorthand in ctx.help_option_names


__all__ = ["build_tree", "is_runnable", "load_command", "split_help"]
