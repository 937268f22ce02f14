"""Front-matter and link rules for generated pages.

Both functions are pure functions of the output file name: the directory
and the ``.md`` extension are dropped and the stem is split on ``-``.
"""

from pathlib import PurePath

from .models import FrontMatter

SEPARATOR = "-"


def _segments(filename: str) -> tuple[str, list[str]]:
    stem = PurePath(filename).name
    if stem.endswith(".md"):
        stem = stem[: -len(".md")]
    return stem, stem.split(SEPARATOR)


def front_matter_for(filename: str) -> FrontMatter:
    """Derive the front-matter fields for a generated file.

    Args:
        filename: Output file name, with or without directory

    Returns:
        FrontMatter for the page

    Example:
        >>> front_matter_for("docs/app-service-start.md").permalink
        'reference/app/service/start'
    """
    title, words = _segments(filename)

    if len(words) <= 1:
        url = f"reference/{words[0]}/main"
        return FrontMatter(title=title, permalink=url, command=words[0])

    if len(words) == 3:
        url = "reference/" + "/".join(words[:3])
        return FrontMatter(title=title, permalink=url, command=words[1], subcommand=words[2])

    if len(words) == 4:
        # The fourth segment only reaches the URL, subcommand stays on seg2.
        url = "reference/" + "/".join(words[:4])
        return FrontMatter(title=title, permalink=url, command=words[1], subcommand=words[2])

    url = f"reference/{words[0]}/{words[1]}"
    return FrontMatter(title=title, permalink=url, command=words[1])


def prepender(filename: str) -> str:
    """Return the front-matter block written ahead of a page body."""
    return front_matter_for(filename).render()


def link_handler(filename: str) -> str:
    """Return the relative link used to point at a generated page."""
    _, words = _segments(filename)

    if len(words) <= 1:
        return "/main"
    if len(words) == 3:
        return words[2].lower()
    if len(words) == 4:
        return f"{words[2].lower()}/{words[3].lower()}"
    return words[1].lower()


__all__ = ["front_matter_for", "link_handler", "prepender"]
