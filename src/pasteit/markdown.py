"""Convert clipboard HTML to Markdown with a custom serializer."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pasteit.exceptions import ConversionError

try:
    from bs4 import BeautifulSoup
    from bs4.element import (
        Comment,
        Declaration,
        Doctype,
        NavigableString,
        ProcessingInstruction,
        Tag,
    )
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
_LIST_TAGS = ("ul", "ol")
_STRONG_TAGS = ("strong", "b")
_EMPHASIS_TAGS = ("em", "i")
_CODE_TAGS = ("code", "kbd", "samp", "tt")
_STRIKE_TAGS = ("del", "s", "strike")
_BLOCK_TAGS = (
    *_HEADING_TAGS,
    *_LIST_TAGS,
    "address",
    "article",
    "aside",
    "blockquote",
    "body",
    "dd",
    "details",
    "div",
    "dl",
    "dt",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "header",
    "hr",
    "html",
    "li",
    "main",
    "nav",
    "p",
    "pre",
    "section",
    "summary",
    "table",
)
_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
_HTML_WHITESPACE_RE = re.compile(r"[ \t\r\n\f]+")
_LIST_INDENT = "    "


@dataclass
class ConverterOptions:
    """Markdown flavor produced by the converter.

    The defaults mirror how pasted content is expected to look in an
    outliner: ATX headings, fenced code, and list items without a bullet
    character so that only their indentation remains.
    """

    bullet_list_marker: str = ""
    hr: str = "---"
    fence: str = "```"
    em_delimiter: str = "_"
    strong_delimiter: str = "**"


def convert_html_to_markdown(html: str, options: ConverterOptions | None = None) -> str:
    """Convert an HTML fragment into Markdown.

    Leading indentation is kept so that a fragment starting with a list item
    nests the same way as the items after it.

    Parameters
    ----------
    html : str
        Clipboard HTML, either a fragment or a full document.
    options : ConverterOptions | None
        Markdown flavor settings. Defaults are used when omitted.

    Raises
    ------
    ConversionError
        If the HTML cannot be parsed or serialized.
    """
    opts = options or ConverterOptions()
    try:
        soup = BeautifulSoup(html, "lxml")
        _strip_unwanted_elements(soup)
        root = soup.body or soup
        containers = _block_containers(root)
        blocks = _serialize_children(root, opts, containers)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ConversionError(f"Failed to convert HTML to Markdown: {exc}") from exc

    markdown = "\n\n".join(block for block in blocks if block).lstrip("\t\r\n").rstrip()
    logger.debug("Converted %d chars of HTML into %d chars of Markdown", len(html), len(markdown))
    return markdown


def _strip_unwanted_elements(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(["script", "style", "noscript", "link", "meta", "template"]):
        tag.decompose()


def _block_containers(root: Tag) -> set[int]:
    """Return ids of the tags that have a block-level descendant."""
    containers: set[int] = set()
    for block in root.find_all(list(_BLOCK_TAGS)):
        for parent in block.parents:
            if id(parent) in containers:
                break
            containers.add(id(parent))
    return containers


def _is_inline(tag: Tag, containers: set[int]) -> bool:
    return tag.name not in _BLOCK_TAGS and id(tag) not in containers


def _serialize_children(container: Tag, opts: ConverterOptions, containers: set[int]) -> list[str]:
    blocks: list[str] = []
    inline_parts: list[str] = []
    for child in container.children:
        if isinstance(child, _SKIPPED_STRINGS):
            continue
        if isinstance(child, NavigableString) or (
            isinstance(child, Tag) and _is_inline(child, containers)
        ):
            inline_parts.append(_serialize_inline(child, opts))
            continue
        if isinstance(child, Tag):
            _flush_inline(inline_parts, blocks)
            blocks.extend(_serialize_block(child, opts, containers))
    _flush_inline(inline_parts, blocks)
    return blocks


def _flush_inline(parts: list[str], blocks: list[str]) -> None:
    if not parts:
        return
    paragraph = _cleanup_inline_text("".join(parts))
    if paragraph:
        blocks.append(paragraph)
    parts.clear()


def _serialize_block(tag: Tag, opts: ConverterOptions, containers: set[int]) -> list[str]:
    if tag.name in _HEADING_TAGS:
        heading = _normalize_text(_serialize_children_inline(tag, opts))
        if not heading:
            return []
        return [f"{'#' * int(tag.name[1])} {heading}"]

    if tag.name == "div" and "markdown-heading" in tag.get("class", []):
        github_heading = _serialize_github_heading(tag)
        if github_heading:
            return [github_heading]
        return _serialize_children(tag, opts, containers)

    if tag.name == "p":
        paragraph = _cleanup_inline_text(_serialize_children_inline(tag, opts))
        return [paragraph] if paragraph else []

    if tag.name in _LIST_TAGS:
        lines = _serialize_list(tag, opts, containers)
        return ["\n".join(lines)] if lines else []

    if tag.name == "li":
        item = "\n".join(_serialize_list_item(tag, opts, containers))
        return [opts.bullet_list_marker + "   " + item] if item else []

    if tag.name == "pre":
        code = tag.get_text().strip()
        return [f"{opts.fence}\n{code}\n{opts.fence}"]

    if tag.name == "blockquote":
        inner = "\n\n".join(_serialize_children(tag, opts, containers))
        if not inner:
            return []
        return ["\n".join(("> " + line).rstrip() for line in inner.split("\n"))]

    if tag.name == "hr":
        return [opts.hr]

    if tag.name == "table":
        table_md = _serialize_table(tag, opts)
        return [table_md] if table_md else []

    if tag.name in _STRONG_TAGS:
        # Google Docs wraps the whole selection in <b id="docs-internal-guid-...">.
        inner = _serialize_children(tag, opts, containers)
        if not inner:
            return []
        return [opts.strong_delimiter, *inner, opts.strong_delimiter]

    return _serialize_children(tag, opts, containers)


def _serialize_github_heading(tag: Tag) -> str:
    """Render a GitHub README heading wrapper as a linked ATX heading."""
    heading = tag.find(list(_HEADING_TAGS))
    anchor = tag.find("a", class_="anchor")
    if not heading or not anchor:
        return ""
    text = heading.get_text()
    href = anchor.get("href")
    if not text or not href:
        return ""
    return f"{'#' * int(heading.name[1])} [{text}]({href})"


def _is_github_anchor(tag: Tag) -> bool:
    return "anchor" in tag.get("class", []) and (tag.get("aria-label") or "").startswith(
        "Permalink:"
    )


def _serialize_inline(node: Tag | NavigableString, opts: ConverterOptions) -> str:
    if isinstance(node, _SKIPPED_STRINGS):
        return ""

    if isinstance(node, NavigableString):
        return _HTML_WHITESPACE_RE.sub(" ", str(node))

    if node.name == "br":
        return "\n"

    if node.name in _EMPHASIS_TAGS:
        return _wrap(_serialize_children_inline(node, opts), opts.em_delimiter)

    if node.name in _STRONG_TAGS:
        return _wrap(_serialize_children_inline(node, opts), opts.strong_delimiter)

    if node.name in _STRIKE_TAGS:
        return _wrap(_serialize_children_inline(node, opts), "~~")

    if node.name in _CODE_TAGS:
        code = node.get_text()
        if not code:
            return ""
        if "`" in code:
            return f"`` {code} ``"
        return f"`{code}`"

    if node.name == "a":
        if _is_github_anchor(node):
            return ""
        text = _serialize_children_inline(node, opts).strip()
        href = node.get("href")
        if href:
            return f"[{text or href}]({href})"
        return text

    if node.name == "img":
        src = node.get("src")
        if not src:
            return ""
        return f"![{node.get('alt') or ''}]({src})"

    if node.name == "input" and (node.get("type") or "").lower() == "checkbox":
        return "[x] " if node.has_attr("checked") else "[ ] "

    return _serialize_children_inline(node, opts)


def _serialize_children_inline(tag: Tag, opts: ConverterOptions) -> str:
    return "".join(_serialize_inline(child, opts) for child in tag.children)


def _wrap(content: str, delimiter: str) -> str:
    if not content.strip():
        return content
    # Keep surrounding spaces outside the delimiters: "a<b> b </b>c" -> "a **b** c".
    stripped = content.strip()
    leading = content[: len(content) - len(content.lstrip())]
    trailing = content[len(content.rstrip()) :]
    return f"{leading}{delimiter}{stripped}{delimiter}{trailing}"


def _cleanup_inline_text(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    return text.strip()


def _serialize_list(list_tag: Tag, opts: ConverterOptions, containers: set[int]) -> list[str]:
    """Render a list; item content after the first line is indented one level."""
    lines: list[str] = []
    ordered = list_tag.name == "ol"
    start = _list_start(list_tag) if ordered else 1

    for position, item in enumerate(list_tag.find_all("li", recursive=False)):
        prefix = f"{start + position}.  " if ordered else opts.bullet_list_marker + "   "
        first, *rest = _serialize_list_item(item, opts, containers)
        lines.append((prefix + first).rstrip())
        lines.extend((_LIST_INDENT + line).rstrip() for line in rest)
    return lines


def _serialize_list_item(item: Tag, opts: ConverterOptions, containers: set[int]) -> list[str]:
    blocks: list[str] = []
    inline_parts: list[str] = []
    for child in item.children:
        if isinstance(child, _SKIPPED_STRINGS):
            continue
        if isinstance(child, Tag) and child.name in _LIST_TAGS:
            _flush_inline(inline_parts, blocks)
            nested = "\n".join(_serialize_list(child, opts, containers))
            if nested and blocks:
                # Nested lists follow the item text without a blank line.
                blocks[-1] = f"{blocks[-1]}\n{nested}"
            elif nested:
                blocks.append(nested)
        elif isinstance(child, Tag) and not _is_inline(child, containers):
            _flush_inline(inline_parts, blocks)
            blocks.extend(_serialize_block(child, opts, containers))
        else:
            inline_parts.append(_serialize_inline(child, opts))
    _flush_inline(inline_parts, blocks)
    return "\n\n".join(blocks).split("\n")


def _list_start(list_tag: Tag) -> int:
    try:
        return int(list_tag.get("start", 1))
    except (TypeError, ValueError):
        return 1


def _serialize_table(table: Tag, opts: ConverterOptions) -> str:
    rows = []
    for row in table.find_all("tr"):
        if row.find_parent("table") is not table:
            continue
        cells = row.find_all(["th", "td"], recursive=False)
        if not cells:
            continue
        values = []
        for cell in cells:
            cell_text = _cleanup_inline_text(_serialize_children_inline(cell, opts))
            values.append(cell_text.replace("\n", " ").replace("|", "\\|"))
        rows.append(values)

    if not rows:
        return ""

    max_cols = max(len(row) for row in rows)
    normalized = [row + [""] * (max_cols - len(row)) for row in rows]
    header = normalized[0]
    lines = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join("---" for _ in header) + " |",
    ]
    for row in normalized[1:]:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines)


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
