"""Preview how clipboard HTML would be split into outline blocks."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import httpx

from pasteit.cleaning import strip_block_headers
from pasteit.config import PASTEIT_LOG_LEVEL
from pasteit.markdown import convert_html_to_markdown
from pasteit.outline import count_blocks, format_outline
from pasteit.split import split_into_blocks


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Preview the outline blocks produced from HTML or Markdown.")
    parser.add_argument("--url", help="URL of an HTML page to fetch")
    parser.add_argument("--file", help="Local HTML file path (Markdown with --markdown)")
    parser.add_argument("--markdown", action="store_true", help="Treat --file as Markdown instead of HTML")
    parser.add_argument("--no-indent-headings", action="store_true", help="Keep all headings at the top level")
    parser.add_argument("--remove-headers", action="store_true", help="Strip heading markers from blocks")
    parser.add_argument("--quiet", action="store_true", help="Do not print the intermediate Markdown")
    args = parser.parse_args(argv)

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    logging.basicConfig(level=PASTEIT_LOG_LEVEL)

    if args.markdown and args.file:
        markdown = Path(args.file).read_text(encoding="utf-8")
    else:
        markdown = convert_html_to_markdown(load_html(url=args.url, file_path=args.file))

    blocks = split_into_blocks(markdown, indent_headings=not args.no_indent_headings)
    blocks = strip_block_headers(blocks, args.remove_headers)

    if not args.quiet:
        print("Markdown:")
        print(markdown)
        print()

    print(f"Blocks: {count_blocks(blocks)}")
    if blocks:
        print(format_outline(blocks))
    else:
        print("(single block, inserted as-is)")


def load_html(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    main()
