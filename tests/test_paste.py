"""Tests for the paste pipeline."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from pasteit import paste
from pasteit.detection import INTERNAL_SIGN
from pasteit.exceptions import ConversionError, NoClipboardDataError, NoCurrentBlockError
from pasteit.paste import PasteAction, handle_paste
from pasteit.schemas import ClipboardPayload, HostBlock, PasteSettings


def _payload(html: object, text: str | None = "plain text") -> ClipboardPayload:
    return ClipboardPayload(types=["text/plain", "text/html"], html=html, text=text)


class TestHandoffToHost:
    """Pastes the pipeline leaves to the host."""

    @pytest.mark.asyncio
    async def test_missing_clipboard_raises(self, host) -> None:
        with pytest.raises(NoClipboardDataError):
            await handle_paste(None, host)

    @pytest.mark.asyncio
    async def test_file_paste_uses_default(self, host) -> None:
        payload = ClipboardPayload(types=["Files"])

        result = await handle_paste(payload, host)

        assert result.action is PasteAction.DEFAULT
        host.get_current_block.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_internal_content_uses_default(self, host) -> None:
        payload = _payload(INTERNAL_SIGN + "<li>copied block</li></ul>")

        result = await handle_paste(payload, host)

        assert result.action is PasteAction.DEFAULT
        host.insert_batch_block.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_current_block_raises(self, host, article_html: str) -> None:
        host.get_current_block.return_value = None

        with pytest.raises(NoCurrentBlockError):
            await handle_paste(_payload(article_html), host)

    @pytest.mark.asyncio
    async def test_code_block_skips(self, host, article_html: str) -> None:
        host.get_current_block.return_value = HostBlock(uuid="b", content="```python")

        result = await handle_paste(_payload(article_html), host)

        assert result.action is PasteAction.SKIPPED
        host.insert_at_editing_cursor.assert_not_awaited()
        host.insert_batch_block.assert_not_awaited()


class TestInsertion:
    """Pastes converted and inserted by the pipeline."""

    @pytest.mark.asyncio
    async def test_inserts_nested_blocks(self, host, article_html: str) -> None:
        result = await handle_paste(_payload(article_html), host)

        assert result.action is PasteAction.INSERTED_BLOCKS
        host.insert_batch_block.assert_awaited_once_with(
            "block-1",
            [
                {
                    "content": "# Guide",
                    "children": [
                        {
                            "content": "Intro paragraph.",
                            "children": [
                                {"content": "First step", "children": []},
                                {"content": "Second step", "children": []},
                            ],
                        },
                        {
                            "content": "## Details",
                            "children": [{"content": "More text.", "children": []}],
                        },
                    ],
                }
            ],
            sibling=True,
        )

    @pytest.mark.asyncio
    async def test_flat_headings(self, host, article_html: str) -> None:
        settings = PasteSettings(indent_headings=False)

        result = await handle_paste(_payload(article_html), host, settings)

        assert [block.content for block in result.blocks] == [
            "# Guide",
            "Intro paragraph.",
            "## Details",
            "More text.",
        ]

    @pytest.mark.asyncio
    async def test_remove_headers_in_blocks(self, host, article_html: str) -> None:
        settings = PasteSettings(remove_headers=True)

        result = await handle_paste(_payload(article_html), host, settings)

        assert result.blocks[0].content == "Guide"
        assert result.blocks[0].children[1].content == "Details"

    @pytest.mark.asyncio
    async def test_single_line_inserted_as_text(self, host) -> None:
        result = await handle_paste(_payload("<p>Just one line</p>"), host)

        assert result.action is PasteAction.INSERTED_TEXT
        host.insert_at_editing_cursor.assert_awaited_once_with("Just one line")
        host.insert_batch_block.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_directive_block_inserts_text(self, host, article_html: str) -> None:
        host.get_current_block.return_value = HostBlock(uuid="b", content="#+BEGIN_QUOTE")

        result = await handle_paste(_payload(article_html), host)

        assert result.action is PasteAction.INSERTED_TEXT
        host.insert_at_editing_cursor.assert_awaited_once_with(result.markdown.strip())

    @pytest.mark.asyncio
    async def test_new_line_block_disabled(self, host, article_html: str) -> None:
        settings = PasteSettings(new_line_block=False, remove_headers=True)

        result = await handle_paste(_payload(article_html), host, settings)

        assert result.action is PasteAction.INSERTED_TEXT
        inserted = host.insert_at_editing_cursor.await_args.args[0]
        assert inserted.startswith("Guide\n\nIntro paragraph.")
        assert "#" not in inserted

    @pytest.mark.asyncio
    async def test_google_docs_wrapper_removed(self, host) -> None:
        html = '<b id="docs-internal-guid-1"><p>One</p><p>Two</p></b>'

        result = await handle_paste(_payload(html), host)

        assert [block.content for block in result.blocks] == ["One", "Two"]

    @pytest.mark.asyncio
    async def test_cleaning_applied(self, host) -> None:
        html = "<p>First <strong>bold</strong> line</p><p>Second line</p>"
        settings = PasteSettings(remove_bolds=True)

        result = await handle_paste(_payload(html), host, settings)

        assert [block.content for block in result.blocks] == ["First bold line", "Second line"]


class TestFallback:
    """Failures fall back to the plain-text payload."""

    @pytest.mark.asyncio
    async def test_conversion_error_inserts_plain_text(self, host, article_html: str) -> None:
        with patch(
            "pasteit.paste.convert_html_to_markdown",
            side_effect=ConversionError("bad html"),
        ):
            result = await handle_paste(_payload(article_html), host)

        assert result.action is PasteAction.INSERTED_TEXT
        host.insert_at_editing_cursor.assert_awaited_once_with("plain text")

    @pytest.mark.asyncio
    async def test_conversion_error_without_text_raises(self, host, article_html: str) -> None:
        with patch(
            "pasteit.paste.convert_html_to_markdown",
            side_effect=ConversionError("bad html"),
        ):
            with pytest.raises(ConversionError):
                await handle_paste(_payload(article_html, text=None), host)

    @pytest.mark.asyncio
    async def test_oversized_html_inserts_plain_text(
        self, host, article_html: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(paste, "PASTEIT_MAX_CONTENT_SIZE", 10)

        result = await handle_paste(_payload(article_html), host)

        assert result.action is PasteAction.INSERTED_TEXT
        host.insert_at_editing_cursor.assert_awaited_once_with("plain text")
        host.insert_batch_block.assert_not_awaited()


def _batch(content: str, *children: dict) -> dict:
    return {"content": content, "children": list(children)}


class TestLeadingStructures:
    """Pastes that start with a list or a table."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("html", "expected"),
        [
            (
                "<ul><li>a</li><li>b</li><li>c</li></ul>",
                [_batch("a"), _batch("b"), _batch("c")],
            ),
            (
                "<ul><li>a<ul><li>a1</li></ul></li><li>b</li></ul>",
                [_batch("a", _batch("a1")), _batch("b")],
            ),
            (
                "<ol><li>a<ol><li>a1</li></ol></li><li>b</li></ol>",
                [_batch("1.  a", _batch("1.  a1")), _batch("2.  b")],
            ),
            (
                "<table><tr><th>A</th><th>B</th></tr><tr><td>1</td><td>2</td></tr></table>"
                "<p>after</p>",
                [_batch("| A | B |\n| --- | --- |\n| 1 | 2 |"), _batch("after")],
            ),
        ],
        ids=["list", "nested-list", "ordered-list", "table"],
    )
    async def test_inserted_tree(self, host, html: str, expected: list[dict]) -> None:
        result = await handle_paste(_payload(html), host)

        assert result.action is PasteAction.INSERTED_BLOCKS
        host.insert_batch_block.assert_awaited_once_with("block-1", expected, sibling=True)
