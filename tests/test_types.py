from __future__ import annotations

import pytest

from pdfcli.exceptions import InvalidArgumentError
from pdfcli.types import CompressPreset, PageSelection, PdfInfo


def test_page_selection_all_has_no_tool_argument() -> None:
    selection = PageSelection.all()

    assert selection.is_all
    assert selection.tool_argument is None
    assert str(selection) == "all"


def test_page_selection_range_renderings() -> None:
    selection = PageSelection.range(2, 7)

    assert not selection.is_all
    assert selection.tool_argument == "2-7"
    assert str(selection) == "2-7"


def test_page_selection_single_page_range() -> None:
    assert PageSelection.range(4, 4).tool_argument == "4-4"


@pytest.mark.parametrize("start,end", [(0, 3), (3, 2), (-1, 1)])
def test_page_selection_rejects_bad_ranges(start: int, end: int) -> None:
    with pytest.raises(InvalidArgumentError):
        PageSelection.range(start, end)


def test_page_selection_requires_both_bounds() -> None:
    with pytest.raises(InvalidArgumentError):
        PageSelection(start=1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("all", PageSelection.all()),
        ("ALL", PageSelection.all()),
        ("1-3", PageSelection.range(1, 3)),
        (" 5 - 9 ", PageSelection.range(5, 9)),
    ],
)
def test_page_selection_parse(text: str, expected: PageSelection) -> None:
    assert PageSelection.parse(text) == expected


@pytest.mark.parametrize("text", ["", "1", "1-", "a-b", "1-3,5-6", "3-1", "0-2"])
def test_page_selection_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(InvalidArgumentError):
        PageSelection.parse(text)


def test_compress_preset_tokens() -> None:
    assert CompressPreset.SCREEN.token == "/screen"
    assert CompressPreset.EBOOK.token == "/ebook"
    assert CompressPreset.PRINTER.token == "/printer"
    assert CompressPreset.PREPRESS.token == "/prepress"
    assert CompressPreset.DEFAULT.token == "/default"
    assert CompressPreset("ebook") is CompressPreset.EBOOK


def test_pdf_info_is_frozen() -> None:
    info = PdfInfo(pages=3, metadata={"Title": "x"})

    with pytest.raises(AttributeError):
        info.pages = 4  # type: ignore[misc]
    with pytest.raises(TypeError):
        info.metadata["Title"] = "changed"  # type: ignore[index]
    assert info.metadata == {"Title": "x"}


def test_pdf_info_copies_metadata() -> None:
    source = {"Title": "x"}
    info = PdfInfo(pages=1, metadata=source)

    source["Title"] = "changed"

    assert info.metadata["Title"] == "x"
