from __future__ import annotations

import pytest

from pdfeditx.naming import (
    MERGED_FILENAME,
    compressed_filename,
    extract_filename,
    part_filename,
    processed_filename,
    split_name,
)
from pdfeditx.types import CompressionResult, OutputFile
from pdfeditx.utils import format_file_size, pluralize


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 Bytes"),
        (512, "512 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (50 * 1024 * 1024, "50 MB"),
        (3 * 1024 ** 3, "3 GB"),
    ],
)
def test_format_file_size(size: int, expected: str) -> None:
    assert format_file_size(size) == expected


def test_pluralize() -> None:
    assert pluralize(1, "page") == "1 page"
    assert pluralize(0, "page") == "0 pages"
    assert pluralize(2, "box", "boxes") == "2 boxes"


def test_split_name_defaults_extension() -> None:
    assert split_name("report.pdf") == ("report", ".pdf")
    assert split_name("report") == ("report", ".pdf")
    assert split_name("annual.report.PDF") == ("annual.report", ".PDF")


def test_output_names() -> None:
    assert processed_filename("report.pdf", []) == "report.pdf"
    assert processed_filename("report.pdf", ["Reorder pages"]) == "report-processed.pdf"
    assert part_filename("report.pdf", 2) == "report-part2.pdf"
    assert compressed_filename("report.pdf") == "report-compressed.pdf"
    assert MERGED_FILENAME == "merged-document.pdf"


def test_extract_name_uses_first_and_last_page() -> None:
    assert extract_filename("report.pdf", [4]) == "report-page-5.pdf"
    assert extract_filename("report.pdf", [6, 0, 2]) == "report-pages-1-7.pdf"

    with pytest.raises(ValueError):
        extract_filename("report.pdf", [])


def test_compression_result_figures() -> None:
    result = CompressionResult(output=OutputFile("a.pdf", b"x" * 75), original_size=100)

    assert result.compressed_size == 75
    assert result.bytes_saved == 25
    assert result.reduction_percent == pytest.approx(25.0)

    grown = CompressionResult(output=OutputFile("a.pdf", b"x" * 120), original_size=100)
    assert grown.bytes_saved == 0
    assert grown.reduction_percent == pytest.approx(-20.0)
