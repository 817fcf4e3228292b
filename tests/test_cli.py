from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner
from pypdf import PdfReader

from pdfeditx.cli import cli, parse_box, parse_page_list
from pdfeditx.types import RedactionBox


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def test_parse_page_list() -> None:
    assert parse_page_list("1, 3,5-7") == [0, 2, 4, 5, 6]

    for value in ("", "a", "4-2", "1-", "-1"):
        with pytest.raises(ValueError):
            parse_page_list(value)

    for value in ("0", "0-2", "2,0"):
        with pytest.raises(ValueError, match="Page numbers start at 1: '0"):
            parse_page_list(value)


def test_parse_box() -> None:
    assert parse_box("2:10,20,30,40") == RedactionBox(page_index=1, x=10, y=20, width=30, height=40)

    with pytest.raises(ValueError):
        parse_box("10,20,30,40")


def test_info(runner: CliRunner, sample_pdf: Path) -> None:
    result = runner.invoke(cli, ["info", str(sample_pdf)])

    assert result.exit_code == 0, result.output
    assert "sample.pdf" in result.output


def test_extract(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "out"

    result = runner.invoke(cli, ["extract", str(sample_pdf), "--pages", "3,1", "-o", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert len(PdfReader(str(output_dir / "sample-pages-1-3.pdf")).pages) == 2


def test_split(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "parts"

    result = runner.invoke(cli, ["split", str(sample_pdf), "--after", "2,4", "-o", str(output_dir)])

    assert result.exit_code == 0, result.output
    counts = [len(PdfReader(str(output_dir / f"sample-part{n}.pdf")).pages) for n in (1, 2, 3)]
    assert counts == [2, 2, 1]


def test_split_after_last_page_fails(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["split", str(sample_pdf), "--after", "5", "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_reorder(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["reorder", str(sample_pdf), "--order", "5,4,3,2,1", "-o", str(tmp_path)])

    assert result.exit_code == 0, result.output
    widths = [float(page.mediabox.width) for page in PdfReader(str(tmp_path / "sample-processed.pdf")).pages]
    assert widths == [140, 130, 120, 110, 100]


def test_reorder_with_missing_pages_fails(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["reorder", str(sample_pdf), "--order", "2,1", "-o", str(tmp_path)])

    assert result.exit_code == 1


def test_reorder_with_repeated_page_fails(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["reorder", str(sample_pdf), "--order", "1,1,2,3,4", "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert "Duplicate page indices" in result.output
    assert not (tmp_path / "sample-processed.pdf").exists()


def test_delete(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["delete", str(sample_pdf), "--pages", "2,4-5", "-o", str(tmp_path)])

    assert result.exit_code == 0, result.output
    widths = [float(page.mediabox.width) for page in PdfReader(str(tmp_path / "sample-processed.pdf")).pages]
    assert widths == [100, 120]


def test_delete_all_pages_fails(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["delete", str(sample_pdf), "--pages", "1-5", "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert not (tmp_path / "sample-processed.pdf").exists()


def test_redact(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        cli,
        ["redact", str(sample_pdf), "-b", "1:10,10,50,50", "-b", "3:0,0,20,20", "-o", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert len(PdfReader(str(tmp_path / "sample-processed.pdf")).pages) == 5


def test_redact_on_missing_page_fails(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["redact", str(sample_pdf), "-b", "9:0,0,20,20", "-o", str(tmp_path)])

    assert result.exit_code == 1


def test_compress(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["compress", str(sample_pdf), "-o", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert len(PdfReader(str(tmp_path / "sample-compressed.pdf")).pages) == 5


def test_merge(runner: CliRunner, pdf_factory: Callable, tmp_path: Path) -> None:
    first = pdf_factory("one.pdf", 2)
    second = pdf_factory("two.pdf", 3)
    output_dir = tmp_path / "merged"

    result = runner.invoke(cli, ["merge", str(first), str(second), "-o", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert len(PdfReader(str(output_dir / "merged-document.pdf")).pages) == 5


def test_merge_single_file_fails(runner: CliRunner, pdf_factory: Callable, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["merge", str(pdf_factory("one.pdf", 2)), "-o", str(tmp_path)])

    assert result.exit_code == 1


def test_verbose_flag(runner: CliRunner, sample_pdf: Path) -> None:
    result = runner.invoke(cli, ["--verbose", "info", str(sample_pdf)])

    assert result.exit_code == 0, result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output
