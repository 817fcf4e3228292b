from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfeditx.document import Document  # noqa: E402
from pdfeditx.loader import load_document  # noqa: E402
from pdfeditx.renderer import NullRenderer  # noqa: E402
from pdfeditx.session import EditorSession  # noqa: E402

BASE_WIDTH = 100
WIDTH_STEP = 10
PAGE_HEIGHT = 200


def build_pdf(sizes: Iterable[Tuple[float, float]], metadata: Optional[Dict[str, str]] = None) -> bytes:
    writer = PdfWriter()
    for width, height in sizes:
        writer.add_blank_page(width=width, height=height)
    if metadata:
        writer.add_metadata(metadata)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def numbered_sizes(count: int) -> List[Tuple[float, float]]:
    """Page ``i`` is ``BASE_WIDTH + i * WIDTH_STEP`` wide so it can be recognised later."""
    return [(BASE_WIDTH + index * WIDTH_STEP, PAGE_HEIGHT) for index in range(count)]


def page_ids(document: Document) -> List[int]:
    return [int(round((page.width - BASE_WIDTH) / WIDTH_STEP)) for page in document.pages]


@pytest.fixture()
def ids() -> Callable[[Document], List[int]]:
    return page_ids


@pytest.fixture()
def pdf_bytes() -> Callable[[int], bytes]:
    def _create(count: int = 5) -> bytes:
        return build_pdf(numbered_sizes(count), {"/Title": "Sample", "/Producer": "pdfeditx-tests"})

    return _create


@pytest.fixture()
def document_factory(pdf_bytes: Callable[[int], bytes]) -> Callable[[int], Document]:
    def _create(count: int = 5) -> Document:
        return Document.from_bytes(pdf_bytes(count))

    return _create


@pytest.fixture()
def five_pages(document_factory: Callable[[int], Document]) -> Document:
    return document_factory(5)


@pytest.fixture()
def session_factory(pdf_bytes: Callable[[int], bytes]) -> Callable[..., EditorSession]:
    def _create(count: int = 5, name: str = "report.pdf", **kwargs) -> EditorSession:
        renderer = kwargs.pop("renderer", NullRenderer())
        loaded = load_document(pdf_bytes(count), name, renderer=renderer, **kwargs)
        return EditorSession(loaded, renderer=renderer, **kwargs)

    return _create


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    pdf_path.write_bytes(build_pdf(numbered_sizes(5), {"/Producer": "pdfeditx-tests", "/Title": "Sample"}))
    return pdf_path


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[[str, int], Path]:
    def _create(filename: str, count: int = 1) -> Path:
        path = tmp_path / filename
        path.write_bytes(build_pdf(numbered_sizes(count)))
        return path

    return _create


@pytest.fixture()
def pdf_builder() -> Callable[..., bytes]:
    return build_pdf
