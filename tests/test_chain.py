from __future__ import annotations

from typing import Callable

import pytest

from pdfeditx.chain import DocumentChain
from pdfeditx.document import Document
from pdfeditx.exceptions import InvalidDocumentError, InvalidSelectionError
from pdfeditx.operations import extract_pages, keep_pages


def test_apply_commits_result_and_label(five_pages: Document) -> None:
    chain = DocumentChain(five_pages)

    result = chain.apply(lambda document: keep_pages(document, [0, 1]), "Delete 3 pages")

    assert chain.working is result
    assert chain.source is five_pages
    assert chain.history == ("Delete 3 pages",)
    assert chain.operation_count == 1
    assert chain.has_operations


def test_operations_compose_on_working_document(five_pages: Document) -> None:
    chain = DocumentChain(five_pages)

    chain.apply(lambda document: keep_pages(document, [0, 1, 2]), "Delete 2 pages")
    chain.apply(lambda document: extract_pages(document, [2]), "Extract 1 page")

    assert chain.working.page_count == 1
    assert chain.history == ("Delete 2 pages", "Extract 1 page")


def test_failed_executor_commits_nothing(five_pages: Document) -> None:
    chain = DocumentChain(five_pages)
    chain.apply(lambda document: keep_pages(document, [0, 1]), "Delete 3 pages")
    working = chain.working

    with pytest.raises(InvalidSelectionError):
        chain.apply(lambda document: extract_pages(document, [9]), "Extract 1 page")

    assert chain.working is working
    assert chain.history == ("Delete 3 pages",)
    assert chain.busy is False


def test_empty_result_is_rejected(five_pages: Document, pdf_builder: Callable) -> None:
    chain = DocumentChain(five_pages)
    empty = Document.from_bytes(pdf_builder([]))

    with pytest.raises(InvalidDocumentError):
        chain.apply(lambda document: empty, "Nothing")

    assert chain.working is five_pages
    assert chain.history == ()


def test_busy_while_executor_runs(five_pages: Document) -> None:
    chain = DocumentChain(five_pages)
    observed = []

    def executor(document: Document) -> Document:
        observed.append(chain.busy)
        return document

    chain.apply(executor, "Inspect")

    assert observed == [True]
    assert chain.busy is False


def test_apply_without_document_is_a_no_op() -> None:
    chain = DocumentChain()

    assert chain.apply(lambda document: document, "Anything") is None
    assert chain.history == ()


def test_reset_returns_to_source(five_pages: Document) -> None:
    chain = DocumentChain(five_pages)
    chain.apply(lambda document: keep_pages(document, [0]), "Delete 4 pages")

    chain.reset_to_original()

    assert chain.working is five_pages
    assert chain.history == ()


def test_load_replaces_chain(five_pages: Document, document_factory: Callable) -> None:
    chain = DocumentChain(five_pages)
    chain.apply(lambda document: keep_pages(document, [0]), "Delete 4 pages")
    other = document_factory(2)

    chain.load(other)

    assert chain.source is other
    assert chain.working is other
    assert chain.history == ()


def test_clear_drops_everything(five_pages: Document) -> None:
    chain = DocumentChain(five_pages)

    chain.clear()

    assert chain.source is None
    assert chain.working is None
