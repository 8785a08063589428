from __future__ import annotations

from pathlib import Path

import pytest
from pypdf import PdfReader

from pdfstudio import NoOperationTargetError, ValidationError, load_document, merge_files, open_document
from pdfstudio.tools import load_builtin_plugins
from pdfstudio.tools.common.interfaces import ConversionContext
from pdfstudio.tools.common.pipeline import registry
from pdfstudio.tools.merger import concatenate, merge_documents


def setup_module(module):
    load_builtin_plugins()


def test_merge_appends_pages_in_input_order(sample_pdfs: list[Path], sizes_of) -> None:
    documents = [open_document(path) for path in sample_pdfs]

    output = merge_documents(documents)

    expected = [size for path in sample_pdfs for size in sizes_of(path)]
    assert sizes_of(output) == expected


def test_merge_is_associative(sample_pdfs: list[Path], sizes_of) -> None:
    first, second, third = (open_document(path) for path in sample_pdfs)
    partial = load_document(merge_documents([first, second]), name="partial.pdf")

    stepwise = merge_documents([partial, open_document(sample_pdfs[2])])
    direct = merge_documents([open_document(path) for path in sample_pdfs])

    assert sizes_of(stepwise) == sizes_of(direct)
    assert len(sizes_of(direct)) == 6
    assert third.page_count() == 3


def test_merge_single_document_is_identity_copy(sample_bytes: bytes, sizes_of) -> None:
    output = merge_documents([load_document(sample_bytes)])
    assert sizes_of(output) == sizes_of(sample_bytes)


def test_merge_same_document_twice(sample_bytes: bytes, sizes_of) -> None:
    document = load_document(sample_bytes)
    output = merge_documents([document, document])
    assert sizes_of(output) == sizes_of(sample_bytes) * 2


def test_merge_without_documents_is_rejected() -> None:
    with pytest.raises(NoOperationTargetError):
        merge_documents([])


def test_concatenate_names_result_merged(sample_bytes: bytes) -> None:
    merged = concatenate([load_document(sample_bytes, name="a.pdf")])
    assert merged.name == "merged.pdf"
    assert merged.source_size == 0


def test_merge_tool_writes_merged_pdf(sample_pdfs: list[Path], tmp_path: Path) -> None:
    output_dir = tmp_path / "out"
    context = ConversionContext(output_path=output_dir, config={"inputs": sample_pdfs})

    result = registry.create("merge", context).run()

    assert result == output_dir / "merged.pdf"
    assert len(PdfReader(str(result)).pages) == 6
    assert context.resources["result"] == result


def test_merge_files_to_explicit_path(sample_pdfs: list[Path], tmp_path: Path) -> None:
    output = tmp_path / "book.pdf"
    assert merge_files(sample_pdfs[:2], output) == output
    assert len(PdfReader(str(output)).pages) == 3


@pytest.mark.parametrize("count", [0, 1])
def test_merge_tool_needs_two_inputs(sample_pdfs: list[Path], tmp_path: Path, count: int) -> None:
    output_dir = tmp_path / "out"

    assert merge_files(sample_pdfs[:count], output_dir) is None
    assert not output_dir.exists()


def test_merge_tool_rejects_missing_input(sample_pdfs: list[Path], tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        merge_files([sample_pdfs[0], tmp_path / "missing.pdf"], tmp_path / "out.pdf")


def test_merge_carries_page_content_in_input_order(content_pdfs: list[Path], contents_of, expected_contents) -> None:
    documents = [open_document(path) for path in reversed(content_pdfs)]

    data = merge_documents(documents)

    assert contents_of(data) == expected_contents(["three-a", "three-b", "two-a", "one-a", "one-b"])
