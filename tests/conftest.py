from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from pypdf import PdfReader, PdfWriter
from pypdf.generic import DecodedStreamObject, NameObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

PdfFactory = Callable[..., Path]

# Five pages with distinct widths so page order can be asserted from geometry.
SAMPLE_SIZES = [(100, 200), (110, 200), (120, 200), (130, 200), (140, 200)]

# Labels for documents whose pages carry their own text content stream.
CONTENT_LABELS = ["alpha", "bravo", "charlie", "delta", "echo"]


def build_pdf_bytes(sizes: Sequence[tuple[float, float]], title: str | None = None) -> bytes:
    writer = PdfWriter()
    for width, height in sizes:
        writer.add_blank_page(width=width, height=height)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def content_stream(label: str) -> bytes:
    return f"BT /F1 12 Tf 20 20 Td ({label}) Tj ET".encode("ascii")


def build_content_pdf_bytes(labels: Sequence[str]) -> bytes:
    writer = PdfWriter()
    for offset, label in enumerate(labels):
        page = writer.add_blank_page(width=200 + 10 * offset, height=300)
        stream = DecodedStreamObject()
        stream.set_data(content_stream(label))
        page[NameObject("/Contents")] = writer._add_object(stream)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def _open_reader(source: bytes | Path) -> PdfReader:
    return PdfReader(io.BytesIO(source) if isinstance(source, bytes) else str(source))


def page_contents(source: bytes | Path) -> list[bytes]:
    """Return the decoded content stream of every page, b"" for blank pages."""

    contents = []
    for page in _open_reader(source).pages:
        stream = page.get("/Contents")
        contents.append(b"" if stream is None else stream.get_object().get_data())
    return contents


def page_sizes(source: bytes | Path) -> list[tuple[float, float]]:
    reader = _open_reader(source)
    return [(float(page.mediabox.width), float(page.mediabox.height)) for page in reader.pages]


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> PdfFactory:
    def _create(
        filename: str,
        sizes: Sequence[tuple[float, float]] = ((72, 72),),
        title: str | None = None,
    ) -> Path:
        path = tmp_path / filename
        path.write_bytes(build_pdf_bytes(sizes, title=title))
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory("sample.pdf", SAMPLE_SIZES, title="Sample")


@pytest.fixture()
def sample_bytes() -> bytes:
    return build_pdf_bytes(SAMPLE_SIZES, title="Sample")


@pytest.fixture()
def sample_pdfs(pdf_factory: PdfFactory) -> list[Path]:
    first = pdf_factory("one.pdf", [(300, 300), (310, 300)], title="Document One")
    second = pdf_factory("two.pdf", [(400, 400)])
    third = pdf_factory("three.pdf", [(500, 500), (510, 500), (520, 500)])
    return [first, second, third]


@pytest.fixture()
def corrupt_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "broken.pdf"
    path.write_text("not a pdf")
    return path


@pytest.fixture()
def zero_byte_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "zero.pdf"
    path.write_bytes(b"")
    return path


@pytest.fixture()
def sizes_of() -> Callable[[bytes | Path], list[tuple[float, float]]]:
    return page_sizes


@pytest.fixture()
def pdf_bytes() -> Callable[..., bytes]:
    return build_pdf_bytes


@pytest.fixture()
def sample_sizes() -> list[tuple[float, float]]:
    return [(float(width), float(height)) for width, height in SAMPLE_SIZES]


@pytest.fixture()
def content_bytes() -> bytes:
    return build_content_pdf_bytes(CONTENT_LABELS)


@pytest.fixture()
def content_pdfs(tmp_path: Path) -> list[Path]:
    paths = []
    for name, labels in (("first.pdf", ["one-a", "one-b"]), ("second.pdf", ["two-a"]), ("third.pdf", ["three-a", "three-b"])):
        path = tmp_path / name
        path.write_bytes(build_content_pdf_bytes(labels))
        paths.append(path)
    return paths


@pytest.fixture()
def contents_of() -> Callable[[bytes | Path], list[bytes]]:
    return page_contents


@pytest.fixture()
def expected_contents() -> Callable[[Sequence[str]], list[bytes]]:
    def _expected(labels: Sequence[str]) -> list[bytes]:
        return [content_stream(label) for label in labels]

    return _expected
