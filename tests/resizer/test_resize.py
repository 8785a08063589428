from __future__ import annotations

import io
import math
from pathlib import Path

import pytest
from pypdf import PdfReader, PdfWriter
from pypdf.generic import NameObject, RectangleObject

from pdfstudio import InvalidScaleFactorError, RESIZE_PRESETS, load_document, resize_file
from pdfstudio.tools import load_builtin_plugins
from pdfstudio.tools.common.interfaces import ConversionContext
from pdfstudio.tools.common.pipeline import registry
from pdfstudio.tools.resizer import resize_document, scale_pages


def setup_module(module):
    load_builtin_plugins()


def test_resize_scales_every_page(sample_bytes: bytes, sizes_of, sample_sizes) -> None:
    output = resize_document(load_document(sample_bytes), 0.5)

    assert sizes_of(output) == [(width * 0.5, height * 0.5) for width, height in sample_sizes]


@pytest.mark.parametrize("factor", RESIZE_PRESETS)
def test_resize_is_invertible(sample_bytes: bytes, sizes_of, factor: float) -> None:
    enlarged = resize_document(load_document(sample_bytes), factor)
    restored = resize_document(load_document(enlarged), 1 / factor)

    for (width, height), (orig_width, orig_height) in zip(sizes_of(restored), sizes_of(sample_bytes)):
        assert width == pytest.approx(orig_width, abs=1e-3)
        assert height == pytest.approx(orig_height, abs=1e-3)


def test_resize_accepts_factors_outside_presets(sample_bytes: bytes, sizes_of) -> None:
    output = resize_document(load_document(sample_bytes), 3)
    assert sizes_of(output)[0] == (300.0, 600.0)


def test_resize_keeps_page_count_and_order(sample_bytes: bytes) -> None:
    document = load_document(sample_bytes)
    scale_pages(document, 2.0)

    widths = [size.width for size in document.page_sizes()]
    assert widths == [200.0, 220.0, 240.0, 260.0, 280.0]


@pytest.mark.parametrize("factor", [0, -1, math.nan, math.inf, "big", None, True])
def test_resize_rejects_invalid_factor(sample_bytes: bytes, factor: object) -> None:
    document = load_document(sample_bytes)
    before = document.page_sizes()

    with pytest.raises(InvalidScaleFactorError):
        resize_document(document, factor)  # type: ignore[arg-type]

    assert document.page_sizes() == before


def test_invalid_factor_is_a_value_error(sample_bytes: bytes) -> None:
    with pytest.raises(ValueError):
        resize_document(load_document(sample_bytes), 0)


def test_resize_moves_matching_crop_box_and_keeps_origin() -> None:
    writer = PdfWriter()
    page = writer.add_blank_page(width=100, height=100)
    page.mediabox = RectangleObject([10, 20, 110, 120])
    page[NameObject("/CropBox")] = RectangleObject([10, 20, 110, 120])
    page[NameObject("/TrimBox")] = RectangleObject([15, 25, 105, 115])
    buffer = io.BytesIO()
    writer.write(buffer)
    document = load_document(buffer.getvalue())

    data = resize_document(document, 2)

    resized = PdfReader(io.BytesIO(data)).pages[0]
    assert [float(value) for value in resized.mediabox] == [10, 20, 210, 220]
    assert [float(value) for value in resized.cropbox] == [10, 20, 210, 220]
    assert [float(value) for value in resized.trimbox] == [15, 25, 105, 115]


def test_resize_tool_writes_conventional_name(sample_pdf: Path, tmp_path: Path, sizes_of) -> None:
    context = ConversionContext(input_path=sample_pdf, output_path=tmp_path, config={"scale": 1.5})

    result = registry.create("resize", context).run()

    assert result == tmp_path / "resized-sample.pdf"
    assert sizes_of(result)[0] == (150.0, 300.0)


def test_resize_file_rejects_zero_scale_before_loading(corrupt_pdf: Path) -> None:
    with pytest.raises(InvalidScaleFactorError):
        resize_file(corrupt_pdf, scale=0)


def test_resize_leaves_content_streams_untouched(content_bytes: bytes, contents_of, sizes_of) -> None:
    data = resize_document(load_document(content_bytes), 0.5)

    assert contents_of(data) == contents_of(content_bytes)
    assert [width for width, _ in sizes_of(data)] == [100, 105, 110, 115, 120]
