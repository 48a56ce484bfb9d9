import io

import numpy as np
import pytest
from PIL import Image

from gradient_texture import (
    ContainerFormat,
    FormatParameters,
    GradientTexture,
    encode_pixels,
)


@pytest.fixture
def ldr_texture(solid_black, solid_white):
    texture = GradientTexture(
        "ramp",
        settings=FormatParameters(resolution=(4, 4), high_dynamic_range=False, store_as_srgb=False),
        top=solid_white,
        bottom=solid_black,
    )
    texture.update()
    return texture


@pytest.fixture
def hdr_texture(black_to_white, solid_black):
    texture = GradientTexture(
        "hdr",
        settings=FormatParameters(resolution=(4, 4), high_dynamic_range=True, store_as_srgb=True),
        top=black_to_white,
        bottom=solid_black,
    )
    texture.update()
    return texture


def test_png_is_top_down_rgba(ldr_texture):
    data = ldr_texture.export_pixels(ContainerFormat.PNG)
    assert data.startswith(b"\x89PNG")

    image = Image.open(io.BytesIO(data))
    assert image.size == (4, 4)
    assert image.mode == "RGBA"
    decoded = np.asarray(image)
    # The top gradient is white, so the first file row is the brightest
    assert decoded[0, 0, 0] > decoded[-1, 0, 0]
    assert decoded[-1, 0, 0] == 0


def test_tga_export(ldr_texture):
    image = Image.open(io.BytesIO(ldr_texture.export_pixels("tga")))
    assert image.format == "TGA"
    assert image.size == (4, 4)


def test_exr_export(hdr_texture):
    pytest.importorskip("OpenImageIO")
    data = hdr_texture.export_pixels(ContainerFormat.EXR)
    assert data[:4] == b"\x76\x2f\x31\x01"


def test_unknown_container_format(ldr_texture):
    with pytest.raises(ValueError):
        ldr_texture.export_pixels("bmp")


def test_export_restores_srgb_flag_and_pixels(hdr_texture):
    """Exporting overrides sRGB temporarily; afterwards a refill is bit-identical."""
    before = hdr_texture.get_texture().pixels.copy()

    hdr_texture.export_pixels(ContainerFormat.PNG)

    assert hdr_texture.get_srgb() is True
    assert np.array_equal(hdr_texture.get_texture().pixels, before)
    hdr_texture.update()
    assert np.array_equal(hdr_texture.get_texture().pixels, before)


def test_hdr_exports_linear_data(hdr_texture):
    """HDR rasters are captured with sRGB storage off."""
    captured = hdr_texture.capture_export_pixels()

    reference = GradientTexture(
        settings=hdr_texture.settings.replace(store_as_srgb=False),
        top=hdr_texture.top,
        bottom=hdr_texture.bottom,
    )
    reference.update()
    assert np.array_equal(captured, reference.get_texture().get_pixels())
    assert not np.array_equal(captured, hdr_texture.get_texture().get_pixels())


def test_ldr_exports_with_srgb_on(ldr_texture):
    captured = ldr_texture.capture_export_pixels()

    reference = GradientTexture(
        settings=ldr_texture.settings.replace(store_as_srgb=True),
        top=ldr_texture.top,
        bottom=ldr_texture.bottom,
    )
    reference.update()
    assert np.array_equal(captured, reference.get_texture().get_pixels())
    assert ldr_texture.get_srgb() is False


def test_flag_is_restored_when_capture_fails(hdr_texture, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("capture failed")

    monkeypatch.setattr(hdr_texture.get_texture(), "get_pixels", broken)
    with pytest.raises(RuntimeError):
        hdr_texture.export_pixels(ContainerFormat.PNG)
    assert hdr_texture.get_srgb() is True


def test_export_image_carries_import_hints(hdr_texture):
    hdr_texture.set_settings(generate_mipmaps=True)
    exported = hdr_texture.export_image(ContainerFormat.PNG)
    assert exported.container_format is ContainerFormat.PNG
    assert exported.srgb is True
    assert exported.mipmaps_enabled is True
    assert exported.wrap_mode == "clamp"
    assert exported.data.startswith(b"\x89PNG")


def test_export_allocates_on_demand(black_to_white):
    texture = GradientTexture(settings=FormatParameters(resolution=(2, 2)), top=black_to_white)
    assert not texture.get_texture().is_allocated
    assert texture.export_pixels(ContainerFormat.PNG).startswith(b"\x89PNG")


def test_encode_pixels_clamps_hdr_for_8bit():
    pixels = np.full((2, 3, 4), 4.0, dtype=np.float32)
    image = Image.open(io.BytesIO(encode_pixels(pixels, ContainerFormat.PNG)))
    assert image.size == (3, 2)
    assert np.all(np.asarray(image) == 255)
