import pytest

from gradient_texture import (
    BlendCurve,
    ColorRGBA,
    FormatParameters,
    GradientField,
)


@pytest.fixture
def black_to_white():
    return GradientField.default()


@pytest.fixture
def solid_black():
    return GradientField(color_keys=[(0.0, (0.0, 0.0, 0.0))], alpha_keys=[(0.0, 1.0)])


@pytest.fixture
def solid_white():
    return GradientField(color_keys=[(0.0, (1.0, 1.0, 1.0))], alpha_keys=[(0.0, 1.0)])


@pytest.fixture
def mid_gray():
    return GradientField(color_keys=[(0.0, ColorRGBA((0.5, 0.5, 0.5, 1.0)))], alpha_keys=[(0.0, 1.0)])


@pytest.fixture
def identity_curve():
    return BlendCurve.identity()


@pytest.fixture
def ldr_params():
    return FormatParameters(
        resolution=(8, 4),
        high_dynamic_range=False,
        store_as_srgb=False,
        generate_mipmaps=False,
    )


@pytest.fixture
def hdr_params():
    return FormatParameters(
        resolution=(8, 4),
        high_dynamic_range=True,
        store_as_srgb=False,
        generate_mipmaps=False,
    )
