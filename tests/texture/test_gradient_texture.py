import numpy as np

from gradient_texture import (
    BlendCurve,
    BufferState,
    FormatParameters,
    GradientField,
    GradientTexture,
    RasterBuffer,
    Resolution,
)


def test_defaults_match_a_fresh_asset():
    texture = GradientTexture()
    assert texture.settings.resolution == Resolution(256, 256)
    assert texture.top == GradientField.default()
    assert texture.bottom == GradientField.default()
    assert texture.curve == BlendCurve.identity()
    assert texture.project_is_linear is True
    assert texture.get_texture().state is BufferState.ABSENT


def test_get_texture_is_an_explicit_accessor():
    texture = GradientTexture("a", settings=FormatParameters(resolution=(4, 2)))
    raster = texture.get_texture()
    assert isinstance(raster, RasterBuffer)
    texture.update()
    assert texture.get_texture() is raster
    assert raster.state is BufferState.FRESH


def test_update_reallocates_once():
    texture = GradientTexture(settings=FormatParameters(resolution=(4, 2)))
    assert texture.update().reallocated
    assert not texture.update().reallocated


def test_gradient_edits_only_refill(solid_white):
    """Changing colors never reallocates, it only recomputes pixels."""
    texture = GradientTexture(settings=FormatParameters(resolution=(4, 2), high_dynamic_range=False))
    texture.update()
    before = texture.get_texture().pixels.copy()
    texture.get_texture().clear_dirty()

    result = texture.set_gradients(top=solid_white)

    assert not result.reallocated
    assert texture.get_texture().is_dirty
    assert not np.array_equal(texture.get_texture().pixels, before)


def test_format_edits_reallocate():
    texture = GradientTexture(settings=FormatParameters(resolution=(4, 2)))
    texture.update()
    result = texture.set_settings(resolution=(8, 8))
    assert result.reasons == ("width", "height")
    assert texture.get_texture().pixels.shape == (8, 8, 4)


def test_set_srgb_refills_without_reallocating():
    texture = GradientTexture(settings=FormatParameters(resolution=(4, 2), high_dynamic_range=True))
    texture.update()
    linear = texture.get_texture().pixels.copy()

    assert not texture.set_srgb(False).reallocated
    assert texture.get_srgb() is False
    assert not np.array_equal(texture.get_texture().pixels, linear)


def test_gamma_project_changes_output():
    """The host color space is an explicit input of the texture."""
    settings = FormatParameters(resolution=(4, 1), high_dynamic_range=False, store_as_srgb=True)
    linear = GradientTexture(settings=settings, project_is_linear=True)
    gamma = GradientTexture(settings=settings, project_is_linear=False)
    linear.update()
    gamma.update()
    assert not np.array_equal(linear.get_texture().pixels, gamma.get_texture().pixels)


def test_rename_syncs_raster_name():
    texture = GradientTexture("before")
    assert texture.get_texture().name == "before"
    texture.name = "after"
    assert texture.get_texture().name == "after"
