import numpy as np

from gradient_texture import BlendCurve, FormatParameters, RasterBuffer
from gradient_texture.texture import build_mip_chain, mipmap_count_for


def test_mipmap_count():
    assert mipmap_count_for(256, 256, True) == 9
    assert mipmap_count_for(256, 64, True) == 9
    assert mipmap_count_for(5, 3, True) == 3
    assert mipmap_count_for(1, 1, True) == 1
    assert mipmap_count_for(256, 256, False) == 1


def test_chain_shapes_halve_down_to_one():
    base = np.zeros((4, 8, 4), dtype=np.float32)
    shapes = [level.shape for level in build_mip_chain(base, 4)]
    assert shapes == [(4, 8, 4), (2, 4, 4), (1, 2, 4), (1, 1, 4)]


def test_odd_sizes_round_down():
    base = np.zeros((3, 5, 4), dtype=np.float32)
    shapes = [level.shape[:2] for level in build_mip_chain(base, 3)]
    assert shapes == [(3, 5), (1, 2), (1, 1)]


def test_box_filter_averages_blocks():
    base = np.zeros((2, 2, 4), dtype=np.float32)
    base[0, 0] = 1.0
    level = build_mip_chain(base, 2)[1]
    assert np.allclose(level[0, 0], 0.25)


def test_buffer_mip_levels_follow_fill(solid_white):
    params = FormatParameters(
        resolution=(8, 8), high_dynamic_range=True, store_as_srgb=False,
        generate_mipmaps=True, use_two_gradients=False,
    )
    buffer = RasterBuffer()
    buffer.reconcile(params)
    buffer.fill(solid_white, None, BlendCurve.identity(), params, project_is_linear=True)

    levels = buffer.mip_levels
    assert len(levels) == buffer.mipmap_count == 4
    assert levels[-1].shape == (1, 1, 4)
    assert np.allclose(buffer.get_pixels(mip_level=3), 1.0)
