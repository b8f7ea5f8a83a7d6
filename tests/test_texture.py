import pytest

from softraster.color import Color
from softraster.texture import Texture


def _columns_texture():
    # 2x2 RGBA: left column red, right column blue, all opaque
    data = bytes([
        255, 0, 0, 255, 0, 0, 255, 255,
        255, 0, 0, 255, 0, 0, 255, 255,
    ])
    return Texture.from_bytes(2, 2, 4, data)


def test_from_bytes_rgba_converts_channels():
    texture = Texture.from_bytes(1, 1, 4, bytes([255, 0, 255, 0]))
    assert texture.texels == [Color(1.0, 0.0, 1.0, 0.0)]


def test_from_bytes_rgb_is_opaque():
    texture = Texture.from_bytes(2, 1, 3, bytes([255, 0, 0, 0, 255, 0]))
    assert [t.alpha for t in texture.texels] == [1.0, 1.0]
    assert texture.texels[0] == Color(1.0, 0.0, 0.0, 1.0)
    assert texture.texels[1] == Color(0.0, 1.0, 0.0, 1.0)


def test_from_bytes_rejects_unsupported_components():
    with pytest.raises(ValueError):
        Texture.from_bytes(1, 1, 2, bytes([1, 2]))


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Texture.from_bytes(2, 2, 3, bytes(11))


def test_constructor_rejects_empty_texture():
    with pytest.raises(ValueError):
        Texture(0, 1, [])


def test_uniform_texture_samples_same_color_everywhere():
    texture = Texture.from_bytes(3, 3, 3, bytes([255, 255, 255] * 9))
    for u, v in [(0.1, 0.2), (0.5, 0.5), (0.9, 0.3), (2.4, -1.3)]:
        sample = texture.color_at(u, v)
        assert sample.red == pytest.approx(1.0)
        assert sample.green == pytest.approx(1.0)
        assert sample.blue == pytest.approx(1.0)
        assert sample.alpha == pytest.approx(1.0)


def test_middle_sample_blends_columns_equally():
    sample = _columns_texture().color_at(0.5, 0.5)
    assert sample.red == pytest.approx(sample.blue)
    assert sample.green == pytest.approx(0.0)
    assert sample.alpha == pytest.approx(1.0)


def test_sampling_repeats_mirrored_beyond_one():
    texture = _columns_texture()
    a = texture.color_at(0.3, 0.6)
    b = texture.color_at(1.7, 0.6)
    assert a.red == pytest.approx(b.red)
    assert a.blue == pytest.approx(b.blue)


def test_sample_close_to_left_is_mostly_red():
    sample = _columns_texture().color_at(0.1, 0.5)
    assert sample.red > sample.blue


def test_transparent_texels_do_not_contribute():
    data = bytes([255, 0, 0, 0] * 4)
    sample = Texture.from_bytes(2, 2, 4, data).color_at(0.5, 0.5)
    assert sample.alpha == pytest.approx(0.0)
    assert sample.red == pytest.approx(0.0)