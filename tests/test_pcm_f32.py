import pytest

from ribbleutils.pcm_f32 import i16_to_f32, to_pcm_f32


def test_extremes_map_to_unit_range():
    assert i16_to_f32(32767) == 1.0
    assert i16_to_f32(-32768) == -1.0
    assert i16_to_f32(0) == 0.0


def test_symmetry():
    for value in (1, 100, 16000, 32000):
        assert i16_to_f32(-value) == -i16_to_f32(value)


def test_monotonic():
    values = [i16_to_f32(v) for v in range(-32768, 32768, 997)]
    assert values == sorted(values)


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        i16_to_f32(40000)
    with pytest.raises(ValueError):
        to_pcm_f32(-40000)


def test_float_passes_through():
    assert to_pcm_f32(0.25) == 0.25
    assert to_pcm_f32(-0.75) == -0.75


def test_int_dispatches_to_i16():
    assert to_pcm_f32(32767) == 1.0
    assert to_pcm_f32(1234) == i16_to_f32(1234)


@pytest.mark.parametrize("bad", ["x", None, True])
def test_unsupported_types(bad):
    with pytest.raises(TypeError):
        to_pcm_f32(bad)