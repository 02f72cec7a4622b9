"""Conversion of PCM samples to normalised 32-bit float form."""

from __future__ import annotations

_I16_MAX = 32767
_I16_MIN = -32768


def i16_to_f32(sample: int) -> float:
    """Normalise a signed 16-bit sample into [-1.0, 1.0]."""
    if not _I16_MIN <= sample <= _I16_MAX:
        raise ValueError(f"sample {sample} is outside the signed 16-bit range")
    return max(-1.0, min(1.0, sample / _I16_MAX))


def to_pcm_f32(sample: int | float) -> float:
    """Convert an i16 (int) or f32 (float) sample to float PCM."""
    if isinstance(sample, bool):
        raise TypeError("boolean is not a PCM sample")
    if isinstance(sample, int):
        return i16_to_f32(sample)
    if isinstance(sample, float):
        return sample
    raise TypeError(f"unsupported sample type: {type(sample).__name__}")