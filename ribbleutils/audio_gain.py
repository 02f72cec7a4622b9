"""Decibel-based gain applied to floating point audio samples."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass, replace

MAX_AUDIO_GAIN_DB = 20.0
# The multiplier reaches this value at the maximum gain.
DECIBEL = 10.0
_F32_EPSILON = 1.1920929e-07


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _clamp_db(db: float) -> float:
    if math.isnan(db):
        raise ValueError("gain in decibels must be a number")
    return _clamp(db, 0.0, MAX_AUDIO_GAIN_DB)


def _db_to_mul(db: float) -> float:
    return DECIBEL ** (db / MAX_AUDIO_GAIN_DB)


def _mul_to_db(mul: float) -> float:
    return MAX_AUDIO_GAIN_DB * math.log(mul, DECIBEL)


@dataclass(frozen=True)
class AudioGainConfigs:
    """User-facing gain settings."""

    db: float = 0.0
    use_offline: bool = False

    def with_decibels(self, db: float) -> AudioGainConfigs:
        return replace(self, db=_clamp_db(db))

    def with_use_offline(self, use_offline: bool) -> AudioGainConfigs:
        return replace(self, use_offline=use_offline)

    def no_gain(self) -> bool:
        return self.db <= _F32_EPSILON

    def build_audio_gain(self) -> AudioGain:
        return AudioGain.from_db(self.db)


@dataclass
class AudioGain:
    """A gain expressed both in decibels and as a sample multiplier."""

    db: float = 0.0
    mul: float = 1.0

    @classmethod
    def from_db(cls, decibel: float) -> AudioGain:
        db = _clamp_db(decibel)
        mul = _clamp(_db_to_mul(db), 1.0, DECIBEL)
        return cls(db=db, mul=mul)

    @classmethod
    def from_mul(cls, mul: float) -> AudioGain:
        if math.isnan(mul):
            raise ValueError("gain multiplier must be a number")
        mul = _clamp(mul, 1.0, DECIBEL)
        return cls(db=_mul_to_db(mul), mul=mul)

    def set_db(self, db: float) -> None:
        """Change the gain in place."""
        self.db = _clamp_db(db)
        self.mul = _db_to_mul(self.db)

    def no_gain(self) -> bool:
        return self.db <= _F32_EPSILON

    def _amplify(self, sample: float) -> float:
        return _clamp(sample * self.mul, -DECIBEL, DECIBEL)

    def apply_gain(self, samples: MutableSequence[float]) -> None:
        """Amplify a mutable sequence of samples in place."""
        samples[:] = [self._amplify(sample) for sample in samples]

    def apply_gain_map(self, signal: Iterable[float]) -> Iterator[float]:
        """Lazily yield the amplified samples of ``signal``."""
        gain = replace(self)
        return (gain._amplify(sample) for sample in signal)