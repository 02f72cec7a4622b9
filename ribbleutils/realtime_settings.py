"""Predefined time lengths for real-time transcription settings."""

from __future__ import annotations

from enum import Enum

_MINUTE_MS = 60 * 1000


class _OrderedChoice(str, Enum):
    """String-valued enum ordered by declaration."""

    def __str__(self) -> str:
        return self.value

    def _position(self) -> int:
        return list(type(self)).index(self)

    def _comparable(self, other: object) -> bool:
        return type(other) is type(self)

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._position() < other._position()

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._position() <= other._position()

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._position() > other._position()

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._position() >= other._position()

    __hash__ = Enum.__hash__


class RealtimeTimeout(_OrderedChoice):
    """How long a real-time session may run; 0 ms means no limit."""

    RT_15MIN = "15 Min"
    RT_30MIN = "30 Min"
    RT_1HR = "1 Hr"
    RT_2HR = "2 Hr"
    INFINITE = "None"

    def millis(self) -> int:
        return _TIMEOUT_MILLIS[self]

    @classmethod
    def from_millis(cls, value: int) -> RealtimeTimeout:
        """Map milliseconds back to a choice, falling back to one hour."""
        return _MILLIS_TIMEOUT.get(value, cls.RT_1HR)


_TIMEOUT_MILLIS = {
    RealtimeTimeout.RT_15MIN: 15 * _MINUTE_MS,
    RealtimeTimeout.RT_30MIN: 30 * _MINUTE_MS,
    RealtimeTimeout.RT_1HR: 60 * _MINUTE_MS,
    RealtimeTimeout.RT_2HR: 2 * _MINUTE_MS,
    RealtimeTimeout.INFINITE: 0,
}
_MILLIS_TIMEOUT = {millis: timeout for timeout, millis in _TIMEOUT_MILLIS.items()}


class AudioSampleLen(_OrderedChoice):
    """Length of the audio window handed to the transcriber."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    LARGEST = "Largest"

    def millis(self) -> int:
        return _AUDIO_MILLIS[self]

    @classmethod
    def from_millis(cls, value: int) -> AudioSampleLen:
        """Map milliseconds back to a choice, falling back to Large."""
        return _MILLIS_AUDIO.get(value, cls.LARGE)


_AUDIO_MILLIS = {
    AudioSampleLen.SMALL: 3000,
    AudioSampleLen.MEDIUM: 5000,
    AudioSampleLen.LARGE: 10_000,
    AudioSampleLen.LARGEST: 20_000,
}
_MILLIS_AUDIO = {millis: length for length, millis in _AUDIO_MILLIS.items()}


class VadSampleLen(_OrderedChoice):
    """Length of the audio window examined for voice activity."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    def millis(self) -> int:
        return _VAD_MILLIS[self]

    @classmethod
    def from_millis(cls, value: int) -> VadSampleLen:
        """Map milliseconds back to a choice, falling back to Small."""
        return _MILLIS_VAD.get(value, cls.SMALL)


_VAD_MILLIS = {
    VadSampleLen.SMALL: 300,
    VadSampleLen.MEDIUM: 500,
    VadSampleLen.LARGE: 1000,
}
_MILLIS_VAD = {millis: length for length, millis in _VAD_MILLIS.items()}