"""Recording and export settings for captured audio."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ribbleutils.errors import CoreError


class _Choice(str, Enum):
    """String-valued enum whose text is the member's display name."""

    def __str__(self) -> str:
        return self.value


class RibbleExportFormat(_Choice):
    """Sample format used when writing recordings to disk."""

    F32 = "F32"
    # Normalised float recordings are very quiet, and 16-bit files are smaller.
    I16 = "I16"

    @classmethod
    def default(cls) -> RibbleExportFormat:
        return cls.I16

    def tooltip(self) -> str:
        return _EXPORT_TOOLTIPS[self]

    def bits_per_sample(self) -> int:
        return _EXPORT_BITS[self]

    @property
    def sample_format(self) -> str:
        """The WAV sample format: ``"float"`` or ``"int"``."""
        return "float" if self is RibbleExportFormat.F32 else "int"

    @classmethod
    def from_sample_format(cls, sample_format: str) -> RibbleExportFormat:
        if sample_format == "float":
            return cls.F32
        if sample_format == "int":
            return cls.I16
        raise ValueError(f"unknown sample format: {sample_format!r}")


_EXPORT_TOOLTIPS = {
    RibbleExportFormat.F32: (
        "32-bit floating point format. Highest dynamic range but large file size."
    ),
    RibbleExportFormat.I16: "16-bit signed integer format. Audio CD quality.",
}
_EXPORT_BITS = {RibbleExportFormat.F32: 32, RibbleExportFormat.I16: 16}


class RibbleChannels(_Choice):
    """Channel layout; ``AUTO`` leaves the choice to the device."""

    AUTO = "Auto"
    MONO = "Mono"
    STEREO = "Stereo"

    def num_channels(self) -> int | None:
        return _CHANNEL_COUNTS[self]

    @classmethod
    def from_num_channels(cls, value: int | None) -> RibbleChannels:
        """Map a channel count to a choice; unknown counts give ``AUTO``."""
        return _COUNT_CHANNELS.get(value, cls.AUTO)


_CHANNEL_COUNTS = {
    RibbleChannels.AUTO: None,
    RibbleChannels.MONO: 1,
    RibbleChannels.STEREO: 2,
}
_COUNT_CHANNELS = {
    count: choice for choice, count in _CHANNEL_COUNTS.items() if count is not None
}


class RibbleSampleRate(_Choice):
    """Capture sample rate; ``AUTO`` leaves the choice to the device."""

    AUTO = "Auto"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    HIGHEST = "Highest"

    def sample_rate(self) -> int | None:
        return _SAMPLE_RATES[self]

    @classmethod
    def from_sample_rate(cls, value: int | None) -> RibbleSampleRate:
        """Map a rate in hertz to a choice; unknown rates give ``AUTO``."""
        return _RATE_CHOICES.get(value, cls.AUTO)


_SAMPLE_RATES = {
    RibbleSampleRate.AUTO: None,
    RibbleSampleRate.LOW: 8000,
    RibbleSampleRate.MEDIUM: 16000,
    RibbleSampleRate.HIGH: 22050,
    RibbleSampleRate.HIGHEST: 44100,
}
_RATE_CHOICES = {
    rate: choice for choice, rate in _SAMPLE_RATES.items() if rate is not None
}


class RibblePeriod(_Choice):
    """Capture buffer size in frames; ``AUTO`` leaves it to the device."""

    AUTO = "Auto"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    HUGE = "Huge"

    def period(self) -> int | None:
        return _PERIODS[self]

    @classmethod
    def from_period(cls, value: int | None) -> RibblePeriod:
        """Map a buffer size to a choice; unknown sizes give ``AUTO``."""
        return _PERIOD_CHOICES.get(value, cls.AUTO)


_PERIODS = {
    RibblePeriod.AUTO: None,
    RibblePeriod.SMALL: 512,
    RibblePeriod.MEDIUM: 1024,
    RibblePeriod.LARGE: 2048,
    RibblePeriod.HUGE: 4096,
}
_PERIOD_CHOICES = {
    size: choice for choice, size in _PERIODS.items() if size is not None
}


@dataclass(frozen=True)
class WavSpec:
    """Parameters of a WAV file to be written."""

    channels: int
    sample_rate: int
    bits_per_sample: int
    sample_format: str


@dataclass(frozen=True)
class RibbleRecordingConfigs:
    """Settings for capturing audio from a microphone."""

    sample_rate: RibbleSampleRate = RibbleSampleRate.AUTO
    num_channels: RibbleChannels = RibbleChannels.AUTO
    period: RibblePeriod = RibblePeriod.AUTO

    def with_sample_rate(self, sample_rate: RibbleSampleRate) -> RibbleRecordingConfigs:
        return replace(self, sample_rate=sample_rate)

    def with_num_channels(
        self, channel_configs: RibbleChannels
    ) -> RibbleRecordingConfigs:
        return replace(self, num_channels=channel_configs)

    def with_period(self, period: RibblePeriod) -> RibbleRecordingConfigs:
        return replace(self, period=period)

    def into_wav_spec(self, format: RibbleExportFormat) -> WavSpec:
        """Build a WAV spec; channels and sample rate must not be ``AUTO``."""
        channels = self.num_channels.num_channels()
        if channels is None:
            raise CoreError("Invalid channel options passed to file writer.")
        sample_rate = self.sample_rate.sample_rate()
        if sample_rate is None:
            raise CoreError("Invalid sample rate options passed to file writer.")
        return WavSpec(
            channels=channels,
            sample_rate=sample_rate,
            bits_per_sample=format.bits_per_sample(),
            sample_format=format.sample_format,
        )