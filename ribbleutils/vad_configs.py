"""Voice activity detection settings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class _Choice(str, Enum):
    """String-valued enum whose text is the member's display name."""

    def __str__(self) -> str:
        return self.value


class VadType(_Choice):
    """Voice activity detection algorithm."""

    AUTO = "Auto"
    SILERO = "Silero"
    WEBRTC = "WebRtc"

    def tooltip(self) -> str:
        return _VAD_TOOLTIPS[self]


_VAD_TOOLTIPS = {
    VadType.AUTO: "Use the default algorithm.",
    VadType.SILERO: (
        "High accuracy, high overhead.\n"
        "Least susceptible to noise but struggles with quiet audio."
    ),
    VadType.WEBRTC: "Great accuracy, low overhead.\n Recommended for all purposes.",
}


class VadFrameSize(_Choice):
    """Length of the frames a detector examines."""

    AUTO = "Auto"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class VadStrictness(_Choice):
    """How much evidence of speech a detector requires."""

    AUTO = "Auto"
    FLEXIBLE = "Flexible"
    MEDIUM = "Medium"
    STRICT = "Strict"


@dataclass(frozen=True)
class VadConfigs:
    """User-facing voice activity detection settings."""

    vad_type: VadType = VadType.AUTO
    frame_size: VadFrameSize = VadFrameSize.AUTO
    strictness: VadStrictness = VadStrictness.AUTO
    use_vad_offline: bool = True

    def with_vad_type(self, vad_type: VadType) -> VadConfigs:
        return replace(self, vad_type=vad_type)

    def with_frame_size(self, frame_size: VadFrameSize) -> VadConfigs:
        return replace(self, frame_size=frame_size)

    def with_strictness(self, strictness: VadStrictness) -> VadConfigs:
        return replace(self, strictness=strictness)

    def with_use_vad_offline(self, use_vad: bool) -> VadConfigs:
        return replace(self, use_vad_offline=use_vad)


@dataclass
class NopVAD:
    """A detector that never finds voice; stands in when VAD is disabled.

    It keeps a count of the samples it has been shown in the current session.
    """

    samples_seen: int = 0

    def voice_detected(self, samples: Sequence[T]) -> bool:
        """Record the samples and report that no voice was found."""
        self.samples_seen += len(samples)
        return False

    def extract_voiced_frames(self, samples: Sequence[T]) -> list[T]:
        """Record the samples and return no voiced frames."""
        self.samples_seen += len(samples)
        return []

    def reset_session(self) -> None:
        """Start a new session, forgetting the samples seen so far."""
        self.samples_seen = 0