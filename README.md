# ribbleutils

Small, dependency-free building blocks for a speech transcription
application: audio signal processing, sample conversion, versioning and
the user-facing settings for recording, realtime transcription and voice
activity detection.

## Installation

```
pip install ribbleutils
```

## What is inside

- `ribbleutils.audio_gain` – `AudioGain` and `AudioGainConfigs`. A gain of
  0–20 dB (values outside are clamped) maps to a 1×–10× multiplier.
  `AudioGain.apply_gain` amplifies a mutable sequence in place and
  `AudioGain.apply_gain_map` lazily amplifies any iterable; amplified
  samples are clamped to [-10, 10]. A NaN gain raises `ValueError`.
- `ribbleutils.dc_block` – `DCBlock`, a first-order IIR filter
  (`y(n) = x(n) - x(n-1) + R * y(n-1)`) that removes the DC offset from a
  signal. `R` is derived from the cutoff frequency (20 Hz by default) and
  the sample rate, falling back to 0.995 when it cannot be computed.
  `process` filters one sample and keeps the state, `process_signal`
  filters a sequence in place and leaves the filter state as it was, and
  `process_signal_map` filters lazily with a copy of the filter.
- `ribbleutils.pcm_f32` – `i16_to_f32` normalises a signed 16-bit sample to
  [-1.0, 1.0] (out-of-range values raise `ValueError`); `to_pcm_f32` accepts
  an int (treated as 16-bit) or a float (returned unchanged).
- `ribbleutils.realtime_settings` – `RealtimeTimeout`, `AudioSampleLen` and
  `VadSampleLen`. Each member converts to a length in milliseconds with
  `millis()`, and `from_millis()` maps back, falling back to the default
  member (`RT_1HR`, `LARGE` and `SMALL` respectively) for unknown values.
  Members are ordered by declaration. `RealtimeTimeout.INFINITE` is 0 ms.
- `ribbleutils.recorder_configs` – `RibbleExportFormat` (`F32`, `I16`),
  `RibbleChannels`, `RibbleSampleRate` and `RibblePeriod` choices that map
  to and from concrete numbers (`AUTO` maps to `None`), and
  `RibbleRecordingConfigs`, which produces a `WavSpec`.
- `ribbleutils.vad_configs` – `VadType`, `VadFrameSize`, `VadStrictness`,
  the `VadConfigs` settings record, and `NopVAD`, a detector that never
  finds a voice and counts the samples it has been shown in a session.
- `ribbleutils.migration` – `RibbleVersion` semantic versions with parsing,
  incrementing and compatibility checks (`VersionError` on malformed
  strings), and `clear_old_ribble_state`, which removes an outdated
  `data.ron` state file from a directory if it is there.
- `ribbleutils.errors` – `RibbleError` and its subclasses `CoreError`,
  `ThreadPanicError` and `ConversionError`.

## Examples

Apply gain to samples:

```python
from ribbleutils.audio_gain import AudioGain

gain = AudioGain.from_db(20.0)
samples = [0.1, -0.2, 0.05]
gain.apply_gain(samples)          # in place: multiplied by 10
louder = list(gain.apply_gain_map([0.1, 0.2]))
```

Remove a DC offset:

```python
from ribbleutils.dc_block import DCBlock

block = DCBlock().with_sample_rate(16000).with_cutoff_frequency(20)
filtered = list(block.process_signal_map([0.5, 0.5, 0.5, 0.5]))
```

Work with versions:

```python
from ribbleutils.migration import RibbleVersion

version = RibbleVersion.from_semver_string("0.1.2")
print(version.increment_minor())  # 0.2.0
```

Build a WAV description from recorder settings:

```python
from ribbleutils.recorder_configs import (
    RibbleChannels, RibbleExportFormat, RibbleRecordingConfigs, RibbleSampleRate,
)

configs = (
    RibbleRecordingConfigs()
    .with_sample_rate(RibbleSampleRate.MEDIUM)
    .with_num_channels(RibbleChannels.MONO)
)
spec = configs.into_wav_spec(RibbleExportFormat.I16)
```

Settings left on `AUTO` cannot describe a WAV file; `into_wav_spec` raises
`CoreError` in that case.

## What this package does not do

It holds settings and signal helpers only. It does not capture audio from
a microphone, write WAV files, or transcribe speech. `VadConfigs` records
the chosen detector settings but does not build a working voice activity
detector; `NopVAD` is the only detector provided. There is no command-line
program and no graphical interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```