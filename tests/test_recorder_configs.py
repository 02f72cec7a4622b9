import pytest

from ribbleutils.errors import CoreError, RibbleError
from ribbleutils.recorder_configs import (
    RibbleChannels,
    RibbleExportFormat,
    RibblePeriod,
    RibbleRecordingConfigs,
    RibbleSampleRate,
    WavSpec,
)


def test_export_format_default_and_bits():
    assert RibbleExportFormat.default() is RibbleExportFormat.I16
    assert RibbleExportFormat.F32.bits_per_sample() == 32
    assert RibbleExportFormat.I16.bits_per_sample() == 16


def test_export_format_tooltips():
    assert RibbleExportFormat.I16.tooltip() == (
        "16-bit signed integer format. Audio CD quality."
    )
    assert RibbleExportFormat.F32.tooltip() == (
        "32-bit floating point format. Highest dynamic range but large file size."
    )


@pytest.mark.parametrize("fmt", list(RibbleExportFormat))
def test_export_format_sample_format_round_trip(fmt):
    assert RibbleExportFormat.from_sample_format(fmt.sample_format) is fmt


def test_export_format_unknown_sample_format():
    with pytest.raises(ValueError):
        RibbleExportFormat.from_sample_format("adpcm")


def test_display_strings():
    assert str(RibbleExportFormat.F32) == "F32"
    assert str(RibbleChannels.AUTO) == "Auto"
    assert RibblePeriod("Huge") is RibblePeriod.HUGE


def test_channels_values():
    assert RibbleChannels.AUTO.num_channels() is None
    assert RibbleChannels.MONO.num_channels() == 1
    assert RibbleChannels.STEREO.num_channels() == 2


@pytest.mark.parametrize("choice", list(RibbleChannels))
def test_channels_round_trip(choice):
    assert RibbleChannels.from_num_channels(choice.num_channels()) is choice


@pytest.mark.parametrize("value", [None, 0, 3, 8])
def test_channels_fallback(value):
    assert RibbleChannels.from_num_channels(value) is RibbleChannels.AUTO


def test_sample_rate_values():
    assert RibbleSampleRate.LOW.sample_rate() == 8000
    assert RibbleSampleRate.MEDIUM.sample_rate() == 16000
    assert RibbleSampleRate.HIGH.sample_rate() == 22050
    assert RibbleSampleRate.HIGHEST.sample_rate() == 44100
    assert RibbleSampleRate.AUTO.sample_rate() is None


@pytest.mark.parametrize("choice", list(RibbleSampleRate))
def test_sample_rate_round_trip(choice):
    assert RibbleSampleRate.from_sample_rate(choice.sample_rate()) is choice


@pytest.mark.parametrize("value", [None, 48000, 1])
def test_sample_rate_fallback(value):
    assert RibbleSampleRate.from_sample_rate(value) is RibbleSampleRate.AUTO


def test_period_values():
    assert RibblePeriod.AUTO.period() is None
    assert RibblePeriod.SMALL.period() == 512
    assert RibblePeriod.MEDIUM.period() == 1024
    assert RibblePeriod.LARGE.period() == 2048
    assert RibblePeriod.HUGE.period() == 4096


@pytest.mark.parametrize("choice", list(RibblePeriod))
def test_period_round_trip(choice):
    assert RibblePeriod.from_period(choice.period()) is choice


@pytest.mark.parametrize("value", [None, 256, 8192])
def test_period_fallback(value):
    assert RibblePeriod.from_period(value) is RibblePeriod.AUTO


def test_recording_configs_defaults_are_auto():
    configs = RibbleRecordingConfigs()
    assert configs.sample_rate is RibbleSampleRate.AUTO
    assert configs.num_channels is RibbleChannels.AUTO
    assert configs.period is RibblePeriod.AUTO


def test_recording_configs_builders_do_not_mutate():
    base = RibbleRecordingConfigs()
    configs = (
        base.with_sample_rate(RibbleSampleRate.HIGH)
        .with_num_channels(RibbleChannels.STEREO)
        .with_period(RibblePeriod.LARGE)
    )
    assert configs.sample_rate is RibbleSampleRate.HIGH
    assert configs.num_channels is RibbleChannels.STEREO
    assert configs.period is RibblePeriod.LARGE
    assert base == RibbleRecordingConfigs()


def test_into_wav_spec():
    configs = (
        RibbleRecordingConfigs()
        .with_sample_rate(RibbleSampleRate.HIGHEST)
        .with_num_channels(RibbleChannels.STEREO)
    )
    spec = configs.into_wav_spec(RibbleExportFormat.I16)
    assert spec == WavSpec(
        channels=2, sample_rate=44100, bits_per_sample=16, sample_format="int"
    )
    float_spec = configs.into_wav_spec(RibbleExportFormat.F32)
    assert float_spec.bits_per_sample == 32
    assert float_spec.sample_format == "float"


def test_into_wav_spec_auto_channels_fails():
    configs = RibbleRecordingConfigs().with_sample_rate(RibbleSampleRate.LOW)
    with pytest.raises(CoreError, match="Invalid channel options"):
        configs.into_wav_spec(RibbleExportFormat.I16)


def test_into_wav_spec_auto_sample_rate_fails():
    configs = RibbleRecordingConfigs().with_num_channels(RibbleChannels.MONO)
    with pytest.raises(RibbleError, match="Invalid sample rate options"):
        configs.into_wav_spec(RibbleExportFormat.F32)