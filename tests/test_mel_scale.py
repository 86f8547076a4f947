import pytest

from voicefeat.config import MelScale
from voicefeat.mel_scale import hz_to_mel, mel_to_hz

FREQUENCIES = [0.0, 100.0, 440.0, 999.0, 1000.0, 4000.0, 8000.0, 11025.0]


@pytest.mark.parametrize("scale", list(MelScale))
@pytest.mark.parametrize("hz", FREQUENCIES)
def test_round_trip(scale, hz):
    assert mel_to_hz(hz_to_mel(hz, scale), scale) == pytest.approx(hz, abs=1e-6)


@pytest.mark.parametrize("scale", list(MelScale))
def test_monotonic(scale):
    mels = [hz_to_mel(hz, scale) for hz in FREQUENCIES]
    assert all(a < b for a, b in zip(mels, mels[1:]))


@pytest.mark.parametrize("scale", list(MelScale))
def test_zero_maps_to_zero(scale):
    assert hz_to_mel(0.0, scale) == pytest.approx(0.0)
    assert mel_to_hz(0.0, scale) == pytest.approx(0.0)


def test_slaney_log_region_starts_at_1000_hz():
    assert hz_to_mel(1000.0, MelScale.SLANEY) == pytest.approx(15.0)


def test_slaney_is_linear_below_1000_hz():
    assert hz_to_mel(600.0, MelScale.SLANEY) == pytest.approx(3 * hz_to_mel(200.0, MelScale.SLANEY))


def test_slaney_is_continuous_at_break():
    below = hz_to_mel(1000.0 - 1e-9, MelScale.SLANEY)
    assert below == pytest.approx(hz_to_mel(1000.0, MelScale.SLANEY), abs=1e-6)


def test_default_scale_is_slaney():
    assert hz_to_mel(3000.0) == hz_to_mel(3000.0, MelScale.SLANEY)
    assert mel_to_hz(30.0) == mel_to_hz(30.0, MelScale.SLANEY)
    assert hz_to_mel(3000.0) != pytest.approx(hz_to_mel(3000.0, MelScale.HTK))