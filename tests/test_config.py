import pytest

from voicefeat.config import (
    DEFAULTS,
    CepstralConfig,
    CepstralType,
    DeltaOptions,
    FeatureOptions,
    FilterbankType,
    FramingOptions,
    MelScale,
    PreEmphasisOptions,
    WindowType,
)


def test_feature_options_defaults():
    opts = FeatureOptions()
    assert opts.sample_rate == 16000
    assert opts.num_filters == 26
    assert opts.num_coeffs == 13
    assert opts.min_freq == 0.0
    assert opts.max_freq == 8000.0
    assert opts.include_energy is True
    assert opts.filterbank is FilterbankType.MEL
    assert opts.mel_scale is MelScale.SLANEY


def test_framing_defaults():
    framing = FramingOptions()
    assert (framing.frame_size, framing.frame_step) == (400, 160)
    assert framing.window is WindowType.HAMMING


def test_delta_and_preemphasis_defaults():
    delta = DeltaOptions()
    assert (delta.use_deltas, delta.use_delta_deltas, delta.regression_window) == (False, False, 2)
    pre = PreEmphasisOptions()
    assert pre.use_pre_emphasis is True
    assert pre.pre_emphasis_coeff == pytest.approx(0.97)


def test_cepstral_config_sub_options_are_independent():
    first = CepstralConfig()
    second = CepstralConfig()
    first.delta.use_deltas = True
    first.feature.num_coeffs = 20
    assert second.delta.use_deltas is False
    assert second.feature.num_coeffs == 13
    assert first.cepstral_type is CepstralType.MFCC


@pytest.mark.parametrize(
    "kind, filters, coeffs, min_freq",
    [
        (CepstralType.MFCC, 26, 13, 0),
        (CepstralType.GFCC, 32, 20, 50),
        (CepstralType.LFCC, 30, 20, 0),
        (CepstralType.PNCC, 40, 20, 20),
        (CepstralType.PLP, 20, 13, 0),
    ],
)
def test_defaults_table(kind, filters, coeffs, min_freq):
    entry = DEFAULTS[kind]
    assert (entry.num_filters, entry.num_coeffs, entry.min_freq) == (filters, coeffs, min_freq)