import numpy as np
import pytest

from voicefeat.config import (
    CepstralConfig,
    CepstralType,
    FeatureOptions,
    FilterbankType,
    MelScale,
)
from voicefeat.dsp import FFTTransformer
from voicefeat.features import (
    Feature,
    create_default_feature,
    create_default_gfcc_feature,
    create_default_lfcc_feature,
    create_default_mfcc_feature,
    create_default_plp_feature,
    create_default_pncc_feature,
)
from voicefeat.mfcc import compute_mfcc


def _config():
    config = CepstralConfig()
    config.feature.sample_rate = 22050
    config.feature.max_freq = 7000.0
    config.feature.include_energy = False
    return config


def test_mfcc_defaults():
    feature = create_default_mfcc_feature(_config())
    assert feature.cepstral_type is CepstralType.MFCC
    assert feature.options.filterbank is FilterbankType.MEL
    assert feature.options.mel_scale is MelScale.SLANEY
    assert (feature.options.num_filters, feature.options.num_coeffs) == (26, 13)
    assert feature.options.min_freq == 0.0


def test_gfcc_defaults():
    feature = create_default_gfcc_feature(_config())
    assert feature.cepstral_type is CepstralType.GFCC
    assert feature.options.filterbank is FilterbankType.GAMMATONE
    assert (feature.options.num_filters, feature.options.num_coeffs) == (32, 20)
    assert feature.options.min_freq == 50.0


def test_lfcc_defaults():
    feature = create_default_lfcc_feature(_config())
    assert feature.cepstral_type is CepstralType.LFCC
    assert feature.options.filterbank is FilterbankType.LINEAR
    assert (feature.options.num_filters, feature.options.num_coeffs) == (30, 20)


def test_pncc_defaults():
    feature = create_default_pncc_feature(_config())
    assert feature.cepstral_type is CepstralType.PNCC
    assert feature.options.filterbank is FilterbankType.MEL
    assert (feature.options.num_filters, feature.options.num_coeffs) == (40, 20)
    assert feature.options.min_freq == 20.0


def test_plp_defaults():
    feature = create_default_plp_feature(_config())
    assert feature.cepstral_type is CepstralType.PLP
    assert feature.options.filterbank is FilterbankType.BARK
    assert (feature.options.num_filters, feature.options.num_coeffs) == (20, 13)


@pytest.mark.parametrize("cepstral_type", list(CepstralType))
def test_defaults_copy_config_fields(cepstral_type):
    feature = create_default_feature(cepstral_type, _config())
    assert feature.cepstral_type is cepstral_type
    assert feature.options.sample_rate == 22050
    assert feature.options.max_freq == 7000.0
    assert feature.options.include_energy is False


@pytest.mark.parametrize(
    "cepstral_type, factory",
    [
        (CepstralType.MFCC, create_default_mfcc_feature),
        (CepstralType.LFCC, create_default_lfcc_feature),
        (CepstralType.GFCC, create_default_gfcc_feature),
        (CepstralType.PNCC, create_default_pncc_feature),
        (CepstralType.PLP, create_default_plp_feature),
    ],
)
def test_factory_dispatches(cepstral_type, factory):
    config = _config()
    assert create_default_feature(cepstral_type, config) == factory(config)


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        create_default_feature("not-a-type", _config())


def test_default_feature_is_mfcc_with_default_options():
    feature = Feature()
    assert feature.cepstral_type is CepstralType.MFCC
    assert feature.options == FeatureOptions()


def test_compute_uses_feature_options():
    rng = np.random.default_rng(3)
    frames = [rng.standard_normal(400) for _ in range(4)]
    feature = create_default_lfcc_feature(_config())
    result = feature.compute(frames, FFTTransformer())
    expected = compute_mfcc(frames, FFTTransformer(), feature.options)
    np.testing.assert_array_equal(result, expected)
    assert result.shape == (4, 20)