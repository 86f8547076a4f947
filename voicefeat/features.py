"""Feature descriptions and their per-type default layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict

import numpy as np

from .config import (
    DEFAULTS,
    CepstralConfig,
    CepstralType,
    FeatureOptions,
    FilterbankType,
    MelScale,
)
from .dsp import Transformer
from .mfcc import FramesLike, compute_mfcc


@dataclass
class Feature:
    """A cepstral feature: its kind and its spectral/cepstral options."""

    options: FeatureOptions = field(default_factory=FeatureOptions)
    cepstral_type: CepstralType = CepstralType.MFCC

    def compute(self, frames: FramesLike, transformer: Transformer) -> np.ndarray:
        """Compute this feature's coefficients for the given frames."""
        return compute_mfcc(frames, transformer, self.options)


def _default_feature(
    cepstral_type: CepstralType, filterbank: FilterbankType, config: CepstralConfig
) -> Feature:
    defaults = DEFAULTS[cepstral_type]
    options = FeatureOptions(
        sample_rate=config.feature.sample_rate,
        num_filters=defaults.num_filters,
        num_coeffs=defaults.num_coeffs,
        min_freq=float(defaults.min_freq),
        max_freq=config.feature.max_freq,
        include_energy=config.feature.include_energy,
        filterbank=filterbank,
        mel_scale=MelScale.SLANEY,
    )
    return Feature(options=options, cepstral_type=cepstral_type)


def create_default_mfcc_feature(config: CepstralConfig) -> Feature:
    """MFCC on a Slaney mel filterbank."""
    return _default_feature(CepstralType.MFCC, FilterbankType.MEL, config)


def create_default_gfcc_feature(config: CepstralConfig) -> Feature:
    """GFCC on a gammatone (ERB-spaced) filterbank."""
    return _default_feature(CepstralType.GFCC, FilterbankType.GAMMATONE, config)


def create_default_lfcc_feature(config: CepstralConfig) -> Feature:
    """LFCC on a linearly spaced filterbank."""
    return _default_feature(CepstralType.LFCC, FilterbankType.LINEAR, config)


def create_default_pncc_feature(config: CepstralConfig) -> Feature:
    """PNCC on a Slaney mel filterbank."""
    return _default_feature(CepstralType.PNCC, FilterbankType.MEL, config)


def create_default_plp_feature(config: CepstralConfig) -> Feature:
    """PLP on a Bark filterbank."""
    return _default_feature(CepstralType.PLP, FilterbankType.BARK, config)


_FACTORIES: Dict[CepstralType, Callable[[CepstralConfig], Feature]] = {
    CepstralType.MFCC: create_default_mfcc_feature,
    CepstralType.LFCC: create_default_lfcc_feature,
    CepstralType.GFCC: create_default_gfcc_feature,
    CepstralType.PNCC: create_default_pncc_feature,
    CepstralType.PLP: create_default_plp_feature,
}


def create_default_feature(cepstral_type: CepstralType, config: CepstralConfig) -> Feature:
    """Return the default feature for ``cepstral_type``."""
    try:
        factory = _FACTORIES[cepstral_type]
    except (KeyError, TypeError):
        raise ValueError("Unsupported feature type") from None
    return factory(config)