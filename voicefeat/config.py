"""Configuration types shared across the feature extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CepstralType(Enum):
    """Kind of cepstral feature to compute."""

    MFCC = "mfcc"
    LFCC = "lfcc"
    GFCC = "gfcc"
    PNCC = "pncc"
    PLP = "plp"


class FilterbankType(Enum):
    """Frequency warping used to lay out the filterbank."""

    MEL = "mel"
    LINEAR = "linear"
    GAMMATONE = "gammatone"
    BARK = "bark"


class WindowType(Enum):
    """Analysis window applied to each frame."""

    HAMMING = "hamming"
    HANNING = "hanning"


class MelScale(Enum):
    """Formula used to convert between hertz and mel."""

    HTK = "htk"
    SLANEY = "slaney"


@dataclass
class FeatureOptions:
    """Spectral and cepstral layout of a feature."""

    sample_rate: int = 16000
    num_filters: int = 26
    num_coeffs: int = 13
    min_freq: float = 0.0
    max_freq: float = 8000.0
    include_energy: bool = True
    filterbank: FilterbankType = FilterbankType.MEL
    mel_scale: MelScale = MelScale.SLANEY


@dataclass
class FramingOptions:
    """Framing and windowing parameters, in samples."""

    frame_size: int = 400
    frame_step: int = 160
    window: WindowType = WindowType.HAMMING


@dataclass
class DeltaOptions:
    """Whether to append first and second time derivatives."""

    use_deltas: bool = False
    use_delta_deltas: bool = False
    regression_window: int = 2


@dataclass
class PreEmphasisOptions:
    """First-order pre-emphasis filter settings."""

    use_pre_emphasis: bool = True
    pre_emphasis_coeff: float = 0.97


@dataclass
class CepstralConfig:
    """Complete configuration of a cepstral feature computation."""

    cepstral_type: CepstralType = CepstralType.MFCC
    framing: FramingOptions = field(default_factory=FramingOptions)
    feature: FeatureOptions = field(default_factory=FeatureOptions)
    delta: DeltaOptions = field(default_factory=DeltaOptions)
    preemphasis: PreEmphasisOptions = field(default_factory=PreEmphasisOptions)


@dataclass(frozen=True)
class CepstralDefaults:
    """Default filterbank layout for one kind of cepstral feature."""

    num_filters: int
    num_coeffs: int
    min_freq: int


DEFAULTS: Mapping[CepstralType, CepstralDefaults] = MappingProxyType(
    {
        CepstralType.MFCC: CepstralDefaults(num_filters=26, num_coeffs=13, min_freq=0),
        CepstralType.GFCC: CepstralDefaults(num_filters=32, num_coeffs=20, min_freq=50),
        CepstralType.LFCC: CepstralDefaults(num_filters=30, num_coeffs=20, min_freq=0),
        CepstralType.PNCC: CepstralDefaults(num_filters=40, num_coeffs=20, min_freq=20),
        CepstralType.PLP: CepstralDefaults(num_filters=20, num_coeffs=13, min_freq=0),
    }
)