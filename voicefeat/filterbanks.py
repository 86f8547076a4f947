"""Triangular filterbanks laid out on mel, linear, ERB and Bark scales."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .config import FilterbankType, MelScale
from .mel_scale import hz_to_mel, mel_to_hz


@dataclass
class FilterbankParams:
    """Layout of a filterbank over the positive half of an FFT spectrum."""

    sample_rate: int = 0
    n_fft: int = 0
    num_filters: int = 0
    min_freq: float = 0.0
    max_freq: float = 0.0


def _empty() -> np.ndarray:
    return np.zeros((0, 0), dtype=np.float64)


def _evenly_spaced(low: float, high: float, num_filters: int) -> np.ndarray:
    """Return ``num_filters + 2`` points from ``low`` to ``high`` inclusive."""
    steps = np.arange(num_filters + 2, dtype=np.float64)
    return low + (high - low) * steps / (num_filters + 1)


def _frequency_bins(params: FilterbankParams, hz_points: Sequence[float]) -> list[int]:
    n_freqs = params.n_fft // 2 + 1
    nyquist = params.sample_rate / 2.0
    bins = []
    for hz in hz_points:
        freq = min(max(float(hz), 0.0), nyquist)
        index = int(math.floor((params.n_fft + 1) * freq / params.sample_rate))
        bins.append(min(max(index, 0), n_freqs - 1))
    return bins


def build_triangular_filters(params: FilterbankParams, hz_points: Sequence[float]) -> np.ndarray:
    """Build overlapping triangular filters whose edges lie at ``hz_points``.

    Filter ``m`` rises from point ``m - 1`` to point ``m`` and falls to point
    ``m + 1``. The result has one row per filter and ``n_fft // 2 + 1``
    columns; it is all zeros if too few points are given.
    """
    if params.num_filters <= 0:
        return _empty()

    n_freqs = params.n_fft // 2 + 1
    filters = np.zeros((params.num_filters, n_freqs), dtype=np.float64)
    if len(hz_points) < params.num_filters + 2:
        return filters

    bins = _frequency_bins(params, hz_points)
    for row, (left, center, right) in enumerate(zip(bins, bins[1:], bins[2:params.num_filters + 2])):
        rising = np.arange(left, center)
        falling = np.arange(center, right)
        filters[row, rising] = (rising - left) / max(1, center - left)
        filters[row, falling] = (right - falling) / max(1, right - center)
    return filters


class Filterbank(ABC):
    """Builds a matrix of filters, one row per filter."""

    @abstractmethod
    def build(self, params: FilterbankParams) -> np.ndarray:
        """Return the filter weights for ``params``."""


class MelFilterbank(Filterbank):
    """Filters evenly spaced on the mel scale."""

    def __init__(self, scale: MelScale = MelScale.SLANEY) -> None:
        self.scale = scale

    def build(self, params: FilterbankParams) -> np.ndarray:
        if params.num_filters <= 0:
            return _empty()
        mel_points = _evenly_spaced(
            hz_to_mel(params.min_freq, self.scale),
            hz_to_mel(params.max_freq, self.scale),
            params.num_filters,
        )
        hz_points = [mel_to_hz(float(mel), self.scale) for mel in mel_points]
        return build_triangular_filters(params, hz_points)


class LinearFilterbank(Filterbank):
    """Filters evenly spaced in hertz."""

    def build(self, params: FilterbankParams) -> np.ndarray:
        if params.num_filters <= 0:
            return _empty()
        hz_points = _evenly_spaced(params.min_freq, params.max_freq, params.num_filters)
        return build_triangular_filters(params, hz_points.tolist())


def _hz_to_erb(hz: float) -> float:
    return 21.4 * math.log10(4.37e-3 * hz + 1.0)


def _erb_to_hz(erb: float) -> float:
    return (10.0 ** (erb / 21.4) - 1.0) / 4.37e-3


class GammatoneFilterbank(Filterbank):
    """Triangular filters evenly spaced on the ERB-rate scale."""

    def build(self, params: FilterbankParams) -> np.ndarray:
        if params.num_filters <= 0:
            return _empty()
        erb_points = _evenly_spaced(
            _hz_to_erb(params.min_freq), _hz_to_erb(params.max_freq), params.num_filters
        )
        hz_points = [_erb_to_hz(float(erb)) for erb in erb_points]
        return build_triangular_filters(params, hz_points)


def _hz_to_bark(hz: float) -> float:
    return 26.81 * hz / (1960.0 + hz) - 0.53


def _bark_to_hz(bark: float) -> float:
    z = bark + 0.53
    return (1960.0 * z) / (26.81 - z)


class BarkFilterbank(Filterbank):
    """Triangular filters evenly spaced on the Bark scale."""

    def build(self, params: FilterbankParams) -> np.ndarray:
        if params.num_filters <= 0:
            return _empty()
        bark_points = _evenly_spaced(
            _hz_to_bark(params.min_freq), _hz_to_bark(params.max_freq), params.num_filters
        )
        hz_points = [_bark_to_hz(float(bark)) for bark in bark_points]
        return build_triangular_filters(params, hz_points)


def create_filterbank(
    filterbank_type: FilterbankType, mel_scale: MelScale = MelScale.SLANEY
) -> Filterbank:
    """Return a filterbank of the requested kind."""
    if filterbank_type is FilterbankType.MEL:
        return MelFilterbank(mel_scale)
    if filterbank_type is FilterbankType.LINEAR:
        return LinearFilterbank()
    if filterbank_type is FilterbankType.GAMMATONE:
        return GammatoneFilterbank()
    if filterbank_type is FilterbankType.BARK:
        return BarkFilterbank()
    raise ValueError("Unsupported filterbank type")