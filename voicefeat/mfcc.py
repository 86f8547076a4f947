"""Cepstral coefficients from windowed frames via a filterbank and a DCT-II."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

import numpy as np

from .config import FeatureOptions
from .dsp import Transformer
from .filterbanks import FilterbankParams, create_filterbank

_LOG_EPS = 1e-10

FramesLike = Union[np.ndarray, Sequence[Sequence[float]]]


def _dct_basis(num_inputs: int, num_coeffs: int) -> np.ndarray:
    """Unnormalised DCT-II basis with at most ``num_inputs`` rows."""
    count = max(1, min(num_coeffs, num_inputs))
    k = np.arange(count, dtype=np.float64)[:, None]
    n = np.arange(num_inputs, dtype=np.float64)[None, :]
    return np.cos(math.pi * k * (2.0 * n + 1.0) / (2.0 * num_inputs))


def _magnitude(spectrum: np.ndarray, n_freqs: int) -> np.ndarray:
    magnitude = np.abs(np.asarray(spectrum)[:n_freqs]).astype(np.float64)
    if len(magnitude) < n_freqs:
        magnitude = np.pad(magnitude, (0, n_freqs - len(magnitude)))
    return magnitude


def compute_mfcc(
    frames: FramesLike,
    transformer: Transformer,
    options: Optional[FeatureOptions] = None,
) -> np.ndarray:
    """Return one row of cepstral coefficients per frame.

    The spectrum size of the first frame fixes the filterbank layout. With
    ``include_energy`` the first coefficient is replaced by the frame's log
    energy.
    """
    options = options or FeatureOptions()
    frame_list = [np.asarray(frame, dtype=np.float32).reshape(-1) for frame in frames]
    if not frame_list:
        return np.zeros((0, 0), dtype=np.float32)

    first_spectrum = transformer.transform(frame_list[0])
    n_fft = len(first_spectrum)
    n_freqs = n_fft // 2 + 1

    num_coeffs = max(1, options.num_coeffs)
    num_filters = max(1, options.num_filters)
    sample_rate = max(1, options.sample_rate)

    nyquist = sample_rate / 2.0
    max_freq = nyquist if options.max_freq <= 0.0 else options.max_freq
    max_freq = min(max(max_freq, 0.0), nyquist)
    min_freq = min(max(options.min_freq, 0.0), max_freq)
    if max_freq <= min_freq:
        max_freq = min_freq + 1.0

    params = FilterbankParams(
        sample_rate=sample_rate,
        n_fft=n_fft,
        num_filters=num_filters,
        min_freq=min_freq,
        max_freq=max_freq,
    )
    filters = create_filterbank(options.filterbank, options.mel_scale).build(params)
    basis = _dct_basis(filters.shape[0], num_coeffs)

    rows = []
    for index, frame in enumerate(frame_list):
        spectrum = first_spectrum if index == 0 else transformer.transform(frame)
        magnitude = _magnitude(spectrum, n_freqs)
        width = min(filters.shape[1], len(magnitude))
        energies = filters[:, :width] @ magnitude[:width]
        coeffs = (basis @ np.log(energies + _LOG_EPS)).astype(np.float32)
        if options.include_energy and len(coeffs):
            energy = float(np.sum(frame.astype(np.float64) ** 2))
            coeffs[0] = np.float32(math.log(energy + _LOG_EPS))
        rows.append(coeffs)

    return np.vstack(rows).astype(np.float32)