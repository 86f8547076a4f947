"""End-to-end cepstral feature extraction from audio files and buffers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from .audio import AudioBuffer, WavAudioReader
from .config import CepstralConfig, FeatureOptions
from .delta import append_deltas
from .dsp import FFTTransformer, FixedFrameExtractor, HanningWindow
from .mfcc import compute_mfcc


def load_audio(path: Union[str, os.PathLike]) -> AudioBuffer:
    """Decode an audio file, choosing the reader by its extension."""
    if Path(path).suffix.lower() == ".wav":
        return WavAudioReader().load(path)
    raise ValueError(f"Unsupported audio format: {os.fspath(path)}")


def apply_pre_emphasis(samples: Union[np.ndarray, Sequence[float]], coeff: float) -> np.ndarray:
    """Return ``y[n] = x[n] - coeff * x[n-1]``, keeping the first sample."""
    x = np.asarray(samples, dtype=np.float32).reshape(-1)
    if len(x) == 0:
        return x.copy()
    emphasized = x.copy()
    emphasized[1:] = x[1:] - np.float32(coeff) * x[:-1]
    return emphasized


def _feature_options(sample_rate: int, config: CepstralConfig) -> FeatureOptions:
    feature = config.feature
    return FeatureOptions(
        sample_rate=sample_rate,
        num_filters=feature.num_filters,
        num_coeffs=feature.num_coeffs,
        min_freq=feature.min_freq,
        max_freq=feature.max_freq if feature.max_freq > 0.0 else sample_rate / 2.0,
        include_energy=feature.include_energy,
        filterbank=feature.filterbank,
        mel_scale=feature.mel_scale,
    )


def compute_buffer_mfcc(audio: AudioBuffer, config: Optional[CepstralConfig] = None) -> np.ndarray:
    """Compute cepstral features (with optional deltas) for an audio buffer.

    The buffer's sample rate is used when positive, otherwise the one in the
    configuration. Audio too short for one frame yields an empty matrix.
    """
    config = config or CepstralConfig()
    framing = config.framing
    if framing.frame_size <= 0 or framing.frame_step <= 0:
        raise ValueError("Frame size and step must be positive")

    sample_rate = audio.sample_rate if audio.sample_rate > 0 else config.feature.sample_rate
    if sample_rate <= 0:
        raise ValueError("Sample rate must be positive")

    samples = np.asarray(audio.samples, dtype=np.float32)
    if config.preemphasis.use_pre_emphasis:
        samples = apply_pre_emphasis(samples, config.preemphasis.pre_emphasis_coeff)
    working = AudioBuffer(samples=samples, sample_rate=sample_rate)

    frames = FixedFrameExtractor(framing.frame_size, framing.frame_step).extract(working)
    if not frames:
        return np.zeros((0, 0), dtype=np.float32)

    window = HanningWindow(framing.frame_size)
    windowed = [window.apply(frame) for frame in frames]

    base = compute_mfcc(windowed, FFTTransformer(), _feature_options(sample_rate, config))
    return append_deltas(
        base,
        config.delta.use_deltas,
        config.delta.use_delta_deltas,
        config.delta.regression_window,
    )


def compute_file_mfcc(
    path: Union[str, os.PathLike], config: Optional[CepstralConfig] = None
) -> np.ndarray:
    """Load an audio file and compute its cepstral features."""
    return compute_buffer_mfcc(load_audio(path), config)