"""Framing, windowing and spectral transforms for short-time analysis."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List, Sequence, Union

import numpy as np

from .audio import AudioBuffer
from .config import WindowType

FrameLike = Union[np.ndarray, Sequence[float]]


def _as_frame(frame: FrameLike) -> np.ndarray:
    return np.asarray(frame, dtype=np.float32).reshape(-1)


class Transformer(ABC):
    """Turns a frame of real samples into a complex spectrum."""

    @abstractmethod
    def transform(self, frame: FrameLike) -> np.ndarray:
        """Return the complex spectrum of ``frame``."""


class FFTTransformer(Transformer):
    """Radix-2 FFT; the frame is zero-padded to the next power of two."""

    def transform(self, frame: FrameLike) -> np.ndarray:
        samples = _as_frame(frame)
        size = 1
        while size < len(samples):
            size <<= 1
        padded = np.zeros(size, dtype=np.complex64)
        padded[: len(samples)] = samples
        return np.fft.fft(padded).astype(np.complex64)


class DFTTransformer(Transformer):
    """Direct O(N^2) discrete Fourier transform without padding."""

    def transform(self, frame: FrameLike) -> np.ndarray:
        samples = _as_frame(frame)
        size = len(samples)
        if size == 0:
            return np.zeros(0, dtype=np.complex64)
        indices = np.arange(size, dtype=np.float64)
        angles = -2.0 * math.pi * np.outer(indices, indices) / size
        kernel = np.cos(angles) + 1j * np.sin(angles)
        return (kernel @ samples.astype(np.float64)).astype(np.complex64)


class FixedFrameExtractor:
    """Cuts audio into fixed-size frames taken every ``hop_size`` samples.

    Only complete frames are produced; trailing samples that do not fill a
    frame are dropped.
    """

    def __init__(self, window_size: int, hop_size: int) -> None:
        if window_size <= 0:
            raise ValueError("windowSize must be positive")
        if hop_size <= 0:
            raise ValueError("hopSize must be positive")
        self.window_size = window_size
        self.hop_size = hop_size

    def extract(self, audio: AudioBuffer) -> List[np.ndarray]:
        """Return the list of frames found in ``audio``."""
        samples = np.asarray(audio.samples, dtype=np.float32)
        last_start = len(samples) - self.window_size
        return [
            samples[start : start + self.window_size].copy()
            for start in range(0, last_start + 1, self.hop_size)
        ]


def _build_window(size: int, window_type: WindowType) -> np.ndarray:
    n = np.arange(size, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        phase = np.cos(2.0 * math.pi * n / (size - 1))
    if window_type is WindowType.HAMMING:
        weights = 0.54 - 0.46 * phase
    elif window_type is WindowType.HANNING:
        weights = 0.5 - 0.5 * phase
    else:
        raise ValueError(f"Unsupported window type: {window_type}")
    return weights.astype(np.float32)


class WindowFunction:
    """A tapering window of fixed length applied sample by sample."""

    def __init__(self, size: int, window_type: WindowType) -> None:
        self.size = size
        self.window_type = window_type
        self.weights = _build_window(size, window_type)

    def apply(self, frame: FrameLike) -> np.ndarray:
        """Return ``frame`` multiplied by the window.

        Only the overlapping part is weighted; samples past the window's
        length are returned unchanged.
        """
        result = _as_frame(frame).copy()
        count = min(len(result), len(self.weights))
        result[:count] *= self.weights[:count]
        return result


class HammingWindow(WindowFunction):
    """Hamming window of the given length."""

    def __init__(self, size: int) -> None:
        super().__init__(size, WindowType.HAMMING)


class HanningWindow(WindowFunction):
    """Hann window of the given length."""

    def __init__(self, size: int) -> None:
        super().__init__(size, WindowType.HANNING)