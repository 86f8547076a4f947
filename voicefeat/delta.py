"""Regression-based delta and delta-delta features."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

FeatureMatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]


def _as_matrix(features: FeatureMatrixLike) -> np.ndarray:
    matrix = np.asarray(features, dtype=np.float32)
    if matrix.ndim == 1 and matrix.size == 0:
        return matrix.reshape(0, 0)
    if matrix.ndim != 2:
        raise ValueError("feature matrix must be two-dimensional")
    return matrix


def compute_delta(features: FeatureMatrixLike, n: int = 2) -> np.ndarray:
    """Return the delta of each frame using a regression window of ``n`` frames.

    Frames beyond either end are replaced by the nearest edge frame.
    """
    matrix = _as_matrix(features)
    frames = matrix.shape[0]
    if frames == 0:
        return matrix.copy()
    if n <= 0:
        raise ValueError("Delta window N must be positive")

    padded = np.pad(matrix.astype(np.float64), ((n, n), (0, 0)), mode="edge")
    numerator = np.zeros(matrix.shape, dtype=np.float64)
    for offset in range(1, n + 1):
        following = padded[n + offset : n + offset + frames]
        preceding = padded[n - offset : n - offset + frames]
        numerator += offset * (following - preceding)

    denominator = 2.0 * sum(offset * offset for offset in range(1, n + 1))
    return (numerator / denominator).astype(np.float32)


def compute_delta_delta(features: FeatureMatrixLike, n: int = 2) -> np.ndarray:
    """Return the second-order delta (the delta of the delta)."""
    return compute_delta(compute_delta(features, n), n)


def append_deltas(
    base: FeatureMatrixLike, use_delta: bool, use_delta_delta: bool, n: int = 2
) -> np.ndarray:
    """Concatenate deltas and/or delta-deltas to each frame of ``base``."""
    matrix = _as_matrix(base)
    if matrix.shape[0] == 0 or not (use_delta or use_delta_delta):
        return matrix

    blocks = [matrix]
    if use_delta:
        blocks.append(compute_delta(matrix, n))
    if use_delta_delta:
        blocks.append(compute_delta_delta(matrix, n))
    return np.hstack(blocks)