"""Conversions between hertz and the mel scale (HTK and Slaney variants)."""

from __future__ import annotations

import math

from .config import MelScale

_LOG_BASE = 6.4
_F_SP = 200.0 / 3.0
_MIN_LOG_HZ = 1000.0
_MIN_LOG_MEL = _MIN_LOG_HZ / _F_SP
_LOG_STEP = math.log(_LOG_BASE) / 27.0


def _hz_to_mel_htk(hz: float) -> float:
    return 2595.0 * math.log10(1.0 + hz / 700.0)


def _mel_to_hz_htk(mel: float) -> float:
    return 700.0 * (10.0 ** (mel / 2595.0) - 1.0)


def _hz_to_mel_slaney(hz: float) -> float:
    if hz >= _MIN_LOG_HZ:
        return _MIN_LOG_MEL + math.log(hz / _MIN_LOG_HZ) / _LOG_STEP
    return hz / _F_SP


def _mel_to_hz_slaney(mel: float) -> float:
    if mel >= _MIN_LOG_MEL:
        return _MIN_LOG_HZ * math.exp(_LOG_STEP * (mel - _MIN_LOG_MEL))
    return mel * _F_SP


def hz_to_mel(hz: float, scale: MelScale = MelScale.SLANEY) -> float:
    """Convert a frequency in hertz to mel."""
    if scale is MelScale.HTK:
        return _hz_to_mel_htk(hz)
    return _hz_to_mel_slaney(hz)


def mel_to_hz(mel: float, scale: MelScale = MelScale.SLANEY) -> float:
    """Convert a mel value back to hertz."""
    if scale is MelScale.HTK:
        return _mel_to_hz_htk(mel)
    return _mel_to_hz_slaney(mel)