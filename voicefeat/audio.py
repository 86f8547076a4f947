"""Audio buffers and readers for decoding files into mono float samples."""

from __future__ import annotations

import os
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

import numpy as np

_FMT_LAYOUT = struct.Struct("<HHIIHH")
_PCM16_SCALE = np.float32(32768.0)


class AudioFormatError(ValueError):
    """Raised when an audio file is malformed or uses an unsupported encoding."""


@dataclass
class AudioBuffer:
    """Mono samples normalised to [-1.0, 1.0] together with their sample rate."""

    samples: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float32))
    sample_rate: int = 0

    def __post_init__(self) -> None:
        self.samples = np.asarray(self.samples, dtype=np.float32).reshape(-1)

    def __len__(self) -> int:
        return len(self.samples)


def resolve_path(path: str | os.PathLike[str], start: str | os.PathLike[str] | None = None) -> Path:
    """Resolve a path, searching ``start`` and its ancestors before the working directory.

    An absolute path is only normalised. A relative path is tried against
    ``start`` (a directory, or a file whose directory is used) and then each of
    its parents; the first existing candidate wins. Otherwise the path is taken
    relative to the current working directory.
    """
    target = Path(path)
    if target.is_absolute():
        return target.resolve()

    if start is not None:
        base = Path(start)
        if base.is_file():
            base = base.parent
        base = base.resolve()
        for directory in (base, *base.parents):
            candidate = (directory / target).resolve()
            if candidate.exists():
                return candidate

    return (Path.cwd() / target).resolve()


class AudioReader(ABC):
    """Loads an audio file into an :class:`AudioBuffer`."""

    def __init__(self, base_dir: str | os.PathLike[str] | None = None) -> None:
        self.base_dir = base_dir

    @abstractmethod
    def load(self, path: str | os.PathLike[str]) -> AudioBuffer:
        """Decode the file at ``path`` into mono samples."""


class WavAudioReader(AudioReader):
    """Reader for 16-bit PCM RIFF/WAVE files; channels are averaged to mono."""

    def load(self, path: str | os.PathLike[str]) -> AudioBuffer:
        resolved = resolve_path(path, self.base_dir)
        with open(resolved, "rb") as stream:
            return _read_wav(stream, str(resolved))


def _read_wav(stream: BinaryIO, name: str) -> AudioBuffer:
    header = stream.read(12)
    if len(header) < 12 or header[:4] != b"RIFF" or header[8:12] != b"WAVE":
        raise AudioFormatError(f"Not a RIFF/WAVE file: {name}")

    channels = 0
    sample_rate = 0
    bits_per_sample = 0
    data = b""

    while True:
        chunk_header = stream.read(8)
        if len(chunk_header) < 8:
            break
        chunk_id = chunk_header[:4]
        (size,) = struct.unpack("<I", chunk_header[4:])

        if chunk_id == b"fmt ":
            fmt = stream.read(_FMT_LAYOUT.size)
            if len(fmt) < _FMT_LAYOUT.size or size < _FMT_LAYOUT.size:
                break
            _, channels, sample_rate, _, _, bits_per_sample = _FMT_LAYOUT.unpack(fmt)
            if size > _FMT_LAYOUT.size:
                stream.seek(size - _FMT_LAYOUT.size, os.SEEK_CUR)
        elif chunk_id == b"data":
            data = stream.read(size).ljust(size, b"\0")
            break
        else:
            stream.seek(size, os.SEEK_CUR)

    if not data:
        raise AudioFormatError(f"No data chunk in wav: {name}")
    if bits_per_sample != 16:
        raise AudioFormatError("Only 16-bit wav supported in this reader")
    if channels == 0:
        raise AudioFormatError(f"wav declares no channels: {name}")

    frames = len(data) // 2 // channels
    pcm = np.frombuffer(data, dtype="<i2", count=frames * channels).reshape(frames, channels)
    scaled = pcm.astype(np.float32) / _PCM16_SCALE
    mono = scaled.sum(axis=1, dtype=np.float32) / np.float32(channels)
    return AudioBuffer(samples=mono, sample_rate=int(sample_rate))