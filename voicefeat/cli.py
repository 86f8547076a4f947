"""Command-line entry point printing the shape of an audio file's MFCC matrix."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .config import CepstralConfig
from .pipeline import compute_file_mfcc

_DEFAULT_AUDIO = "./data/common_voice_en_42698961.mp3"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compute MFCCs with deltas and delta-deltas and report the matrix shape."""
    parser = argparse.ArgumentParser(description="Compute MFCC features of an audio file.")
    parser.add_argument("path", nargs="?", default=_DEFAULT_AUDIO, help="audio file to analyse")
    args = parser.parse_args(argv)

    config = CepstralConfig()
    config.delta.use_deltas = True
    config.delta.use_delta_deltas = True

    try:
        mfcc = compute_file_mfcc(args.path, config)
    except (OSError, ValueError) as error:
        print(f"Failed to compute MFCC: {error}", file=sys.stderr)
        return 1

    width = mfcc.shape[1] if len(mfcc) else 0
    print(f"Frames: {len(mfcc)}")
    print(f"Coefficients per frame: {width}")
    return 0


if __name__ == "__main__":
    sys.exit(main())