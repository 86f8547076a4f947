"""Cepstral speech feature extraction from WAV audio: framing, filterbanks, MFCC and deltas."""

__version__ = "0.1.0"