# voicefeat

`voicefeat` computes cepstral speech features from audio. It applies
pre-emphasis, cuts the signal into fixed-size frames, windows each frame,
takes its spectrum, passes the magnitude through a triangular filterbank
(Mel, linear, gammatone/ERB or Bark), takes the log and a DCT-II, and returns
a matrix of coefficients: one row per frame, optionally extended with delta
and delta-delta coefficients. Matrices are `numpy` arrays of `float32`.

## Installation

```
pip install .
```

The only runtime dependency is `numpy`. To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

The entry points are in `voicefeat.pipeline`:

```python
from voicefeat.config import CepstralConfig
from voicefeat.pipeline import compute_file_mfcc

config = CepstralConfig()
config.delta.use_deltas = True
matrix = compute_file_mfcc("speech.wav", config)
print(matrix.shape)  # (frames, coefficients)
```

- `compute_file_mfcc(path, config=None)` loads a file with `load_audio` and
  computes its features.
- `compute_buffer_mfcc(audio, config=None)` does the same for a
  `voicefeat.audio.AudioBuffer`. The buffer's sample rate is used when it is
  positive, otherwise `config.feature.sample_rate`. A non-positive frame size,
  frame step or sample rate raises `ValueError`; audio shorter than one frame
  gives an empty `(0, 0)` matrix.
- `load_audio(path)` reads `.wav` files (extension matched case-insensitively)
  and raises `ValueError` for any other extension.
- `apply_pre_emphasis(samples, coeff)` returns `y[n] = x[n] - coeff * x[n-1]`,
  keeping the first sample.

### Configuration

`voicefeat.config.CepstralConfig` groups:

- `framing`: `FramingOptions(frame_size=400, frame_step=160, window=WindowType.HAMMING)`
- `feature`: `FeatureOptions(sample_rate=16000, num_filters=26, num_coeffs=13,
  min_freq=0.0, max_freq=8000.0, include_energy=True,
  filterbank=FilterbankType.MEL, mel_scale=MelScale.SLANEY)`
- `delta`: `DeltaOptions(use_deltas=False, use_delta_deltas=False, regression_window=2)`
- `preemphasis`: `PreEmphasisOptions(use_pre_emphasis=True, pre_emphasis_coeff=0.97)`
- `cepstral_type`: a `CepstralType` (`MFCC`, `LFCC`, `GFCC`, `PNCC`, `PLP`)

With `include_energy` the first coefficient is replaced by the frame's log
energy. A `max_freq` of zero or less means the Nyquist frequency.
`config.DEFAULTS` maps each `CepstralType` to its default filter count,
coefficient count and minimum frequency.

### Building blocks

- `voicefeat.audio`: `AudioBuffer` (mono `float32` samples and a sample
  rate), `WavAudioReader` for 16-bit PCM RIFF/WAVE files (channels averaged
  to mono; other bit depths raise `AudioFormatError`), and
  `resolve_path(path, start=None)`, which looks for a relative path in `start`
  and its parent directories before the working directory. A reader given
  `base_dir` resolves relative paths from there.
- `voicefeat.dsp`: `FixedFrameExtractor` (complete frames only),
  `WindowFunction`, `HammingWindow`, `HanningWindow`, `FFTTransformer`
  (zero-pads to the next power of two) and `DFTTransformer` (direct DFT, no
  padding).
- `voicefeat.filterbanks`: `FilterbankParams`, `MelFilterbank`,
  `LinearFilterbank`, `GammatoneFilterbank`, `BarkFilterbank`,
  `create_filterbank(filterbank_type, mel_scale)` and
  `build_triangular_filters(params, hz_points)`.
- `voicefeat.mel_scale`: `hz_to_mel` and `mel_to_hz` for `MelScale.HTK` and
  `MelScale.SLANEY`.
- `voicefeat.delta`: `compute_delta`, `compute_delta_delta` and
  `append_deltas`; frames past either end are replaced by the edge frame.
- `voicefeat.mfcc`: `compute_mfcc(frames, transformer, options)` over frames
  that are already windowed.
- `voicefeat.features`: `Feature` (options plus a cepstral type, with
  `compute(frames, transformer)`), the presets
  `create_default_mfcc_feature`, `create_default_lfcc_feature`,
  `create_default_gfcc_feature`, `create_default_pncc_feature`,
  `create_default_plp_feature`, and `create_default_feature(cepstral_type, config)`.

## Command line

```
voicefeat speech.wav
```

computes MFCCs with deltas and delta-deltas and prints the number of frames
and the number of coefficients per frame. On failure it prints
`Failed to compute MFCC: ...` to standard error and exits with status 1.
The path argument is optional; its default, `./data/common_voice_en_42698961.mp3`,
is an MP3 file and therefore fails (see below).

## What it does not do

- Only 16-bit PCM WAV input is read. MP3 and other formats are not decoded.
- The pipeline always applies a Hann window; `FramingOptions.window` is not
  consulted. `CepstralConfig.cepstral_type` is not consulted either.
- Every `Feature`, whatever its `cepstral_type`, is computed the same way
  (filterbank, log, DCT-II); the LFCC, GFCC, PNCC and PLP presets differ only
  in filterbank and sizes. There is no PNCC power normalisation and no PLP
  linear-prediction stage.