"""Octave-band check that a signal falls off like brown noise.

A 1/f^2 power spectral density drops to a quarter every octave, so the mean
density of each octave band should be about 0.25 of the band below it. Only
the region well above the integrator's corner (~70 Hz at 44.1 kHz) and well
below Nyquist follows that slope, hence the defaults.
"""
from typing import List

import numpy as np
from scipy.signal import welch

BROWN_OCTAVE_RATIO = 0.25
NPERSEG = 4096


def octave_band_ratios(samples, sample_rate: int, low: float = 250.0, octaves: int = 4) -> List[float]:
    """Ratios of mean PSD between successive octave bands starting at ``low``."""
    x = np.asarray(samples, dtype=np.float64)
    if low * 2 ** octaves >= sample_rate / 2:
        raise ValueError(f"Bands up to {low * 2 ** octaves:.0f} Hz do not fit below Nyquist at {sample_rate} Hz")
    if len(x) < NPERSEG:
        raise ValueError(f"Need at least {NPERSEG} samples, got {len(x)}")

    freqs, psd = welch(x, fs=sample_rate, nperseg=NPERSEG)
    means = []
    for k in range(octaves):
        lo, hi = low * 2 ** k, low * 2 ** (k + 1)
        band = psd[(freqs >= lo) & (freqs < hi)]
        means.append(float(np.mean(band)))
    return [b / a if a > 0 else float("nan") for a, b in zip(means, means[1:])]


def verify_spectral_characteristics(samples, sample_rate: int, low: float = 250.0,
                                    octaves: int = 4, tolerance: float = 0.08) -> bool:
    ratios = octave_band_ratios(samples, sample_rate, low, octaves)
    return all(abs(r - BROWN_OCTAVE_RATIO) <= tolerance for r in ratios)
