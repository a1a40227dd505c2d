import logging
import numpy as np
from dataclasses import dataclass
from scipy.signal import lfilter
from .base import GenBase
from typing import Iterator, Tuple
from ..types import ChunkInfo, GenerationParameters, NormalSource

logger = logging.getLogger(__name__)

# leaky integrator coefficient; y[n] = ALPHA*y[n-1] + (1-ALPHA)*x[n]
ALPHA = 0.99
# integrated noise peaks far above its input, scale it down before int16
NORMALIZATION = 0.15

INT16_MAX = 32767
INT16_MIN = -32768


class LeakyIntegrator:
    """First-order low-pass that turns white noise brown.

    ``state`` is the previous real-valued output and carries across calls to
    :meth:`process`, so filtering a signal in pieces gives the same result as
    filtering it in one go.
    """

    def __init__(self, alpha: float = ALPHA):
        self.alpha = alpha
        self.state = 0.0
        self._b = [1.0 - alpha]
        self._a = [1.0, -alpha]

    def process(self, white: np.ndarray) -> np.ndarray:
        white = np.asarray(white, dtype=np.float64)
        if white.size == 0:
            return white
        # lfilter's transposed form keeps alpha*y[n-1] as its single delay
        y, _ = lfilter(self._b, self._a, white, zi=[self.alpha * self.state])
        self.state = float(y[-1])
        return y


def quantize(values) -> np.ndarray:
    """Truncate ``values * 32767`` toward zero and saturate to int16. NaN -> 0."""
    with np.errstate(invalid="ignore", over="ignore"):
        scaled = np.trunc(np.asarray(values, dtype=np.float64) * INT16_MAX)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=INT16_MAX, neginf=INT16_MIN)
    return np.clip(scaled, INT16_MIN, INT16_MAX).astype(np.int16)


@dataclass
class BrownNoiseSpec(GenBase):

    def _normalization(self) -> float:
        return self.amplitude * NORMALIZATION

    def generator(self, duration: float, rng: NormalSource = None) -> Iterator[Tuple[np.ndarray, ChunkInfo]]:
        num = self._num_samples(duration)
        if rng is None:
            rng = np.random.default_rng()
        integrator = LeakyIntegrator()
        norm = self._normalization()
        logger.debug("brown noise: %d samples at %d Hz, amplitude %s", num, self.sample_rate, self.amplitude)
        for start, n in self._frames(num):
            white = rng.standard_normal(n)
            y = integrator.process(white)
            with np.errstate(invalid="ignore", over="ignore"):
                scaled = y * norm
            yield quantize(scaled), {"type": "brown", "start": start, "amplitude": self.amplitude}

    def render(self, duration: float, rng: NormalSource = None) -> np.ndarray:
        chunks = [chunk for chunk, _ in self.generator(duration, rng)]
        if not chunks:
            return np.zeros(0, dtype=np.int16)
        return np.concatenate(chunks)


def synthesize(params: GenerationParameters, rng: NormalSource = None) -> np.ndarray:
    """Render ``params`` to an int16 array of floor(duration * sample_rate) samples."""
    spec = BrownNoiseSpec(amplitude=params.amplitude, sample_rate=params.sample_rate)
    return spec.render(params.duration, rng)
