from dataclasses import dataclass
from typing import Protocol, TypedDict, Union
import os
import numpy as np

from .generators.base import DEFAULT_SAMPLE_RATE

DEFAULT_OUTPUT = "brown_noise.wav"
DEFAULT_DURATION = 10.0
DEFAULT_AMPLITUDE = 0.5

class ChunkInfo(TypedDict, total=False):
    type: str
    start: int
    amplitude: float

class NormalSource(Protocol):
    def standard_normal(self, size: int) -> np.ndarray: ...


@dataclass(frozen=True)
class GenerationParameters:
    """Everything one brown noise run needs. Amplitude is not clamped."""
    duration: float = DEFAULT_DURATION
    sample_rate: int = DEFAULT_SAMPLE_RATE
    amplitude: float = DEFAULT_AMPLITUDE
    output: Union[str, os.PathLike] = DEFAULT_OUTPUT
