"""Brown noise synthesis to 16-bit mono WAV."""

from .generators import BrownNoiseSpec, synthesize
from .types import GenerationParameters

__all__ = ["BrownNoiseSpec", "GenerationParameters", "synthesize"]
