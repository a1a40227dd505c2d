import math
from dataclasses import dataclass

DEFAULT_SAMPLE_RATE = 44100
FRAME = 1024

@dataclass
class GenBase:
    amplitude: float = 0.5
    sample_rate: int = DEFAULT_SAMPLE_RATE
    frame: int = FRAME

    def _num_samples(self, duration: float) -> int:
        """floor(duration * sample_rate), never negative."""
        if not duration > 0 or not self.sample_rate > 0:
            return 0
        total = duration * self.sample_rate
        if not math.isfinite(total):
            return 0
        return int(math.floor(total))

    def _frames(self, num: int):
        for i in range(0, num, self.frame):
            yield i, min(self.frame, num - i)
