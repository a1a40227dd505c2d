import logging
from typing import Iterable, Tuple

import numpy as np
import soundfile as sf

logger = logging.getLogger(__name__)

CHANNELS = 1
SUBTYPE = "PCM_16"


def write_wav(path, samples: np.ndarray, sample_rate: int) -> None:
    """Write int16 mono samples to ``path`` as 16-bit PCM WAV."""
    data = np.asarray(samples, dtype=np.int16)
    sf.write(path, data, sample_rate, subtype=SUBTYPE, format="WAV")
    logger.info("Saved %d samples to %s", len(data), path)


def write_stream(path, chunks: Iterable[Tuple[np.ndarray, dict]], sample_rate: int) -> int:
    """Write ``(chunk, info)`` pairs as they arrive; returns the frame count."""
    frames = 0
    with sf.SoundFile(path, "w", samplerate=sample_rate, channels=CHANNELS,
                      subtype=SUBTYPE, format="WAV") as f:
        for chunk, _ in chunks:
            f.write(np.asarray(chunk, dtype=np.int16))
            frames += len(chunk)
    logger.info("Saved %d samples to %s", frames, path)
    return frames


def read_wav(path) -> Tuple[np.ndarray, int]:
    data, rate = sf.read(path, dtype="int16")
    return data, rate
