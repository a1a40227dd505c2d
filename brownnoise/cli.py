import argparse, logging
import numpy as np
from .generators.brown import BrownNoiseSpec
from .spectrum import verify_spectral_characteristics
from .types import DEFAULT_AMPLITUDE, DEFAULT_DURATION, DEFAULT_OUTPUT, GenerationParameters
from .generators.base import DEFAULT_SAMPLE_RATE
from .wav import read_wav, write_stream

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="brownnoise", description="Brown noise generator")
    p.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="Output WAV file path")
    p.add_argument("-d", "--duration", type=float, default=DEFAULT_DURATION, help="Duration in seconds")
    p.add_argument("-s", "--sample-rate", type=int, default=DEFAULT_SAMPLE_RATE, help="Sample rate in Hz")
    p.add_argument("-a", "--amplitude", type=float, default=DEFAULT_AMPLITUDE, help="Amplitude (0.0 to 1.0)")
    p.add_argument("--seed", type=int, help="Seed for reproducible output")
    p.add_argument("--verify", action="store_true", help="Check the octave slope of the written file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p

def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    params = GenerationParameters(duration=args.duration, sample_rate=args.sample_rate,
                                  amplitude=args.amplitude, output=args.output)
    if params.duration <= 0 or params.sample_rate <= 0:
        logger.warning("Non-positive duration or sample rate, writing an empty file")
    if not 0.0 < params.amplitude <= 1.0:
        logger.warning("Amplitude %s is outside (0, 1], output may clip or be silent", params.amplitude)

    spec = BrownNoiseSpec(amplitude=params.amplitude, sample_rate=params.sample_rate)
    rng = np.random.default_rng(args.seed)
    # libsndfile rejects a zero or negative rate in the header
    rate = max(params.sample_rate, 1)
    try:
        write_stream(params.output, spec.generator(params.duration, rng), rate)
    except (OSError, RuntimeError) as e:
        p.exit(1, f"Failed to write {params.output}: {e}\n")

    if args.verify:
        audio, sr = read_wav(params.output)
        try:
            ok = verify_spectral_characteristics(audio, sr)
        except ValueError as e:
            logger.warning("Spectral check skipped: %s", e)
        else:
            logger.info("Spectral check %s", "passed" if ok else "failed")

    print(f"Brown noise generated and saved to {params.output}")

if __name__ == "__main__":
    main()
