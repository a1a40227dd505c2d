from .brown import BrownNoiseSpec, LeakyIntegrator, quantize, synthesize

__all__ = [
    "BrownNoiseSpec",
    "LeakyIntegrator",
    "quantize",
    "synthesize",
]
