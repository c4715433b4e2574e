"""Spectral tone synthesis."""

from .synthesizer import ToneSynthesizer
from .transform import InverseTransform, plan_inverse
from .window import build_spectral_window

__all__ = [
    "ToneSynthesizer",
    "InverseTransform",
    "plan_inverse",
    "build_spectral_window",
]
