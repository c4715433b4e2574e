"""Shared pytest fixtures for matrix_tones tests."""

import pytest
import soundfile as sf

from matrix_tones.config import GeneratorConfig
from matrix_tones.directions import DIRECTION_ORDER, Direction, DirectionalTone, TestPlan, polar


@pytest.fixture
def small_config():
    """Short file: full-size window, few repetitions."""
    return GeneratorConfig(iterations_per_tone=2, iterations_per_silence=1)


@pytest.fixture
def silent_plan():
    """Plan with zero-magnitude tones in every direction."""
    return TestPlan({d: DirectionalTone(0j, 0j) for d in DIRECTION_ORDER})


@pytest.fixture
def center_only_plan():
    """Center tone at -3 dB on both channels, zero tones elsewhere."""
    tones = {d: DirectionalTone(0j, 0j) for d in DIRECTION_ORDER}
    tones[Direction.CENTER] = DirectionalTone(polar(0.707), polar(0.707))
    return TestPlan(tones)


@pytest.fixture
def read_wav():
    """Read a WAV file back as float32 frames (frames x channels)."""
    def _read(path):
        data, sample_rate = sf.read(str(path), dtype="float32", always_2d=True)
        return data, sample_rate
    return _read
