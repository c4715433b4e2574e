"""matrix_tones - Calibration tone files for matrix surround decoders."""

__version__ = "0.1.0"

from .config import GeneratorConfig
from .directions import DIRECTION_ORDER, Direction, DirectionalTone, TestPlan, polar
from .exceptions import (
    MatrixTonesError,
    ConfigurationError,
    TestPlanError,
    TransformError,
    SinkError,
    SinkOpenError,
    SinkWriteError,
    SinkFlushError,
)
from .generator import SequenceState, ToneGenerator
from .matrix import sq_encode
from .plans import PLANS, default_plan, sq_plan
from .sink import WavHeader, WavWriter, open_sink
from .synthesis import InverseTransform, ToneSynthesizer, build_spectral_window, plan_inverse

__all__ = [
    # Core components
    "ToneGenerator",
    "SequenceState",
    "ToneSynthesizer",
    "build_spectral_window",
    "sq_encode",
    # Data model
    "Direction",
    "DIRECTION_ORDER",
    "DirectionalTone",
    "TestPlan",
    "polar",
    # Plans
    "PLANS",
    "default_plan",
    "sq_plan",
    # Configuration
    "GeneratorConfig",
    # Collaborators
    "WavHeader",
    "WavWriter",
    "open_sink",
    "InverseTransform",
    "plan_inverse",
    # Exceptions
    "MatrixTonesError",
    "ConfigurationError",
    "TestPlanError",
    "TransformError",
    "SinkError",
    "SinkOpenError",
    "SinkWriteError",
    "SinkFlushError",
]
