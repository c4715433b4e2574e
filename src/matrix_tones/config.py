"""Generator configuration for matrix_tones."""

import logging
from dataclasses import dataclass

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
WINDOW_SIZE = 50
ITERATIONS_PER_TONE = 200
ITERATIONS_PER_SILENCE = 20

# Silence before the first tone and after each of the eight tones
SILENCE_SEGMENTS = 9
TONE_SEGMENTS = 8


@dataclass
class GeneratorConfig:
    """Fixed timing constants for one calibration file."""
    sample_rate: int = SAMPLE_RATE                        # Hz
    window_size: int = WINDOW_SIZE                        # Samples per tone period
    iterations_per_tone: int = ITERATIONS_PER_TONE        # Periods per tone segment
    iterations_per_silence: int = ITERATIONS_PER_SILENCE  # Windows per silence segment

    @property
    def tone_frequency(self) -> float:
        """Frequency of every synthesized tone in Hz."""
        return self.sample_rate / self.window_size

    @property
    def tone_frames(self) -> int:
        """Sample frames in one tone segment."""
        return self.iterations_per_tone * self.window_size

    @property
    def silence_frames(self) -> int:
        """Sample frames in one silence segment."""
        return self.iterations_per_silence * self.window_size

    @property
    def total_frames(self) -> int:
        """Sample frames in a complete calibration file."""
        return (
            self.silence_frames * SILENCE_SEGMENTS
            + self.tone_frames * TONE_SEGMENTS
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.sample_rate <= 0:
            raise ConfigurationError(
                f"Invalid sample rate {self.sample_rate}. Must be greater than 0"
            )

        # Bin 1 and its mirror bin must be distinct
        if self.window_size < 3:
            raise ConfigurationError(
                f"Invalid window size {self.window_size}. Must be at least 3"
            )

        if self.iterations_per_tone < 0:
            raise ConfigurationError(
                f"Invalid iterations per tone {self.iterations_per_tone}. "
                "Must be >= 0"
            )

        if self.iterations_per_silence < 0:
            raise ConfigurationError(
                f"Invalid iterations per silence {self.iterations_per_silence}. "
                "Must be >= 0"
            )

        logger.debug(
            f"Config OK: {self.tone_frequency:.1f}Hz tones, "
            f"{self.total_frames} frames per file"
        )
