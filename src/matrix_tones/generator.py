"""Calibration file assembly: silence and tone segments in direction order."""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .config import GeneratorConfig
from .directions import Direction, DirectionalTone, TestPlan
from .exceptions import ConfigurationError
from .sink import FRONT_LEFT, FRONT_RIGHT, WavHeader, WavWriter, open_sink
from .synthesis import ToneSynthesizer

logger = logging.getLogger(__name__)

_SILENT_FRAME = {FRONT_LEFT: 0.0, FRONT_RIGHT: 0.0}


class SequenceState(Enum):
    """Generator state machine."""
    IDLE = "idle"
    WRITING_SILENCE = "writing_silence"
    WRITING_TONE = "writing_tone"
    DONE = "done"


class ToneGenerator:
    """
    Writes calibration files for a matrix surround decoder.

    Every file is a leading silence followed by, for each direction in
    order, one tone segment and one silence segment. The instance is reused
    across files; sample_index is reset at the start of each.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        synthesizer: Optional[ToneSynthesizer] = None,
    ):
        """
        Initialize generator.

        Args:
            config: Timing constants (defaults to GeneratorConfig())
            synthesizer: Tone synthesizer; built from config.window_size when omitted

        Raises:
            ConfigurationError: If config is invalid
        """
        self.config = config or GeneratorConfig()
        self.config.validate()
        self.synthesizer = synthesizer or ToneSynthesizer(self.config.window_size)
        if self.synthesizer.window_size != self.config.window_size:
            raise ConfigurationError(
                f"Synthesizer window size {self.synthesizer.window_size} does not "
                f"match configured window size {self.config.window_size}"
            )
        self.header = WavHeader(
            sample_format="float",
            channels=(FRONT_LEFT, FRONT_RIGHT),
            sample_rate=self.config.sample_rate,
        )

        self.sample_index = 0
        self._state = SequenceState.IDLE

    @property
    def state(self) -> SequenceState:
        """Get current state."""
        return self._state

    def _set_state(self, new_state: SequenceState) -> None:
        logger.debug(f"State: {self._state.value} -> {new_state.value} @ frame {self.sample_index}")
        self._state = new_state

    def total_frames(self) -> int:
        """Frames in every generated file, independent of the tones."""
        return self.config.total_frames

    def generate(self, path: Union[str, Path], test_plan: TestPlan) -> Path:
        """
        Write one calibration file.

        Args:
            path: Output WAV path
            test_plan: Tone for every direction

        Returns:
            Path of the written file

        Raises:
            SinkError: On the first open, write or flush failure; the file
                may be left incomplete
        """
        path = Path(path)
        self._set_state(SequenceState.IDLE)

        writer = open_sink(path, self.header)
        with writer:
            self.sample_index = 0
            self._write_silence(writer)

            for direction, tone in test_plan:
                self._write_tone(writer, direction, tone)
                self._write_silence(writer)

            writer.flush()

        self._set_state(SequenceState.DONE)
        logger.info(f"Wrote {self.sample_index} frames to {path}")
        return path

    def _write_tone(self, writer: WavWriter, direction: Direction, tone: DirectionalTone) -> None:
        self._set_state(SequenceState.WRITING_TONE)
        logger.debug(f"Tone: {direction.value} L={tone.left:.3f} R={tone.right:.3f}")

        channels = self.synthesizer.render_tone(tone)
        self.sample_index = self.synthesizer.emit(
            channels, self.config.iterations_per_tone, writer, self.sample_index
        )

    def _write_silence(self, writer: WavWriter) -> None:
        self._set_state(SequenceState.WRITING_SILENCE)
        for _ in range(self.config.silence_frames):
            writer.write_frame(self.sample_index, _SILENT_FRAME)
            self.sample_index += 1
