"""Tone rendering and emission."""

import logging
from typing import Dict, Mapping, Optional

import numpy as np

from ..directions import DirectionalTone
from ..sink import FRONT_LEFT, FRONT_RIGHT, WavWriter
from .transform import InverseTransform, plan_inverse
from .window import build_spectral_window

logger = logging.getLogger(__name__)

# Relative bound on the imaginary part left over by the inverse transform
_IMAG_TOLERANCE = 1e-9


class ToneSynthesizer:
    """
    Renders one period of a tone through the inverse FFT and repeats it.

    The scratch buffer is allocated once from the transform's reported
    requirement and reused by every render.
    """

    def __init__(self, window_size: int, transform: Optional[InverseTransform] = None):
        """
        Initialize synthesizer.

        Args:
            window_size: Transform length (samples per tone period)
            transform: Inverse transform to use; planned here when omitted
        """
        self.window_size = window_size
        self.transform = transform or plan_inverse(window_size)
        self._scratch = self.transform.make_scratch()

        # The conjugate pair doubles the amplitude; also undo the transform's
        # own normalization so the peak equals the requested magnitude.
        self.scale = 1.0 / (2.0 * self.transform.gain)

    def render(self, window: np.ndarray) -> np.ndarray:
        """
        Inverse-transform a spectral window in place.

        Args:
            window: Spectral window from build_spectral_window (consumed)

        Returns:
            The same array, now holding one normalized period in the time
            domain. Only the real component is meaningful.
        """
        self.transform.apply_in_place(window, self._scratch)
        window *= self.scale

        peak = float(np.max(np.abs(window.real), initial=0.0))
        residue = float(np.max(np.abs(window.imag), initial=0.0))
        # NaN input propagates; the comparison is False for NaN
        assert not residue > _IMAG_TOLERANCE * max(1.0, peak), (
            f"Spectral window was not conjugate-symmetric "
            f"(imaginary residue {residue:.3e})"
        )
        return window

    def render_tone(self, tone: DirectionalTone) -> Dict[str, np.ndarray]:
        """Render both channels of a directional tone, keyed by sink channel."""
        return {
            FRONT_LEFT: self.render(build_spectral_window(tone.left, self.window_size)),
            FRONT_RIGHT: self.render(build_spectral_window(tone.right, self.window_size)),
        }

    def emit(
        self,
        channels: Mapping[str, np.ndarray],
        repeat_count: int,
        writer: WavWriter,
        sample_index: int,
    ) -> int:
        """
        Write rendered windows to the sink back to back.

        Args:
            channels: Rendered window per sink channel name
            repeat_count: How many times to repeat the whole window
            writer: Open sink writer
            sample_index: Frame index of the first sample

        Returns:
            Frame index following the last written sample

        Raises:
            SinkWriteError: Propagated from the writer on the first failure
        """
        reals = {name: samples.real.tolist() for name, samples in channels.items()}
        frames = [
            {name: values[i] for name, values in reals.items()}
            for i in range(self.window_size)
        ]

        for _ in range(repeat_count):
            for frame in frames:
                writer.write_frame(sample_index, frame)
                sample_index += 1

        return sample_index
