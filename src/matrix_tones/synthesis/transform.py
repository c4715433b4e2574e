"""Fixed-size inverse FFT backed by scipy.fft."""

import logging

import numpy as np
from scipy import fft

from ..exceptions import TransformError

logger = logging.getLogger(__name__)

# Output gain of each scipy.fft inverse normalization mode, as a function of n
_INVERSE_GAIN = {
    "forward": lambda n: 1.0,          # unnormalized inverse
    "ortho": lambda n: 1.0 / np.sqrt(n),
    "backward": lambda n: 1.0 / n,
}


class InverseTransform:
    """Planned inverse DFT of one fixed length."""

    def __init__(self, size: int, norm: str = "forward"):
        """
        Initialize inverse transform.

        Args:
            size: Transform length
            norm: scipy.fft normalization mode ("forward" leaves the
                inverse unscaled)
        """
        if size < 1:
            raise TransformError(f"Invalid transform size {size}")
        if norm not in _INVERSE_GAIN:
            raise TransformError(
                f"Invalid normalization '{norm}'. "
                f"Valid options: {', '.join(_INVERSE_GAIN)}"
            )
        self.size = size
        self.norm = norm

    @property
    def gain(self) -> float:
        """Factor the inverse applies on top of the plain DFT sum."""
        return float(_INVERSE_GAIN[self.norm](self.size))

    def scratch_len(self) -> int:
        """Number of complex elements apply_in_place needs as workspace."""
        return self.size

    def make_scratch(self) -> np.ndarray:
        """Allocate a scratch buffer of the required size."""
        return np.zeros(self.scratch_len(), dtype=np.complex128)

    def apply_in_place(self, buffer: np.ndarray, scratch: np.ndarray) -> None:
        """
        Replace ``buffer`` with its inverse transform.

        Args:
            buffer: Complex spectrum of length ``size``, overwritten
            scratch: Workspace of at least ``scratch_len()`` elements;
                contents on entry and exit are meaningless
        """
        if buffer.shape != (self.size,):
            raise TransformError(
                f"Buffer shape {buffer.shape} does not match transform size {self.size}"
            )
        if scratch.size < self.scratch_len():
            raise TransformError(
                f"Scratch buffer too small: {scratch.size} < {self.scratch_len()}"
            )

        work = scratch[:self.size]
        work[:] = fft.ifft(buffer, norm=self.norm)
        buffer[:] = work


def plan_inverse(size: int, norm: str = "forward") -> InverseTransform:
    """Plan an inverse transform of the given length."""
    logger.debug(f"Planned inverse FFT: size={size}, norm={norm}")
    return InverseTransform(size, norm=norm)
