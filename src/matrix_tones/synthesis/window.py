"""Single-bin spectral windows for tone synthesis."""

import numpy as np

from ..exceptions import ConfigurationError


def build_spectral_window(tone: complex, window_size: int) -> np.ndarray:
    """
    Build a frequency-domain window holding one tone at the lowest bin.

    Bin 1 carries the tone and bin ``window_size - 1`` its complex conjugate,
    so the inverse transform is purely real: exactly one period of a sinusoid
    at ``sample_rate / window_size`` Hz. Every other bin is zero.

    Args:
        tone: Complex amplitude and phase of the tone
        window_size: Number of bins (transform length)

    Returns:
        complex128 array of length ``window_size``

    Raises:
        ConfigurationError: If window_size < 3 (mirror would overlap bin 1)
    """
    if window_size < 3:
        raise ConfigurationError(
            f"Invalid window size {window_size}. Must be at least 3"
        )

    tone = complex(tone)
    window = np.zeros(window_size, dtype=np.complex128)
    window[1] = tone
    window[window_size - 1] = tone.conjugate()
    return window
