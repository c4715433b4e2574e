"""Random-access WAV sink.

Frames are collected in memory by explicit index and written as a single
RIFF/WAVE file (IEEE float ``fmt `` chunk, interleaved ``data`` chunk) when the
writer is flushed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Mapping, Optional, Tuple, Union

import numpy as np
import soundfile as sf
from scipy.io import wavfile

from .exceptions import SinkFlushError, SinkOpenError, SinkWriteError

logger = logging.getLogger(__name__)

FRONT_LEFT = "front_left"
FRONT_RIGHT = "front_right"

SUPPORTED_SAMPLE_FORMATS = {"float": np.float32}

_INITIAL_CAPACITY = 4096


@dataclass(frozen=True)
class WavHeader:
    """Sample format, channel layout and rate of an output file."""
    sample_format: str = "float"
    channels: Tuple[str, ...] = (FRONT_LEFT, FRONT_RIGHT)
    sample_rate: int = 44100


class WavWriter:
    """
    Writer accepting frames at arbitrary indices.

    Nothing reaches the file until flush(). Channels omitted from a
    write_frame() call keep their previous value (zero if never written).
    """

    def __init__(self, path: Path, header: WavHeader, file: BinaryIO):
        self.path = path
        self.header = header
        self._file: Optional[BinaryIO] = file
        self._dtype = SUPPORTED_SAMPLE_FORMATS[header.sample_format]
        self._channel_index = {name: i for i, name in enumerate(header.channels)}
        self._frames = np.zeros((_INITIAL_CAPACITY, len(header.channels)), dtype=self._dtype)
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        """Frames the file will contain (highest written index + 1)."""
        return self._frame_count

    @property
    def closed(self) -> bool:
        """Check if the writer has been flushed or closed."""
        return self._file is None

    def _ensure_capacity(self, frames: int) -> None:
        capacity = len(self._frames)
        if frames <= capacity:
            return
        while capacity < frames:
            capacity *= 2
        grown = np.zeros((capacity, self._frames.shape[1]), dtype=self._dtype)
        grown[:self._frame_count] = self._frames[:self._frame_count]
        self._frames = grown

    def write_frame(self, index: int, samples: Mapping[str, float]) -> None:
        """
        Write one frame at an explicit index.

        Args:
            index: Frame index (>= 0)
            samples: Sample value per channel name

        Raises:
            SinkWriteError: If the writer is closed, the index is negative or
                a channel name is not in the header
        """
        if self._file is None:
            raise SinkWriteError(f"Writer for {self.path} is already closed")
        if index < 0:
            raise SinkWriteError(f"Invalid frame index {index}")

        try:
            columns = [(self._channel_index[name], value) for name, value in samples.items()]
        except KeyError as e:
            raise SinkWriteError(
                f"Unknown channel {e.args[0]!r}. "
                f"Valid channels: {', '.join(self.header.channels)}"
            ) from e

        self._ensure_capacity(index + 1)
        for column, value in columns:
            self._frames[index, column] = value
        if index >= self._frame_count:
            self._frame_count = index + 1

    def flush(self) -> None:
        """
        Write all frames to disk and close the file.

        Raises:
            SinkFlushError: If the writer is closed or the file cannot be written
        """
        if self._file is None:
            raise SinkFlushError(f"Writer for {self.path} is already closed")

        data = self._frames[:self._frame_count]
        try:
            wavfile.write(self._file, self.header.sample_rate, data)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise SinkFlushError(f"Failed to write WAV file {self.path}: {e}") from e
        finally:
            self.close()

        logger.debug(
            f"Flushed {self._frame_count} frames @ {self.header.sample_rate}Hz to {self.path}"
        )

    def close(self) -> None:
        """Close the file without writing pending frames."""
        if self._file is None:
            return
        try:
            self._file.close()
        finally:
            self._file = None

    def __enter__(self) -> "WavWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_sink(path: Union[str, Path], header: WavHeader) -> WavWriter:
    """
    Open a WAV file for random-access writing.

    Args:
        path: Output file path (created or truncated)
        header: Sample format, channel layout and rate

    Returns:
        Open WavWriter

    Raises:
        SinkOpenError: If the header is unsupported or the file cannot be opened
    """
    path = Path(path)

    if header.sample_format not in SUPPORTED_SAMPLE_FORMATS:
        raise SinkOpenError(
            f"Unsupported sample format '{header.sample_format}'. "
            f"Valid options: {', '.join(SUPPORTED_SAMPLE_FORMATS)}"
        )
    if not header.channels or len(set(header.channels)) != len(header.channels):
        raise SinkOpenError(f"Invalid channel layout {header.channels}")
    if header.sample_rate <= 0:
        raise SinkOpenError(f"Invalid sample rate {header.sample_rate}")

    try:
        file = open(path, "wb")
    except OSError as e:
        logger.error(f"Failed to open {path}: {e}")
        raise SinkOpenError(f"Failed to open WAV file {path}: {e}") from e

    logger.info(
        f"Opened {path} ({len(header.channels)}ch, {header.sample_rate}Hz, "
        f"{header.sample_format})"
    )
    return WavWriter(path, header, file)


def describe_output(path: Union[str, Path]) -> str:
    """Summarize a finished file as libsndfile reads it back."""
    info = sf.info(str(path))
    return (
        f"{Path(path).name}: {info.channels}ch, {info.samplerate}Hz, "
        f"{info.subtype}, {info.frames} frames ({info.duration:.2f}s)"
    )
