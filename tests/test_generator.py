"""Tests for calibration file assembly."""

from unittest.mock import patch

import numpy as np
import pytest

from matrix_tones.config import GeneratorConfig
from matrix_tones.directions import DIRECTION_ORDER, Direction, DirectionalTone, TestPlan, polar
from matrix_tones.exceptions import ConfigurationError, SinkOpenError, SinkWriteError
from matrix_tones.generator import SequenceState, ToneGenerator
from matrix_tones.sink import WavWriter
from matrix_tones.synthesis import ToneSynthesizer


def _segments(config):
    """(start, stop, kind, direction) for every segment, in file order."""
    silence, tone = config.silence_frames, config.tone_frames
    segments = [(0, silence, "silence", None)]
    index = silence
    for direction in DIRECTION_ORDER:
        segments.append((index, index + tone, "tone", direction))
        index += tone
        segments.append((index, index + silence, "silence", None))
        index += silence
    return segments


def test_total_frame_count(tmp_path, small_config, center_only_plan, read_wav):
    """Test the file length is 9 silences plus 8 tones."""
    generator = ToneGenerator(small_config)
    path = generator.generate(tmp_path / "out.wav", center_only_plan)

    data, sample_rate = read_wav(path)
    expected = 1 * 50 * 9 + 2 * 50 * 8
    assert generator.total_frames() == expected
    assert data.shape == (expected, 2)
    assert sample_rate == 44100
    assert generator.sample_index == expected


def test_center_tone_and_silence(tmp_path, small_config, center_only_plan, read_wav):
    """Test only the center segment carries signal; silences are exact zeros."""
    generator = ToneGenerator(small_config)
    data, _ = read_wav(generator.generate(tmp_path / "out.wav", center_only_plan))

    for start, stop, kind, direction in _segments(small_config):
        segment = data[start:stop]
        if kind == "silence":
            assert np.all(segment == 0.0)
        elif direction == Direction.CENTER:
            assert np.all(segment != 0.0)
            assert np.max(np.abs(segment)) == pytest.approx(0.707, abs=1e-6)
            # Both channels in phase
            assert np.array_equal(segment[:, 0], segment[:, 1])
        else:
            assert np.all(segment == 0.0)


def test_tone_segment_repeats_window(tmp_path, small_config, center_only_plan, read_wav):
    """Test each repetition of a tone is identical (no envelope)."""
    generator = ToneGenerator(small_config)
    data, _ = read_wav(generator.generate(tmp_path / "out.wav", center_only_plan))

    start = small_config.silence_frames
    first = data[start:start + 50]
    second = data[start + 50:start + 100]
    assert np.array_equal(first, second)


def test_segment_order_follows_directions(tmp_path, small_config, read_wav):
    """Test the n-th tone segment belongs to the n-th direction."""
    tones = {
        direction: DirectionalTone(polar((i + 1) / 10), polar((i + 1) / 20))
        for i, direction in enumerate(DIRECTION_ORDER)
    }
    generator = ToneGenerator(small_config)
    data, _ = read_wav(generator.generate(tmp_path / "out.wav", TestPlan(tones)))

    for start, stop, kind, direction in _segments(small_config):
        if kind != "tone":
            continue
        i = DIRECTION_ORDER.index(direction)
        # Phase 0 puts the peak on the first sample
        assert data[start, 0] == pytest.approx((i + 1) / 10, abs=1e-6)
        assert data[start, 1] == pytest.approx((i + 1) / 20, abs=1e-6)


def test_no_tone_iterations(tmp_path, center_only_plan, read_wav):
    """Test iterations_per_tone=0 writes only the nine silences."""
    config = GeneratorConfig(iterations_per_tone=0, iterations_per_silence=1)
    generator = ToneGenerator(config)
    data, _ = read_wav(generator.generate(tmp_path / "out.wav", center_only_plan))

    assert data.shape == (9 * 50, 2)
    assert np.all(data == 0.0)


def test_generate_is_idempotent(tmp_path, small_config, center_only_plan):
    """Test identical inputs give byte-identical files."""
    generator = ToneGenerator(small_config)
    path = tmp_path / "out.wav"

    first = generator.generate(path, center_only_plan).read_bytes()
    second = generator.generate(path, center_only_plan).read_bytes()
    other = ToneGenerator(small_config).generate(tmp_path / "other.wav", center_only_plan).read_bytes()

    assert first == second
    assert first == other


def test_state_reset_between_files(tmp_path, small_config, center_only_plan, silent_plan):
    """Test the sample index restarts at zero for each file."""
    generator = ToneGenerator(small_config)
    assert generator.state == SequenceState.IDLE

    generator.generate(tmp_path / "a.wav", center_only_plan)
    assert generator.state == SequenceState.DONE
    assert generator.sample_index == generator.total_frames()

    generator.generate(tmp_path / "b.wav", silent_plan)
    assert generator.sample_index == generator.total_frames()


def test_silent_plan(tmp_path, small_config, silent_plan, read_wav):
    """Test zero-magnitude tones write zero samples."""
    data, _ = read_wav(ToneGenerator(small_config).generate(tmp_path / "out.wav", silent_plan))
    assert np.all(data == 0.0)


def test_open_failure_propagates(tmp_path, small_config, center_only_plan):
    """Test sink open errors abort generation."""
    generator = ToneGenerator(small_config)
    with pytest.raises(SinkOpenError):
        generator.generate(tmp_path / "missing" / "out.wav", center_only_plan)


def test_write_failure_aborts_file(tmp_path, small_config, center_only_plan):
    """Test a mid-file write error stops generation without flushing."""
    generator = ToneGenerator(small_config)
    path = tmp_path / "out.wav"
    failures = [None] * 60 + [SinkWriteError("I/O error")]

    with patch.object(WavWriter, "write_frame", side_effect=failures) as write_frame:
        with patch.object(WavWriter, "flush") as flush:
            with pytest.raises(SinkWriteError, match="I/O error"):
                generator.generate(path, center_only_plan)

    assert write_frame.call_count == 61
    flush.assert_not_called()
    assert generator.state == SequenceState.WRITING_TONE
    assert path.stat().st_size == 0


def test_invalid_config():
    """Test invalid configuration is rejected at construction."""
    with pytest.raises(ConfigurationError, match="window size"):
        ToneGenerator(GeneratorConfig(window_size=2))


def test_mismatched_synthesizer():
    """Test the synthesizer must use the configured window size."""
    with pytest.raises(ConfigurationError, match="does not match"):
        ToneGenerator(GeneratorConfig(), synthesizer=ToneSynthesizer(64))
