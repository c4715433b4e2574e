"""Custom exceptions for matrix_tones."""


class MatrixTonesError(Exception):
    """Base exception for all matrix_tones errors."""
    pass


class ConfigurationError(MatrixTonesError):
    """Raised when generator configuration is invalid."""
    pass


class TestPlanError(MatrixTonesError):
    """Raised when a test plan does not cover every direction exactly once."""
    __test__ = False  # not a pytest test class


class TransformError(MatrixTonesError):
    """Raised when the inverse transform is given mis-sized buffers."""
    pass


class SinkError(MatrixTonesError):
    """Base exception for WAV sink operations."""
    pass


class SinkOpenError(SinkError):
    """Raised when the output file cannot be opened with the given header."""
    pass


class SinkWriteError(SinkError):
    """Raised when a frame cannot be written."""
    pass


class SinkFlushError(SinkError):
    """Raised when the output file cannot be finalized."""
    pass
