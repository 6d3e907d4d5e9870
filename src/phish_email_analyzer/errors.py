"""Custom exceptions for phish_email_analyzer."""


class AnalyzerError(Exception):
    """Base exception for application-level errors."""


class PersistenceError(AnalyzerError):
    """Raised when saved state cannot be read or written."""


class StateFormatError(PersistenceError):
    """Raised when a state file or mapping does not match the saved-state schema."""


class StateWriteError(PersistenceError):
    """Raised when the state file cannot be written."""


class ConfigError(AnalyzerError):
    """Raised when configuration cannot be loaded or validated."""
