"""
strongpass.exceptions

StrongPassError
├── InvalidConfiguration
└── ConfigFileError
"""


class StrongPassError(Exception):
    """Base exception for all StrongPass errors."""


class InvalidConfiguration(StrongPassError, ValueError):
    """Raised when a generation config fails boundary validation."""


class ConfigFileError(StrongPassError):
    """Raised when the preferences file cannot be written."""
