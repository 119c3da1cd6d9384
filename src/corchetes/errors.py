"""Exception classes for Corchetes.

Malformed markup never raises: the translator degrades to literal text.
These exceptions cover misuse of the API itself.
"""

from __future__ import annotations


class CorchetesError(Exception):
    """Base exception for all Corchetes errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(CorchetesError):
    """Invalid translation configuration.

    Raised when a TranslateConfig field holds a value outside its domain.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending config field (e.g., "max_depth")
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Config field '{field_name}': {message}")
