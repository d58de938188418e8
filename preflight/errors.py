"""
Preflight Error Hierarchy

Defines the exceptions raised by the outer layers of content-preflight
(configuration and content loading). Validation findings are not errors:
the rule engine reports them as data and never raises for item content.
"""


class PreflightError(Exception):
    """Base exception for all content-preflight errors."""
    pass


class ConfigurationError(PreflightError):
    """Error in preflight configuration.

    Raised when a configuration file is malformed, is not a mapping,
    or contains invalid values.
    """

    def __init__(self, message: str, file_path: str = None, line_number: int = None):
        self.file_path = file_path
        self.line_number = line_number

        parts = [message]
        if file_path:
            parts.append(f"File: {file_path}")
        if line_number is not None:
            parts.append(f"Line {line_number}")
        super().__init__(" | ".join(parts))


class ContentLoadError(PreflightError):
    """A content file could not be turned into an item.

    Raised when a file cannot be read, its front matter is not valid
    YAML, or the parsed fields do not fit the item model.

    Attributes:
        file_path: Path of the offending file or directory
        original_error: The underlying parsing or validation error
    """

    def __init__(
        self,
        message: str,
        file_path: str = None,
        original_error: Exception = None
    ):
        super().__init__(message)
        self.file_path = file_path
        self.original_error = original_error
