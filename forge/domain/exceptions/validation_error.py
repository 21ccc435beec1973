"""
Input validation errors. All of them map to HTTP 400.
"""

from .base import ForgeError


class ValidationError(ForgeError):
    """Input is malformed, out of range or of the wrong type."""

    reason = "validation_error"


class RequiredFieldError(ValidationError):
    """A mandatory field is absent or blank (e.g. ``address``, ``good.price``)."""

    reason = "missing_field"

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} is required")


class InvalidFormatError(ValidationError):
    """A field does not match its textual format, such as HH:MM hours."""

    reason = "invalid_format"

    def __init__(self, field_name: str, expected_format: str):
        self.field_name = field_name
        self.expected_format = expected_format
        super().__init__(f"{field_name} must use the {expected_format} format")


class FileTooLargeError(ValidationError):
    """An uploaded file is bigger than the configured limit."""

    reason = "file_too_large"

    def __init__(self, limit_bytes: int):
        self.limit_bytes = limit_bytes
        super().__init__(f"File exceeds the {limit_bytes} byte limit")
