"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class InvalidStatusTransitionError(ValidationError):
    """Raised when a record cannot move from its current status to the target."""

    def __init__(self, record_id: str, current_status: str, target_status: str):
        self.record_id = record_id
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            f"Cannot move '{record_id}' from '{current_status}' to '{target_status}'"
        )


class RecordNotFoundError(ValidationError):
    """Raised when a record id is not present in the fetched data."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} '{record_id}' not found")


class InvalidFormatError(ValidationError):
    """Raised when field format is invalid."""

    def __init__(self, field_name: str, expected_format: str):
        self.field_name = field_name
        self.expected_format = expected_format
        super().__init__(
            f"Field '{field_name}' has invalid format, expected: {expected_format}"
        )
