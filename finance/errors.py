class CalculationError(Exception):
    """Base for user-facing, non-retryable calculation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInputError(CalculationError):
    def __init__(self, field: str = "property_value"):
        super().__init__("Property value is missing.")
        self.field = field


class InvalidInputError(CalculationError, ValueError):
    def __init__(self, value, reason: str):
        super().__init__(f"Property value {value!r} is invalid: {reason}.")
        self.value = value
        self.reason = reason
