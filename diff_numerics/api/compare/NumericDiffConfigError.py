"""Numeric diff configuration error."""


class NumericDiffConfigError(Exception):
    """Raised when comparison options are invalid."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Numeric diff configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
