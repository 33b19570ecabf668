class FraError(Exception):
    """Base class for errors raised by the ratio desk."""


class FormValidationError(FraError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message
