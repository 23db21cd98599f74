# registrar/core/errors.py
# Domain errors raised by the crud layer; routes translate them to HTTP.


class RegistrarError(Exception):
    code = "REGISTRAR_ERROR"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class NotFoundError(RegistrarError):
    code = "NOT_FOUND"


class DuplicateEnrollmentError(RegistrarError):
    code = "DUPLICATE_ENROLLMENT"


class InvalidStatusError(RegistrarError, ValueError):
    code = "INVALID_STATUS"


class PermissionDeniedError(RegistrarError):
    code = "FORBIDDEN"
