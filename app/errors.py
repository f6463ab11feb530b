# app/errors.py


class AccountError(Exception):
    """Base class for failures raised by the account service."""

    status_code = 500
    message = "Request failed"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"message": self.message}


class DuplicateUsername(AccountError):
    status_code = 400
    message = "Username already exists"


class NotFound(AccountError):
    status_code = 404
    message = "User not found"


class InvalidCredentials(AccountError):
    status_code = 401
    message = "Incorrect password"


class StorageFailure(AccountError):
    """Any unexpected database/driver error; ``detail`` holds the driver text."""

    status_code = 500
    message = "Storage failure"

    def __init__(self, message=None, detail=None):
        super().__init__(message)
        self.detail = detail

    def to_body(self) -> dict:
        return {"message": self.message, "error": self.detail}
