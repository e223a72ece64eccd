"""Error taxonomy for the stockroom domain.

Field-level problems keep using ``protean.exceptions.ValidationError``; the
classes below cover the failures the API reports with their own status codes.
"""


class StockroomError(Exception):
    """Base class for stockroom failures that carry a user-facing message."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordNotFoundError(StockroomError):
    status_code = 404


class AuthenticationRequiredError(StockroomError):
    status_code = 401


class PermissionDeniedError(StockroomError):
    status_code = 403


class ConflictError(StockroomError):
    """A uniqueness or reference constraint would be broken."""

    status_code = 409


class InvalidStockOperationError(StockroomError):
    """Raised for a stock operation token other than add, subtract or set."""

    status_code = 400

    def __init__(self, operation):
        super().__init__("Invalid operation")
        self.operation = operation
