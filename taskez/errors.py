from fastapi import status


class TaskEzError(Exception):
    """Base error carrying the HTTP status and the message shown to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidInput(TaskEzError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class NotFound(TaskEzError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(TaskEzError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists"


class StoreFailure(TaskEzError):
    # Message stays generic; the cause is only logged
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
