from typing import Any, Dict, Optional
from fastapi import HTTPException, status
from .responses import error_response

class CustomHTTPException(HTTPException):
    def __init__(
        self,
        status_code: int,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status_code,
            detail=error_response(message, status_code, details)
        )

class DatabaseError(CustomHTTPException):
    def __init__(self, message: str):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


# <========== Typed service failures ==========>
class ServiceError(CustomHTTPException):
    """Failure raised by the card services, tagged with its kind and entity."""

    kind: str = ""
    status_code_for_kind: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, entity: str):
        self.entity = entity
        self.message = self.build_message(entity)
        super().__init__(
            self.status_code_for_kind, self.message, details={"kind": self.kind}
        )

    @staticmethod
    def build_message(entity: str) -> str:
        return f'You don\'t have permission to do this, check your "{entity}"!'

    def __str__(self) -> str:
        return self.message


class UnauthorizedError(ServiceError):
    kind = "unauthorized"
    status_code_for_kind = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    kind = "forbidden"
    status_code_for_kind = status.HTTP_403_FORBIDDEN


class NotFoundError(ServiceError):
    kind = "notFound"
    status_code_for_kind = status.HTTP_404_NOT_FOUND

    @staticmethod
    def build_message(entity: str) -> str:
        return f'Could not find specified "{entity}"!'


class ConflictError(ServiceError):
    kind = "conflict"
    status_code_for_kind = status.HTTP_409_CONFLICT

    @staticmethod
    def build_message(entity: str) -> str:
        return f'The specified "{entity}" already exists!'
