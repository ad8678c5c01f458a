# Pydantic schemas package
from learning_journal.backend.schemas.base import (
    CamelModel,
    ErrorDetail,
    ErrorResponse,
    ResponseMetadata,
)

__all__ = [
    "CamelModel",
    "ErrorDetail",
    "ErrorResponse",
    "ResponseMetadata",
]
