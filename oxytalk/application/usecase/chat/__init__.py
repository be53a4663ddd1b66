"""Chat use cases."""

from oxytalk.application.usecase.chat.clear_history import (
    ClearHistoryRequest,
    ClearHistoryResponse,
    ClearHistoryUseCase,
)
from oxytalk.application.usecase.chat.get_history import (
    GetHistoryRequest,
    GetHistoryResponse,
    GetHistoryUseCase,
    MessageItem,
)

__all__ = [
    "ClearHistoryRequest",
    "ClearHistoryResponse",
    "ClearHistoryUseCase",
    "GetHistoryRequest",
    "GetHistoryResponse",
    "GetHistoryUseCase",
    "MessageItem",
]
