from typing import Any, Dict, List, TypedDict

from .chat import ChatMessageType, SendMessageDataType
from .sessions import ChatSessionType


# Standardized response envelope; statusCode is injected by the transport
class ApiResponseType(TypedDict, total=False):
    statusCode: int
    success: bool
    message: str
    errors: Dict[str, str]
    data: Any


class SendMessageResponseType(TypedDict, total=False):
    statusCode: int
    success: bool
    message: str
    errors: Dict[str, str]
    data: SendMessageDataType


class GetMessagesResponseType(TypedDict, total=False):
    statusCode: int
    success: bool
    message: str
    errors: Dict[str, str]
    data: List[ChatMessageType]


class ChatSessionsResponseType(TypedDict, total=False):
    statusCode: int
    success: bool
    message: str
    errors: Dict[str, str]
    data: List[ChatSessionType]


# Session history uses the same message-list shape
SessionMessagesResponseType = GetMessagesResponseType
