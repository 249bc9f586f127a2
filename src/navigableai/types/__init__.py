# Export all types
from .common import ClientOptionsType
from .chat import ChatMessageType, SendMessageDataType, SendMessageOptionsType, ToolCallType
from .sessions import ChatSessionType
from .responses import (
    ApiResponseType, SendMessageResponseType, GetMessagesResponseType,
    ChatSessionsResponseType, SessionMessagesResponseType
)
