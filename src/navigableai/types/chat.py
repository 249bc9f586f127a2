from typing import Any, List, Literal, Optional, TypedDict


class SendMessageOptionsType(TypedDict, total=False):
    identifier: str  # unique id of the user sending the message
    new: bool  # start a new conversation
    markdown: bool  # respond in markdown format
    current_page: str  # page the user is on, as configured in Navigable AI
    configured_actions: List[Any]
    configured_functions: List[Any]
    function_call_id: str  # answers a previous tool call
    signature: str  # required when using a shared secret key
    omit_action_handler: bool  # don't run the action handler for this call


class ChatMessageType(TypedDict):
    sender: Literal["USER", "ASSISTANT"]
    content: str
    new: bool
    createdAt: str
    action: Optional[str]


class ToolCallType(TypedDict, total=False):
    id: str
    name: str
    arguments: Any


class SendMessageDataType(TypedDict, total=False):
    assistantMessage: str
    action: Optional[str]
    identifier: str
    toolCalls: List[ToolCallType]
