from typing import TypedDict


class ChatSessionType(TypedDict, total=False):
    id: str
    title: str
    createdAt: str
    updatedAt: str
