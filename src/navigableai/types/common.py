from typing import TypedDict


class ClientOptionsType(TypedDict, total=False):
    api_key: str  # model API key sent as X-Api-Key (required)
    shared_secret_key: str  # enables signature checks on every call
    base_url: str  # defaults to https://www.navigable.ai
    timeout: float  # seconds, defaults to 30
    handler_errors: str  # "raise" | "log" | "fail"
