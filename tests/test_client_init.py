"""
Initialization and method existence tests for the Navigable AI Python SDK.
No server required - just checks client setup and available methods.
"""

import pytest

from navigableai import NavigableAI, ClientOptions, ConfigurationError


def test_client_initialization():
    """Test that client initializes correctly with options."""
    options: ClientOptions = {
        "api_key": "test-key",
        "base_url": "https://api.test.com/",
        "timeout": 5,
    }

    client = NavigableAI(options)
    assert client.api_key == "test-key"
    assert client.base_url == "https://api.test.com"
    assert client.http_client.timeout == 5
    assert client.signing_enabled is False


def test_client_initialization_with_api_key_string():
    client = NavigableAI("test-key")
    assert client.api_key == "test-key"
    assert client.base_url == "https://www.navigable.ai"
    assert client.http_client.timeout == 30


def test_shared_secret_key_enables_signing():
    assert NavigableAI("test-key", "secret").signing_enabled is True
    assert NavigableAI({"api_key": "test-key", "shared_secret_key": "secret"}).signing_enabled is True


@pytest.mark.parametrize("api_key", [None, "", "   ", "\t\n", 123])
def test_invalid_api_key_fails(api_key):
    with pytest.raises(ConfigurationError):
        NavigableAI({"api_key": api_key})


def test_missing_options_fail():
    with pytest.raises(ConfigurationError):
        NavigableAI()


@pytest.mark.parametrize("options", [
    {"api_key": "k", "shared_secret_key": ""},
    {"api_key": "k", "timeout": 0},
    {"api_key": "k", "timeout": "10"},
    {"api_key": "k", "handler_errors": "ignore"},
])
def test_invalid_options_fail(options):
    with pytest.raises(ConfigurationError):
        NavigableAI(options)


def test_repr_does_not_leak_secrets():
    client = NavigableAI("test-key", "super-secret")
    assert "super-secret" not in repr(client)
    assert "test-key" not in repr(client)
    assert "super-secret" not in repr(client._verifier)


def test_method_existence():
    """Test that all expected methods exist on the client."""
    client = NavigableAI("test-key")

    methods = [
        'get_messages', 'send_message', 'list_chat_sessions', 'get_messages_by_session_id',
        'get_messages_result', 'send_message_result', 'list_chat_sessions_result',
        'get_messages_by_session_id_result',
        'register_action_handler', 'unregister_action_handler', 'sign',
    ]
    for method in methods:
        assert hasattr(client, method), f"Missing {method} method"
        assert callable(getattr(client, method)), f"{method} is not callable"


def test_http_client_headers():
    """Test that headers are built correctly."""
    from navigableai.client.auth import build_headers

    headers = build_headers("test-key", has_body=True)
    assert headers == {'X-Api-Key': 'test-key', 'Content-Type': 'application/json'}

    headers_no_body = build_headers("test-key")
    assert headers_no_body == {'X-Api-Key': 'test-key'}


def test_url_encoding():
    """Test URL encoding functionality."""
    from navigableai import HTTPClient

    assert HTTPClient.encode_url_component("hello world") == "hello%20world"
    assert HTTPClient.encode_url_component("a/b?c") == "a%2Fb%3Fc"
    assert HTTPClient.encode_url_component("") == ""


def test_endpoints():
    from navigableai import ENDPOINTS

    assert ENDPOINTS["SEND_MESSAGE"] == ("/api/v1/chat", "POST")
    assert ENDPOINTS["GET_MESSAGES"] == ("/api/v1/chat", "GET")
    assert ENDPOINTS["GET_CHAT_SESSIONS"].path == "/api/v1/chat/sessions"
    assert ENDPOINTS["GET_SESSION_MESSAGES"].method == "GET"


def test_type_imports():
    """Test that all types can be imported."""
    from navigableai import (  # noqa: F401
        ClientOptions,
        SendMessageOptions,
        ChatMessageType,
        SendMessageDataType,
        ToolCallType,
        ChatSessionType,
        ApiResponse,
        SendMessageResponse,
        GetMessagesResponse,
        ChatSessionsResponse,
        SessionMessagesResponse,
    )


def test_error_imports():
    """Test that error classes can be imported and share a base."""
    from navigableai import (
        NavigableAIError,
        SignatureError,
        SignatureRequiredError,
        InvalidSignatureError,
        TransportError,
    )

    assert issubclass(ConfigurationError, NavigableAIError)
    assert issubclass(SignatureRequiredError, SignatureError)
    assert issubclass(InvalidSignatureError, SignatureError)

    err = TransportError("bad body", 502)
    assert err.message == "bad body"
    assert err.status_code == 502


@pytest.mark.parametrize("policy", ["raise", "log", "fail"])
def test_handler_error_policies(policy):
    client = NavigableAI({"api_key": "k", "handler_errors": policy})
    assert client.chat.handler_errors == policy


def test_default_handler_error_policy():
    assert NavigableAI("k").chat.handler_errors == "raise"


def test_result_methods_are_documented():
    """Test that the result-returning methods document their arguments and return value."""
    for method in ['get_messages_result', 'send_message_result',
                   'list_chat_sessions_result', 'get_messages_by_session_id_result']:
        doc = getattr(NavigableAI, method).__doc__
        assert doc, f"{method} has no docstring"
        assert "Args:" in doc and "Returns:" in doc, f"{method} docstring is incomplete"
