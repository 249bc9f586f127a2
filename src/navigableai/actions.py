"""Action handler registry for the Navigable AI Python SDK."""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

# (action_id, context) -> None
ActionHandler = Callable[..., None]


class ActionRegistry:
    """Maps action names to handlers and runs them when the assistant suggests an action.

    Registering a second handler under the same name replaces the first.
    Handlers run synchronously on the calling thread; exceptions they raise
    propagate to the caller of :meth:`dispatch`.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, ActionHandler] = {}
        self._lock = threading.Lock()

    def __contains__(self, action_name: object) -> bool:
        with self._lock:
            return action_name in self._handlers

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def register(self, action_name: str, handler: ActionHandler) -> None:
        """Register ``handler`` for ``action_name``.

        Args:
            action_name: Name of the action in Navigable AI
            handler: Callable invoked as ``handler(action_id, context)``
        """
        if not isinstance(action_name, str) or not action_name.strip():
            raise ValueError("action_name must be a non-empty string")
        if not callable(handler):
            raise TypeError("handler must be callable")
        with self._lock:
            self._handlers[action_name] = handler

    def unregister(self, action_name: str) -> bool:
        with self._lock:
            return self._handlers.pop(action_name, None) is not None

    def get(self, action_name: str) -> Optional[ActionHandler]:
        with self._lock:
            return self._handlers.get(action_name)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._handlers)

    def dispatch(self, action_name: str, context: Any = None) -> bool:
        """Run the handler registered for ``action_name``, if any.

        Args:
            action_name: Action suggested by the assistant
            context: Passed as the handler's second argument (the user identifier
                for chat responses)

        Returns:
            True if a handler ran, False if none is registered
        """
        handler = self.get(action_name)
        if handler is None:
            return False

        logger.debug("Dispatching action %r", action_name)
        handler(action_name, context)
        return True
