"""
Signal Emitter - Minimal observer base for panel and list notifications.

Subclasses declare their signal names in __signals__ and listeners
subscribe with connect(). Callbacks receive the emitted arguments.

Example:
    class Store(SignalEmitter):
        __signals__ = ("changed",)

    store.connect("changed", lambda size: print(size))
    store.emit("changed", 3)
"""

from typing import Callable

from loguru import logger


class SignalEmitter:
    """Dispatch named signals to connected callbacks in connection order."""

    __signals__: tuple[str, ...] = ()

    def __init__(self):
        self._handlers: dict[int, tuple[str, Callable]] = {}
        self._next_handler_id = 1

    def connect(self, signal: str, callback: Callable) -> int:
        """
        Subscribe to a signal.

        Args:
            signal: One of the names in __signals__
            callback: Called with the signal's arguments

        Returns:
            Handler ID usable with disconnect()
        """
        if signal not in self.__signals__:
            raise ValueError(f"Unknown signal '{signal}' for {type(self).__name__}")

        handler_id = self._next_handler_id
        self._next_handler_id += 1
        self._handlers[handler_id] = (signal, callback)
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self._handlers.pop(handler_id, None)

    def emit(self, signal: str, *args) -> None:
        """Invoke every callback connected to signal."""
        for name, callback in list(self._handlers.values()):
            if name != signal:
                continue
            try:
                callback(*args)
            except Exception:
                logger.exception(f"Handler for '{signal}' on {type(self).__name__} failed")
