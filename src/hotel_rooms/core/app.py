"""Application — composed from modules via app.register(module); dispatches commands and queries."""
from __future__ import annotations

import logging
from typing import Any, Callable

from hotel_rooms.core.config import HotelConfig
from hotel_rooms.core.container import Container
from hotel_rooms.core.module import Module

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Each command or query type has exactly one handler; dispatch(message) runs it.
    """

    def __init__(self, config: HotelConfig | None = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._handlers: dict[type, type[Any] | Callable[..., Any]] = {}
        self._config = config if config is not None else HotelConfig()
        self._container.register_instance(HotelConfig, self._config)

    def register(self, module: Module) -> Application:
        """Register a module (DomainModule etc.). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        return self

    def add_handler(self, message_type: type, handler: type[Any] | Callable[..., Any]) -> None:
        """Bind a handler (class resolved from the container, or plain callable) to a message type."""
        if message_type in self._handlers:
            raise ValueError(f"Handler already registered for {message_type.__name__}")
        self._handlers[message_type] = handler

    def dispatch(self, message: Any) -> Any:
        """Run the handler registered for type(message) and return its result."""
        handler = self._handlers.get(type(message))
        if handler is None:
            raise LookupError(f"No handler registered for {type(message).__name__}")
        if isinstance(handler, type):
            handler = self._container.resolve(handler)
        logger.debug("Dispatching %s", type(message).__name__)
        return handler(message)

    @property
    def config(self) -> HotelConfig:
        return self._config

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container
