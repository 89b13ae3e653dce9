"""
DomainModule — one object per bounded context.
Describes repositories, bindings, commands, queries, event subscriptions.
"""
from __future__ import annotations

from typing import Any, Callable, Type

from hotel_rooms.core.app import Application
from hotel_rooms.core.module import Module
from hotel_rooms.domain import Repository
from hotel_rooms.domain.events import EventBus, InProcessEventDispatcher
from hotel_rooms.ddd.commands import Command, Query


class DomainModule(Module):
    """
    One object = full bounded context.
    .repository() .bind() .command() .query() .on_event()
    Register via app.register(module).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._repositories: list[tuple[Type[Repository[Any]], Type[Any]]] = []
        self._bindings: list[tuple[Type[Any], Type[Any]]] = []
        self._commands: list[tuple[Type[Command], Type[Any] | Callable[..., Any]]] = []
        self._queries: list[tuple[Type[Query], Type[Any] | Callable[..., Any]]] = []
        self._event_handlers: list[tuple[type, Callable[..., Any]]] = []

    def repository(self, interface: Type[Repository[Any]], impl: Type[Any]) -> DomainModule:
        self._repositories.append((interface, impl))
        return self

    def bind(self, interface: Type[Any], impl: Type[Any] | None = None) -> DomainModule:
        """Register interface → implementation for DI (domain services, strategies). impl defaults to interface."""
        self._bindings.append((interface, impl or interface))
        return self

    def command(self, cmd_type: Type[Command], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._commands.append((cmd_type, handler))
        return self

    def query(self, query_type: Type[Query], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._queries.append((query_type, handler))
        return self

    def on_event(self, event_type: type, handler: Callable[..., Any]) -> DomainModule:
        self._event_handlers.append((event_type, handler))
        return self

    def register_into(self, app: Application) -> None:
        container = app.container

        # Repositories and arbitrary bindings: interface -> implementation
        for iface, impl in [*self._repositories, *self._bindings]:
            container.register_class(impl)
            if iface is not impl:
                container.register(iface, lambda c=container, i=impl: c.resolve(i))

        # EventBus: if already registered, use it; else default in-process
        if container.has(EventBus):
            event_bus = container.resolve(EventBus)
        else:
            event_bus = InProcessEventDispatcher()
            container.register_instance(EventBus, event_bus)
            container.register_instance(InProcessEventDispatcher, event_bus)
        for event_type, handler in self._event_handlers:
            event_bus.subscribe(event_type, handler)

        # Command/query handlers: classes are resolved from the container on dispatch
        for message_type, handler in [*self._commands, *self._queries]:
            if isinstance(handler, type):
                container.register_class(handler)
            app.add_handler(message_type, handler)
