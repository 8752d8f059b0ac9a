"""Declarative callback routing utilities."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

from telegram import Update
from telegram.ext import ContextTypes

from users.guard import GuardDecision, SessionGuard
from users.models import UserRole

CallbackHandlerFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[object]]
DeniedHandlerFn = Callable[[Update, ContextTypes.DEFAULT_TYPE, GuardDecision], Awaitable[object]]
InputHandlerFn = Callable[[Update, ContextTypes.DEFAULT_TYPE, Any], Awaitable[object]]
Predicate = Callable[[str], bool]


@dataclass
class CallbackRoute:
    """Route definition for exact matches."""

    token: str
    handler: CallbackHandlerFn
    role: Optional[UserRole] = None


@dataclass
class PrefixRoute:
    """Route definition for prefix-based matches."""

    prefix: str
    handler: CallbackHandlerFn
    role: Optional[UserRole] = None


@dataclass
class PredicateRoute:
    """Route definition for predicate-based matches."""

    predicate: Predicate
    handler: CallbackHandlerFn
    role: Optional[UserRole] = None


Route = Union[CallbackRoute, PrefixRoute, PredicateRoute]


class CallbackRouter:
    """
    Routes callback query data to async handlers.

    A route registered with a ``role`` is protected: the session guard runs
    before the handler and a failed check goes to ``on_denied`` instead, so
    the handler body (and any request it would issue) never runs.
    """

    def __init__(
        self,
        default_handler: CallbackHandlerFn,
        *,
        guard: Optional[SessionGuard] = None,
        on_denied: Optional[DeniedHandlerFn] = None,
    ) -> None:
        self._default_handler = default_handler
        self._guard = guard
        self._on_denied = on_denied
        self._exact_routes: Dict[str, CallbackRoute] = {}
        self._prefix_routes: List[PrefixRoute] = []
        self._predicate_routes: List[PredicateRoute] = []

    def add_exact(self, token: str, handler: CallbackHandlerFn, role: Optional[UserRole] = None) -> None:
        self._exact_routes[token] = CallbackRoute(token=token, handler=handler, role=role)

    def add_prefix(self, prefix: str, handler: CallbackHandlerFn, role: Optional[UserRole] = None) -> None:
        self._prefix_routes.append(PrefixRoute(prefix=prefix, handler=handler, role=role))

    def add_predicate(self, predicate: Predicate, handler: CallbackHandlerFn, role: Optional[UserRole] = None) -> None:
        self._predicate_routes.append(PredicateRoute(predicate=predicate, handler=handler, role=role))

    def add_routes(self, routes: Dict[str, CallbackHandlerFn], role: Optional[UserRole] = None) -> None:
        """Register a ``build_routes`` mapping; keys ending in ``_`` are prefixes."""
        for token, handler in routes.items():
            if token.endswith('_'):
                self.add_prefix(token, handler, role)
            else:
                self.add_exact(token, handler, role)

    def resolve(self, data: str) -> Optional[Route]:
        route = self._exact_routes.get(data)
        if route:
            return route

        for prefix_route in self._prefix_routes:
            if data.startswith(prefix_route.prefix):
                return prefix_route

        for predicate_route in self._predicate_routes:
            if predicate_route.predicate(data):
                return predicate_route

        return None

    async def dispatch(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        query = update.callback_query
        if not query or not query.data:
            await self._default_handler(update, context)
            return

        route = self.resolve(query.data)
        if route is None:
            await self._default_handler(update, context)
            return

        if route.role is not None and self._guard is not None:
            user_id = update.effective_user.id if update.effective_user else None
            decision = (
                self._guard.require_role(user_id, route.role)
                if user_id is not None
                else GuardDecision(allowed=False, redirect='login')
            )
            if not decision.allowed:
                if self._on_denied is not None:
                    await self._on_denied(update, context, decision)
                return

        await route.handler(update, context)


class InputRouter:
    """Routes a pending text prompt (see ``expect_input``) to its handler, with the same guard rules."""

    def __init__(
        self,
        *,
        guard: Optional[SessionGuard] = None,
        on_denied: Optional[DeniedHandlerFn] = None,
    ) -> None:
        self._guard = guard
        self._on_denied = on_denied
        self._routes: Dict[str, Tuple[InputHandlerFn, Optional[UserRole]]] = {}

    def add(self, kind: str, handler: InputHandlerFn, role: Optional[UserRole] = None) -> None:
        self._routes[kind] = (handler, role)

    def add_routes(self, routes: Dict[str, InputHandlerFn], role: Optional[UserRole] = None) -> None:
        for kind, handler in routes.items():
            self.add(kind, handler, role)

    def has(self, kind: Optional[str]) -> bool:
        return kind is not None and kind in self._routes

    async def dispatch(self, update: Update, context: ContextTypes.DEFAULT_TYPE, kind: str, value) -> bool:
        """Run the handler for ``kind``. Returns False when no route matches."""
        entry = self._routes.get(kind)
        if entry is None:
            return False

        handler, role = entry
        if role is not None and self._guard is not None:
            decision = self._guard.require_role(update.effective_user.id, role)
            if not decision.allowed:
                if self._on_denied is not None:
                    await self._on_denied(update, context, decision)
                return True

        await handler(update, context, value)
        return True


__all__ = [
    "CallbackRouter",
    "InputRouter",
    "CallbackRoute",
    "PrefixRoute",
    "PredicateRoute",
]
