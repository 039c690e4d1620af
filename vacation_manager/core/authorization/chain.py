"""
Authorization chain and the service that runs it.

A chain is an immutable sequence of handlers. Running it evaluates the
handlers in order and stops at the first failure; when every handler
passes, the last handler's outcome is the chain's outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from vacation_manager.core.authorization.context import AuthorizationContext
from vacation_manager.core.authorization.handlers import AuthorizationHandler
from vacation_manager.core.outcome import Outcome

logger = logging.getLogger(__name__)


class AuthorizationChain:
    """Ordered, immutable list of authorization handlers."""

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Iterable[AuthorizationHandler] = ()):
        self._handlers: tuple[AuthorizationHandler, ...] = tuple(handlers)

    @classmethod
    def of(cls, *handlers: AuthorizationHandler) -> AuthorizationChain:
        return cls(handlers)

    def then(self, handler: AuthorizationHandler) -> AuthorizationChain:
        """Return a new chain with ``handler`` appended."""
        return AuthorizationChain(self._handlers + (handler,))

    @property
    def handlers(self) -> tuple[AuthorizationHandler, ...]:
        return self._handlers

    async def handle(self, context: AuthorizationContext) -> Outcome:
        outcome = Outcome.success()
        for handler in self._handlers:
            outcome = await handler.check(context)
            if not outcome.is_authorized:
                return outcome
        return outcome

    def __iter__(self) -> Iterator[AuthorizationHandler]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return " -> ".join(repr(h) for h in self._handlers) or "<empty chain>"


class AuthorizationService:
    """Runs an authorization chain against a context."""

    async def authorize(
        self,
        chain: AuthorizationChain,
        context: AuthorizationContext,
    ) -> Outcome:
        outcome = await chain.handle(context)
        if not outcome.is_authorized:
            logger.info(
                "Authorization denied for %s (user=%s): %s",
                context.operation or "<unnamed>",
                context.user.id if context.user is not None else None,
                outcome.code,
            )
        return outcome
