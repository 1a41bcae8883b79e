"""Prompt-command registry for the line-oriented browser loop."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandBinding:
    """Mapping from one or more typed tokens to a single action callback."""

    tokens: tuple[str, ...]
    handler: Callable[[], bool | None]


def normalize_token(token: str) -> str:
    return token.strip().lower()


class CommandRegistry:
    """Small dispatch table keyed by case-insensitive prompt tokens."""

    def __init__(self, normalize: Callable[[str], str] = normalize_token) -> None:
        self._normalize = normalize
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: CommandBinding) -> CommandRegistry:
        """Register one binding, overwriting existing handlers for same tokens."""
        for token in binding.tokens:
            self._handlers[self._normalize(token)] = binding.handler
        return self

    def register_bindings(self, *bindings: CommandBinding) -> CommandRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def __contains__(self, token: str) -> bool:
        return self._normalize(token) in self._handlers

    def dispatch(self, token: str) -> bool | None:
        """Invoke the handler bound to ``token``; ``None`` when unbound."""
        handler = self._handlers.get(self._normalize(token))
        if handler is None:
            return None
        return handler()
