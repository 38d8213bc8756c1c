"""Form state controller.

Holds the live ``MetaConfig``, re-validates fields as they are edited and
notifies listeners (the URL synchronizer, a renderer) after every change.
Edits are always accepted; errors are reported next to the field.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from metacraft.model import ErrorKind, MetaConfig
from metacraft.validation import validate, validate_config

logger = logging.getLogger(__name__)

Listener = Callable[[MetaConfig], None]


class FormState:
    def __init__(self, initial: Optional[Mapping[str, object]] = None):
        self._values = MetaConfig.from_query(initial or {})
        self._errors: dict[str, ErrorKind] = validate_config(self._values)
        self._listeners: list[Listener] = []

    @property
    def values(self) -> MetaConfig:
        return self._values

    @property
    def errors(self) -> dict[str, ErrorKind]:
        return dict(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def error_for(self, key: str) -> Optional[ErrorKind]:
        return self._errors.get(key)

    def set_field(self, key: str, value: str) -> MetaConfig:
        """Apply one edit. Raises ``UnknownFieldError`` for unknown keys."""
        self._apply(key, value)
        self._notify()
        return self._values

    def update(self, changes: Mapping[str, str]) -> MetaConfig:
        """Apply several edits, notifying listeners once."""
        for key, value in changes.items():
            self._apply(key, value)
        self._notify()
        return self._values

    def _apply(self, key: str, value: str) -> None:
        kind = validate(key, value)
        self._values = self._values.with_field(key, value)
        if kind is None:
            self._errors.pop(key, None)
        else:
            self._errors[key] = kind
            logger.debug("field %s invalid: %s", key, kind.value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._values)
