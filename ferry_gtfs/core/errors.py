"""Error kinds raised by agency policy hooks."""

from __future__ import annotations

from typing import Any


class PolicyError(Exception):
    """Base class for errors that must abort the run."""


class UnsupportedEntityError(PolicyError):
    """A hook was asked about an entity outside the single supported route family.

    Never answered with a guessed value: downstream real-time matching relies on
    the ids, names and colours being exact.
    """

    def __init__(self, hook: str, entity: Any, detail: str = "") -> None:
        self.hook = hook
        self.entity = entity
        msg = f"{hook}: unexpected {entity!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class MalformedFieldError(PolicyError, ValueError):
    """A feed field expected to be numeric could not be parsed."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: expected an integer, got {value!r}")
