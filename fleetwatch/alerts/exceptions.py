"""Expiry alert engine exceptions."""

from __future__ import annotations


class ExpiryAlertError(Exception):
    """Base exception for expiry alert engine errors."""


class RegistryIncompleteError(ExpiryAlertError):
    """A document kind has no entry in a per-kind registry.

    Raised while building a registry (at import or policy construction),
    never during evaluation.
    """

    def __init__(self, registry: str, missing: list[str]) -> None:
        self.registry = registry
        self.missing = missing
        super().__init__(
            f"{registry} registry is missing document kinds: {', '.join(missing)}"
        )
