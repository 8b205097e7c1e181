"""Placeholder marker and override-slot configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceholderConfig:
    """Names agreed with the parser that produced the tree.

    ``placeholder_text`` marks a full placeholder (``pcss-lin:3``) and
    ``short_placeholder_text`` a short one (``pcss_lin3``). Neither may
    contain a space, since short placeholders are found by splitting on
    spaces.
    """

    placeholder_text: str = "pcss-lin"
    short_placeholder_text: str = "pcss_lin"
    namespace: str = "linaria"
    expressions_key: str = "linariaTemplateExpressions"

    def __post_init__(self) -> None:
        for name in ("placeholder_text", "short_placeholder_text"):
            marker = getattr(self, name)
            if not marker or " " in marker:
                raise ValueError(f"{name} must be non-empty and contain no spaces")

    def override_slot(self, name: str) -> str:
        """Return the override slot name for raw slot *name* (``value`` -> ``linariaValue``)."""
        return f"{self.namespace}{name[:1].upper()}{name[1:]}"


DEFAULT_CONFIG = PlaceholderConfig()
