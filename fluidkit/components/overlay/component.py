"""
Overlay component - live preview of unsaved preset edits.

Keeps an ordered list of ":root { NAME: VALUE; }" rules in one style
container on the preview surface. Order matters: like the CSS cascade, the
last rule for a variable wins.

Key behaviors:
- set_variable filters existing rules for the variable, then appends
- unset_variable appends an "unset !important" rule and keeps history
- restore_variable removes every rule for the variable, including the
  earlier set rule; callers re-issue set_variable to bring a value back
- No target surface: every operation is a no-op returning False
- Item ids that cannot form a variable name are ignored the same way
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from fluidkit.components.formula import DEFAULT_PRESET_PREFIX, css_variable_name

from .models import UNSET_VALUE, OverlayRule, StyleHostUnavailable
from .ports import StyleContainerPort, StyleHostPort

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER_ID = "fluid-live-style"

_RULE_PATTERN = re.compile(r"^:root\s*\{\s*(--[\w-]+)\s*:\s*(.*?)\s*;?\s*\}$", re.DOTALL)


# --- Rule text helpers ---


def parse_rules_from_text(css_text: str) -> list[str]:
    """Split stylesheet text into complete rules. Only valid for overlay-produced rules."""
    return [f"{rule.strip()}}}" for rule in css_text.split("}") if rule.strip()]


def format_rules_for_stylesheet(rules: Iterable[str]) -> str:
    return "\n".join(rule if rule.endswith("}") else f"{rule}}}" for rule in rules)


def rule_declares(rule: str, variable_name: str) -> bool:
    """True if the rule declares exactly this variable (no prefix matches)."""
    pattern = rf"(?<![\w-]){re.escape(variable_name)}\s*:"
    return re.search(pattern, rule) is not None


def filter_rules_by_variable(rules: Iterable[str], variable_name: str) -> list[str]:
    """Rules that do not declare the variable."""
    return [rule for rule in rules if not rule_declares(rule, variable_name)]


def create_variable_rule(variable_name: str, value: str) -> str:
    return OverlayRule(variable_name=variable_name, value=value).render()


def create_unset_rule(variable_name: str) -> str:
    return create_variable_rule(variable_name, UNSET_VALUE)


def parse_rule(rule: str) -> OverlayRule | None:
    match = _RULE_PATTERN.match(rule.strip())
    if not match:
        return None
    return OverlayRule(variable_name=match.group(1), value=match.group(2))


# --- Overlay ---


class LiveStyleOverlay:
    """
    Overlay stylesheet bound to one lazily created container.

    The host is consulted on every operation, so a container detached by a
    reload or an unloaded surface is never written to. reset() drops the
    memoized container explicitly.
    """

    def __init__(
        self,
        host: StyleHostPort,
        *,
        container_id: str = DEFAULT_CONTAINER_ID,
        prefix: str = DEFAULT_PRESET_PREFIX,
    ) -> None:
        self._host = host
        self._container_id = container_id
        self._prefix = prefix
        self._container: StyleContainerPort | None = None

    def variable_name(self, item_id: str) -> str:
        return css_variable_name(item_id, self._prefix)

    def reset(self) -> None:
        """Forget the memoized container."""
        self._container = None

    def _get_container(self) -> StyleContainerPort | None:
        try:
            container = self._host.find(self._container_id)
            if container is None:
                container = self._host.create(self._container_id)
        except StyleHostUnavailable as e:
            logger.debug("Overlay target %s unavailable: %s", self._container_id, e)
            self._container = None
            return None

        if container is None:
            logger.debug("Overlay target %s not loaded", self._container_id)
            self._container = None
            return None

        if self._container is not None and container is not self._container:
            logger.debug("Overlay target %s replaced by the host", self._container_id)

        self._container = container
        return container

    def current_rules(self) -> list[str]:
        container = self._get_container()
        if container is None:
            return []
        return parse_rules_from_text(container.read())

    def declarations(self) -> list[OverlayRule]:
        rules = (parse_rule(rule) for rule in self.current_rules())
        return [rule for rule in rules if rule is not None]

    def _checked_name(self, item_id: str) -> str | None:
        try:
            return self.variable_name(item_id)
        except ValueError as e:
            logger.debug("Overlay ignores item: %s", e)
            return None

    def effective_value(self, item_id: str) -> str | None:
        """Value the cascade would apply for the variable (last rule wins)."""
        name = self._checked_name(item_id)
        if name is None:
            return None
        value = None
        for rule in self.declarations():
            if rule.variable_name == name:
                value = rule.value
        return value

    def set_rules(self, rules: Iterable[str]) -> bool:
        container = self._get_container()
        if container is None:
            return False
        container.write(format_rules_for_stylesheet(rules))
        return True

    def set_variable(self, item_id: str, formula: str) -> bool:
        """Replace any rules for the variable with a single set rule."""
        name = self._checked_name(item_id)
        if name is None:
            return False
        container = self._get_container()
        if container is None:
            return False

        rules = filter_rules_by_variable(parse_rules_from_text(container.read()), name)
        rules.append(create_variable_rule(name, formula))
        container.write(format_rules_for_stylesheet(rules))
        return True

    def unset_variable(self, item_id: str) -> bool:
        """Append an unset rule; earlier rules for the variable stay in place."""
        name = self._checked_name(item_id)
        if name is None:
            return False
        container = self._get_container()
        if container is None:
            return False

        rules = parse_rules_from_text(container.read())
        rules.append(create_unset_rule(name))
        container.write(format_rules_for_stylesheet(rules))
        return True

    def restore_variable(self, item_id: str) -> bool:
        """Remove every rule for the variable, the set rule included."""
        name = self._checked_name(item_id)
        if name is None:
            return False
        container = self._get_container()
        if container is None:
            return False

        rules = filter_rules_by_variable(parse_rules_from_text(container.read()), name)
        container.write(format_rules_for_stylesheet(rules))
        return True
