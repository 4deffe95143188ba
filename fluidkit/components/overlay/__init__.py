"""
Overlay component - live preview stylesheet for unsaved edits.
"""

from .component import (
    DEFAULT_CONTAINER_ID,
    LiveStyleOverlay,
    create_unset_rule,
    create_variable_rule,
    filter_rules_by_variable,
    format_rules_for_stylesheet,
    parse_rule,
    parse_rules_from_text,
    rule_declares,
)
from .models import UNSET_VALUE, OverlayRule, StyleHostUnavailable
from .ports import StyleContainerPort, StyleHostPort

__all__ = [
    # Overlay
    "LiveStyleOverlay",
    # Rule helpers
    "parse_rules_from_text",
    "format_rules_for_stylesheet",
    "filter_rules_by_variable",
    "rule_declares",
    "create_variable_rule",
    "create_unset_rule",
    "parse_rule",
    # Models
    "OverlayRule",
    "StyleHostUnavailable",
    # Ports
    "StyleContainerPort",
    "StyleHostPort",
    # Constants
    "DEFAULT_CONTAINER_ID",
    "UNSET_VALUE",
]
