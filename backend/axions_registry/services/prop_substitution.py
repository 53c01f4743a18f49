"""
Custom prop substitution for generated component code
"""

import json
import re
from abc import ABC, abstractmethod
from typing import Any, Mapping


class PropSubstituter(ABC):
    """Rewrites JSX attribute values in component source."""

    @abstractmethod
    def apply(self, code: str, custom_props: Mapping[str, Any]) -> str:
        """Return code with each prop's attribute value replaced."""


class RegexPropSubstituter(PropSubstituter):
    """
    Textual single-pass substitution.

    Every `name={...}` match is replaced by `name={<JSON value>}`. The
    attribute body is `[^}]*`, so a value that itself contains `}` is cut at
    the first closing brace. No parsing, no nesting awareness.
    """

    def apply(self, code: str, custom_props: Mapping[str, Any]) -> str:
        for prop_name, value in custom_props.items():
            pattern = re.compile(re.escape(prop_name) + r"=\{[^}]*\}")
            replacement = f"{prop_name}={{{encode_prop_value(value)}}}"
            # Callable replacement so backslashes in the JSON stay literal
            code = pattern.sub(lambda _match: replacement, code)
        return code


def encode_prop_value(value: Any) -> str:
    """JSON encoding matching JSON.stringify output (compact, unicode kept)."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
