"""``{{name}}`` placeholder substitution.

Substitution is a single pass: inserted values are never scanned again, so a
value that itself contains ``{{...}}`` ends up in the output verbatim.
"""

import re
from typing import Mapping

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


def render_template(template: str, variables: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in variables:
            return str(variables[key])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, template)


def find_template_variables(template: str) -> list[str]:
    return _PLACEHOLDER_RE.findall(template or "")


__all__ = ["find_template_variables", "render_template"]
