from .locales import validate_locales
from .report import CrossLocaleIssue, CrossLocaleReport, ValidationIssue, ValidationReport
from .rules import validate_config

__all__ = [
    "CrossLocaleIssue",
    "CrossLocaleReport",
    "ValidationIssue",
    "ValidationReport",
    "validate_config",
    "validate_locales",
]
