"""
Fallback email templates: catalog, keyword matcher and placeholder substitution.
"""

from .catalog import (
    EmailTemplate,
    TemplateCatalog,
    TemplateCatalogError,
    EMAIL_TEMPLATES,
    DEFAULT_CATALOG,
)
from .matcher import find_matching_template, score_template
from .variables import VariableDefaults, replace_variables

__all__ = [
    "EmailTemplate",
    "TemplateCatalog",
    "TemplateCatalogError",
    "EMAIL_TEMPLATES",
    "DEFAULT_CATALOG",
    "find_matching_template",
    "score_template",
    "VariableDefaults",
    "replace_variables",
]
