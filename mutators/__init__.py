from .base import Mutator, Transform, mutate, mutator_names
from .html_mutator import (
    HTML_MUTATORS,
    duplicate_tags,
    extend_opening_tag_name,
    html_mutators,
    increase_attribute_length,
    increase_content_length,
)

__all__ = [
    "Mutator",
    "Transform",
    "mutate",
    "mutator_names",
    "HTML_MUTATORS",
    "html_mutators",
    "duplicate_tags",
    "increase_attribute_length",
    "increase_content_length",
    "extend_opening_tag_name",
]
