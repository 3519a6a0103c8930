import re
from functools import partial
from typing import List

from mutators.base import Mutator

ATTRIBUTE_TARGET_LENGTH = 20
CONTENT_TARGET_LENGTH = 100
TAG_NAME_THRESHOLD = 16

ATTRIBUTE_FILLER = "X"
CONTENT_FILLER = "Y"
TAG_NAME_FILLER = "X"
INJECTED_ATTRIBUTE = "newAttr"

_ATTRIBUTE_RE = re.compile(r'(\w+)="([^"]*)"')
_OPENING_TAG_RE = re.compile(r"<(\w+)([^>]*)>")
_ELEMENT_RE = re.compile(r"(<(\w+)\b[^>]*>)(.*?)(</\2>)", re.DOTALL)
_TAG_NAME_RE = re.compile(r"<(\w+)")


def _pad(value: str, filler: str, target_length: int) -> str:
    if len(value) >= target_length:
        return value
    return value + filler * (target_length - len(value))


def duplicate_tags(text: str) -> str:
    return text.replace("<", "<<").replace(">", ">>")


def increase_attribute_length(text: str, target_length: int = ATTRIBUTE_TARGET_LENGTH) -> str:
    """Pad every name="value" attribute value with filler up to target_length.

    When the markup has no attribute at all, a synthetic one is injected into
    the first opening tag so the seed still yields a distinct variant.
    """
    def inflate(match):
        value = _pad(match.group(2), ATTRIBUTE_FILLER, target_length)
        return f'{match.group(1)}="{value}"'

    mutated, count = _ATTRIBUTE_RE.subn(inflate, text)
    if count:
        return mutated

    tag = _OPENING_TAG_RE.search(text)
    if tag is None:
        return text
    injected = f' {INJECTED_ATTRIBUTE}="{ATTRIBUTE_FILLER * target_length}"'
    pos = tag.end(1)
    return text[:pos] + injected + text[pos:]


def increase_content_length(text: str, target_length: int = CONTENT_TARGET_LENGTH) -> str:
    """Pad the content of each <tag>...</tag> pair with filler up to target_length."""
    def inflate(match):
        content = _pad(match.group(3), CONTENT_FILLER, target_length)
        return match.group(1) + content + match.group(4)

    return _ELEMENT_RE.sub(inflate, text)


def extend_opening_tag_name(text: str, threshold: int = TAG_NAME_THRESHOLD) -> str:
    # names must end up strictly longer than threshold
    return _TAG_NAME_RE.sub(
        lambda m: "<" + _pad(m.group(1), TAG_NAME_FILLER, threshold + 1), text
    )


def html_mutators(
    attribute_length: int = ATTRIBUTE_TARGET_LENGTH,
    content_length: int = CONTENT_TARGET_LENGTH,
    tag_name_threshold: int = TAG_NAME_THRESHOLD,
) -> List[Mutator]:
    return [
        ("duplicate_tags", duplicate_tags),
        ("increase_attribute_length", partial(increase_attribute_length, target_length=attribute_length)),
        ("increase_content_length", partial(increase_content_length, target_length=content_length)),
        ("extend_opening_tag_name", partial(extend_opening_tag_name, threshold=tag_name_threshold)),
    ]


HTML_MUTATORS: List[Mutator] = html_mutators()
