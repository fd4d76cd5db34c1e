"""
Metadata label recognition.

Authors write the same field many ways ("Meta-Description:",
"metaDescription =", "Meta Description | ..."). This module maps a single
"label<sep>value" line to a canonical key using a fixed alias table.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

# Accepted separators between label and value
SEPARATOR_PATTERN = r"\s*[:\-=|]\s*"


@dataclass(frozen=True)
class PatternRule:
    """One canonical metadata key and the label aliases that map to it."""
    key: str
    aliases: tuple[str, ...]
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the anchored, case-insensitive label matcher."""
        alternation = "|".join(re.escape(alias) for alias in self.aliases)
        compiled = re.compile(
            rf"^(?:{alternation}){SEPARATOR_PATTERN}(.+)$",
            re.IGNORECASE,
        )
        object.__setattr__(self, "pattern", compiled)

    def match(self, line: str) -> Optional[str]:
        """Return the trimmed value if ``line`` carries this field."""
        found = self.pattern.match(line)
        if not found:
            return None
        value = found.group(1).strip()
        return value or None


# Tried in order. "url" and the specific multi-word aliases come before
# the generic "title" rule; the first matching rule wins.
FIELD_RULES: tuple[PatternRule, ...] = (
    PatternRule("canonicalUrl", ("url",)),
    PatternRule("metaTitle", ("meta-title", "metatitle", "meta title")),
    PatternRule("metaDescription", ("meta-description", "metadescription", "meta description")),
    PatternRule("metaKeywords", ("meta-keywords", "metakeywords", "meta keywords")),
    PatternRule("canonicalUrl", ("canonicalurl", "canonical url")),
    PatternRule("title", ("title",)),
)


def match_field_line(
    line: str,
    rules: tuple[PatternRule, ...] = FIELD_RULES,
) -> Optional[tuple[str, str]]:
    """
    Recognize a "label: value" metadata line.

    Args:
        line: A single line of text. Values never span lines.
        rules: Rule table to try, in order.

    Returns:
        ``(canonical_key, value)`` for the first matching rule, or None.

    Examples:
        >>> match_field_line("Meta-Description: A great post")
        ('metaDescription', 'A great post')
        >>> match_field_line("Meta Title | Best Guide")
        ('metaTitle', 'Best Guide')
        >>> match_field_line("Just a sentence about titles.") is None
        True
    """
    text = line.strip() if line else ""
    if not text:
        return None

    for rule in rules:
        value = rule.match(text)
        if value is not None:
            return rule.key, value
    return None
