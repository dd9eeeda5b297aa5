"""
Type-Format Registry

Maps a format name (as used in a field-format list) to a prepared
FormatRule. Patterns are compiled once when the registry is built and
shared read-only by every validation thread afterwards. Digit classes
match ASCII digits only.

Usage:
    >>> from proofreader.formats.registry import default_registry
    >>> rule = default_registry.resolve("uuid")
    >>> rule.matches("not-a-uuid")
    False
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Pattern

from proofreader.errors import ConfigurationError, UnknownFormatError


@dataclass(frozen=True)
class FormatRule:
    """A named field type and the pattern a value must fully match.

    Attributes:
        name: Format name used in field-format lists
        pattern: Compiled pattern, or None for formats that always pass
        description: Human-readable description shown by `proofreader formats`
    """
    name: str
    pattern: Optional[Pattern[str]]
    description: str = ""

    def matches(self, value: str) -> bool:
        """Return True if the whole value satisfies this format."""
        if self.pattern is None:
            return True
        return self.pattern.fullmatch(value) is not None


_OCTET = r"(25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"

# name -> (pattern source or None, description)
BUILTIN_FORMATS: Dict[str, tuple] = {
    "uuid": (
        r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}",
        "8-4-4-4-12 hexadecimal UUID",
    ),
    "app_id": (r"[0-9a-fA-F]{64}", "64 hex digit application id"),
    "user_id": (r"[0-9a-fA-F]{32}", "32 hex digit user id"),
    "os": (r"IOS|AND", "platform OS code (IOS, AND)"),
    "version": (r"(\d+\.)?(\d+\.)?(\*|\d+)", "dotted version, up to three parts"),
    "ad_id_type": (r"IDFA|AAID", "advertising id type (IDFA, AAID)"),
    "am_type": (r"[a-z]{2}", "two lowercase letters"),
    "ip_addr": (r"\.".join([_OCTET] * 4), "dotted-quad IPv4 address"),
    "ts_sec": (r"[0-9]{10}", "10 digit epoch timestamp (seconds)"),
    "ts_msec": (r"[0-9]{13}", "13 digit epoch timestamp (milliseconds)"),
    "cc": (r"[A-Z]{2}", "two letter country code"),
    "state": (r"[A-Z]{2}", "two letter state code"),
    "zip": (r"[0-9]{5}", "5 digit zip code"),
    "loc_context": (r"(fore|back)ground", "location context (foreground, background)"),
    "loc_method": (r"BCN|GPS", "location method (BCN, GPS)"),
    "exchange": (
        r"ASX|BIT|BVMF|CPH|Euronext|FWB|LSE|BMAD|NASDAQ|TSX|NYSE|TYO|SIX|OTC Pink|STO",
        "stock exchange code",
    ),
    "ticker": (r".{7}", "exactly 7 characters"),
    "lat": (r"[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?)", "latitude, -90 to 90"),
    "lon": (
        r"[-+]?(180(\.0+)?|((1[0-7]\d)|([1-9]?\d))(\.\d+)?)",
        "longitude, -180 to 180",
    ),
    "int": (r"\d+", "unsigned integer"),
    "float": (r"[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?", "signed decimal number"),
    "num": (r"\d+(\.\d+)?", "unsigned number with optional fraction"),
    "text": (None, "free text, never checked"),
    "SKIP": (None, "column ignored, never checked"),
}


class FormatRegistry:
    """Lookup table of prepared format rules.

    Resolution is a pure dictionary lookup; an unknown name raises
    UnknownFormatError so schema construction fails before any record
    is processed.
    """

    def __init__(self, rules: Optional[List[FormatRule]] = None):
        self._rules: Dict[str, FormatRule] = {}
        for rule in rules or []:
            self.register(rule)

    @classmethod
    def with_builtin_formats(cls) -> "FormatRegistry":
        """Create a registry holding every built-in format."""
        rules = [
            FormatRule(
                name=name,
                pattern=re.compile(source, re.ASCII) if source is not None else None,
                description=description,
            )
            for name, (source, description) in BUILTIN_FORMATS.items()
        ]
        return cls(rules)

    def register(self, rule: FormatRule) -> None:
        """Add a rule.

        Raises:
            ConfigurationError: If a rule with the same name already exists.
        """
        if rule.name in self._rules:
            raise ConfigurationError(f"Format '{rule.name}' is already registered")
        self._rules[rule.name] = rule

    def resolve(self, format_name: str) -> FormatRule:
        """Return the rule registered under format_name.

        Raises:
            UnknownFormatError: If no such format exists.
        """
        try:
            return self._rules[format_name]
        except KeyError:
            raise UnknownFormatError(format_name) from None

    def names(self) -> List[str]:
        return list(self._rules)

    def __contains__(self, format_name: str) -> bool:
        return format_name in self._rules

    def __iter__(self) -> Iterator[FormatRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)


# Shared registry used when callers do not supply their own
default_registry = FormatRegistry.with_builtin_formats()
