"""Paradox localisation YAML parser."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..utils.logging_config import log_manager

HEADER_PREFIX = "l_"
COMMENT_PREFIX = "#"
BOM = "\ufeff"
VERSION_RE = re.compile(r"[0-9]+")
MAX_VERSION = 2 ** 31 - 1


class LocalisationError(Exception):
    """Base class for localisation parsing errors."""
    pass


class MalformedUnitLineError(LocalisationError, ValueError):
    """Raised when a unit line does not match `key:version "value"`."""

    def __init__(
        self,
        line: str,
        reason: str,
        line_no: Optional[int] = None,
        lang: Optional[str] = None,
    ):
        self.line = line
        self.reason = reason
        self.line_no = line_no
        self.lang = lang
        super().__init__(self._format())

    def _format(self) -> str:
        where = []
        if self.line_no is not None:
            where.append(f"line {self.line_no}")
        if self.lang is not None:
            where.append(f"l_{self.lang}")
        prefix = f"{', '.join(where)}: " if where else ""
        return f"{prefix}malformed localisation line ({self.reason}): {self.line!r}"

    def located(self, line: str, line_no: int, lang: str) -> "MalformedUnitLineError":
        return MalformedUnitLineError(line, self.reason, line_no=line_no, lang=lang)


@dataclass(frozen=True)
class LocalizationUnit:
    """One `key:version "value"` entry."""
    key: str
    value: str
    version: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "version": self.version, "value": self.value}


@dataclass(frozen=True)
class Localization:
    """All units found under one `l_<lang>` header."""
    lang: str
    units: Tuple[LocalizationUnit, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"lang": self.lang, "units": [u.to_dict() for u in self.units]}

    @classmethod
    def parse(cls, content: str) -> List["Localization"]:
        return parse(content)


@dataclass
class ParseResult:
    """Localizations plus the malformed lines skipped in lenient mode."""
    localizations: List[Localization] = field(default_factory=list)
    errors: List[MalformedUnitLineError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def split_lines(content: str) -> List[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    A trailing newline does not produce an empty final line.
    """
    if content.startswith(BOM):
        content = content[len(BOM):]
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def is_header_line(line: str) -> bool:
    return line.startswith(HEADER_PREFIX)


def header_lang(line: str) -> str:
    """``l_english:`` -> ``english``."""
    name = line[len(HEADER_PREFIX):]
    return name.partition(":")[0].strip()


def parse_unit_line(line: str) -> LocalizationUnit:
    """Parse a trimmed unit line into a :class:`LocalizationUnit`.

    The value runs from the first double quote to the final one, which must
    end the line. The key/version split happens on the last colon before the
    whitespace that precedes the opening quote.

    Raises:
        MalformedUnitLineError: If the line does not match the grammar
    """
    if len(line) < 2 or not line.endswith('"'):
        raise MalformedUnitLineError(line, "value must end with a double quote")

    close = len(line) - 1
    opening = line.find('"')
    if opening == close:
        raise MalformedUnitLineError(line, "missing opening double quote")

    head = line[:opening]
    prefix = head.rstrip()
    if prefix == head:
        raise MalformedUnitLineError(line, "expected whitespace before opening quote")

    key, colon, version_text = prefix.rpartition(":")
    if not colon:
        raise MalformedUnitLineError(line, "missing ':' after key")
    if not key:
        raise MalformedUnitLineError(line, "empty key")

    version: Optional[int] = None
    if version_text:
        if not VERSION_RE.fullmatch(version_text):
            raise MalformedUnitLineError(line, f"invalid version {version_text!r}")
        version = int(version_text)
        if version > MAX_VERSION:
            raise MalformedUnitLineError(line, f"version {version_text} out of range")

    return LocalizationUnit(key=key, value=line[opening + 1:close], version=version)


def _group_lines(lines: List[str]) -> Dict[str, List[Tuple[int, str]]]:
    # dicts keep insertion order, so groups come out in first-header order
    groups: Dict[str, List[Tuple[int, str]]] = {}
    current: Optional[List[Tuple[int, str]]] = None
    for idx, line in enumerate(lines):
        if is_header_line(line):
            current = groups.setdefault(header_lang(line), [])
            continue
        if current is not None:
            current.append((idx + 1, line))
    return groups


def _parse(content: str, strict: bool) -> ParseResult:
    result = ParseResult()
    for lang, owned in _group_lines(split_lines(content)).items():
        units: List[LocalizationUnit] = []
        for line_no, raw in owned:
            text = raw.strip()
            if not text or text.startswith(COMMENT_PREFIX):
                continue
            try:
                units.append(parse_unit_line(text))
            except MalformedUnitLineError as e:
                err = e.located(raw, line_no, lang)
                if strict:
                    raise err from None
                log_manager.warning(f"Skipping {err}")
                result.errors.append(err)
        result.localizations.append(Localization(lang=lang, units=tuple(units)))

    log_manager.debug(
        f"Parsed {len(result.localizations)} language group(s), "
        f"{sum(len(loc.units) for loc in result.localizations)} unit(s)"
    )
    return result


def parse(content: str, strict: bool = True) -> List[Localization]:
    """Parse HOI4 localisation text into one :class:`Localization` per language.

    Args:
        content: Whole file content
        strict: If True, the first malformed unit line aborts the parse;
            otherwise such lines are skipped and logged

    Returns:
        Localizations in order of first header appearance. Repeated headers
        for the same language are merged into the first group.

    Raises:
        MalformedUnitLineError: In strict mode, on the first bad unit line
    """
    return _parse(content, strict).localizations


def parse_report(content: str) -> ParseResult:
    """Lenient parse that also returns every skipped line as an error."""
    return _parse(content, strict=False)
