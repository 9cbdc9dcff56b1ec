"""Parser for line-oriented `.offer` files.

Format, one rule per line, any order, each rule at most once:

    OFFER: "Crypto Pro Max"
    GEO: US, CA
    TRAFFIC: Facebook, "Google, Search"
    PAYOUT: 42.5 USD
    CR: 1.25%
    CAP: 200
    VERTICAL: Crypto

Blank lines and lines starting with ``#`` are skipped. OFFER, PAYOUT and CR
are required. The first problem found stops the parse.
"""
from __future__ import annotations

import io
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from loguru import logger

from offer_parser.config import settings
from offer_parser.errors import (
    DuplicateFieldError,
    EmptyValueError,
    InvalidFormatError,
    InvalidNumberError,
    MissingFieldError,
    OfferIOError,
    UnknownRuleError,
)
from offer_parser.models import OfferRecord

# library code stays quiet unless the caller opts in (the CLI does)
logger.disable("offer_parser")

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_DIGITS_RE = re.compile(r"\+?\d+", re.ASCII)
_CAP_MAX = 2**32 - 1


# --------- Value helpers ---------
def unquote(text: str) -> str:
    """Strip one pair of surrounding double quotes, if both are present."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def split_list(raw: str) -> list[str]:
    """Split a GEO/TRAFFIC value on commas that sit outside double quotes.

    Every piece is trimmed and unquoted once, so ``"Google, Search", Facebook``
    gives ``["Google, Search", "Facebook"]``. Empty pieces are kept; the
    caller decides whether they are allowed.

    Raises:
        ValueError: if a double quote is never closed.
    """
    pieces: list[str] = []
    buf: list[str] = []
    quoted = False
    for ch in raw:
        if ch == '"':
            quoted = not quoted
        elif ch == "," and not quoted:
            pieces.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    if quoted:
        raise ValueError(f"unbalanced quote in {raw!r}")
    pieces.append("".join(buf))
    return [unquote(p.strip()) for p in pieces]


# --------- Per-rule converters ---------
# (rule, value after "KEY:", whole trimmed line, line number) -> field value
Converter = Callable[[str, str, str, int], object]


def _text(rule: str, value: str, line: str, lineno: int) -> str:
    text = unquote(value)
    if not text:
        raise EmptyValueError(rule, lineno=lineno)
    return text


def _tokens(rule: str, value: str, line: str, lineno: int) -> list[str]:
    if not value:
        raise EmptyValueError(rule, lineno=lineno)
    try:
        tokens = split_list(value)
    except ValueError as ex:
        raise InvalidFormatError(line, lineno=lineno) from ex
    if any(not t for t in tokens):
        raise EmptyValueError(rule, lineno=lineno)
    return tokens


def _decimal(suffix: str) -> Converter:
    def convert(rule: str, value: str, line: str, lineno: int) -> float:
        if not value.endswith(suffix):
            raise InvalidFormatError(line, lineno=lineno)
        number = value[: -len(suffix)].strip()
        if not _DECIMAL_RE.fullmatch(number):
            raise InvalidNumberError(line, lineno=lineno)
        return float(number)
    return convert


def _count(rule: str, value: str, line: str, lineno: int) -> int:
    if not value:
        raise EmptyValueError(rule, lineno=lineno)
    if not _DIGITS_RE.fullmatch(value):
        raise InvalidNumberError(line, lineno=lineno)
    cap = int(value)
    if cap > _CAP_MAX:
        raise InvalidNumberError(line, lineno=lineno)
    return cap


# rule keyword, accumulator slot, converter
_RULES: tuple[tuple[str, str, Converter], ...] = (
    ("OFFER", "name", _text),
    ("GEO", "geo", _tokens),
    ("TRAFFIC", "traffic", _tokens),
    ("PAYOUT", "payout", _decimal("USD")),
    ("CR", "conversion_rate", _decimal("%")),
    ("CAP", "cap", _count),
    ("VERTICAL", "vertical", _text),
)

_REQUIRED = (("OFFER", "name"), ("PAYOUT", "payout"), ("CR", "conversion_rate"))


def _match_rule(line: str) -> tuple[str, str, Converter] | None:
    for rule in _RULES:
        if line.startswith(rule[0] + ":"):
            return rule
    return None


# --------- Accumulator ---------
@dataclass(slots=True)
class _Draft:
    name: str | None = None
    geo: list[str] | None = None
    traffic: list[str] | None = None
    payout: float | None = None
    conversion_rate: float | None = None
    cap: int | None = None
    vertical: str | None = None

    def finish(self) -> OfferRecord:
        for rule, slot in _REQUIRED:
            if getattr(self, slot) is None:
                raise MissingFieldError(rule)
        return OfferRecord(
            name=self.name,
            payout=self.payout,
            conversion_rate=self.conversion_rate,
            geo=self.geo or [],
            traffic=self.traffic or [],
            cap=self.cap,
            vertical=self.vertical,
        )


# --------- Public API ---------
def parse_offer_lines(lines: Iterable[str]) -> OfferRecord:
    """Parse an iterable of `.offer` lines into an OfferRecord.

    Raises:
        OfferParseError: a subclass naming the first problem found.
    """
    draft = _Draft()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        matched = _match_rule(line)
        if matched is None:
            raise UnknownRuleError(line, lineno=lineno)
        rule, slot, convert = matched

        if getattr(draft, slot) is not None:
            raise DuplicateFieldError(rule, lineno=lineno)
        value = line[len(rule) + 1:].strip()
        setattr(draft, slot, convert(rule, value, line, lineno))

    return draft.finish()


def parse_offer_text(text: str) -> OfferRecord:
    """Parse `.offer` content already held in memory."""
    # same line breaks as a file opened in text mode
    return parse_offer_lines(io.StringIO(text, newline=None))


def parse_offer_file(path: str | Path, encoding: str | None = None) -> OfferRecord:
    """Read and parse one `.offer` file.

    Open/read failures and undecodable bytes become OfferIOError; the file
    is closed before this returns or raises.
    """
    encoding = encoding or settings.encoding
    logger.debug("Parsing offer file {} ({})", path, encoding)
    try:
        fh = open(path, "r", encoding=encoding)
    except (OSError, ValueError) as ex:  # ValueError: NUL byte in path
        raise OfferIOError(str(ex)) from ex
    try:
        with fh:
            record = parse_offer_lines(fh)
    except (OSError, UnicodeDecodeError) as ex:
        raise OfferIOError(str(ex)) from ex
    logger.debug("Parsed offer {!r} from {}", record.name, path)
    return record
