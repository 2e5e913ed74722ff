"""Cron expression parser.

Expands the five time fields of a cron expression into the explicit values
they match:

- "*"        -> every value in the field's range
- "N"        -> a single value
- "N-M"      -> an inclusive range
- ".../S"    -> every S-th value of "*", "N" or "N-M"
- "A,B,..."  -> the union of any of the above
- month and day of week accept 3-letter names (jan..dec, sun..sat)
- day of week accepts 7 as an alias for Sunday (0)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from cronexpand.exceptions import (
    InvalidRangeError,
    InvalidStepError,
    InvalidValueError,
    MalformedExpressionError,
    MissingFieldError,
    OutOfBoundsError,
    UsageError,
)

logger = logging.getLogger("cronexpand.parse")


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    min: int
    max: int


FIELDS = (
    FieldDefinition("minute", 0, 59),
    FieldDefinition("hour", 0, 23),
    FieldDefinition("day of month", 1, 31),
    FieldDefinition("month", 1, 12),
    FieldDefinition("day of week", 0, 6),
)

MONTH_INDEX = 3
DAY_OF_WEEK_INDEX = 4
SUNDAY_ALIAS = 7

MONTH_NAMES: Mapping[str, int] = MappingProxyType({
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
})
WEEKDAY_NAMES: Mapping[str, int] = MappingProxyType({
    "sun": 0, "mon": 1, "tue": 2, "wed": 3, "thu": 4, "fri": 5, "sat": 6,
})

_NAME_TABLES: Mapping[int, Mapping[str, int]] = MappingProxyType({
    MONTH_INDEX: MONTH_NAMES,
    DAY_OF_WEEK_INDEX: WEEKDAY_NAMES,
})
_NAME_RE = re.compile(r"[a-zA-Z]{3}")
_DIGITS_RE = re.compile(r"[0-9]+")

LABEL_WIDTH = 14
COMMAND_LABEL = "command"


@dataclass(frozen=True)
class ParsedExpression:
    minute: tuple[int, ...]
    hour: tuple[int, ...]
    day_of_month: tuple[int, ...]
    month: tuple[int, ...]
    day_of_week: tuple[int, ...]
    command: str

    @property
    def fields(self) -> Iterator[tuple[FieldDefinition, tuple[int, ...]]]:
        values = (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week)
        return zip(FIELDS, values)


def _to_int(text: str) -> int | None:
    # ASCII digits only: int() would also take "+5", "1_5" and non-ASCII digits
    if not _DIGITS_RE.fullmatch(text):
        return None
    return int(text)


def _replace_names(token: str, field_index: int) -> str:
    table = _NAME_TABLES.get(field_index)
    if table is None:
        return token

    def _sub(match: re.Match[str]) -> str:
        value = table.get(match.group(0).lower())
        return match.group(0) if value is None else str(value)

    return _NAME_RE.sub(_sub, token)


def _parse_token(token: str, field_index: int) -> list[int]:
    field = FIELDS[field_index]
    resolved = _replace_names(token, field_index)

    range_part, has_step, step_part = resolved.partition("/")
    step = _to_int(step_part) if has_step else 1
    if step is None or step <= 0:
        raise InvalidStepError(f"Invalid step in token '{token}'", field=field.name, token=token)

    if range_part == "*":
        start, end = field.min, field.max
    elif "-" in range_part:
        low, high = range_part.split("-", 1)
        start, end = _to_int(low), _to_int(high)
        if start is None or end is None:
            raise InvalidRangeError(f"Invalid range in token '{token}'", field=field.name, token=token)
    else:
        start = end = _to_int(range_part)
        if start is None:
            raise InvalidValueError(
                f"Invalid value '{range_part}' in token '{token}'", field=field.name, token=token
            )

    # 7 is Sunday: on its own it means 0, at the end of a range it means
    # "through Sunday" and the generated 7 folds back to 0 below.
    fold_sunday = field_index == DAY_OF_WEEK_INDEX
    if fold_sunday:
        if start == SUNDAY_ALIAS and end == SUNDAY_ALIAS:
            start = end = 0
        elif start == SUNDAY_ALIAS:
            start = 0

    checked_end = 0 if fold_sunday and end == SUNDAY_ALIAS else end
    if not (field.min <= start <= field.max and field.min <= checked_end <= field.max):
        raise OutOfBoundsError(
            f"Value out of bounds in token '{token}' (allowed {field.min}-{field.max})",
            field=field.name,
            token=token,
            minimum=field.min,
            maximum=field.max,
        )

    # start > end is not rejected: the range is simply empty
    values = range(start, end + 1, step)
    if fold_sunday:
        return [0 if v == SUNDAY_ALIAS else v for v in values]
    return list(values)


def expand_field(raw_text: str, field_index: int) -> list[int]:
    """Expand one time field into its sorted, unique values.

    Args:
        raw_text: The field text, e.g. "*/15" or "mon-fri,sun".
        field_index: Position of the field, 0 (minute) to 4 (day of week).

    Returns:
        Ascending list of every value the field matches.

    Raises:
        FieldExpansionError: The first token that fails to expand.
    """
    if not 0 <= field_index < len(FIELDS):
        raise ValueError(f"field_index must be 0-{len(FIELDS) - 1}, got {field_index}")

    field = FIELDS[field_index]
    if not raw_text or not raw_text.strip():
        raise MissingFieldError("Missing field", field=field.name, token=raw_text or "")

    tokens = [t.strip() for t in raw_text.split(",")]
    values: set[int] = set()
    for token in tokens:
        if token:
            values.update(_parse_token(token, field_index))

    expanded = sorted(values)
    logger.debug("Expanded %s %r -> %s", field.name, raw_text, expanded)
    return expanded


def parse_expression(raw_text: str) -> ParsedExpression:
    """Split a full cron line and expand its five time fields.

    The command is everything after the fifth field, with runs of
    whitespace collapsed to single spaces.
    """
    raw_text = (raw_text or "").strip()
    if not raw_text:
        raise UsageError("No cron expression given")

    parts = raw_text.split()
    if len(parts) < len(FIELDS) + 1:
        raise MalformedExpressionError(
            "Invalid cron expression: expected at least 6 space-separated parts "
            f"(5 time fields + command), got {len(parts)}"
        )

    time_fields = parts[:len(FIELDS)]
    command = " ".join(parts[len(FIELDS):])
    logger.debug("Fields %s, command %r", time_fields, command)

    minute, hour, dom, month, dow = (expand_field(f, i) for i, f in enumerate(time_fields))
    return ParsedExpression(
        minute=tuple(minute),
        hour=tuple(hour),
        day_of_month=tuple(dom),
        month=tuple(month),
        day_of_week=tuple(dow),
        command=command,
    )


def format_expression(parsed: ParsedExpression) -> str:
    lines = [
        field.name.ljust(LABEL_WIDTH) + " ".join(str(v) for v in values)
        for field, values in parsed.fields
    ]
    lines.append(COMMAND_LABEL.ljust(LABEL_WIDTH) + parsed.command)
    return "\n".join(lines)
