"""Regex-based parser and validator for Munsell colour specs.

Accepts a combined spec ("9R 5.5/14", "N 4.5") or discrete fields
(hue, value[, chroma]). Fields are checked in order: hue, value, chroma.
The first failure wins and is reported as a MunsellValidationError.

Numbers are rounded to one decimal place, ties away from zero, using
Decimal so that "4.45" rounds to 4.5 regardless of float representation.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from munsell_model.core.types import (
    NEUTRAL_MARK,
    Chromatic,
    ConstructResult,
    ErrorCause,
    HueFamily,
    MunsellColor,
    MunsellValidationError,
    Neutral,
    previous_family,
)

_SPLIT_RE = re.compile(r'[ /]+')
_NUMBER_RE = re.compile(r'\d+|\d+\.\d+', re.ASCII)
_HUE_RE = re.compile(r'(\d+|\d+\.\d+)(R|YR|Y|GY|G|BG|B|PB|P|RP)', re.ASCII)

_TENTH = Decimal('0.1')
_TEN = Decimal(10)


def parse_tenth(raw: object) -> Decimal | None:
    """Parse a non-negative decimal and round it to one place.

    Strings must look like '12' or '12.5'. Numbers must be finite and >= 0.
    Returns None for anything else.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        number = Decimal(str(raw))
        if not number.is_finite() or number < 0:
            return None
    elif isinstance(raw, str) and _NUMBER_RE.fullmatch(raw):
        number = Decimal(raw)
    else:
        return None
    with localcontext() as ctx:
        # every integer digit plus the tenth must fit
        ctx.prec = max(ctx.prec, number.adjusted() + 3)
        return number.quantize(_TENTH, rounding=ROUND_HALF_UP)


def split_spec(spec: object) -> tuple[object, object, object]:
    """Split a combined spec into (hue, value, chroma); missing fields are None."""
    if spec is None:
        return (None, None, None)
    text = str(spec).strip()
    tokens: list[object] = _SPLIT_RE.split(text) if text else []
    tokens += [None] * 3
    return (tokens[0], tokens[1], tokens[2])


def parse(*fields: object) -> MunsellColor:
    """Parse and validate a Munsell colour.

    parse('9R 5.5/14')       # combined spec
    parse('7PB', 4, 10)      # discrete hue, value, chroma
    parse('N', 9)            # neutral, chroma not needed

    Raises MunsellValidationError naming the failing field.
    """
    if len(fields) == 1:
        hue, value, chroma = split_spec(fields[0])
    elif len(fields) <= 3:
        hue, value, chroma = (*fields, None, None, None)[:3]
    else:
        raise TypeError(f'parse() takes at most 3 arguments ({len(fields)} given)')

    hue_parts = _parse_hue(hue)
    level = _parse_value(value)
    if hue_parts is None or level in (0, _TEN):
        return Neutral(value=float(level))

    saturation = _parse_chroma(chroma)
    if saturation == 0:
        return Neutral(value=float(level))

    family, step = hue_parts
    return Chromatic(
        value=float(level),
        hue_col=family,
        hue_step=float(step),
        chroma=float(saturation),
    )


def construct(*fields: object) -> ConstructResult:
    """Like parse(), but returns a ConstructResult instead of raising on bad input."""
    try:
        return ConstructResult(color=parse(*fields))
    except MunsellValidationError as e:
        return ConstructResult(error=e)


def _parse_hue(hue: object) -> tuple[HueFamily, Decimal] | None:
    """Return (family, step) for a chromatic hue, None for the neutral mark."""
    if hue is None:
        raise MunsellValidationError(ErrorCause.HUE_UNDEFINED, 'Hue is undefined.')
    text = str(hue).upper()
    if text == NEUTRAL_MARK:
        return None

    m = _HUE_RE.fullmatch(text)
    if not m:
        raise MunsellValidationError(ErrorCause.HUE_FORMAT, f'Hue, "{hue}", is not valid format.')
    step = parse_tenth(m.group(1))
    if step is None or step > _TEN:
        raise MunsellValidationError(ErrorCause.HUE_RANGE, f'Number of hue, "{hue}", is greater than 10.0.')

    family = HueFamily(m.group(2))
    # 0 on a family is the same point as 10 on the family before it
    if step == 0:
        return previous_family(family), _TEN
    return family, step


def _parse_value(value: object) -> Decimal:
    if value is None:
        raise MunsellValidationError(ErrorCause.VALUE_UNDEFINED, 'Value is undefined.')
    level = parse_tenth(value)
    if level is None:
        raise MunsellValidationError(ErrorCause.VALUE_FORMAT, 'Value is not a valid number.')
    if level > _TEN:
        raise MunsellValidationError(ErrorCause.VALUE_RANGE, f'Value ({level}) is out of range.')
    return level


def _parse_chroma(chroma: object) -> Decimal:
    if chroma is None:
        raise MunsellValidationError(ErrorCause.CHROMA_UNDEFINED, 'Chroma is undefined.')
    saturation = parse_tenth(chroma)
    if saturation is None:
        raise MunsellValidationError(ErrorCause.CHROMA_FORMAT, 'Chroma is not a valid number.')
    return saturation
