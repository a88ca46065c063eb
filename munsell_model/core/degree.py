"""Conversion between hue codes and the 0-100 degree scale.

The hue circle is laid out as R=0-10, YR=10-20, ..., RP=90-100, with
10RP sitting on 0 rather than 100. Both functions expect trusted input:
malformed hues or numbers raise instead of returning an error result.
"""

from munsell_model.core.munsell_parser import parse, parse_tenth
from munsell_model.core.types import (
    HUE_NUMBER,
    HUE_ORDER,
    Chromatic,
    DegreeError,
    HueFamily,
    MunsellColor,
    format_minimal,
)

_FULL_CIRCLE = 100


def degree(hue: str | MunsellColor) -> float:
    """Serial hue number of a chromatic hue code or colour.

    degree('10RP') == 0, degree('10R') == 10, degree('5YR') == 15, ...,
    degree('9.9RP') == 99.9.

    A hue string is validated like a constructor call; MunsellValidationError
    propagates. Neutral colours have no hue and raise DegreeError.
    """
    color = hue if isinstance(hue, MunsellColor) else parse(hue, 1, 1)
    if not isinstance(color, Chromatic):
        raise DegreeError(f'Neutral colour "{color.code()}" has no hue degree.')
    if color.hue_col is HueFamily.RP and color.hue_step == 10.0:
        return 0.0
    return round(HUE_NUMBER[color.hue_col.value] * 10 + color.hue_step, 1)


def undegree(number: int | float | str) -> str:
    """Hue code for a serial hue number in 0.0-100.0.

    Both 0 and 100 close the circle at '10RP'. Exact multiples of ten land on
    step 10 of the lower family, so undegree(10) == '10R', never '0YR'.
    """
    num = parse_tenth(number)
    if num is None:
        raise DegreeError(f'Argument, {number!r}, is not a valid number.')
    if num > _FULL_CIRCLE:
        raise DegreeError(f'Given number ({num}) is out of range (<=100).')
    if num == 0 or num == _FULL_CIRCLE:
        return f'10{HueFamily.RP.value}'

    index, step = divmod(num, 10)
    index = int(index)
    if step == 0:
        index, step = index - 1, 10
    return f'{format_minimal(step)}{HUE_ORDER[index].value}'
