"""Shared types for munsell-model: HueFamily, Neutral, Chromatic, errors, ConstructResult."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class HueFamily(str, Enum):
    """The ten hue families, declared in circular order."""

    R = 'R'
    YR = 'YR'
    Y = 'Y'
    GY = 'GY'
    G = 'G'
    BG = 'BG'
    B = 'B'
    PB = 'PB'
    P = 'P'
    RP = 'RP'


HUE_ORDER: tuple[HueFamily, ...] = tuple(HueFamily)
HUE_NUMBER: dict[str, int] = {family.value: index for index, family in enumerate(HUE_ORDER)}

NEUTRAL_MARK = 'N'


def previous_family(family: HueFamily) -> HueFamily:
    """Circular predecessor of a hue family (R wraps to RP)."""
    return HUE_ORDER[HUE_NUMBER[family.value] - 1]


def format_minimal(number: float | Decimal) -> str:
    """Render a one-decimal number without a trailing '.0' (5.5 -> '5.5', 9.0 -> '9')."""
    text = f'{number:.1f}'
    return text[:-2] if text.endswith('.0') else text


class ErrorCause(str, Enum):
    """Why a colour spec was rejected."""

    HUE_UNDEFINED = 'hue_undefined'
    HUE_FORMAT = 'hue_format'
    HUE_RANGE = 'hue_range'
    VALUE_UNDEFINED = 'value_undefined'
    VALUE_FORMAT = 'value_format'
    VALUE_RANGE = 'value_range'
    CHROMA_UNDEFINED = 'chroma_undefined'
    CHROMA_FORMAT = 'chroma_format'


class MunsellError(ValueError):
    """Base class for every error raised by munsell_model."""


class MunsellValidationError(MunsellError):
    """A colour spec failed validation. `cause` says which field and why."""

    def __init__(self, cause: ErrorCause, message: str):
        super().__init__(message)
        self.cause = cause
        self.message = message


class DegreeError(MunsellError):
    """degree()/undegree() called with input outside their contract."""


@dataclass(frozen=True)
class MunsellColor:
    """A validated Munsell colour. Either a Neutral or a Chromatic, never this base directly.

    Build instances with munsell_model.parse() or munsell_model.construct().
    """

    value: float

    def __post_init__(self) -> None:
        if type(self) is MunsellColor:
            raise TypeError('MunsellColor is abstract; build a Neutral or Chromatic via parse()')

    @property
    def lightness(self) -> float:
        return self.value

    @property
    def saturation(self) -> float | None:
        return self.chroma  # type: ignore[attr-defined]

    @property
    def is_chromatic(self) -> bool:
        return isinstance(self, Chromatic)

    @property
    def is_neutral(self) -> bool:
        return not self.is_chromatic

    @property
    def is_near_black(self) -> bool:
        """True when value <= 1.0, whether or not the colour is chromatic."""
        return self.value <= 1.0

    @property
    def is_near_white(self) -> bool:
        """True when value >= 9.5, whether or not the colour is chromatic."""
        return self.value >= 9.5

    def code(self) -> str:
        raise NotImplementedError

    def degree(self) -> float:
        """Position of this colour's hue on the 0-100 degree scale."""
        from munsell_model.core.degree import degree

        return degree(self)

    def __str__(self) -> str:
        return self.code()


@dataclass(frozen=True)
class Neutral(MunsellColor):
    """A gray: value only, no hue and no chroma."""

    def __post_init__(self) -> None:
        if not 0.0 <= self.value <= 10.0:
            raise ValueError(f'Neutral value {self.value} outside 0.0-10.0')

    @property
    def hue(self) -> str:
        return NEUTRAL_MARK

    @property
    def hue_col(self) -> None:
        return None

    @property
    def hue_step(self) -> None:
        return None

    @property
    def chroma(self) -> None:
        return None

    def code(self) -> str:
        return f'{NEUTRAL_MARK} {self.value:.1f}'


@dataclass(frozen=True)
class Chromatic(MunsellColor):
    """A colour with a hue (family + step) and a positive chroma."""

    hue_col: HueFamily
    hue_step: float
    chroma: float

    def __post_init__(self) -> None:
        if not 0.0 < self.hue_step <= 10.0:
            raise ValueError(f'Hue step {self.hue_step} outside (0.0, 10.0]')
        if not 0.0 < self.value < 10.0:
            raise ValueError(f'Chromatic value {self.value} outside (0.0, 10.0)')
        if not self.chroma > 0.0:
            raise ValueError(f'Chromatic chroma {self.chroma} must be positive')

    @property
    def hue(self) -> str:
        return f'{format_minimal(self.hue_step)}{self.hue_col.value}'

    def code(self) -> str:
        return f'{self.hue} {format_minimal(self.value)}/{format_minimal(self.chroma)}'


@dataclass(frozen=True)
class ConstructResult:
    """Outcome of construct(): exactly one of `color` or `error` is set."""

    color: MunsellColor | None = None
    error: MunsellValidationError | None = None

    def __post_init__(self) -> None:
        if (self.color is None) == (self.error is None):
            raise ValueError('ConstructResult needs exactly one of color or error')

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def cause(self) -> ErrorCause | None:
        return self.error.cause if self.error is not None else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None

    def unwrap(self) -> MunsellColor:
        """Return the colour, or raise the stored validation error."""
        if self.error is not None:
            raise self.error
        return self.color  # type: ignore[return-value]
