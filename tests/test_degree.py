"""Tests for munsell_model.core.degree — hue code <-> 0-100 degree scale."""

from decimal import Decimal

import pytest
from munsell_model.core.degree import degree, undegree
from munsell_model.core.munsell_parser import parse
from munsell_model.core.types import HUE_ORDER, DegreeError, ErrorCause, MunsellValidationError, format_minimal


class TestDegree:
    def test_first_family(self) -> None:
        assert degree('5R') == 5.0

    def test_ten_r(self) -> None:
        assert degree('10R') == 10.0

    def test_later_family(self) -> None:
        assert degree('2.5PB') == 72.5

    def test_ten_rp_is_origin(self) -> None:
        assert degree('10RP') == 0

    def test_last_step_before_origin(self) -> None:
        assert degree('9.9RP') == 99.9

    def test_lowercase(self) -> None:
        assert degree('5yr') == 15.0

    def test_zero_step_rolls_back(self) -> None:
        # 0YR is 10R, and 0R is 10RP
        assert degree('0YR') == 10.0
        assert degree('0R') == 0

    def test_colour_instance(self) -> None:
        assert degree(parse('7PB 4/10')) == 77.0

    def test_method_form(self) -> None:
        assert parse('7PB 4/10').degree() == 77.0

    def test_malformed_hue_propagates(self) -> None:
        with pytest.raises(MunsellValidationError) as excinfo:
            degree('BooR')
        assert excinfo.value.cause is ErrorCause.HUE_FORMAT

    def test_out_of_range_hue_propagates(self) -> None:
        with pytest.raises(MunsellValidationError):
            degree('12R')

    def test_neutral_mark(self) -> None:
        with pytest.raises(DegreeError):
            degree('N')

    def test_neutral_colour(self) -> None:
        with pytest.raises(DegreeError, match='N 4.5'):
            parse('N 4.5').degree()

    def test_arity(self) -> None:
        with pytest.raises(TypeError):
            degree()  # type: ignore[call-arg]
        with pytest.raises(TypeError):
            degree('5R', '5Y')  # type: ignore[call-arg]

    def test_method_arity(self) -> None:
        with pytest.raises(TypeError):
            parse('5R 4/6').degree('5Y')  # type: ignore[call-arg]


class TestUndegree:
    def test_first_family(self) -> None:
        assert undegree(5) == '5R'

    def test_fractional(self) -> None:
        assert undegree(72.5) == '2.5PB'

    def test_zero_closes_circle(self) -> None:
        assert undegree(0) == '10RP'

    def test_hundred_closes_circle(self) -> None:
        assert undegree(100) == '10RP'

    def test_multiple_of_ten_stays_on_lower_family(self) -> None:
        assert undegree(10) == '10R'
        assert undegree(90) == '10P'

    def test_rounds_to_one_decimal(self) -> None:
        assert undegree(15.04) == '5YR'
        assert undegree('15.05') == '5.1YR'

    def test_rounding_up_to_hundred(self) -> None:
        assert undegree(99.96) == '10RP'

    def test_accepts_strings_and_decimals(self) -> None:
        assert undegree('33.3') == '3.3GY'
        assert undegree(Decimal('33.3')) == '3.3GY'

    def test_out_of_range(self) -> None:
        with pytest.raises(DegreeError, match='out of range'):
            undegree(100.1)

    def test_huge_number_is_out_of_range(self) -> None:
        with pytest.raises(DegreeError, match='out of range'):
            undegree('1' + '0' * 40)
        with pytest.raises(DegreeError, match='out of range'):
            undegree(1e30)

    @pytest.mark.parametrize('bad', ['abc', '-5', -5, None, '1e2', float('nan'), True])
    def test_not_a_number(self, bad: object) -> None:
        with pytest.raises(DegreeError, match='not a valid number'):
            undegree(bad)  # type: ignore[arg-type]

    def test_arity(self) -> None:
        with pytest.raises(TypeError):
            undegree()  # type: ignore[call-arg]
        with pytest.raises(TypeError):
            undegree(1, 2)  # type: ignore[call-arg]


class TestRoundTrip:
    def test_degree_of_undegree(self) -> None:
        for tenths in range(1000):
            d = tenths / 10
            assert degree(undegree(d)) == d, d

    def test_undegree_of_degree(self) -> None:
        for family in HUE_ORDER:
            for tenths in range(1, 101):
                code = f'{format_minimal(Decimal(tenths) / 10)}{family.value}'
                assert undegree(degree(code)) == code, code
