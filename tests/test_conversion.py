import pytest

from ftkit.conversion import atoi, itoa

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42xyz") == -42


def test_atoi_accepts_plus_sign():
    assert atoi("+7") == 7


def test_atoi_rejects_double_sign():
    assert atoi("+-7") == 0


def test_atoi_without_digits_is_zero():
    assert atoi("") == atoi("abc") == atoi("   ") == 0


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


def test_atoi_wraps_to_32_bits():
    assert atoi(str(2**32 + 5)) == 5
    assert atoi(str(INT_MAX + 1)) == INT_MIN


def test_atoi_requires_string():
    with pytest.raises(TypeError):
        atoi(None)


@pytest.mark.parametrize("n", [0, 1, -1, 9, -10, 12345, INT_MIN, INT_MAX])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum():
    assert itoa(INT_MIN) == "-2147483648"


def test_itoa_has_no_padding():
    text = itoa(-305)
    assert text.startswith("-")
    assert text.lstrip("-").isdigit()
    assert not text.lstrip("-").startswith("0")


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


@pytest.mark.parametrize("bad", ["12", 1.5, True, None])
def test_itoa_rejects_non_integers(bad):
    with pytest.raises(TypeError):
        itoa(bad)