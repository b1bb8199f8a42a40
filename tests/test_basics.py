import math

import pytest

from sortlab.basics import (
    SAMPLE_ARRAY,
    birth_probability,
    cosine,
    easter_date,
    factorial,
    main,
    negatives_then_positives,
    positives_reversed,
    power_n,
    to_binary,
    triangle,
)


def test_easter_known_year():
    assert easter_date(2024) == (5, "may")


@pytest.mark.parametrize("year", range(1900, 2100))
def test_easter_range(year):
    day, month = easter_date(year)
    if month == "april":
        assert 4 <= day <= 30
    else:
        assert month == "may"
        assert 1 <= day <= 8


@pytest.mark.parametrize("x,n", [(2.0, 10), (1.5, 3), (3.0, -2), (-2.0, 5), (7.0, 0)])
def test_power_matches_builtin(x, n):
    assert power_n(x, n) == pytest.approx(x**n)


def test_power_zero_exponent():
    assert power_n(123.0, 0) == 1


def test_power_zero_negative_exponent():
    with pytest.raises(ZeroDivisionError):
        power_n(0.0, -1)


@pytest.mark.parametrize("x", [0.0, 0.5, 1.0, -1.0, 2.0, 3.0])
def test_cosine_close_to_math(x):
    assert cosine(x) == pytest.approx(math.cos(x), abs=1e-3)


def test_cosine_tighter_eps_is_closer():
    assert abs(cosine(2.5, 1e-10) - math.cos(2.5)) <= abs(cosine(2.5, 0.1) - math.cos(2.5))


def test_cosine_rejects_bad_eps():
    with pytest.raises(ValueError):
        cosine(1.0, 0)


def test_positives_reversed_stops_at_zero():
    assert positives_reversed([1, -4, 2, 0, 5]) == [2, 1]


def test_positives_reversed_without_zero():
    assert positives_reversed([3, 9]) == [9, 3]


def test_negatives_then_positives_sample():
    result = negatives_then_positives(list(SAMPLE_ARRAY))
    assert result == [-1, -23, -1, -28, 1, 2, 28, 65, 64, 13]


def test_negatives_then_positives_drops_zero():
    assert negatives_then_positives([0, 4, -3, 0]) == [-3, 4]


@pytest.mark.parametrize("x", [1, 2, 5, 13, 255, 1024, 99999])
def test_to_binary_positive(x):
    assert to_binary(x) == format(x, "b")


def test_to_binary_zero_is_empty():
    assert to_binary(0) == ""


def test_triangle_right():
    perimeter, area = triangle(3, 4, 5)
    assert perimeter == 3 + 4 + 5
    assert area == pytest.approx(6.0)


@pytest.mark.parametrize("sides", [(1, 2, 3), (1, 1, 5), (0, 1, 1)])
def test_triangle_impossible(sides):
    with pytest.raises(ValueError):
        triangle(*sides)


@pytest.mark.parametrize("x", range(0, 13))
def test_factorial(x):
    assert factorial(x) == math.factorial(x)


@pytest.mark.parametrize("n", [1, 4, 10])
def test_birth_probability_sums_to_one(n):
    girls = sum(birth_probability(n, m)[0] for m in range(n + 1))
    boys = sum(birth_probability(n, m)[1] for m in range(n + 1))
    assert girls == pytest.approx(1.0)
    assert boys == pytest.approx(1.0)


def test_birth_probability_symmetry():
    assert birth_probability(6, 2)[0] == pytest.approx(birth_probability(6, 4)[1])


def test_birth_probability_invalid():
    with pytest.raises(ValueError):
        birth_probability(3, 5)


def test_main_easter(capsys):
    assert main(["easter", "2024"]) == 0
    assert "The Easter date is 5 may." in capsys.readouterr().out


def test_main_triangle_impossible(capsys):
    main(["triangle", "1", "2", "3"])
    assert "Such a triangle is impossible" in capsys.readouterr().out


def test_main_binary(capsys):
    main(["binary", "10"])
    assert capsys.readouterr().out.strip() == "Binary: " + format(10, "b")