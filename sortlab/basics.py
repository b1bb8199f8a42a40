"""Introductory numeric tasks: Easter date, powers, cosine series, recursion and probability."""

from __future__ import annotations

import argparse
import math

SAMPLE_ARRAY = (1, 2, 28, -28, 65, 64, -1, 13, -23, -1)
GIRL_PROBABILITY = 0.45


def easter_date(year):
    """Return the Orthodox Easter date of year as (day, month), month being "april" or "may"."""
    a = year % 19
    b = year % 4
    c = year % 7
    d = (19 * a + 15) % 30
    e = (2 * b + 4 * c + 6 * d + 6) % 7
    f = d + e
    if f > 26:
        return f - 26, "may"
    return f + 4, "april"


def power_n(x, n):
    """Return x raised to the integer power n by repeated multiplication or division."""
    result = 1.0
    for _ in range(abs(n)):
        result = result * x if n > 0 else result / x
    return result


def cosine(x, eps=0.0001):
    """Return cos(x) summed from its Taylor series until a term changes the sum by at most eps."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    result = 1.0
    i = 1
    fact = 2
    while True:
        previous = result
        result += (-1) ** i * x ** (2 * i) / fact
        fact *= (2 * i + 1) * (2 * i + 2)
        i += 1
        if abs(previous - result) <= eps:
            return result


def positives_reversed(numbers):
    """Read numbers up to the first zero and return the positive ones in reverse order."""
    taken = []
    for number in numbers:
        if number == 0:
            break
        taken.append(number)
    return [number for number in reversed(taken) if number > 0]


def negatives_then_positives(values):
    """Return the negative values from last to first, then the positive ones from first to last."""
    return [v for v in reversed(values) if v < 0] + [v for v in values if v > 0]


def to_binary(x):
    """Return the binary digits of x, most significant first; zero gives an empty string.

    Negative numbers keep the sign on every digit, as truncating division produces.
    """
    digits = []
    while x != 0:
        quotient = -(-x // 2) if x < 0 else x // 2
        digits.append(str(x - 2 * quotient))
        x = quotient
    return "".join(reversed(digits))


def triangle(a, b, c):
    """Return (perimeter, area) of the triangle with sides a, b, c.

    Raises ValueError when no such triangle exists.
    """
    if a + b <= c or a + c <= b or b + c <= a:
        raise ValueError("such a triangle is impossible")
    p = a + b + c
    half = p / 2
    return p, math.sqrt(half * (half - a) * (half - b) * (half - c))


def factorial(x):
    """Return x! (1 for x below 1)."""
    return math.prod(range(1, x + 1))


def birth_probability(n, m):
    """Return the probabilities that among n children exactly m are girls and m are boys."""
    if n < 0 or not 0 <= m <= n:
        raise ValueError("m must lie between 0 and n")
    p = GIRL_PROBABILITY
    q = 1 - p
    ways = math.comb(n, m)
    return ways * p**m * q ** (n - m), ways * q**m * p ** (n - m)


def main(argv=None):
    """Run one of the introductory tasks chosen on the command line."""
    parser = argparse.ArgumentParser(description="Introductory numeric tasks.")
    sub = parser.add_subparsers(dest="task", required=True)
    sub.add_parser("easter").add_argument("year", type=int)
    power = sub.add_parser("power")
    power.add_argument("x", type=float)
    power.add_argument("n", type=int)
    sub.add_parser("cos").add_argument("x", type=float)
    sub.add_parser("positives").add_argument("numbers", type=int, nargs="*")
    sub.add_parser("order")
    sub.add_parser("binary").add_argument("x", type=int)
    tri = sub.add_parser("triangle")
    for side in ("a", "b", "c"):
        tri.add_argument(side, type=float)
    birth = sub.add_parser("birth")
    birth.add_argument("n", type=int)
    birth.add_argument("m", type=int)
    args = parser.parse_args(argv)

    if args.task == "easter":
        day, month = easter_date(args.year)
        print(f"The Easter date is {day} {month}.")
    elif args.task == "power":
        try:
            value = power_n(args.x, args.n)
        except ZeroDivisionError:
            parser.error("zero cannot be raised to a negative power")
        print(f"x to the power n = {value:f}")
    elif args.task == "cos":
        print(f"Cosinus calculated using Taylor series:\n{cosine(args.x):f}")
        print(f"Cosinus calculated by standard function:\n{math.cos(args.x):f}")
    elif args.task == "positives":
        print(" ".join(str(v) for v in positives_reversed(args.numbers)))
    elif args.task == "order":
        print("Array:" + "".join(f"{v} " for v in SAMPLE_ARRAY))
        print("Output: " + "".join(f"{v} " for v in negatives_then_positives(SAMPLE_ARRAY)))
    elif args.task == "binary":
        print(f"Binary: {to_binary(args.x)}")
    elif args.task == "triangle":
        try:
            perimeter, area = triangle(args.a, args.b, args.c)
        except ValueError:
            print("Such a triangle is impossible")
        else:
            print(f"The perimetr is: {perimeter:.2f}, the area is: {area:.2f}")
    else:
        try:
            girls, boys = birth_probability(args.n, args.m)
        except ValueError as exc:
            parser.error(str(exc))
        print(
            f"The probability that among {args.n} children there will be\n"
            f" {args.m} girls: {girls:.3f}\t{args.m} boys: {boys:.3f}"
        )
    return 0