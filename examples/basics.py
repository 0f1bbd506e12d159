"""
Arithmetic and comparison with fractions
"""
from fractioncalc import Fraction, try_divide


def basics_example():
    half = Fraction(1, 2)
    third = Fraction(1, 3)

    print(f"{half} + {third} = {half + third}")
    print(f"{half} - {third} = {half - third}")
    print(f"{half} * {third} = {half * third}")
    print(f"{half} / {third} = {half / third}")
    print(f"{half} + 2 = {half + 2}")
    print(f"{third} < {half}: {third < half}")
    print(f"Fraction(2, -4) = {Fraction(2, -4)}")

    counter = Fraction(1, 4)
    before = counter.post_increment()
    print(f"post increment: returned {before}, now {counter}")

    res = try_divide(half, Fraction(0, 1))
    print(f"dividing by zero fraction gives ok={res.is_ok()}")


if __name__ == "__main__":
    basics_example()
