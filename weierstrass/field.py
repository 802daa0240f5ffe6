"""
Integer arithmetic modulo m.
The multiplicative inverse is computed with the extended Euclidean algorithm.
"""


class NotInvertibleError(ValueError):
    """Raised by the checked inverse when gcd(value, modulo) != 1."""


def _extended_euclid(value, modulo):
    """Return the terminal remainder and Bezout coefficient of value mod modulo."""
    t, new_t = 0, 1
    r, new_r = modulo, value

    while new_r != 0:
        quotient = r // new_r
        t, new_t = new_t, t - quotient * new_t
        r, new_r = new_r, r - quotient * new_r

    return r, t


def mod_inverse(value, modulo):
    """
    Return t in [0, modulo) such that value * t == 1 (mod modulo).

    No coprimality check is made: for a non-invertible value the result
    is not an inverse. Use checked_mod_inverse to get an error instead.
    """
    _, t = _extended_euclid(value, modulo)
    if t < 0:
        t += modulo
    return t


def checked_mod_inverse(value, modulo):
    """Like mod_inverse, but raise NotInvertibleError unless gcd(value, modulo) == 1."""
    value %= modulo
    r, t = _extended_euclid(value, modulo)
    if r != 1:
        raise NotInvertibleError(f"{value} has no inverse modulo {modulo}")
    if t < 0:
        t += modulo
    return t


class PrimeField:
    """Integers modulo m."""

    def __init__(self, m):
        if m <= 0:
            raise ValueError(f"Modulus must be positive, got {m}")
        self.p = m

    def reduce(self, value):
        """Return the representative of value in [0, p)."""
        return value % self.p

    __call__ = reduce

    def inverse(self, value, checked=False):
        value = self.reduce(value)
        if checked:
            return checked_mod_inverse(value, self.p)
        return mod_inverse(value, self.p)

    def __eq__(self, other):
        return isinstance(other, PrimeField) and self.p == other.p

    def __hash__(self):
        return hash(self.p)

    def __repr__(self):
        return f"GF({self.p})"


def GF(m):
    """Factory function for the integers modulo m."""
    return PrimeField(m)
