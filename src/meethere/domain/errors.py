# domain/errors.py

# remove()/adjust() miss; a normal result, not an error
NOT_FOUND = -1


class InvalidArgument(ValueError):
    """Bad shape or value of an input: empty point set, index out of range,
    underdetermined fit, non-finite coordinate, invalid options."""


class NumericDegeneracy(ArithmeticError):
    """Data-dependent numeric failure, e.g. a singular least-squares system."""
