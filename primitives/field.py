"""Goldilocks field GF(p) and cubic extension GF(p^3).

Uses galois library for all field arithmetic. FF and FF3 are the field types;
every routine in this package accepts either one and keeps the caller's field.
"""

from typing import List, Optional, Sequence, Type, Union

import galois

# --- Field Construction ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) - Goldilocks prime field."""

# x^3 - x - 1, galois wants descending coefficients [x^3, x^2, x^1, x^0]
_IRR_POLY = galois.Poly([1, 0, GOLDILOCKS_PRIME - 1, GOLDILOCKS_PRIME - 1], field=FF)

FF3 = galois.GF(GOLDILOCKS_PRIME**3, irreducible_poly=_IRR_POLY)
"""Cubic extension field GF(p^3) with irreducible polynomial x^3 - x - 1."""

# Type aliases
FieldType = Type[galois.FieldArray]
FieldValues = Union[galois.FieldArray, Sequence[galois.FieldArray]]


# --- Coefficient Order Conversion ---
# Galois uses descending order [a2, a1, a0], we use ascending [a0, a1, a2].


def ff3(coeffs: List[int]) -> FF3:
    """Construct FF3 element from ascending-order coefficients [a0, a1, a2]."""
    return FF3.Vector(coeffs[::-1])


def ff3_coeffs(elem: FF3) -> List[int]:
    """Extract ascending-order coefficients [a0, a1, a2] from FF3 element."""
    return [int(c) for c in elem.vector()[::-1]]


# --- Field Capability Helpers ---


def _is_subfield(src: FieldType, field: FieldType) -> bool:
    return src is not field and src.degree == 1 and src.characteristic == field.characteristic


def embed(value, field: FieldType) -> galois.FieldArray:
    """Return `value` as an element of `field`.

    Integers and elements of `field` convert directly; elements of the prime
    subfield (FF inside FF3) are lifted to constant polynomials.
    """
    if isinstance(value, galois.FieldArray) and _is_subfield(type(value), field):
        return field(int(value))
    return field(value)


def as_field_array(values: FieldValues, field: Optional[FieldType] = None) -> galois.FieldArray:
    """Return values as a 1-D galois array.

    Lists take the field of their first element when it is a galois scalar,
    otherwise `field`, then FF (so plain integer lists land in FF). When
    `field` is given, prime-subfield arrays and elements are lifted into it.
    Any other galois array passes through untouched.
    """
    if isinstance(values, galois.FieldArray):
        if field is not None and _is_subfield(type(values), field):
            return field([int(v) for v in values]) if len(values) > 0 else field.Zeros(0)
        return values
    if field is None:
        if len(values) > 0 and isinstance(values[0], galois.FieldArray):
            field = type(values[0])
        else:
            field = FF
    if len(values) == 0:
        return field.Zeros(0)
    return field([embed(v, field) for v in values])


def field_one(field: FieldType) -> galois.FieldArray:
    """Multiplicative identity of `field`."""
    return field(1)


def product(values: FieldValues, field: Optional[FieldType] = None) -> galois.FieldArray:
    """Product of all elements, ONE for an empty sequence."""
    arr = as_field_array(values, field)
    acc = field_one(type(arr))
    for v in arr:
        acc = acc * v
    return acc
