"""Primitives - Field arithmetic and partial product building blocks."""

from primitives.field import (
    FF,
    FF3,
    GOLDILOCKS_PRIME,
    as_field_array,
    embed,
    ff3,
    ff3_coeffs,
    field_one,
    product,
)
from primitives.partial_products import (
    check_partial_products,
    num_partial_products,
    partial_products,
)

__all__ = [
    # Field
    "FF",
    "FF3",
    "GOLDILOCKS_PRIME",
    "ff3",
    "ff3_coeffs",
    "as_field_array",
    "embed",
    "field_one",
    "product",
    # Partial products
    "partial_products",
    "num_partial_products",
    "check_partial_products",
]
