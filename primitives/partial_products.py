"""Chunked partial products for degree-bounded grand-product arguments.

A grand product over n factors cannot be checked by one constraint when the
constraint system caps the number of multiplicands at `max_degree`. Instead the
running product is materialized once per chunk of `max_degree` factors, and each
chunk is checked against its neighbour:

    partials[i] * prod(deno_chunk_i) == acc_i * prod(nume_chunk_i)
    acc_0 = acc,  acc_{i+1} = partials[i]

Only complete chunks are folded. The trailing n mod max_degree elements are
left to the caller, who combines them with the last partial product:

    partials[-1] * product(values[consumed:]) == product(values)

All routines work for FF and FF3 alike and return arrays of the input's field.
"""

import logging
from typing import Tuple

import galois

from primitives.field import FieldValues, as_field_array, embed, field_one

logger = logging.getLogger(__name__)


def num_partial_products(n: int, max_degree: int) -> Tuple[int, int]:
    """Return (num_chunks, consumed) for an input of length n.

    num_chunks is the length of partial_products() on such an input, consumed
    is the number of leading elements it folds.
    """
    assert max_degree > 1, "max_degree must be greater than 1"
    num_chunks = n // max_degree
    return num_chunks, num_chunks * max_degree


def _chunk_products(values: galois.FieldArray, max_degree: int, num_chunks: int) -> galois.FieldArray:
    """Product of each complete chunk, computed column-wise over all chunks at once."""
    chunks = values[: num_chunks * max_degree].reshape(num_chunks, max_degree)
    prods = chunks[:, 0]
    for j in range(1, max_degree):
        prods = prods * chunks[:, j]
    return prods


def partial_products(values: FieldValues, max_degree: int) -> galois.FieldArray:
    """Running product of `values` sampled after every complete chunk.

    result[i] = prod(values[0:(i+1)*max_degree]), len(result) = n // max_degree.
    """
    assert max_degree > 1, "max_degree must be greater than 1"
    values = as_field_array(values)
    field = type(values)
    num_chunks, _ = num_partial_products(len(values), max_degree)

    chunk_prods = _chunk_products(values, max_degree, num_chunks)

    # Sequential fold: each partial depends on the previous one
    result = field.Zeros(num_chunks)
    acc = field_one(field)
    for i in range(num_chunks):
        acc = acc * chunk_prods[i]
        result[i] = acc
    return result


def check_partial_products(
    numerators: FieldValues,
    denominators: FieldValues,
    partials: FieldValues,
    acc,
    max_degree: int,
) -> galois.FieldArray:
    """Residuals of the chunk relation, one per chunk.

    residual[i] = acc_i * prod(nume_chunk_i) - partials[i] * prod(deno_chunk_i)

    acc_i is the *claimed* partial of the previous chunk, so a wrong claim shows
    up in the residuals of its own chunk and the next one only. All residuals
    are zero iff the claimed partials are consistent.

    Raises:
        AssertionError: If max_degree <= 1
        ValueError: If numerators and denominators differ in length, or the
            number of partials is not n // max_degree
    """
    assert max_degree > 1, "max_degree must be greater than 1"
    numerators = as_field_array(numerators)
    field = type(numerators)
    denominators = as_field_array(denominators, field)
    partials = as_field_array(partials, field)

    if len(numerators) != len(denominators):
        raise ValueError(
            f"Dimension mismatch: {len(numerators)} numerators vs {len(denominators)} denominators"
        )
    num_chunks, _ = num_partial_products(len(numerators), max_degree)
    if len(partials) != num_chunks:
        raise ValueError(f"Dimension mismatch: expected {num_chunks} partial products, got {len(partials)}")

    nume_prods = _chunk_products(numerators, max_degree, num_chunks)
    deno_prods = _chunk_products(denominators, max_degree, num_chunks)

    # Accumulator entering each chunk: acc, then the claimed partials shifted by one
    accs = field.Zeros(num_chunks)
    if num_chunks > 0:
        accs[0] = embed(acc, field)
        accs[1:] = partials[:-1]

    residuals = accs * nume_prods - partials * deno_prods
    logger.debug("checked %d partial products (max_degree=%d)", num_chunks, max_degree)
    return residuals
