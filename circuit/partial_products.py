"""In-circuit partial product check.

Mirrors primitives.partial_products.check_partial_products over targets: each
chunk emits two mul_many products, one mul and one fused mul_sub, and yields a
residual target the caller constrains to zero.
"""

import logging
from typing import List, Sequence

from circuit.builder import CircuitBuilder
from circuit.target import Target
from primitives.partial_products import num_partial_products

logger = logging.getLogger(__name__)


def check_partial_products_circuit(
    builder: CircuitBuilder,
    numerators: Sequence[Target],
    denominators: Sequence[Target],
    partials: Sequence[Target],
    acc: Target,
    max_degree: int,
) -> List[Target]:
    """Emit the chunk relation for every complete chunk.

    residual_i = acc_i * prod(nume_chunk_i) - partials[i] * prod(deno_chunk_i)

    Raises:
        AssertionError: If max_degree <= 1
        ValueError: On a numerator/denominator or partials length mismatch
    """
    assert max_degree > 1, "max_degree must be greater than 1"
    if len(numerators) != len(denominators):
        raise ValueError(
            f"Dimension mismatch: {len(numerators)} numerators vs {len(denominators)} denominators"
        )
    num_chunks, _ = num_partial_products(len(numerators), max_degree)
    if len(partials) != num_chunks:
        raise ValueError(f"Dimension mismatch: expected {num_chunks} partial products, got {len(partials)}")

    residuals = []
    for i in range(num_chunks):
        chunk = slice(i * max_degree, (i + 1) * max_degree)
        nume_product = builder.mul_many(numerators[chunk])
        deno_product = builder.mul_many(denominators[chunk])
        new_acc = partials[i]
        new_acc_deno = builder.mul(new_acc, deno_product)
        # acc * nume_product == new_acc * deno_product
        residuals.append(builder.mul_sub(acc, nume_product, new_acc_deno))
        acc = new_acc

    logger.debug("emitted %d partial product residuals (max_degree=%d)", num_chunks, max_degree)
    return residuals
