"""Arithmetic gate: the only constraint shape the reference builder emits."""

from dataclasses import dataclass

import galois

from circuit.target import Target


@dataclass(frozen=True)
class ArithmeticGate:
    """One degree-2 constraint.

        output = const_0 * multiplicand_0 * multiplicand_1 + const_1 * addend

    Attributes:
        const_0: Coefficient of the product term
        const_1: Coefficient of the addend
        multiplicand_0: First factor
        multiplicand_1: Second factor
        addend: Linear term
        output: Target constrained to hold the result
    """
    const_0: galois.FieldArray
    const_1: galois.FieldArray
    multiplicand_0: Target
    multiplicand_1: Target
    addend: Target
    output: Target

    def evaluate(self, witness) -> galois.FieldArray:
        """Compute the output value from the witness values of the inputs."""
        m0 = witness.get_target(self.multiplicand_0)
        m1 = witness.get_target(self.multiplicand_1)
        c = witness.get_target(self.addend)
        return self.const_0 * m0 * m1 + self.const_1 * c
