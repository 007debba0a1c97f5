"""Concrete values for circuit targets."""

import logging
from typing import Dict, List, Mapping, Sequence

import galois

from circuit.builder import ArithmeticCircuitBuilder
from circuit.target import Target
from primitives.field import FF, FieldType, as_field_array

logger = logging.getLogger(__name__)


class PartialWitness:
    """Assignment of field values to (some of) a circuit's targets."""

    def __init__(self, field: FieldType = FF):
        self.field = field
        self._values: Dict[Target, galois.FieldArray] = {}

    def __contains__(self, target: Target) -> bool:
        return target in self._values

    def __len__(self) -> int:
        return len(self._values)

    def set_target(self, target: Target, value) -> None:
        """Assign `value` to `target`.

        Raises:
            ValueError: If target already holds a different value
        """
        value = self.field(value)
        existing = self._values.get(target)
        if existing is not None and existing != value:
            raise ValueError(f"Conflicting values for {target!r}: {existing} vs {value}")
        self._values[target] = value

    def set_targets(self, targets: Sequence[Target], values) -> None:
        if len(targets) != len(values):
            raise ValueError(f"Dimension mismatch: {len(targets)} targets vs {len(values)} values")
        for t, v in zip(targets, values):
            self.set_target(t, v)

    def get_target(self, target: Target) -> galois.FieldArray:
        try:
            return self._values[target]
        except KeyError:
            raise KeyError(f"{target!r} has no witness value") from None

    def get_targets(self, targets: Sequence[Target]) -> galois.FieldArray:
        return as_field_array([self.get_target(t) for t in targets], self.field)


def generate_witness(
    builder: ArithmeticCircuitBuilder, inputs: Mapping[Target, object]
) -> PartialWitness:
    """Evaluate every gate of `builder` on the given input assignment.

    Gates are evaluated in emission order, which is a topological order since a
    gate only references targets that existed when it was emitted.
    """
    witness = PartialWitness(builder.field)
    for target, value in inputs.items():
        witness.set_target(target, value)
    for target, value in builder.constants.items():
        witness.set_target(target, value)
    for gate in builder.gates:
        witness.set_target(gate.output, gate.evaluate(witness))
    logger.debug("generated witness: %d targets, %d gates", len(witness), builder.num_gates)
    return witness


def check_constraints(builder: ArithmeticCircuitBuilder, witness: PartialWitness) -> List[Target]:
    """Targets whose constraint fails under `witness`.

    Returns gate outputs that disagree with their gate, followed by
    zero-asserted targets holding a non-zero value. Empty means satisfied.
    """
    failed = [
        gate.output
        for gate in builder.gates
        if witness.get_target(gate.output) != gate.evaluate(witness)
    ]
    failed.extend(t for t in builder.zero_asserts if witness.get_target(t) != 0)
    return failed
