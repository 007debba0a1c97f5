"""Circuit builder interface and a reference arithmetic-gate implementation.

In-circuit checks are written against CircuitBuilder only, so any constraint
system that can multiply many targets, multiply two targets and compute
a*b - c in one constraint can host them.

ArithmeticCircuitBuilder is the reference backend: every operation becomes an
ArithmeticGate over a single field (FF for base-field wires, FF3 for
extension wires), and generate_witness() in circuit.witness evaluates the
result on concrete inputs.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

import galois

from circuit.gates import ArithmeticGate
from circuit.target import Target
from primitives.field import FF, FieldType, field_one


class CircuitBuilder(ABC):
    """Constraint-emission capability consumed by in-circuit checks."""

    @abstractmethod
    def mul_many(self, targets: Sequence[Target]) -> Target:
        """Target holding the product of all targets (ONE when empty)."""
        pass

    @abstractmethod
    def mul(self, a: Target, b: Target) -> Target:
        """Target holding a * b."""
        pass

    @abstractmethod
    def mul_sub(self, a: Target, b: Target, c: Target) -> Target:
        """Target holding a * b - c, emitted as a single constraint."""
        pass


class ArithmeticCircuitBuilder(CircuitBuilder):
    """Builds a list of ArithmeticGates over one galois field.

    Attributes:
        field: Field class every wire lives in
        gates: Emitted gates, in emission order
        constants: Constant targets and their values
        zero_asserts: Targets the circuit constrains to zero
    """

    def __init__(self, field: FieldType = FF):
        self.field = field
        self.gates: List[ArithmeticGate] = []
        self.constants: Dict[Target, galois.FieldArray] = {}
        self.zero_asserts: List[Target] = []
        self._num_targets = 0
        self._constant_targets: Dict[int, Target] = {}

    @property
    def num_targets(self) -> int:
        return self._num_targets

    @property
    def num_gates(self) -> int:
        return len(self.gates)

    # --- Targets ---

    def add_virtual_target(self) -> Target:
        """Fresh target with no constraint attached."""
        target = Target(self._num_targets)
        self._num_targets += 1
        return target

    def add_virtual_targets(self, n: int) -> List[Target]:
        return [self.add_virtual_target() for _ in range(n)]

    def constant(self, value) -> Target:
        """Target fixed to `value`; one target per distinct value."""
        value = self.field(value)
        key = int(value)
        if key not in self._constant_targets:
            target = self.add_virtual_target()
            self._constant_targets[key] = target
            self.constants[target] = value
        return self._constant_targets[key]

    def zero(self) -> Target:
        return self.constant(0)

    def one(self) -> Target:
        return self.constant(1)

    def _check_target(self, target: Target) -> None:
        if not isinstance(target, Target) or not 0 <= target.index < self._num_targets:
            raise ValueError(f"{target!r} was not issued by this builder")

    # --- Gates ---

    def arithmetic(self, const_0, const_1, a: Target, b: Target, c: Target) -> Target:
        """Target holding const_0 * a * b + const_1 * c."""
        for t in (a, b, c):
            self._check_target(t)
        output = self.add_virtual_target()
        self.gates.append(ArithmeticGate(
            const_0=self.field(const_0),
            const_1=self.field(const_1),
            multiplicand_0=a,
            multiplicand_1=b,
            addend=c,
            output=output,
        ))
        return output

    def mul(self, a: Target, b: Target) -> Target:
        return self.arithmetic(1, 0, a, b, self.zero())

    def mul_sub(self, a: Target, b: Target, c: Target) -> Target:
        return self.arithmetic(1, -field_one(self.field), a, b, c)

    def mul_many(self, targets: Sequence[Target]) -> Target:
        if len(targets) == 0:
            return self.one()
        acc = targets[0]
        self._check_target(acc)
        for t in targets[1:]:
            acc = self.mul(acc, t)
        return acc

    def assert_zero(self, target: Target) -> None:
        """Constrain `target` to the zero wire."""
        self._check_target(target)
        self.zero_asserts.append(target)
