"""Circuit - Symbolic targets, constraint emission and witness evaluation."""

from circuit.builder import ArithmeticCircuitBuilder, CircuitBuilder
from circuit.gates import ArithmeticGate
from circuit.partial_products import check_partial_products_circuit
from circuit.target import Target
from circuit.witness import PartialWitness, check_constraints, generate_witness

__all__ = [
    "Target",
    "ArithmeticGate",
    "CircuitBuilder",
    "ArithmeticCircuitBuilder",
    "PartialWitness",
    "generate_witness",
    "check_constraints",
    "check_partial_products_circuit",
]
