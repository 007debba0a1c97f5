"""Symbolic wire handles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Target:
    """Handle to one wire of a circuit under construction.

    Only the builder that issued a target knows what it stands for; everything
    else just passes it around.
    """
    index: int

    def __repr__(self) -> str:
        return f"Target({self.index})"
