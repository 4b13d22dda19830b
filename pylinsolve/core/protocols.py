"""
Core protocols for pylinsolve.

These define structural interfaces that domain-specific implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal typing)
to allow flexibility while maintaining type safety.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated domain design and produce
    a domain-specific parameter payload.

    Backends are stateless: all configuration is passed at construction
    time. This makes them easy to test and swap, and safe to share between
    concurrent calls.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gaussian'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated domain design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent solution (singularity, overflow)
        """
        ...
