"""
Exceptions raised by PGA-Axioms.

Geometric "no solution" outcomes are not exceptions; the axiom solver
returns None for those. Exceptions are reserved for operations that are
undefined for their input or deliberately unsupported.
"""


class PGAError(Exception):
    """Base class for all PGA-Axioms errors."""


class NotInvertibleError(PGAError, ArithmeticError):
    """Raised when a multivector has no inverse under the geometric product."""


class UnsupportedAxiomError(PGAError, NotImplementedError):
    """Raised for fold constructions that are not implemented (axiom 6)."""
