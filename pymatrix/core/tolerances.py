"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different kinds of result the
engine produces:
- Structural results (slices, inserts, transposes): bit-exact
- Factorization reconstructions (U*S*V', L*L', inv(A)*A): a few ulps
  scaled by the problem size
- Published reference values quoted to four decimals

Used by the test suite when comparing matrices numerically.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Pure index arithmetic: no floating-point work at all
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Structural operations with bit-identical values',
)

# Reconstruction of a well-conditioned input from its factors
RECONSTRUCTION = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='reconstruction',
    description='Factor products reproduce the input to double precision',
)

# Reference values published with four decimals
FOUR_DECIMALS = ToleranceTier(
    rtol=0.0,
    atol=1e-3,
    name='four_decimals',
    description='Agreement with reference values quoted to 4 decimals',
)
