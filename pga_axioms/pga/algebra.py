"""
Projective Geometric Algebra (PGA) implementation for G(2,0,1).

2D PGA is an algebra with 8 basis elements organized by grade:
- Grade 0 (scalar): 1
- Grade 1 (vectors/lines): e₀, e₁, e₂
- Grade 2 (bivectors/points): e₀₁, e₂₀, e₁₂
- Grade 3 (pseudoscalar): e₀₁₂

The metric signature is (2,0,1) meaning:
- e₁² = e₂² = +1 (Euclidean)
- e₀² = 0 (degenerate/null direction)

Component ordering:
[s, e0, e1, e2, e01, e20, e12, e012]
 0   1   2   3   4    5    6    7

Note that the dual in 2D PGA is a plain reversal of this ordering, so
dual(dual(M)) = M exactly.
"""

from __future__ import annotations
from typing import Union, Optional, Tuple
import torch

from ..core.constants import BASIS_COUNT, BASIS_ELEMENTS, DEFAULT_EPS
from ..core.exceptions import NotInvertibleError


# Component indices for each basis element
IDX_S = 0      # Scalar (grade 0)
IDX_E0 = 1     # e₀
IDX_E1 = 2     # e₁
IDX_E2 = 3     # e₂
IDX_E01 = 4    # e₀₁
IDX_E20 = 5    # e₂₀
IDX_E12 = 6    # e₁₂
IDX_E012 = 7   # e₀₁₂

# Grade masks for extraction
GRADE_0_MASK = [IDX_S]
GRADE_1_MASK = [IDX_E0, IDX_E1, IDX_E2]
GRADE_2_MASK = [IDX_E01, IDX_E20, IDX_E12]
GRADE_3_MASK = [IDX_E012]

GRADE_MASKS = (GRADE_0_MASK, GRADE_1_MASK, GRADE_2_MASK, GRADE_3_MASK)

# Grade of each basis blade, indexed like the components
BLADE_GRADES = (0, 1, 1, 1, 2, 2, 2, 3)

# Reversion sign table: grade k has sign (-1)^(k*(k-1)/2)
# Grade 0: +1, Grade 1: +1, Grade 2: -1, Grade 3: -1
REVERSION_SIGNS = torch.tensor([
    1,   # s
    1,   # e0
    1,   # e1
    1,   # e2
    -1,  # e01
    -1,  # e20
    -1,  # e12
    -1,  # e012
], dtype=torch.float32)

# Grade involution sign table: odd grades get negated
INVOLUTION_SIGNS = torch.tensor([
    1,   # s
    -1,  # e0
    -1,  # e1
    -1,  # e2
    1,   # e01
    1,   # e20
    1,   # e12
    -1,  # e012
], dtype=torch.float32)

# Clifford conjugation: reversion + grade involution, (-1)^(k*(k+1)/2)
CONJUGATION_SIGNS = REVERSION_SIGNS * INVOLUTION_SIGNS


def _build_cayley_table() -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Build the Cayley table for the geometric product in 2D PGA.

    The Cayley table defines: e_i * e_j = sign * e_k

    Returns:
        signs: (8, 8) tensor of signs (+1, -1, or 0)
        indices: (8, 8) tensor of result indices
    """
    signs = torch.zeros(BASIS_COUNT, BASIS_COUNT, dtype=torch.float32)
    indices = torch.zeros(BASIS_COUNT, BASIS_COUNT, dtype=torch.long)

    # Basis element names for reference
    # 0:s, 1:e0, 2:e1, 3:e2, 4:e01, 5:e20, 6:e12, 7:e012

    # The metric: e0^2 = 0, e1^2 = e2^2 = 1
    # Anti-commutativity: ei*ej = -ej*ei for i != j

    # Format: (i, j, sign, result_idx)
    # Checked against scripts/verify_cayley.py
    products = [
        # Row 0: scalar (1) products
        (0, 0, 1, 0), (0, 1, 1, 1), (0, 2, 1, 2), (0, 3, 1, 3),
        (0, 4, 1, 4), (0, 5, 1, 5), (0, 6, 1, 6), (0, 7, 1, 7),
        # Row 1: e0 products (e0² = 0)
        (1, 0, 1, 1), (1, 1, 0, 0), (1, 2, 1, 4), (1, 3, -1, 5),
        (1, 4, 0, 0), (1, 5, 0, 0), (1, 6, 1, 7), (1, 7, 0, 0),
        # Row 2: e1 products (e1² = 1)
        (2, 0, 1, 2), (2, 1, -1, 4), (2, 2, 1, 0), (2, 3, 1, 6),
        (2, 4, -1, 1), (2, 5, 1, 7), (2, 6, 1, 3), (2, 7, 1, 5),
        # Row 3: e2 products (e2² = 1)
        (3, 0, 1, 3), (3, 1, 1, 5), (3, 2, -1, 6), (3, 3, 1, 0),
        (3, 4, 1, 7), (3, 5, 1, 1), (3, 6, -1, 2), (3, 7, 1, 4),
        # Row 4: e01 products (e01² = 0 because e0² = 0)
        (4, 0, 1, 4), (4, 1, 0, 0), (4, 2, 1, 1), (4, 3, 1, 7),
        (4, 4, 0, 0), (4, 5, 0, 0), (4, 6, -1, 5), (4, 7, 0, 0),
        # Row 5: e20 products (e20² = 0, note: e20 = e2∧e0 = -e02)
        (5, 0, 1, 5), (5, 1, 0, 0), (5, 2, 1, 7), (5, 3, -1, 1),
        (5, 4, 0, 0), (5, 5, 0, 0), (5, 6, 1, 4), (5, 7, 0, 0),
        # Row 6: e12 products (e12² = -1)
        (6, 0, 1, 6), (6, 1, 1, 7), (6, 2, -1, 3), (6, 3, 1, 2),
        (6, 4, 1, 5), (6, 5, -1, 4), (6, 6, -1, 0), (6, 7, -1, 1),
        # Row 7: e012 products (e012² = 0, PGA pseudoscalar)
        (7, 0, 1, 7), (7, 1, 0, 0), (7, 2, 1, 5), (7, 3, 1, 4),
        (7, 4, 0, 0), (7, 5, 0, 0), (7, 6, -1, 1), (7, 7, 0, 0),
    ]

    for i, j, s, k in products:
        signs[i, j] = s
        indices[i, j] = k

    return signs, indices


def _build_product_tensor(grade_filter=None) -> torch.Tensor:
    """
    Expand the Cayley table into a dense (8, 8, 8) product tensor.

    Entry [i, j, k] is the coefficient of e_k in e_i * e_j. When
    ``grade_filter`` is given, only the terms for which
    ``grade_filter(grade_i, grade_j, grade_k)`` holds are kept.
    """
    tensor = torch.zeros(BASIS_COUNT, BASIS_COUNT, BASIS_COUNT, dtype=torch.float32)
    for i in range(BASIS_COUNT):
        for j in range(BASIS_COUNT):
            sign = CAYLEY_SIGNS[i, j].item()
            if sign == 0:
                continue
            k = CAYLEY_INDICES[i, j].item()
            if grade_filter is not None and not grade_filter(
                BLADE_GRADES[i], BLADE_GRADES[j], BLADE_GRADES[k]
            ):
                continue
            tensor[i, j, k] = sign
    return tensor


# Build Cayley tables at module load time
CAYLEY_SIGNS, CAYLEY_INDICES = _build_cayley_table()

GEOMETRIC_PRODUCT_TENSOR = _build_product_tensor()
# Outer product keeps the grade-raising part: grade(k) = grade(i) + grade(j)
OUTER_PRODUCT_TENSOR = _build_product_tensor(lambda r, s, k: k == r + s)
# Symmetric inner product keeps the |r - s| part
INNER_PRODUCT_TENSOR = _build_product_tensor(lambda r, s, k: k == abs(r - s))


def _bilinear(a: torch.Tensor, b: torch.Tensor, table: torch.Tensor) -> torch.Tensor:
    """Apply a bilinear product table to two broadcastable (..., 8) tensors."""
    pairs = a.unsqueeze(-1) * b.unsqueeze(-2)  # (..., 8, 8)
    table = table.to(device=pairs.device, dtype=pairs.dtype)
    return torch.einsum('...ij,ijk->...k', pairs, table)


def _as_tensor(value: Union[float, torch.Tensor], ref: torch.Tensor) -> torch.Tensor:
    """Convert a python or tensor scalar to a tensor matching ``ref``."""
    return torch.as_tensor(value, dtype=ref.dtype, device=ref.device)


class Multivector:
    """
    A multivector in the Projective Geometric Algebra G(2,0,1).

    Components are stored as a tensor of shape (..., 8) where the last
    dimension contains the coefficients for each basis element.

    Geometric interpretation (same storage, different conventions):
    - Line ax + by + c = 0: c*e0 + a*e1 + b*e2
    - Point (x, y): y*e01 + x*e20 + w*e12, Euclidean when w != 0
    - Rotor / translator: scalar + bivector, applied by sandwich product

    Multivectors are treated as values: every operation returns a new
    Multivector and never modifies its operands.
    """

    def __init__(self, components: torch.Tensor):
        """
        Initialize a multivector from its components.

        Args:
            components: Tensor of shape (..., 8) containing coefficients
                       for each basis element in order:
                       [s, e0, e1, e2, e01, e20, e12, e012]
        """
        if components.dim() == 0 or components.shape[-1] != BASIS_COUNT:
            got = components.shape[-1] if components.dim() > 0 else 0
            raise ValueError(f"Expected {BASIS_COUNT} components, got {got}")
        self.mv = components

    @classmethod
    def from_coefficients(cls, coefficients, dtype: Optional[torch.dtype] = None) -> 'Multivector':
        """Create a multivector from any sequence of 8 coefficients."""
        return cls(torch.as_tensor(coefficients, dtype=dtype or torch.get_default_dtype()))

    @classmethod
    def zeros(cls, *batch_shape: int, dtype: Optional[torch.dtype] = None) -> 'Multivector':
        """The zero multivector."""
        return cls(torch.zeros(*batch_shape, BASIS_COUNT, dtype=dtype or torch.get_default_dtype()))

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the 8 components)."""
        return self.mv.shape[:-1]

    @property
    def device(self) -> torch.device:
        return self.mv.device

    @property
    def dtype(self) -> torch.dtype:
        return self.mv.dtype

    def to(self, device: Optional[torch.device] = None,
           dtype: Optional[torch.dtype] = None) -> 'Multivector':
        """Move to specified device and/or dtype."""
        return Multivector(self.mv.to(device=device, dtype=dtype))

    def clone(self) -> 'Multivector':
        """Create a copy."""
        return Multivector(self.mv.clone())

    def detach(self) -> 'Multivector':
        """Detach from computation graph."""
        return Multivector(self.mv.detach())

    # === Coefficient access ===

    def scalar(self) -> torch.Tensor:
        """Extract scalar (grade 0) component."""
        return self.mv[..., IDX_S]

    def e0(self) -> torch.Tensor:
        return self.mv[..., IDX_E0]

    def e1(self) -> torch.Tensor:
        return self.mv[..., IDX_E1]

    def e2(self) -> torch.Tensor:
        return self.mv[..., IDX_E2]

    def e01(self) -> torch.Tensor:
        return self.mv[..., IDX_E01]

    def e20(self) -> torch.Tensor:
        return self.mv[..., IDX_E20]

    def e12(self) -> torch.Tensor:
        return self.mv[..., IDX_E12]

    def e012(self) -> torch.Tensor:
        return self.mv[..., IDX_E012]

    def vector(self) -> torch.Tensor:
        """Extract vector (grade 1) components: [e0, e1, e2]."""
        return self.mv[..., GRADE_1_MASK]

    def bivector(self) -> torch.Tensor:
        """Extract bivector (grade 2) components: [e01, e20, e12]."""
        return self.mv[..., GRADE_2_MASK]

    def pseudoscalar(self) -> torch.Tensor:
        """Extract pseudoscalar (grade 3) component."""
        return self.mv[..., IDX_E012]

    def grade(self, k: int) -> 'Multivector':
        """Extract grade-k part of the multivector."""
        if k not in (0, 1, 2, 3):
            raise ValueError(f"Grade must be between 0 and 3, got {k}")
        mask = GRADE_MASKS[k]
        result = torch.zeros_like(self.mv)
        result[..., mask] = self.mv[..., mask]
        return Multivector(result)

    # === Unary operations ===

    def reverse(self) -> 'Multivector':
        """
        Reversion: ~M

        Reverses the order of basis vectors in each term, e.g. e20 -> e02.
        Negates the bivector and pseudoscalar parts.
        """
        signs = REVERSION_SIGNS.to(device=self.device, dtype=self.dtype)
        return Multivector(self.mv * signs)

    def __invert__(self) -> 'Multivector':
        """Operator ~: reversion."""
        return self.reverse()

    def conjugate(self) -> 'Multivector':
        """
        Clifford conjugation: reversion + grade involution.

        Negates the vector and bivector parts.
        """
        signs = CONJUGATION_SIGNS.to(device=self.device, dtype=self.dtype)
        return Multivector(self.mv * signs)

    def involute(self) -> 'Multivector':
        """
        Grade involution: negate odd grades (vector and pseudoscalar parts).
        """
        signs = INVOLUTION_SIGNS.to(device=self.device, dtype=self.dtype)
        return Multivector(self.mv * signs)

    def dual(self) -> 'Multivector':
        """
        Poincaré dual.

        Maps blade index i to 7 - i: scalar <-> e012, e0 <-> e12,
        e1 <-> e20, e2 <-> e01. Points and lines are dual to each other.
        """
        return Multivector(self.mv.flip(-1))

    def norm_squared(self) -> torch.Tensor:
        """
        Compute ⟨M M̄⟩₀ where M̄ is the Clifford conjugate.
        """
        product = self * self.conjugate()
        return product.scalar()

    def norm(self) -> torch.Tensor:
        """
        Compute |M| = √|⟨M M̄⟩₀|

        Zero for null elements such as ideal points and the ideal line.
        """
        return torch.sqrt(torch.abs(self.norm_squared()))

    def ideal_norm(self) -> torch.Tensor:
        """Norm of the dual; the length of an ideal point's direction."""
        return self.dual().norm()

    def normalize(self, eps: float = DEFAULT_EPS) -> 'Multivector':
        """
        Return unit multivector: M / |M|

        Elements whose norm is below ``eps`` (ideal points, the ideal line,
        zero) are returned unchanged.
        """
        return self._divide_by(self.norm(), eps)

    def normalize_ideal(self, eps: float = DEFAULT_EPS) -> 'Multivector':
        """
        Return M / |M|∞, scaling an ideal point to a unit direction.

        Elements whose ideal norm is below ``eps`` are returned unchanged.
        """
        return self._divide_by(self.ideal_norm(), eps)

    def _divide_by(self, n: torch.Tensor, eps: float) -> 'Multivector':
        safe = torch.where(n > eps, n, torch.ones_like(n))
        return Multivector(self.mv / safe.unsqueeze(-1))

    def inverse(self, eps: float = DEFAULT_EPS) -> 'Multivector':
        """
        Multiplicative inverse: M^{-1} where M * M^{-1} = 1

        Uses repeated involutions until the denominator is a scalar:
            M^{-1} = M̄ M̂ M̃ / ⟨M M̄ M̂ M̃⟩₀

        Raises:
            NotInvertibleError: if the denominator is (close to) zero,
                e.g. for ideal points or the ideal line.
        """
        numerator = self.conjugate() * self.involute() * self.reverse()
        denominator = (self * numerator).scalar()
        if bool((denominator.abs() < eps).any()):
            raise NotInvertibleError(
                f"Multivector is not invertible (denominator {denominator.abs().min().item():.3e})"
            )
        return Multivector(numerator.mv / denominator.unsqueeze(-1))

    # === Binary operations ===

    def __mul__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Geometric product, or scaling by a scalar."""
        if isinstance(other, (int, float)):
            return Multivector(self.mv * other)
        if isinstance(other, torch.Tensor) and (other.dim() == 0 or other.shape[-1] != BASIS_COUNT):
            return Multivector(self.mv * other.unsqueeze(-1))
        if isinstance(other, Multivector):
            return geometric_product(self, other)
        return NotImplemented

    def __rmul__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        """Right multiplication by scalar."""
        if isinstance(other, Multivector):
            return geometric_product(other, self)
        return self.__mul__(other)

    def __add__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Addition. Scalars are added to the grade-0 part."""
        if isinstance(other, Multivector):
            return Multivector(self.mv + other.mv)
        if isinstance(other, (int, float, torch.Tensor)):
            return self._add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        return self.__add__(other)

    def __sub__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Subtraction. Scalars are subtracted from the grade-0 part."""
        if isinstance(other, Multivector):
            return Multivector(self.mv - other.mv)
        if isinstance(other, (int, float, torch.Tensor)):
            return self._add_scalar(-other)
        return NotImplemented

    def __rsub__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        return (-self).__add__(other)

    def _add_scalar(self, value: Union[float, torch.Tensor]) -> 'Multivector':
        value = _as_tensor(value, self.mv)
        result = self.mv.clone()
        result[..., IDX_S] = result[..., IDX_S] + value
        return Multivector(result)

    def __neg__(self) -> 'Multivector':
        """Negation."""
        return Multivector(-self.mv)

    def __truediv__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Division by scalar, or multiplication by the inverse: A * B^{-1}."""
        if isinstance(other, (int, float)):
            return Multivector(self.mv / other)
        if isinstance(other, torch.Tensor):
            return Multivector(self.mv / other.unsqueeze(-1))
        if isinstance(other, Multivector):
            return geometric_product(self, other.inverse())
        return NotImplemented

    def __xor__(self, other: 'Multivector') -> 'Multivector':
        """Outer (wedge) product, the meet: a ^ b."""
        return outer_product(self, other)

    def __or__(self, other: 'Multivector') -> 'Multivector':
        """Inner (dot) product: a | b."""
        return inner_product(self, other)

    def __and__(self, other: 'Multivector') -> 'Multivector':
        """Regressive (vee) product, the join: a & b."""
        return regressive_product(self, other)

    def outer(self, other: 'Multivector') -> 'Multivector':
        """Outer (wedge) product."""
        return outer_product(self, other)

    def inner(self, other: 'Multivector') -> 'Multivector':
        """Inner (dot) product."""
        return inner_product(self, other)

    def regressive(self, other: 'Multivector') -> 'Multivector':
        """Regressive (vee) product."""
        return regressive_product(self, other)

    def meet(self, other: 'Multivector') -> 'Multivector':
        """Intersection, e.g. the point where two lines cross."""
        return outer_product(self, other)

    def join(self, other: 'Multivector') -> 'Multivector':
        """Span, e.g. the line through two points (oriented from self to other)."""
        return regressive_product(self, other)

    def __repr__(self) -> str:
        return f"Multivector(shape={self.shape}, device={self.device})"

    def __str__(self) -> str:
        """
        Human readable sum of blades, e.g. ``1 + 2e0 + -3e12``.

        Coefficients with magnitude below 1e-5 are omitted.
        """
        if self.mv.dim() != 1:
            return repr(self)
        terms = []
        for i, coeff in enumerate(self.mv.tolist()):
            if abs(coeff) <= 1e-5:
                continue
            text = f"{coeff:.7f}".rstrip('0').rstrip('.')
            terms.append(text + (BASIS_ELEMENTS[i] if i > 0 else ""))
        return " + ".join(terms) if terms else "0"


def geometric_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the geometric product a * b.

    Uses the Cayley table for efficient computation.
    """
    return Multivector(_bilinear(a.mv, b.mv, GEOMETRIC_PRODUCT_TENSOR))


def outer_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the outer (wedge) product a ∧ b.

    The outer product extracts the grade-raising part of the geometric product.
    For grade-r and grade-s elements: (a ∧ b) has grade r + s. For two lines
    this is their point of intersection (ideal when they are parallel).
    """
    return Multivector(_bilinear(a.mv, b.mv, OUTER_PRODUCT_TENSOR))


def inner_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the symmetric inner product a · b.

    For grade-r and grade-s parts the product keeps the grade |r - s| part
    of their geometric product.
    """
    return Multivector(_bilinear(a.mv, b.mv, INNER_PRODUCT_TENSOR))


def regressive_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the regressive (vee) product a ∨ b.

    Defined as: a ∨ b = (b* ∧ a*)*
    The operands are swapped so that the join of two points is oriented
    from the first point to the second.
    """
    return outer_product(b.dual(), a.dual()).dual()


def sandwich(versor: Multivector, element: Multivector) -> Multivector:
    """
    Compute the sandwich product: R * X * R̄

    This is the fundamental operation for applying rotors and translators.
    """
    return versor * element * versor.conjugate()


# === Factory functions for basis elements ===

def _basis(idx: int, coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create a basis element multivector."""
    if isinstance(coeff, torch.Tensor):
        mv = torch.zeros(*coeff.shape, BASIS_COUNT, device=coeff.device, dtype=coeff.dtype)
        mv[..., idx] = coeff
    else:
        mv = torch.zeros(BASIS_COUNT)
        mv[idx] = coeff
    return Multivector(mv)


def scalar(s: Union[float, torch.Tensor]) -> Multivector:
    """Create a scalar multivector."""
    return _basis(IDX_S, s)


def e0(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀ basis element (degenerate direction, the ideal line)."""
    return _basis(IDX_E0, coeff)


def e1(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₁ basis element (the line x = 0)."""
    return _basis(IDX_E1, coeff)


def e2(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₂ basis element (the line y = 0)."""
    return _basis(IDX_E2, coeff)


def e01(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀₁ basis bivector."""
    return _basis(IDX_E01, coeff)


def e20(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₂₀ basis bivector."""
    return _basis(IDX_E20, coeff)


def e12(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₁₂ basis bivector (the origin)."""
    return _basis(IDX_E12, coeff)


def e012(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """Create e₀₁₂ basis element (the PGA pseudoscalar)."""
    return _basis(IDX_E012, coeff)


# Permuted blade names, expressed through the canonical blades

def e10(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₁₀ = -e₀₁."""
    return _basis(IDX_E01, -coeff)


def e02(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₀₂ = -e₂₀."""
    return _basis(IDX_E20, -coeff)


def e21(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₂₁ = -e₁₂."""
    return _basis(IDX_E12, -coeff)


def e021(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₀₂₁ = -e₀₁₂."""
    return _basis(IDX_E012, -coeff)


def e102(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₁₀₂ = -e₀₁₂."""
    return _basis(IDX_E012, -coeff)


def e210(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₂₁₀ = -e₀₁₂."""
    return _basis(IDX_E012, -coeff)


def e120(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₁₂₀ = e₀₁₂."""
    return _basis(IDX_E012, coeff)


def e201(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """e₂₀₁ = e₀₁₂."""
    return _basis(IDX_E012, coeff)


def pseudoscalar(coeff: Union[float, torch.Tensor] = 1.0) -> Multivector:
    """The unit pseudoscalar e₀₁₂."""
    return e012(coeff)
