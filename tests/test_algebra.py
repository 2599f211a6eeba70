"""
Tests for PGA algebra operations.

The algebra implements G(2,0,1) - 2D Projective Geometric Algebra with:
- 8 basis elements organized by grade
- Metric signature (2,0,1): e0^2 = 0, e1^2 = e2^2 = +1
- Geometric, outer, inner, and regressive products
- Reversion, involution, conjugation and dual
"""

import math

import pytest
import torch

from pga_axioms.core import NotInvertibleError, PGAError
from pga_axioms.pga.algebra import (
    Multivector,
    geometric_product,
    outer_product,
    inner_product,
    regressive_product,
    sandwich,
    scalar,
    pseudoscalar,
    e0, e1, e2,
    e01, e20, e12,
    e012,
    e10, e02, e21,
    IDX_S, IDX_E0, IDX_E1, IDX_E2,
    IDX_E01, IDX_E20, IDX_E12, IDX_E012,
    REVERSION_SIGNS, INVOLUTION_SIGNS, CONJUGATION_SIGNS,
    CAYLEY_SIGNS,
)
from pga_axioms.pga.primitives import point, ideal_point, line
from pga_axioms.pga.transforms import rotor, translator


def _mv(*coefficients, dtype=torch.float64):
    return Multivector(torch.tensor(coefficients, dtype=dtype))


# =============================================================================
# Multivector Creation and Properties
# =============================================================================

class TestMultivectorCreation:
    """Tests for Multivector construction and basic properties."""

    def test_create_multivector_requires_8_components(self):
        """Multivector REQUIRES exactly 8 components."""
        with pytest.raises(ValueError, match="Expected 8 components"):
            Multivector(torch.zeros(7))
        with pytest.raises(ValueError, match="Expected 8 components"):
            Multivector(torch.zeros(9))

    def test_scalar_tensor_rejected(self):
        with pytest.raises(ValueError, match="Expected 8 components"):
            Multivector(torch.tensor(1.0))

    def test_batched_multivector_shape(self):
        """Batched multivectors preserve batch dimensions."""
        for batch_shape in [(4,), (2, 3)]:
            mv = Multivector(torch.zeros(*batch_shape, 8))
            assert mv.shape == torch.Size(batch_shape)
            assert mv.mv.shape == (*batch_shape, 8)

    def test_dtype_preservation(self):
        assert Multivector(torch.zeros(8, dtype=torch.float32)).dtype == torch.float32
        assert Multivector(torch.zeros(8, dtype=torch.float64)).dtype == torch.float64

    def test_from_coefficients(self):
        mv = Multivector.from_coefficients([1, 2, 3, 4, 5, 6, 7, 8])
        assert mv.mv.tolist() == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_clone_creates_independent_copy(self):
        original = Multivector(torch.ones(8))
        cloned = original.clone()
        cloned.mv[0] = 999.0
        assert original.mv[0] == 1.0

    def test_basis_factories_return_fresh_tensors(self):
        """Mutating one basis element never affects the next one built."""
        a = e1()
        a.mv[IDX_E1] = 5.0
        assert e1().mv[IDX_E1] == 1.0

    def test_component_accessors(self):
        mv = _mv(1, 2, 3, 4, 5, 6, 7, 8)
        assert mv.scalar() == 1
        assert mv.e0() == 2
        assert mv.e1() == 3
        assert mv.e2() == 4
        assert mv.e01() == 5
        assert mv.e20() == 6
        assert mv.e12() == 7
        assert mv.e012() == 8
        assert mv.vector().tolist() == [2, 3, 4]
        assert mv.bivector().tolist() == [5, 6, 7]

    def test_grade_extraction(self):
        mv = _mv(1, 2, 3, 4, 5, 6, 7, 8)
        assert mv.grade(0).mv.tolist() == [1, 0, 0, 0, 0, 0, 0, 0]
        assert mv.grade(1).mv.tolist() == [0, 2, 3, 4, 0, 0, 0, 0]
        assert mv.grade(2).mv.tolist() == [0, 0, 0, 0, 5, 6, 7, 0]
        assert mv.grade(3).mv.tolist() == [0, 0, 0, 0, 0, 0, 0, 8]

    def test_invalid_grade(self):
        with pytest.raises(ValueError):
            _mv(1, 2, 3, 4, 5, 6, 7, 8).grade(4)

    def test_permuted_aliases(self):
        assert e10().e01() == -1
        assert e02().e20() == -1
        assert e21().e12() == -1


# =============================================================================
# Geometric Product
# =============================================================================

class TestGeometricProduct:
    """Basis products and algebraic laws of the geometric product."""

    def test_basis_squares(self):
        """The metric: e0^2 = 0, e1^2 = e2^2 = 1, e12^2 = -1, e012^2 = 0."""
        assert torch.allclose((e0() * e0()).mv, torch.zeros(8))
        assert torch.allclose((e1() * e1()).mv, scalar(1.0).mv)
        assert torch.allclose((e2() * e2()).mv, scalar(1.0).mv)
        assert torch.allclose((e12() * e12()).mv, scalar(-1.0).mv)
        assert torch.allclose((e01() * e01()).mv, torch.zeros(8))
        assert torch.allclose((e20() * e20()).mv, torch.zeros(8))
        assert torch.allclose((e012() * e012()).mv, torch.zeros(8))

    def test_vector_products_build_bivectors(self):
        assert torch.allclose((e0() * e1()).mv, e01().mv)
        assert torch.allclose((e1() * e2()).mv, e12().mv)
        assert torch.allclose((e2() * e0()).mv, e20().mv)

    def test_vectors_anticommute(self):
        basis = [e0(), e1(), e2()]
        for i in range(3):
            for j in range(3):
                if i == j:
                    continue
                ab = basis[i] * basis[j]
                ba = basis[j] * basis[i]
                assert torch.allclose(ab.mv, -ba.mv)

    def test_pseudoscalar_from_vectors(self):
        assert torch.allclose((e0() * e1() * e2()).mv, e012().mv)

    def test_scalar_is_identity(self, random_mv):
        one = scalar(torch.ones(random_mv.shape, dtype=torch.float64))
        assert torch.allclose((one * random_mv).mv, random_mv.mv)
        assert torch.allclose((random_mv * one).mv, random_mv.mv)

    def test_associativity(self, random_mv_pair, random_mv):
        a, b = random_mv_pair
        c = random_mv
        left = (a * b) * c
        right = a * (b * c)
        assert torch.allclose(left.mv, right.mv, atol=1e-10)

    def test_distributivity(self, random_mv_pair, random_mv):
        a, b = random_mv_pair
        c = random_mv
        assert torch.allclose((a * (b + c)).mv, (a * b + a * c).mv, atol=1e-10)

    def test_function_matches_operator(self, random_mv_pair):
        a, b = random_mv_pair
        assert torch.allclose(geometric_product(a, b).mv, (a * b).mv)

    def test_batch_broadcasting(self, random_mv):
        """A single multivector multiplies against a whole batch."""
        result = random_mv * e12().to(dtype=torch.float64)
        assert result.shape == random_mv.shape

    def test_mixed_precision_promotes(self):
        a = e1().to(dtype=torch.float32)
        b = e2().to(dtype=torch.float64)
        assert (a * b).dtype == torch.float64

    def test_scalar_multiplication(self):
        mv = _mv(1, 2, 3, 4, 5, 6, 7, 8)
        assert torch.allclose((mv * 2).mv, mv.mv * 2)
        assert torch.allclose((2.0 * mv).mv, mv.mv * 2)
        assert torch.allclose((mv * torch.tensor(2.0, dtype=torch.float64)).mv, mv.mv * 2)

    def test_cayley_signs_are_unit_or_zero(self):
        assert set(CAYLEY_SIGNS.unique().tolist()) <= {-1.0, 0.0, 1.0}


# =============================================================================
# Outer, Inner and Regressive Products
# =============================================================================

class TestDerivedProducts:

    def test_outer_product_of_vectors(self):
        assert torch.allclose((e1() ^ e2()).mv, e12().mv)
        assert torch.allclose((e1() ^ e1()).mv, torch.zeros(8))

    def test_outer_is_antisymmetric_part_for_vectors(self, random_mv_pair):
        a, b = (m.grade(1) for m in random_mv_pair)
        expected = (a * b - b * a) * 0.5
        assert torch.allclose(outer_product(a, b).mv, expected.mv, atol=1e-10)

    def test_inner_is_symmetric_part_for_vectors(self, random_mv_pair):
        a, b = (m.grade(1) for m in random_mv_pair)
        expected = (a * b + b * a) * 0.5
        assert torch.allclose(inner_product(a, b).mv, expected.mv, atol=1e-10)

    def test_inner_of_orthogonal_lines_vanishes(self):
        assert torch.allclose((e1() | e2()).mv, torch.zeros(8))
        assert torch.allclose((e1() | e1()).mv, scalar(1.0).mv)

    def test_regressive_formula(self, random_mv_pair):
        """a & b equals dual(dual(b) ^ dual(a))."""
        a, b = random_mv_pair
        expected = (b.dual() ^ a.dual()).dual()
        assert torch.allclose((a & b).mv, expected.mv)
        assert torch.allclose(regressive_product(a, b).mv, expected.mv)

    def test_join_of_points_is_line(self):
        l = point(0.0, 0.0) & point(2.0, 0.0)
        # Only grade 1 survives
        assert torch.allclose(l.grade(1).mv, l.mv)
        assert l.e1().abs() < 1e-6

    def test_named_methods(self, random_mv_pair):
        a, b = random_mv_pair
        assert torch.allclose(a.outer(b).mv, (a ^ b).mv)
        assert torch.allclose(a.meet(b).mv, (a ^ b).mv)
        assert torch.allclose(a.inner(b).mv, (a | b).mv)
        assert torch.allclose(a.regressive(b).mv, (a & b).mv)
        assert torch.allclose(a.join(b).mv, (a & b).mv)


# =============================================================================
# Unary Operations
# =============================================================================

class TestUnaryOperations:

    def test_sign_tables(self):
        assert REVERSION_SIGNS.tolist() == [1, 1, 1, 1, -1, -1, -1, -1]
        assert INVOLUTION_SIGNS.tolist() == [1, -1, -1, -1, 1, 1, 1, -1]
        assert CONJUGATION_SIGNS.tolist() == [1, -1, -1, -1, -1, -1, -1, 1]

    def test_reverse_operator(self):
        assert torch.allclose((~e12()).mv, -e12().mv)
        assert torch.allclose((~e1()).mv, e1().mv)

    def test_reverse_of_product(self, random_mv_pair):
        """~(ab) = ~b ~a."""
        a, b = random_mv_pair
        assert torch.allclose((~(a * b)).mv, ((~b) * (~a)).mv, atol=1e-10)

    def test_involutions_are_self_inverse(self, random_mv):
        assert torch.allclose(random_mv.reverse().reverse().mv, random_mv.mv)
        assert torch.allclose(random_mv.involute().involute().mv, random_mv.mv)
        assert torch.allclose(random_mv.conjugate().conjugate().mv, random_mv.mv)

    def test_dual_is_self_inverse(self, random_mv):
        assert torch.allclose(random_mv.dual().dual().mv, random_mv.mv)

    def test_dual_maps_points_to_lines(self):
        """e12 (origin) <-> e0, e20 <-> e1, e01 <-> e2."""
        assert torch.allclose(e12().dual().mv, e0().mv)
        assert torch.allclose(e20().dual().mv, e1().mv)
        assert torch.allclose(e01().dual().mv, e2().mv)
        assert torch.allclose(scalar(1.0).dual().mv, pseudoscalar().mv)

    def test_point_norm_is_weight(self):
        assert torch.isclose(point(3.0, 4.0, 2.0).norm(), torch.tensor(2.0))

    def test_line_norm(self):
        assert torch.isclose(line(3.0, 4.0, 7.0).norm(), torch.tensor(5.0))

    def test_ideal_norm(self):
        p = ideal_point(3.0, 4.0)
        assert p.norm() == 0
        assert torch.isclose(p.ideal_norm(), torch.tensor(5.0))

    def test_normalize_line(self):
        l = line(3.0, 4.0, 10.0).normalize()
        assert torch.allclose(l.vector(), torch.tensor([2.0, 0.6, 0.8]))

    def test_normalized_norm_is_one(self, random_mv):
        """Any element with a Euclidean part normalizes to unit norm."""
        for k in (1, 2):
            normalized = random_mv.grade(k).normalize()
            assert torch.allclose(normalized.norm(), torch.ones(random_mv.shape, dtype=torch.float64))

    def test_normalize_passes_null_elements_through(self):
        """Zero-norm elements come back unchanged instead of as NaN."""
        for mv in [ideal_point(1.0, 2.0), e0(3.0), Multivector.zeros()]:
            out = mv.normalize()
            assert torch.equal(out.mv, mv.mv)
            assert not torch.isnan(out.mv).any()

    def test_normalize_batched_mixes_policies(self):
        mv = Multivector(torch.stack([point(2.0, 2.0, 2.0).mv, ideal_point(1.0, 0.0).mv]))
        out = mv.normalize()
        assert torch.allclose(out.mv[0], point(1.0, 1.0).mv)
        assert torch.allclose(out.mv[1], ideal_point(1.0, 0.0).mv)

    def test_normalize_ideal(self):
        p = ideal_point(3.0, 4.0).normalize_ideal()
        assert torch.isclose(p.ideal_norm(), torch.tensor(1.0))


# =============================================================================
# Inverse and Division
# =============================================================================

class TestInverse:

    def test_point_inverse_is_negation(self):
        p = point(1.0, 2.0)
        assert torch.allclose(p.inverse().mv, -p.mv)

    def test_point_times_inverse_is_one(self, random_points):
        product = random_points * random_points.inverse()
        one = scalar(torch.ones(random_points.shape, dtype=torch.float64))
        assert torch.allclose(product.mv, one.mv, atol=1e-10)

    def test_line_inverse(self):
        l = line(3.0, 4.0, 1.0)
        product = l * l.inverse()
        assert torch.allclose(product.mv, scalar(1.0).mv, atol=1e-6)

    def test_versor_inverse(self):
        v = rotor(0.7, 1.0, 2.0) * translator(1.0, -3.0)
        assert torch.allclose((v * v.inverse()).mv, scalar(1.0).mv, atol=1e-4)

    def test_ideal_point_not_invertible(self):
        with pytest.raises(NotInvertibleError):
            ideal_point(1.0, 0.0).inverse()

    def test_not_invertible_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            e0().inverse()
        with pytest.raises(PGAError):
            e0().inverse()

    def test_division(self):
        a = line(1.0, 2.0, 3.0)
        b = point(1.0, 1.0)
        assert torch.allclose((a / b).mv, (a * b.inverse()).mv)
        assert torch.allclose((a / 2.0).mv, a.mv / 2)

    def test_division_by_ideal_element_raises(self):
        with pytest.raises(NotInvertibleError):
            e1() / e01()


# =============================================================================
# Arithmetic and Formatting
# =============================================================================

class TestArithmetic:

    def test_scalar_addition(self):
        mv = e1() + 1.0
        assert mv.scalar() == 1.0
        assert mv.e1() == 1.0

    def test_scalar_radd_and_rsub(self):
        mv = 1.0 - e1()
        assert mv.scalar() == 1.0
        assert mv.e1() == -1.0
        assert (2.0 + e2()).scalar() == 2.0

    def test_scalar_addition_does_not_mutate(self):
        a = e1()
        _ = a + 1.0
        assert a.scalar() == 0.0

    def test_negation(self):
        assert torch.equal((-e1()).mv, -e1().mv)

    def test_sandwich(self):
        """Sandwiching by a unit scalar is the identity."""
        l = line(1.0, 2.0, 3.0)
        assert torch.allclose(sandwich(scalar(1.0), l).mv, l.mv)


class TestFormatting:

    def test_str_skips_small_terms(self):
        mv = Multivector(torch.tensor([1.0, 2.0, 0.0, 0.0, 0.0, 0.0, -3.0, 1e-7]))
        assert str(mv) == "1 + 2e0 + -3e12"

    def test_str_fractions(self):
        assert str(e01(0.5)) == "0.5e01"

    def test_str_zero(self):
        assert str(Multivector.zeros()) == "0"

    def test_repr(self):
        assert "Multivector(shape=" in repr(e1())

    def test_basis_indices(self):
        assert (IDX_S, IDX_E0, IDX_E1, IDX_E2) == (0, 1, 2, 3)
        assert (IDX_E01, IDX_E20, IDX_E12, IDX_E012) == (4, 5, 6, 7)

    def test_pi_constant(self):
        from pga_axioms.core import PI
        assert math.isclose(PI, math.pi)

    def test_core_imports_before_algebra(self):
        """The core package must import in a fresh interpreter on its own."""
        import subprocess
        import sys
        result = subprocess.run(
            [sys.executable, '-c', 'import pga_axioms.core.types as t; print(t.CreaseList)'],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
