"""Tests for affine transforms."""

import math

import numpy as np
import pytest

from planar import AffineTransform


def test_rotation_about_a_center() -> None:
    R = AffineTransform.rotation(math.pi / 2.0, center=(1.0, 1.0))
    assert np.allclose(R.apply((2.0, 1.0)), [1.0, 2.0])
    assert np.allclose(R.apply((1.0, 1.0)), [1.0, 1.0])
    assert R.is_direct()
    assert R.is_isometry()


def test_apply_accepts_point_arrays() -> None:
    T = AffineTransform.translation(1.0, -2.0)
    P = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 3.0]])
    assert np.allclose(T.apply(P), P + [1.0, -2.0])
    assert np.allclose(T.apply_vector((1.0, 1.0)), [1.0, 1.0])
    with pytest.raises(ValueError):
        T.apply(np.zeros((3, 3)))


def test_compose_applies_right_operand_first() -> None:
    T = AffineTransform.translation(1.0, 0.0)
    S = AffineTransform.scaling(2.0)
    assert np.allclose(T.compose(S).apply((1.0, 1.0)), [3.0, 2.0])
    assert np.allclose(T.then(S).apply((1.0, 1.0)), [4.0, 2.0])


def test_inverse_round_trip_and_singular_map() -> None:
    M = AffineTransform([[2.0, 1.0, 3.0], [0.5, 1.5, -1.0]])
    assert M.compose(M.inverse()).is_identity(1e-12)
    with pytest.raises(ValueError):
        AffineTransform.scaling(1.0, 0.0).inverse()


def test_reflections_are_indirect_similarities() -> None:
    F = AffineTransform.line_reflection((0.0, 1.0), (1.0, 0.0))
    assert np.allclose(F.apply((3.0, 3.0)), [3.0, -1.0])
    assert not F.is_direct()
    assert F.is_isometry()

    P = AffineTransform.point_reflection((1.0, 0.0))
    assert np.allclose(P.apply((0.0, 1.0)), [2.0, -1.0])
    assert P.is_direct()


def test_similarity_detection_and_factor() -> None:
    H = AffineTransform.homothecy((1.0, 1.0), 3.0)
    assert H.is_similarity()
    assert H.similarity_factor() == pytest.approx(3.0)
    assert np.allclose(H.apply((1.0, 1.0)), [1.0, 1.0])

    assert not AffineTransform.scaling(2.0, 3.0).is_similarity()
    shear = AffineTransform.shear(0.5, 0.0)
    assert not shear.is_similarity()
    assert shear.determinant() == pytest.approx(1.0)


def test_invalid_matrices_are_rejected() -> None:
    with pytest.raises(ValueError):
        AffineTransform(np.eye(2))
    with pytest.raises(ValueError):
        AffineTransform([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [1.0, 0.0, 1.0]])


def test_matrix_is_read_only_and_equality_is_by_value() -> None:
    A = AffineTransform.rotation(0.3)
    with pytest.raises(ValueError):
        A.matrix[0, 0] = 5.0
    B = AffineTransform.rotation(0.1).then(AffineTransform.rotation(0.2))
    assert A == B
    assert A != AffineTransform.identity()
