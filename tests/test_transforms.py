import numpy as np
import pytest

from rendercore.transforms import (
    euler_zxy_from_quat,
    matrix_from_quat,
    normalize,
    ortho,
    perspective,
    quat_from_euler_zxy,
    quat_from_matrix,
)


def _project(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_normalize_unit_length():
    v = normalize([3.0, -4.0, 12.0])
    assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.allclose(np.cross(v, [3.0, -4.0, 12.0]), 0.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


ANGLES = [(0.0, 0.0, 0.0), (0.3, -0.2, 0.5), (-1.0, 2.0, -2.5), (1.2, 0.1, 3.0)]


@pytest.mark.parametrize("angles", ANGLES)
def test_matrix_is_rotation(angles):
    m = matrix_from_quat(quat_from_euler_zxy(*angles))
    assert np.allclose(m @ m.T, np.eye(3))
    assert np.linalg.det(m) == pytest.approx(1.0)


@pytest.mark.parametrize("angles", ANGLES)
def test_quat_matrix_round_trip(angles):
    q = quat_from_euler_zxy(*angles)
    back = quat_from_matrix(matrix_from_quat(q))
    assert np.allclose(back, q) or np.allclose(back, -q)


@pytest.mark.parametrize("angles", ANGLES)
def test_euler_round_trip(angles):
    q = quat_from_euler_zxy(*angles)
    x, y, z = euler_zxy_from_quat(q)
    again = quat_from_euler_zxy(x, y, z)
    assert np.allclose(matrix_from_quat(again), matrix_from_quat(q))


def test_euler_angles_recovered():
    x, y, z = euler_zxy_from_quat(quat_from_euler_zxy(0.3, -0.2, 0.5))
    assert (x, y, z) == pytest.approx((0.3, -0.2, 0.5))


def test_identity():
    assert np.allclose(quat_from_euler_zxy(0.0, 0.0, 0.0), [1.0, 0.0, 0.0, 0.0])
    assert np.allclose(matrix_from_quat([1.0, 0.0, 0.0, 0.0]), np.eye(3))


def test_quat_from_matrix_rejects_bad_shape():
    with pytest.raises(ValueError):
        quat_from_matrix(np.eye(4))


def test_perspective_maps_frustum_corners():
    near, far = 1.0, 10.0
    m = perspective(-1.0, 1.0, 1.0, -1.0, near, far)
    assert np.allclose(_project(m, (1.0, 1.0, -near)), [1.0, 1.0, -1.0])
    assert np.allclose(_project(m, (-10.0, -10.0, -far)), [-1.0, -1.0, 1.0])
    assert m[3, 2] == -1.0


def test_ortho_maps_box_corners():
    width, height, near, far = 4.0, 2.0, 0.5, 20.0
    m = ortho(width, height, near, far)
    assert np.allclose(_project(m, (width / 2, height / 2, -near)), [1.0, 1.0, -1.0])
    assert np.allclose(_project(m, (-width / 2, -height / 2, -far)), [-1.0, -1.0, 1.0])