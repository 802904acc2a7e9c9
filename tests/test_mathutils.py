import math

import numpy as np
import pytest

from luthcore.mathutils import (
    Frustum,
    compose_transform,
    create_frustum_from_camera,
    decompose_transform,
    is_in_frustum,
    mat4_to_mat3,
    normal_matrix,
    ortho,
    perspective,
    quat_conjugate,
    quat_from_euler,
    quat_to_mat4,
    scale_matrix,
    translation_matrix,
)


def test_translation_moves_point():
    m = translation_matrix([1.0, -2.0, 3.0])
    p = m @ np.array([4.0, 5.0, 6.0, 1.0])
    assert np.allclose(p[:3], [5.0, 3.0, 9.0])


def test_scale_matrix_scales_components():
    m = scale_matrix([2.0, 3.0, 4.0])
    p = m @ np.array([1.0, 1.0, 1.0, 1.0])
    assert np.allclose(p, [2.0, 3.0, 4.0, 1.0])


def test_quarter_turn_about_z_maps_x_to_y():
    q = quat_from_euler([0.0, 0.0, math.pi / 2])
    v = quat_to_mat4(q) @ np.array([1.0, 0.0, 0.0, 0.0])
    assert np.allclose(v, [0.0, 1.0, 0.0, 0.0])


def test_quaternion_from_euler_is_unit():
    q = quat_from_euler([0.4, -1.2, 2.5])
    assert np.isclose(np.linalg.norm(q), 1.0)


def test_conjugate_rotation_is_inverse():
    q = quat_from_euler([0.3, 0.2, -0.9])
    r = quat_to_mat4(q)
    rc = quat_to_mat4(quat_conjugate(q))
    assert np.allclose(r @ rc, np.eye(4))
    assert np.allclose(rc, r.T)


def test_perspective_depth_zero_to_one():
    near, far = 0.5, 100.0
    p = perspective(math.radians(45.0), 16 / 9, near, far)
    at_near = p @ np.array([0.0, 0.0, -near, 1.0])
    at_far = p @ np.array([0.0, 0.0, -far, 1.0])
    assert np.isclose(at_near[2] / at_near[3], 0.0)
    assert np.isclose(at_far[2] / at_far[3], 1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_ortho_maps_box_to_clip_volume():
    m = ortho(-4.0, 4.0, -2.0, 2.0, -1.0, 1.0)
    low = m @ np.array([-4.0, -2.0, 1.0, 1.0])
    high = m @ np.array([4.0, 2.0, -1.0, 1.0])
    assert np.allclose(low[:3], [-1.0, -1.0, 0.0])
    assert np.allclose(high[:3], [1.0, 1.0, 1.0])


def test_normal_matrix_of_rotation_is_rotation():
    r = quat_to_mat4(quat_from_euler([0.1, 0.7, -0.3]))
    model = translation_matrix([3.0, 2.0, 1.0]) @ r
    assert np.allclose(normal_matrix(model), r[:3, :3])


def test_mat4_to_mat3_takes_upper_block():
    m = np.arange(16.0).reshape(4, 4)
    assert np.array_equal(mat4_to_mat3(m), m[:3, :3])


def test_compose_decompose_round_trip():
    t = np.array([1.0, -2.0, 3.0])
    q = quat_from_euler([0.3, -0.7, 1.1])
    s = np.array([2.0, 0.5, 3.0])
    m = compose_transform(t, q, s)
    t2, q2, s2 = decompose_transform(m)
    assert np.allclose(t2, t)
    assert np.allclose(s2, s)
    assert np.allclose(compose_transform(t2, q2, s2), m)
    assert np.isclose(abs(q2 @ q), 1.0)


def test_decompose_mirrored_matrix_round_trip():
    m = compose_transform([0.5, 0.5, 0.5], quat_from_euler([1.0, 0.2, 0.4]), [-1.0, -2.0, -3.0])
    assert np.allclose(compose_transform(*decompose_transform(m)), m)


def test_decompose_rejects_zero_w():
    m = np.eye(4)
    m[3, 3] = 0.0
    with pytest.raises(ValueError):
        decompose_transform(m)


def test_frustum_planes_normalized():
    vp = perspective(math.radians(60.0), 1.5, 0.1, 50.0)
    frustum = create_frustum_from_camera(vp)
    assert frustum.planes.shape == (6, 4)
    assert np.allclose(np.linalg.norm(frustum.planes[:, :3], axis=1), 1.0)


def test_identity_frustum_containment():
    frustum = create_frustum_from_camera(np.eye(4), normalize=False)
    assert is_in_frustum(frustum, [0.0, 0.0, 0.0])
    assert not is_in_frustum(frustum, [2.0, 0.0, 0.0])
    assert is_in_frustum(frustum, [2.0, 0.0, 0.0], radius=1.5)


def test_perspective_frustum_in_front_and_behind():
    frustum = create_frustum_from_camera(perspective(math.radians(60.0), 1.0, 0.1, 50.0))
    assert is_in_frustum(frustum, [0.0, 0.0, -10.0])
    assert not is_in_frustum(frustum, [0.0, 0.0, 10.0])


def test_default_frustum_has_six_planes():
    assert Frustum().planes.shape == (6, 4)