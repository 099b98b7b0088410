import math

import pytest

from quadwalk.geometry import Point, Rotation, Transformation

IDENTITY_ENTRIES = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def test_cross_of_unit_axes():
    assert Point(1, 0, 0).cross(Point(0, 1, 0)) == Point(0, 0, 1)


def test_cross_is_orthogonal_to_inputs():
    a, b = Point(0.3, -1.2, 2.5), Point(-0.7, 0.4, 1.1)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_cross_is_anticommutative():
    a, b = Point(1.5, 2.0, -3.0), Point(0.5, -0.25, 4.0)
    assert tuple(a.cross(b)) == pytest.approx(tuple(-b.cross(a)))


def test_magnitude_pythagorean():
    assert Point(3, 4, 0).magnitude() == pytest.approx(5.0)


def test_magnitude_matches_self_dot():
    p = Point(0.2, -0.9, 1.7)
    assert p.magnitude() ** 2 == pytest.approx(p.dot(p))


def test_dot_is_symmetric():
    a, b = Point(1.0, 2.0, 3.0), Point(-4.0, 0.5, 2.0)
    assert a.dot(b) == pytest.approx(b.dot(a))


def test_point_copy_is_independent():
    p = Point(1.0, 2.0, 3.0)
    q = p.copy()
    q.x = 10.0
    assert p.x == 1.0
    assert q == Point(10.0, 2.0, 3.0)


def test_identity_leaves_point_unchanged():
    p = Point(0.4, -0.6, 2.2)
    assert Rotation.identity() @ p == p


def test_rotation_rejects_bad_shape():
    with pytest.raises(ValueError):
        Rotation([[1, 0], [0, 1]])


def test_from_euler_angles_is_orthonormal():
    r = Rotation.from_euler_angles(0.3, -0.5, 1.1)
    product = r @ r.transpose()
    entries = [product[i, j] for i in range(3) for j in range(3)]
    assert entries == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)


def test_from_euler_angles_matches_successive_rotations():
    psi, theta, phi = 0.2, 0.7, -1.3
    built = Rotation.identity().rotate_x(psi).rotate_y(theta).rotate_z(phi)
    direct = Rotation.from_euler_angles(psi, theta, phi)
    built_entries = [built[i, j] for i in range(3) for j in range(3)]
    direct_entries = [direct[i, j] for i in range(3) for j in range(3)]
    assert built_entries == pytest.approx(direct_entries, abs=1e-9)


def test_to_euler_angles_round_trip():
    angles = (0.4, -0.6, 1.2)
    first, _ = Rotation.from_euler_angles(*angles).to_euler_angles()
    assert first == pytest.approx(angles)


def test_second_euler_solution_gives_same_matrix():
    r = Rotation.from_euler_angles(-0.9, 0.35, 2.0)
    _, second = r.to_euler_angles()
    rebuilt = Rotation.from_euler_angles(*second)
    rebuilt_entries = [rebuilt[i, j] for i in range(3) for j in range(3)]
    original_entries = [r[i, j] for i in range(3) for j in range(3)]
    assert rebuilt_entries == pytest.approx(original_entries, abs=1e-9)


def test_rotate_and_unrotate_restores_matrix():
    r = Rotation.from_euler_angles(0.1, 0.2, 0.3)
    original = r.copy()
    r.rotate_z(0.8).rotate_y(-0.4).rotate_x(1.5)
    r.rotate_x(-1.5).rotate_y(0.4).rotate_z(-0.8)
    restored_entries = [r[i, j] for i in range(3) for j in range(3)]
    original_entries = [original[i, j] for i in range(3) for j in range(3)]
    assert restored_entries == pytest.approx(original_entries, abs=1e-9)


def test_rotation_copy_is_independent():
    r = Rotation.identity()
    c = r.copy()
    c.rotate_z(1.0)
    assert r == Rotation.identity()
    assert c != r


def test_rotation_preserves_length():
    p = Point(1.3, -0.2, 0.8)
    r = Rotation.from_euler_angles(1.0, -0.3, 2.4)
    assert (r @ p).magnitude() == pytest.approx(p.magnitude())


def test_transformation_rotate_z_quarter_turn():
    t = Transformation().translate(1.0, 0.0, 0.0)
    t.rotate_z(math.pi / 2)
    assert tuple(t.position) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_transformation_rotation_matches_rotation_matrix():
    t = Transformation().translate(0.5, -0.2, 0.9)
    expected_position = Rotation.identity().rotate_y(0.6) @ t.position
    t.rotate_y(0.6)
    assert tuple(t.position) == pytest.approx(tuple(expected_position))
    expected = Rotation.identity().rotate_y(0.6)
    actual_entries = [t.rotation[i, j] for i in range(3) for j in range(3)]
    expected_entries = [expected[i, j] for i in range(3) for j in range(3)]
    assert actual_entries == pytest.approx(expected_entries, abs=1e-9)


def test_transformation_rotate_x_and_back():
    t = Transformation().translate(0.1, 0.2, 0.3)
    t.rotate_x(0.9).rotate_x(-0.9)
    assert tuple(t.position) == pytest.approx((0.1, 0.2, 0.3))


def test_translate_accumulates():
    t = Transformation()
    t.translate(1.0, 2.0, 3.0).translate(0.5, -1.0, 1.0)
    assert (t.x, t.y, t.z) == pytest.approx((1.5, 1.0, 4.0))


def test_coordinate_setters_update_position():
    t = Transformation()
    t.x, t.y, t.z = 0.25, -0.5, 0.75
    assert t.position == Point(0.25, -0.5, 0.75)


def test_composition_follows_homogeneous_product():
    a = Transformation().translate(1.0, 0.0, 0.5).rotate_z(0.7)
    b = Transformation().translate(0.2, -0.3, 0.1).rotate_x(0.4)
    c = a @ b
    assert tuple(c.position) == pytest.approx(tuple(a.rotation @ b.position + a.position))
    expected = a.rotation @ b.rotation
    actual_entries = [c.rotation[i, j] for i in range(3) for j in range(3)]
    expected_entries = [expected[i, j] for i in range(3) for j in range(3)]
    assert actual_entries == pytest.approx(expected_entries, abs=1e-9)


def test_homogeneous_indexing():
    t = Transformation().translate(0.3, 0.6, 0.9)
    assert t[3, 3] == 1.0
    assert t[3, 1] == 0.0
    assert t[1, 3] == 0.6
    assert t[0, 0] == 1.0


def test_homogeneous_index_out_of_range():
    with pytest.raises(IndexError):
        Transformation()[4, 0]


def test_transformation_copy_is_deep():
    t = Transformation().translate(1.0, 1.0, 1.0)
    c = t.copy()
    c.rotate_z(1.0).translate(2.0, 0.0, 0.0)
    assert t.position == Point(1.0, 1.0, 1.0)
    assert t.rotation == Rotation.identity()