import numpy as np
import pytest
from steer_obstacles.local_space import LocalSpace
from steer_obstacles.vehicle import SimpleVehicle
from steer_obstacles.obstacles import PlaneObstacle, RectangleObstacle, SeenFrom


def test_head_on_rectangle_hit():
    """
    10x10 panel at the origin, normal +Z. Vehicle at z=5 heading -Z
    hits the panel center after 5 units.
    """
    panel = RectangleObstacle(width=10, height=10)
    vehicle = SimpleVehicle(position=(0, 0, 5), forward=(0, 0, -1), speed=1.0)

    pi = panel.find_intersection_with_vehicle_path(vehicle)

    assert pi.intersect
    assert pi.distance == pytest.approx(5.0)
    assert np.allclose(pi.surface_point, [0, 0, 0])
    # normal faces the side the vehicle came from
    assert np.allclose(pi.surface_normal, [0, 0, 1])
    assert pi.obstacle is panel


def test_rectangle_missed_beyond_half_width():
    """Same panel, vehicle 20 units to the side: outside the half-width 5."""
    panel = RectangleObstacle(width=10, height=10)
    vehicle = SimpleVehicle(position=(20, 0, 5), forward=(0, 0, -1))

    assert not panel.find_intersection_with_vehicle_path(vehicle).intersect


def test_rectangle_bounds_grow_with_vehicle_radius():
    """x=6 misses a half-width of 5 unless the vehicle radius covers the gap."""
    panel = RectangleObstacle(width=10, height=10)

    point = SimpleVehicle(position=(6, 0, 5), forward=(0, 0, -1), radius=0.0)
    fat = SimpleVehicle(position=(6, 0, 5), forward=(0, 0, -1), radius=1.5)

    assert not panel.find_intersection_with_vehicle_path(point).intersect
    assert panel.find_intersection_with_vehicle_path(fat).intersect


def test_off_center_hit_biases_steer_hint_toward_edge():
    """
    Hitting at x=3 on a panel spanning x in [-5, 5]: the steer hint is the
    normal plus the unit in-plane direction from the center, (1, 0, 1).
    """
    panel = RectangleObstacle(width=10, height=10)
    vehicle = SimpleVehicle(position=(3, 0, 5), forward=(0, 0, -1))

    pi = panel.find_intersection_with_vehicle_path(vehicle)

    assert pi.intersect
    assert np.allclose(pi.surface_point, [3, 0, 0])
    assert np.allclose(pi.surface_normal, [0, 0, 1])
    assert np.allclose(pi.steer_hint, [1, 0, 1])


def test_oblique_path_distance():
    """
    Heading (1, 0, -1)/√2 from z=5: crosses the plane at world x=5,
    after √50 units.
    """
    panel = RectangleObstacle(width=12, height=12)
    vehicle = SimpleVehicle(position=(0, 0, 5), forward=(1, 0, -1))

    pi = panel.find_intersection_with_vehicle_path(vehicle)

    assert pi.intersect
    assert pi.distance == pytest.approx(np.sqrt(50.0))
    assert np.allclose(pi.surface_point, [5, 0, 0])


def test_parallel_path_never_hits():
    panel = RectangleObstacle(width=10, height=10)
    vehicle = SimpleVehicle(position=(0, 0, 5), forward=(1, 0, 0))

    assert not panel.find_intersection_with_vehicle_path(vehicle).intersect


@pytest.mark.parametrize("z, heading", [(5.0, 1.0), (-5.0, -1.0)])
def test_heading_away_never_hits(z, heading):
    panel = RectangleObstacle(width=10, height=10)
    vehicle = SimpleVehicle(position=(0, 0, z), forward=(0, 0, heading))

    assert not panel.find_intersection_with_vehicle_path(vehicle).intersect


def test_seen_from_selects_blocking_side():
    """
    OUTSIDE panels only block from local z > 0, INSIDE only from z < 0,
    BOTH from either side.
    """
    from_front = SimpleVehicle(position=(0, 0, 5), forward=(0, 0, -1))
    from_back = SimpleVehicle(position=(0, 0, -5), forward=(0, 0, 1))

    outside = RectangleObstacle(width=10, height=10, seen_from=SeenFrom.OUTSIDE)
    inside = RectangleObstacle(width=10, height=10, seen_from=SeenFrom.INSIDE)
    both = RectangleObstacle(width=10, height=10, seen_from=SeenFrom.BOTH)

    assert outside.find_intersection_with_vehicle_path(from_front).intersect
    assert not outside.find_intersection_with_vehicle_path(from_back).intersect

    assert not inside.find_intersection_with_vehicle_path(from_front).intersect
    assert inside.find_intersection_with_vehicle_path(from_back).intersect

    assert both.find_intersection_with_vehicle_path(from_front).intersect
    pi = both.find_intersection_with_vehicle_path(from_back)
    assert pi.intersect
    # approached from behind: normal flips
    assert np.allclose(pi.surface_normal, [0, 0, -1])


def test_rotated_wall():
    """
    Wall facing +X at x=10. Vehicle at origin heading +X hits it after
    10 units; the normal faces back toward the vehicle.
    """
    wall = RectangleObstacle(
        space=LocalSpace.from_forward((1, 0, 0), up=(0, 1, 0), position=(10, 0, 0)),
        width=4,
        height=4,
    )
    vehicle = SimpleVehicle(position=(0, 0, 0), forward=(1, 0, 0))

    pi = wall.find_intersection_with_vehicle_path(vehicle)

    assert pi.intersect
    assert pi.distance == pytest.approx(10.0)
    assert np.allclose(pi.surface_point, [10, 0, 0])
    assert np.allclose(pi.surface_normal, [-1, 0, 0])


def test_plane_is_unbounded():
    """A plane blocks far from its origin where a rectangle would not."""
    plane = PlaneObstacle()
    vehicle = SimpleVehicle(position=(100, -40, 5), forward=(0, 0, -1))

    pi = plane.find_intersection_with_vehicle_path(vehicle)

    assert pi.intersect
    assert pi.distance == pytest.approx(5.0)
    assert np.allclose(pi.surface_point, [100, -40, 0])


def test_plane_and_rectangle_default_to_double_sided():
    assert PlaneObstacle().seen_from is SeenFrom.BOTH
    assert RectangleObstacle().seen_from is SeenFrom.BOTH


def test_negative_extents_rejected():
    with pytest.raises(ValueError):
        RectangleObstacle(width=-1, height=2)
