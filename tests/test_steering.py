import numpy as np
import pytest
from steer_obstacles.constants import ZERO
from steer_obstacles.vehicle import SimpleVehicle
from steer_obstacles.obstacles import (
    PathIntersection,
    SphericalObstacle,
    RectangleObstacle,
)


def test_steers_away_from_offset_sphere():
    """
    Sphere at (1, 0, 10), r=2. First contact ~8.27 ahead, inside the
    look-ahead of 3 s * 5 m/s = 15 m. The hit normal leans toward -X, so
    the lateral force is max_force along -X.
    """
    vehicle = SimpleVehicle(forward=(0, 0, 1), speed=5.0, max_force=3.0)
    sphere = SphericalObstacle(center=(1, 0, 10), radius=2)

    force = sphere.steer_to_avoid(vehicle, 3.0)

    assert np.allclose(force, [-3, 0, 0])


def test_no_steering_when_collision_is_far():
    """Same sphere, look-ahead 1 s * 5 m/s = 5 m < 8.27 m."""
    vehicle = SimpleVehicle(forward=(0, 0, 1), speed=5.0, max_force=3.0)
    sphere = SphericalObstacle(center=(1, 0, 10), radius=2)

    assert np.array_equal(sphere.steer_to_avoid(vehicle, 1.0), ZERO)


def test_no_steering_without_intersection():
    vehicle = SimpleVehicle(forward=(0, 0, 1), speed=5.0)
    pi = PathIntersection()

    assert np.array_equal(pi.steer_to_avoid_if_needed(vehicle, 100.0), ZERO)


def test_stationary_vehicle_never_steers():
    """speed 0 makes the look-ahead distance 0."""
    vehicle = SimpleVehicle(forward=(0, 0, 1), speed=0.0)
    sphere = SphericalObstacle(center=(1, 0, 10), radius=2)

    assert np.array_equal(sphere.steer_to_avoid(vehicle, 10.0), ZERO)


def test_head_on_hint_gives_zero_not_nan():
    """
    Dead-center hit on a sphere: the normal is parallel to forward, there
    is no lateral component, and the result is the zero vector.
    """
    vehicle = SimpleVehicle(forward=(0, 0, 1), speed=10.0, max_force=1.0)
    sphere = SphericalObstacle(center=(0, 0, 10), radius=2)

    force = sphere.steer_to_avoid(vehicle, 5.0)

    assert np.all(np.isfinite(force))
    assert np.array_equal(force, ZERO)


def test_panel_steers_toward_nearer_edge():
    """Hitting a panel at x=3 (edge at x=5) steers toward +X."""
    vehicle = SimpleVehicle(position=(3, 0, 5), forward=(0, 0, -1), speed=10.0, max_force=4.0)
    panel = RectangleObstacle(width=10, height=10)

    force = panel.steer_to_avoid(vehicle, 1.0)

    assert np.allclose(force, [4, 0, 0])


def test_force_magnitude_equals_max_force():
    """Any nonzero avoidance force has length max_force."""
    rng = np.random.default_rng(7)
    sphere = SphericalObstacle(center=(0, 0, 10), radius=3)
    checked = 0
    for _ in range(200):
        pos = rng.uniform(-2, 2, size=3)
        fwd = np.array([rng.uniform(-0.3, 0.3), rng.uniform(-0.3, 0.3), 1.0])
        vehicle = SimpleVehicle(position=pos, forward=fwd, speed=4.0,
                                radius=rng.uniform(0, 1), max_force=2.5)
        force = sphere.steer_to_avoid(vehicle, 10.0)
        if force.any():
            assert np.linalg.norm(force) == pytest.approx(2.5)
            # purely lateral
            assert np.dot(force, vehicle.forward()) == pytest.approx(0.0, abs=1e-9)
            checked += 1
    assert checked > 0


def test_zero_when_distance_reaches_threshold():
    """distance == min_time * speed is not 'closer than' the threshold."""
    vehicle = SimpleVehicle(forward=(0, 0, 1), speed=1.0)
    pi = PathIntersection(intersect=True, distance=4.0, steer_hint=np.array([1.0, 0.0, 0.0]))

    assert np.array_equal(pi.steer_to_avoid_if_needed(vehicle, 4.0), ZERO)
    assert np.allclose(pi.steer_to_avoid_if_needed(vehicle, 4.5), [1, 0, 0])
