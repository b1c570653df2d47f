# examples/avoid_sphere.py
from steer_obstacles import SimpleVehicle, SphericalObstacle

vehicle = SimpleVehicle(position=(0.0, 0.0, 0.0), forward=(0.0, 0.0, 1.0),
                        speed=5.0, radius=0.5, max_force=2.0)
rock = SphericalObstacle(center=(1.0, 0.0, 10.0), radius=2.0)

pi = rock.find_intersection_with_vehicle_path(vehicle)
print("intersect:", pi.intersect)
print("distance:", pi.distance)
print("surface point:", pi.surface_point)
print("steering:", rock.steer_to_avoid(vehicle, 3.0))
