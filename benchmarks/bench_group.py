"""
Microbenchmark: time per group query vs number of obstacles.
Run:
  python benchmarks/bench_group.py
"""
import time
import numpy as np
from steer_obstacles.local_space import LocalSpace
from steer_obstacles.vehicle import SimpleVehicle
from steer_obstacles.obstacles import (
    SphericalObstacle,
    BoxObstacle,
    first_path_intersection_with_obstacle_group,
)


def run(n: int, queries: int = 200):
    rng = np.random.default_rng(12345)  # determinism

    obstacles = []
    for i in range(n):
        c = rng.uniform(-20, 20, size=3)
        if i % 2 == 0:
            obstacles.append(SphericalObstacle(center=c, radius=float(rng.uniform(0.5, 2))))
        else:
            obstacles.append(BoxObstacle(width=1, height=1, depth=1, space=LocalSpace(position=c)))

    vehicles = [
        SimpleVehicle(position=rng.uniform(-20, 20, size=3), forward=rng.normal(size=3),
                      up=(0.577, 0.577, 0.577), radius=0.5)
        for _ in range(queries)
    ]

    hits = 0
    t0 = time.perf_counter()
    for v in vehicles:
        nearest, _ = first_path_intersection_with_obstacle_group(v, obstacles)
        hits += nearest.intersect
    t1 = time.perf_counter()

    return (t1 - t0) / queries, hits / queries


if __name__ == "__main__":
    for n in [1, 10, 50, 100, 250]:
        per_query, hit_rate = run(n)
        print(f"N={n:4d}  query={1e3*per_query:8.3f} ms  queries/s={1/per_query:8.1f}  hit rate={hit_rate:.2f}")
