"""
Pick move quickstart for cartraj.
- Builds the straight approach move with a full orientation change
- Streams samples the way an IK step would consume them

Run from the repository root:
    python examples/pick_move_quickstart.py
"""

from cartraj import TrajectoryAssembler

P_INITIAL = [0.491, -0.008, 1.134]
P_FINAL = [0.543, -0.464, 0.574]
PHI_INITIAL = [3.073289, 0.6506525, -1.4879759]
PHI_FINAL = [0.4884818, 1.4777122, -2.0672861]


def main() -> None:
    traj = TrajectoryAssembler(P_INITIAL, P_FINAL, PHI_INITIAL, PHI_FINAL, ti=0.0, tf=2.0, Ts=0.1)
    print(f"samples: {traj.sample_count}")
    for sample in traj.iter_samples():
        x, y, z, phi1, phi2, phi3 = sample.position
        print(f"t={sample.time:.2f} xyz=({x:.4f}, {y:.4f}, {z:.4f}) phi=({phi1:.4f}, {phi2:.4f}, {phi3:.4f})")


if __name__ == "__main__":
    main()
