#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path


def _ensure_src_on_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


_ensure_src_on_path()

import numpy as np

from liectrl.config import ControlGains, build_default_gains, build_default_params
from liectrl.control import BodyAccelerationPlant, LiePID, constant_trajectory
from liectrl.lie import R3, SO2

LOG = logging.getLogger("run_pose_tracking")


def _targets(group: str):
    """Return (group class, start state, target state) for the selected group."""
    if group == "r3":
        return R3, R3.identity(), R3([1.0, 2.0, 3.0])
    if group == "so2":
        return SO2, SO2.identity(), SO2(2.5)
    from liectrl.lie.pinocchio_groups import SE3, SO3

    if group == "so3":
        return SO3, SO3.identity(), SO3.exp(np.array([0.3, -0.2, 0.5]))
    return SE3, SE3.identity(), SE3.exp(np.array([1.0, 0.5, -0.2, 0.1, 0.2, 0.3]))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Drive a body-acceleration plant to a fixed pose with the Lie group PID controller.",
    )
    parser.add_argument("--group", choices=["r3", "so2", "so3", "se3"], default="se3", help="State-space group.")
    parser.add_argument("--rate-hz", type=float, default=100.0, help="Controller update frequency.")
    parser.add_argument("--duration", type=float, default=10.0, help="Simulated seconds.")
    parser.add_argument("--kp", type=float, default=None, help="Proportional gain (all axes).")
    parser.add_argument("--kd", type=float, default=None, help="Derivative gain (all axes).")
    parser.add_argument("--ki", type=float, default=None, help="Integral gain (all axes).")
    parser.add_argument("--windup-limit", type=float, default=None, help="Integral clamp; default unlimited.")
    parser.add_argument("--realtime", action="store_true", help="Pace the loop against the wall clock.")
    parser.add_argument("--log-level", default="INFO", help="Python logging level (DEBUG, INFO, ...).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    if args.rate_hz <= 0.0:
        raise ValueError("--rate-hz must be positive")

    env_gains = build_default_gains()
    gains = ControlGains(
        kp=env_gains.kp if args.kp is None else args.kp,
        kd=env_gains.kd if args.kd is None else args.kd,
        ki=env_gains.ki if args.ki is None else args.ki,
    )
    params = build_default_params(args.windup_limit)

    group, start, target = _targets(args.group)
    controller = LiePID.from_config(group, params, gains)
    controller.set_xdes(constant_trajectory(target))
    plant = BodyAccelerationPlant(start)

    dt = 1.0 / args.rate_hz
    steps = int(round(args.duration * args.rate_hz))
    LOG.info("Tracking %r on %s for %d steps at %.1f Hz", target, group.__name__, steps, args.rate_hz)

    next_tick = time.perf_counter() + dt
    try:
        for k in range(steps):
            t = k * dt
            u = controller(t, plant.g, plant.v)
            plant.step(u, dt)
            if args.realtime:
                sleep_time = next_tick - time.perf_counter()
                if sleep_time > 0:
                    time.sleep(sleep_time)
                next_tick += dt
    except KeyboardInterrupt:
        LOG.info("Tracking interrupted by user.")

    error = target - plant.g
    LOG.info("Final tangent error %s (norm %.3e)", np.round(error, 6).tolist(), float(np.linalg.norm(error)))
    LOG.info("Final integral state %s", np.round(controller.integral, 6).tolist())


if __name__ == "__main__":
    main()
