"""
PID feedback control on Lie groups.

Modules within `liectrl` expose:
  - group types (R^n, SO(2), and Pinocchio-backed SO(3)/SE(3)) used as state spaces
  - the Lie group PID controller and its reference-trajectory adapters
  - a body-acceleration plant model for closed-loop simulation
  - configuration defaults for gains and anti-windup limits

The controller only relies on the group protocol in `liectrl.lie.base`, so
any pose or orientation type providing it can be plugged in unchanged.
"""

__all__ = [
    "config",
    "control",
    "lie",
]
