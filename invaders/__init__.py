"""
invaders – simulation core for a fixed-formation shooter.

The core (ecs, components, simulation, systems other than input/render) runs
headless. See app.py for the pygame entrypoint.
"""
__all__ = [
    "app",
    "clock",
    "config",
    "constants",
    "events",
    "ecs",
    "components",
    "input_state",
    "simulation",
    "snapshot",
    "state",
]
