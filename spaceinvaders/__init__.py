"""Game-object model for a vertical space shooter: ships, weapons, projectiles, collectables, effects and benchmarking."""

__version__ = "0.1.0"