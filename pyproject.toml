[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceinvaders"
version = "0.1.0"
description = "Game-object model for a vertical space shooter: ships, weapons, projectiles, collectables, effects and frame-time benchmarking."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "space-invaders", "shooter", "arcade", "game-objects"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spaceinvaders"]

[tool.pytest.ini_options]
addopts = "-ra"
