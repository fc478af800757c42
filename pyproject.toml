[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridbots"
version = "0.1.0"
description = "Grid pathfinding (A*, Dijkstra, BFS) and TCP-driven learning bots for grid worlds"
requires-python = ">=3.10"
dependencies = []
keywords = ["pathfinding", "astar", "dijkstra", "bfs", "grid", "reinforcement-learning", "bots"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridbots-benchmark = "gridbots.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["gridbots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
