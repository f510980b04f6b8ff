[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchlab"
version = "0.1.0"
description = "Small local search, path finding and optimisation algorithms: hill climbing, simulated annealing, A*, coin change and sequence consensus."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hill-climbing",
    "simulated-annealing",
    "a-star",
    "pathfinding",
    "coin-change",
    "dynamic-programming",
    "consensus-sequence",
    "heuristic-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchlab-hillclimb = "searchlab.hillclimbing:main"
searchlab-anneal = "searchlab.annealing:main"
searchlab-change = "searchlab.change:main"
searchlab-maze = "searchlab.maze:main"
searchlab-consensus = "searchlab.consensus:main"

[tool.hatch.build.targets.wheel]
packages = ["searchlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
