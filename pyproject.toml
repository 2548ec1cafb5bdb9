[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pbitfactor"
version = "0.5.0"
description = "Probabilistic-bit (p-bit) simulator that factors integers by stochastic annealing"
requires-python = ">=3.10"
dependencies = []
keywords = ["p-bit", "probabilistic computing", "factorization", "annealing", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pbitfactor = "pbitfactor.simulate:main"

[tool.hatch.build.targets.wheel]
packages = ["pbitfactor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
