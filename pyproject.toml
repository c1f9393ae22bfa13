[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hpclab"
version = "0.1.0"
description = "Numerical kernels and small benchmarks: Black-Scholes pricing, edge-detection stencil, N-body, heat diffusion, trapezoidal quadrature and electric potential"
requires-python = ">=3.10"
keywords = [
    "benchmark",
    "black-scholes",
    "n-body",
    "stencil",
    "heat-equation",
    "trapezoidal-rule",
    "electric-potential",
    "numerical",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hpclab-black-scholes = "hpclab.black_scholes_cli:main"
hpclab-edge = "hpclab.edge_cli:main"
hpclab-compiler-opt = "hpclab.compiler_opt:main"
hpclab-nbody = "hpclab.nbody:main"
hpclab-trapezoid = "hpclab.trapezoid:main"
hpclab-heat = "hpclab.heat:main"
hpclab-electric-potential = "hpclab.electric_potential:main"

[tool.hatch.build.targets.wheel]
packages = ["hpclab"]

[tool.hatch.build.targets.sdist]
include = ["hpclab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
