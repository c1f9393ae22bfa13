"""Numerical kernels (option pricing, stencil, N-body, heat, quadrature, potential) and benchmark commands."""

__version__ = "0.1.0"

__all__ = [
    "black_scholes",
    "black_scholes_cli",
    "compiler_opt",
    "edge_cli",
    "electric_potential",
    "heat",
    "nbody",
    "pngio",
    "stencil",
    "timing",
    "trapezoid",
]