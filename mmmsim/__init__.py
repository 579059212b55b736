"""Response simulation of third- and fourth-order linear systems with RK4 and Taylor integrators."""

__version__ = "0.1.0"
__all__ = ["models", "signals", "solvers", "storage", "cli"]