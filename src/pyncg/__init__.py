"""
pyncg - Nonlinear Conjugate Gradient Minimization.

A small Python library for unconstrained minimization of smooth scalar
functions of a real vector. Users supply the objective f(x) and its
gradient; the minimizer alternates an exact line search (bracketing plus
a Brent root solve of the directional derivative) with conjugate
direction updates.

Main features:
- Fletcher-Reeves and Polak-Ribiere beta formulas
- Periodic and negative-beta direction restarts
- Pluggable preconditioner and root finder
- YAML configuration, observers for progress reporting
- Optional FastAPI transport for benchmark problems
"""

__version__ = "0.1.0"
__author__ = "pyncg Team"
