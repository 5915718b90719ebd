"""Numeric helpers shared by the gradient estimators and flow solvers."""
