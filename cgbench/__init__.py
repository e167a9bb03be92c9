"""Stencil problem, sparse and vector kernels, and multigrid preconditioner for a CG benchmark."""

__version__ = "3.1.0"