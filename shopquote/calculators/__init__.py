"""
Deterministic quote calculators.

Pure Python math. No I/O: the caller resolves the material and the tunable
rates before calling calculate().
"""
