"""Packing algorithms."""

from loadopt.algorithms.engine import OptimizationEngine

__all__ = ["OptimizationEngine"]
