"""
Boarding Analyzer

This package provides statistics collection and plotting for boarding
simulation runs.

Components:
- BoardingStatistics: broker recorder plus simulation-only passenger metrics
"""

__version__ = "0.1.0"

from .boarding_statistics import BoardingStatistics

__all__ = ['BoardingStatistics']
