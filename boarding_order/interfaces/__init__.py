"""Boarding order policy interfaces"""

from .order_policy import IBoardingOrderPolicy

__all__ = ['IBoardingOrderPolicy']
