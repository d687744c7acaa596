"""Read-only cabin rendering"""

from .cabin_renderer import CabinRenderer

__all__ = ['CabinRenderer']
