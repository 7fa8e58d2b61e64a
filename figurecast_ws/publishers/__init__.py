"""
Figure Publishers
=================

Bounded Context: Message Production

Public API
----------
    FigurePublisher: Drives a FigureEncoder and hands text to a transport
"""

from .figure import FigurePublisher

__all__ = [
    'FigurePublisher',
]
