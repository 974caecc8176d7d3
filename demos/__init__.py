"""
Demo runners for the two Neptune access paths.
"""

from .bolt_demo import NeptuneBoltDemo
from .data_api_demo import NeptuneDataApiDemo

__all__ = [
    'NeptuneBoltDemo',
    'NeptuneDataApiDemo'
]
