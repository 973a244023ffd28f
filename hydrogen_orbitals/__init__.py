"""
Hydrogen Orbital Engine

Radial wave functions, spherical harmonics, complete hydrogen wave
functions, probability densities, and orbital descriptors computed from
the quantum numbers (n, l, m).
"""

from .quantum_constants import *
from .special_functions import *
from .coordinates import *
from .hydrogen_wavefunctions import *
from .orbital_descriptors import *

__all__ = [
    'quantum_constants',
    'special_functions',
    'coordinates',
    'hydrogen_wavefunctions',
    'orbital_descriptors',
]

__version__ = '1.0.0'
