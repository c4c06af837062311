# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Welcome to astrokit

astrokit provides the three dimensional vector algebra and rotation primitives that the rest of an astrodynamics tool
suite is built on.  The functionality is split into the following modules/packages:

* :mod:`.vectors` - cross products, unit vectors (and their time derivatives), outer/box products and projections
* :mod:`.rotations` - Rodrigues axis-angle rotations, cross product matrices and principal axis rotation matrices
* :mod:`.utilities` - spherical coordinate conversions and the user option dataclass base
* :mod:`.diagnostics` - a self consistency check of the rotation routines
"""

__version__ = '1.0.0'
