# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides a few utility routines used throughout astrokit.

:mod:`.spherical_coordinates` converts between spherical and Cartesian coordinates and :mod:`.options` provides the
:class:`.UserOptions` dataclass base used to configure classes.
"""
