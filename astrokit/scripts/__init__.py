"""
This package provides the command line scripts that ship with astrokit.
"""
