"""
The `constants` module defines unit conversion and time constants used in datum transformations.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

"""
Constant to convert parts-per-million to a dimensionless ratio. Units: *1/ppm*
"""
PPM2RATIO = 1.0e-6

# Time Constants

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5  # Offset between Julian Date and Modified Julian Date

"""
Modified Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
MJD2000 = 51544.5
