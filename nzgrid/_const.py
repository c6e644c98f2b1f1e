"""
Constants declarations for nzgrid
"""

# Value of pi used by the LINZ NZTM routines. Degree conversions and the longitude
# wrap use it so results match theirs bit for bit.
PI = 3.1415926535898
TWOPI = 2.0 * PI
RAD2DEG = 180 / PI

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0  # Major axis (meters)
GRS80_RF = 298.257222101  # Inverse flattening

# NZTM2000 projection constants
NZTM_CM = 173.0  # Central meridian (degrees)
NZTM_OLAT = 0.0  # Origin latitude (degrees)
NZTM_SF = 0.9996  # Scale factor on the central meridian
NZTM_FE = 1_600_000.0  # False easting (meters)
NZTM_FN = 10_000_000.0  # False northing (meters)
NZTM_UTOM = 1.0  # Unit to meter conversion

# Extent of the NZTM design zone, used only for warnings
NZTM_LON_BOUNDS = (160.0, 190.0)
NZTM_LAT_BOUNDS = (-60.0, -25.0)
NZTM_EASTING_BOUNDS = (1_000_000.0, 2_200_000.0)
NZTM_NORTHING_BOUNDS = (3_000_000.0, 7_000_000.0)
