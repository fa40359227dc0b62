"""
Constants declarations for geosegments
"""

# Mean Earth Radius (spherical model)
EARTH_RADIUS_KM = 6371.0

# Default number of subdivisions along a great-circle path
DEFAULT_PATH_POINTS = 50

# Below this, the rhumb line is treated as running along a parallel
RHUMB_PARALLEL_TOLERANCE = 1e-11

# Below this, sin(d) is treated as zero and slerp weights are undefined
SLERP_TOLERANCE = 1e-12

# Curve overlay (display only)
BEZIER_LATITUDE_OFFSET = 10.0
BEZIER_PATH_POINTS = 100
