"""Constants for distance metrics."""

# Mean equatorial earth radius, used to normalize distances to radians
EARTH_RADIUS_KM = 6378.137
EARTH_RADIUS_MI = 3963.191
