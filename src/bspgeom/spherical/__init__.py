"""
Spherical spaces.

- oned: limit angles and sets of arcs on the unit circle
- twod: great circles and polygons on the unit sphere
"""
