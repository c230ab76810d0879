"""
Euclidean spaces.

- oned: oriented points and sets of intervals on the real line
- twod: lines and polygons of the plane
"""
