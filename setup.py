"""
Setup script for bspgeom.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies

The package is pure Python; numpy is only needed at runtime, for the
point-array helpers of bspgeom.mathutils.
"""

from setuptools import setup, find_packages


setup(
    name='bspgeom',
    version='0.1.0',
    description='Binary space partitioning regions with exact boolean algebra',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={'dev': ['pytest']},
)
