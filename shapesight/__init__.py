"""ShapeSight: planar shapes with canonical vertex ordering."""

__version__ = "0.1.0"
