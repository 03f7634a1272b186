"""Geometry, buffer layouts, transforms, input state, lights and textures for a small 3D renderer."""

__version__ = "0.1.0"