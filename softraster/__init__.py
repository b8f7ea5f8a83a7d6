"""A pure-Python software rasterizer: meshes, textures, cameras, lights, clipping and a depth-buffered screen."""

__version__ = "0.1.0"