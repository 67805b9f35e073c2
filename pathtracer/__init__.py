"""Vectors, rays, bounding boxes, diffuse materials, lights and a Wavefront OBJ loader for path tracing."""

__version__ = "0.1.0"