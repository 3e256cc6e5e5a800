"""Whitted-style recursive ray tracer.

Traces rays through a scene of spheres and planes, shading hits with Phong
illumination, hard shadows, mirror reflection and dielectric refraction, up
to a fixed recursion depth. Rendered images are stored in a Taichi-backed
canvas and exported as PNG with Pillow.

Subpackages:
    core: Vectors, colors, matrices, transforms, rays, canvas and renderer
    geometry: Shape kinds and scene objects
    materials: Phong materials and procedural patterns
    scene: Intersections, lights, the world and example scenes
    camera: Pinhole camera ray generation
    preview: Tone mapping, Matplotlib preview and PNG export
"""

__version__ = "0.1.0"
