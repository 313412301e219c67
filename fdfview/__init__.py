"""Interactive wireframe viewer for FdF height maps: parsing, projection, rasterising and a pygame window."""

__version__ = "1.0.0"
__all__ = ["app", "colors", "parsing", "raster", "view"]