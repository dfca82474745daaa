"""Building blocks for a layered application engine: results, geometry, timing,
vector math, logging, files, images, file trees, layer stacks and application
descriptions."""

__version__ = "0.0.1"