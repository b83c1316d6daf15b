"""natsize - scale document images to their natural size."""

from .config import ScaleConfig
from .transform import ScaleToNaturalSize, scale_to_natural_size

__version__ = "0.1.0"

__all__ = ["ScaleConfig", "ScaleToNaturalSize", "scale_to_natural_size"]
