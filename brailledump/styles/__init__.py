# Importing the style modules registers them with STYLE_REGISTRY.
from . import bcd, direct, nibble  # noqa: F401
