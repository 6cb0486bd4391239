"""
advertorial_builder — pages advertorial (presell) en blocs typés.

Blocs (23 types) → générateurs (archétypes déterministes ou Claude) → rendu HTML
prêt à publier sur une page Shopify.
"""
__version__ = "0.1.0"

from .blocks import Block, BaseBlock, BLOCK_TYPES, coerce_block, dump_blocks, parse_block, parse_blocks
from .errors import AdvertorialError, ConfigurationError, MalformedResponse, ModelCallError, PublishError
from .factory import BLOCK_CATALOG, create_default
from .generator import generate, generate_page, generate_title, list_archetypes
from .renderer import RenderOptions, render, render_one

__all__ = [
    "__version__",
    "Block", "BaseBlock", "BLOCK_TYPES", "coerce_block", "dump_blocks", "parse_block", "parse_blocks",
    "AdvertorialError", "ConfigurationError", "MalformedResponse", "ModelCallError", "PublishError",
    "BLOCK_CATALOG", "create_default",
    "generate", "generate_page", "generate_title", "list_archetypes",
    "RenderOptions", "render", "render_one",
]
