"""persistence — file codec and the on-disk yarn library."""

from yarnblend.persistence.codec import (
    decode_catalog,
    decode_recipes,
    encode_catalog,
    encode_recipes,
    split_top_level,
)
from yarnblend.persistence.library import YarnLibrary, read_text, write_text

__all__ = [
    "decode_catalog",
    "decode_recipes",
    "encode_catalog",
    "encode_recipes",
    "split_top_level",
    "YarnLibrary",
    "read_text",
    "write_text",
]
