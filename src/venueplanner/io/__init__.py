"""Reading and writing venue scenes."""

from .parser import load_scene, parse_venue
from .serializer import dump_scene, serialize_layout, to_dict

__all__ = ["dump_scene", "load_scene", "parse_venue", "serialize_layout", "to_dict"]
