"""Reading and writing sketch geometry payloads."""

from .parser import build_save_payload, load_sketch, save_sketch, sketch_from_dict, sketch_to_dict

__all__ = ["build_save_payload", "load_sketch", "save_sketch", "sketch_from_dict", "sketch_to_dict"]
