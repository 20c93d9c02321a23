"""Concrete reader/writer implementations."""

from .json_codec import JsonGraphReader, JsonGraphWriter, graph_from_obj, graph_to_obj

__all__ = ["JsonGraphReader", "JsonGraphWriter", "graph_from_obj", "graph_to_obj"]
