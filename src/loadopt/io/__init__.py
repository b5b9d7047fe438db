"""Job file schemas and loading."""

from loadopt.io.loader import build_job, expand_items, load_request, parse_request
from loadopt.io.schemas import ContainerSchema, ItemLineSchema, PackingRequestSchema

__all__ = [
    "build_job",
    "expand_items",
    "load_request",
    "parse_request",
    "ContainerSchema",
    "ItemLineSchema",
    "PackingRequestSchema",
]
