"""Request handlers"""

from label_lookup.handlers.label_lookup_handler import LabelLookupHandler

__all__ = ["LabelLookupHandler"]
