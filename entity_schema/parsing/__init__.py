"""Reading schema documents from files or strings."""

from .document_parser import DocumentParser, build_source_map, document_parser

__all__ = ["DocumentParser", "build_source_map", "document_parser"]
