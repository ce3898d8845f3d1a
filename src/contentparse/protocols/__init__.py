"""Protocol definitions for extensible components."""

from contentparse.protocols.content_provider import ContentProvider
from contentparse.protocols.ingester import Ingester
from contentparse.protocols.structure_parser import StructureParser

__all__ = ["ContentProvider", "Ingester", "StructureParser"]
