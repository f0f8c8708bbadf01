"""
Extraction engines for characters and locations.
"""

from extractors.entity_extractor import EntityExtractor

__all__ = [
    "EntityExtractor",
]
