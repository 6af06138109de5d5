"""
LANTERN - Layered Annotation and Narrative Text Emphasis RendereR

Text engines behind career-story narratives: splits narrative prose around
persisted annotations and decorates it with priority-ranked semantic highlights.

Architecture:
- Annotation Context: offset-addressed annotations and text segmentation
- Highlighting Context: metric, technique, glossary, verb and emphasis decoration
- Narrative Context: section-level helpers (STAR mapping, ratings, timing)
"""

__version__ = "0.1.0"
