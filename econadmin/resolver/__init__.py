"""Entity resolver module.

This module resolves user-typed tokens to host entities:
- Numeric ID match
- Exact name match
- Substring match (with ambiguity reporting)
"""

from econadmin.resolver.entity_resolver import AMBIGUOUS_PREVIEW_LIMIT, EntityResolver

__all__ = [
    "AMBIGUOUS_PREVIEW_LIMIT",
    "EntityResolver",
]
