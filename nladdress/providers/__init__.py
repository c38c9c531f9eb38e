"""
Providers Module
--------------
Common machinery for external geodata providers: one HTTP call per lookup,
status-code classification and table-driven mapping of response fields.
"""
from nladdress.providers.base import (
    Failed,
    NoMatch,
    ProviderAdapter,
    ProviderResult,
    Resolved,
)

__all__ = ["Failed", "NoMatch", "ProviderAdapter", "ProviderResult", "Resolved"]
