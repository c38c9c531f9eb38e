"""
Address Lookup Module
-------------------
Resolves a Dutch postcode and house number to a canonical address by trying
the configured postcode providers in a fixed priority order.
"""
from nladdress.lookup.cascade import AddressResolutionCascade, ProviderAttempt
from nladdress.lookup.providers import POSTCODE_PROVIDERS, build_postcode_providers

__all__ = [
    "AddressResolutionCascade",
    "ProviderAttempt",
    "POSTCODE_PROVIDERS",
    "build_postcode_providers",
]
