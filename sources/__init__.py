"""Address sources package"""
from .base import AddressSource, LookupFailure, normalize_postcode
from .flat_file import FlatFileAddressSource
from .ideal_postcodes import IdealPostcodesSource
from .cached import CachedAddressSource

__all__ = [
    'AddressSource',
    'LookupFailure',
    'normalize_postcode',
    'FlatFileAddressSource',
    'IdealPostcodesSource',
    'CachedAddressSource'
]
