"""
Caching wrapper around another address source
"""
from typing import List, Optional

from models.address import Address
from sources.base import AddressSource, normalize_postcode
from utils.cache_manager import CacheManager
from utils.logger import Logger


class CachedAddressSource(AddressSource):
    """Serves repeated postcodes from CacheManager; failures are not cached"""

    def __init__(self, source: AddressSource, cache: Optional[CacheManager] = None):
        self.source = source
        self.cache = cache or CacheManager()
        self.logger = Logger()

    def get_candidates(self, postcode: str) -> List[Address]:
        key = normalize_postcode(postcode)

        cached = self.cache.get(key) if key else None
        if cached is not None:
            self.logger.debug(f"Lookup cache hit for '{postcode}' ({len(cached)} addresses)")
            return [Address.from_dict(item) for item in cached]

        addresses = self.source.get_candidates(postcode)

        if key:
            self.cache.set(key, [a.to_dict() for a in addresses])
        return addresses
