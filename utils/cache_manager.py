"""
Cache of postcode lookup results
"""
import json
import os
from datetime import datetime
from typing import Dict, List, Optional
import config
from utils.logger import Logger


class CacheManager:
    """JSON file cache of candidate addresses keyed by normalized postcode"""

    def __init__(self, cache_file: Optional[str] = None, enabled: Optional[bool] = None,
                 expiry_days: Optional[int] = None):
        self.cache_file = cache_file or config.LOOKUP_CACHE_PATH
        self.cache: Dict[str, Dict] = {}
        self.enabled = config.ENABLE_LOOKUP_CACHE if enabled is None else enabled
        self.expiry_days = config.CACHE_EXPIRY_DAYS if expiry_days is None else expiry_days
        self.logger = Logger()

        if self.enabled:
            self._load_cache()

    def get(self, key: str) -> Optional[List[Dict]]:
        """
        Returns cached addresses for a key

        Args:
            key: Normalized postcode

        Returns:
            List of address dicts, or None on a miss or expired entry
        """
        if not self.enabled:
            return None

        if key not in self.cache:
            return None

        cached_item = self.cache[key]

        try:
            result = cached_item['result']
            cached_date = datetime.fromisoformat(cached_item.get('cached_at', '2000-01-01'))
            age_days = (datetime.now() - cached_date).days
            if not isinstance(result, list):
                raise TypeError(f"result is {type(result).__name__}, not a list")
        except (TypeError, ValueError, AttributeError, KeyError) as e:
            self.logger.warning(f"Dropping unreadable lookup cache entry '{key}': {e}")
            del self.cache[key]
            self._save_cache()
            return None

        if self.expiry_days > 0 and age_days > self.expiry_days:
            del self.cache[key]
            self._save_cache()
            return None

        return result

    def set(self, key: str, result: List[Dict]):
        """
        Stores addresses in the cache

        Args:
            key: Normalized postcode
            result: List of address dicts
        """
        if not self.enabled:
            return

        self.cache[key] = {
            'result': result,
            'cached_at': datetime.now().isoformat()
        }

        self._save_cache()

    def clear(self):
        """Clears the whole cache"""
        self.cache.clear()
        self._save_cache()

    def _load_cache(self):
        """Loads the cache file"""
        if not os.path.exists(self.cache_file):
            return

        try:
            with open(self.cache_file, 'r', encoding='utf-8') as f:
                self.cache = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Cannot load lookup cache {self.cache_file}: {e}")
            self.cache = {}

    def _save_cache(self):
        """Writes the cache file"""
        try:
            os.makedirs(os.path.dirname(self.cache_file) or '.', exist_ok=True)
            with open(self.cache_file, 'w', encoding='utf-8') as f:
                json.dump(self.cache, f, ensure_ascii=False, indent=2)
        except OSError as e:
            self.logger.warning(f"Cannot save lookup cache {self.cache_file}: {e}")

    def get_statistics(self) -> Dict:
        """Cache statistics"""
        return {
            'total_entries': len(self.cache),
            'enabled': self.enabled
        }
