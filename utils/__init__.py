"""Utils package"""
from .logger import Logger
from .cache_manager import CacheManager

__all__ = ['Logger', 'CacheManager']
