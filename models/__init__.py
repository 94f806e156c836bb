"""Models package"""
from .address import Address, AddressResult
from .tokenized_address import ScoredCandidate, TokenizedAddress

__all__ = ['Address', 'AddressResult', 'TokenizedAddress', 'ScoredCandidate']
