"""Search package"""
from .tokenizer import tokenize
from .canonicalizer import canonicalize
from .scorer import score
from .resolver import AddressResolver, Resolution, rank, resolve, select

__all__ = ['tokenize', 'canonicalize', 'score', 'rank', 'select', 'resolve',
           'AddressResolver', 'Resolution']
