"""
Tokenized views of an address used for scoring
"""
from dataclasses import dataclass, field
from typing import Dict, List

from models.address import Address


@dataclass
class TokenizedAddress:
    """Address with its general (lines) and primary (identifying fields) tokens"""

    address: Address
    tokens: List[str] = field(default_factory=list)          # line_1..line_3
    primary_tokens: List[str] = field(default_factory=list)  # building name, number, sub-building


@dataclass
class ScoredCandidate(TokenizedAddress):
    """Candidate scored against the target address in one ranking pass"""

    score: int = 0
    close_penalty: int = 0
    matches: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Converts to a JSON-friendly dict"""
        return {
            'address': self.address.to_dict(),
            'score': self.score,
            'close_penalty': self.close_penalty,
            'tokens': list(self.tokens),
            'primary_tokens': list(self.primary_tokens),
            'matches': list(self.matches)
        }

    def __str__(self):
        return f"{self.score:3d} | penalty {self.close_penalty:2d} | {self.address.get_full_address()}"
