"""
Address resolution: picks the candidate the user meant, or none

rank() and resolve() are pure functions over the given candidates.
AddressResolver fetches the candidates for the input postcode from an
injected AddressSource and logs the decision.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.address import Address
from models.tokenized_address import ScoredCandidate
from search.canonicalizer import canonicalize
from search.scorer import score
from sources.base import AddressSource
from utils.logger import Logger
import config


def rank(address: Address, candidates: List[Address]) -> List[ScoredCandidate]:
    """
    Scores every candidate against the address

    Returns:
        One ScoredCandidate per candidate, best first: score descending,
        then close_penalty ascending. Equal keys keep the input order.
    """
    target = canonicalize(address)
    scored = [score(canonicalize(candidate), target) for candidate in candidates]
    scored.sort(key=lambda c: (-c.score, c.close_penalty))
    return scored


def select(ranked: List[ScoredCandidate]) -> List[ScoredCandidate]:
    """
    Applies the decision policy to an already ranked list

    Returns:
        [best] if one candidate can be preferred, the list itself when it has
        fewer than two entries, [] when the top candidates cannot be told apart
    """
    # only one address or no addresses
    if len(ranked) < 2:
        return list(ranked)

    highest_score = ranked[0].score
    top = [c for c in ranked if c.score == highest_score]

    if len(top) == 1:
        return top

    if ranked[0].close_penalty < ranked[1].close_penalty:
        return [ranked[0]]

    return []


def resolve(address: Address, candidates: List[Address]) -> List[ScoredCandidate]:
    """
    Resolves the address against the candidates

    Args:
        address: Address as entered by the user
        candidates: Every address known for the postcode

    Returns:
        A single-element list with the accepted match, or an empty list when
        the input is ambiguous or there are no candidates
    """
    return select(rank(address, candidates))


@dataclass
class Resolution:
    """Outcome of resolving one address"""

    status: str                                   # match | ambiguous | none
    matches: List[ScoredCandidate] = field(default_factory=list)
    ranked: List[ScoredCandidate] = field(default_factory=list)

    @property
    def best(self) -> Optional[ScoredCandidate]:
        """The accepted candidate or None"""
        return self.matches[0] if self.matches else None

    def to_dict(self, include_ranked: bool = False) -> Dict:
        data = {
            'status': self.status,
            'total_found': len(self.ranked),
            'matches': [m.to_dict() for m in self.matches]
        }
        if include_ranked:
            data['ranked'] = [c.to_dict() for c in self.ranked]
        return data


class AddressResolver:
    """Looks up candidates for an address's postcode and resolves the address"""

    def __init__(self, source: AddressSource):
        """
        Args:
            source: Where candidates come from (flat files, remote API, ...)
        """
        self.source = source
        self.logger = Logger()

    def validate(self, address: Address) -> Resolution:
        """
        Finds the canonical record for an address

        Raises:
            LookupFailure: if the source cannot provide candidates
        """
        self.logger.info("=" * 80)
        self.logger.info("ADDRESS LOOKUP")
        self.logger.info(f"   Line 1:        '{address.line_1}'")
        self.logger.info(f"   Line 2:        '{address.line_2}'")
        self.logger.info(f"   Line 3:        '{address.line_3}'")
        self.logger.info(f"   Building:      '{address.building_number}' '{address.building_name}'")
        self.logger.info(f"   Sub-building:  '{address.sub_building_name}'")
        self.logger.info(f"   Postcode:      '{address.postcode}'")
        self.logger.info("-" * 80)

        candidates = self.source.get_candidates(address.postcode)
        resolution = self.resolve_candidates(address, candidates)

        self._log_resolution(resolution)
        return resolution

    def resolve_candidates(self, address: Address, candidates: List[Address]) -> Resolution:
        """Resolves against candidates the caller already has"""
        ranked = rank(address, candidates)
        matches = select(ranked)

        if matches:
            status = config.STATUS_MATCH
        elif ranked:
            status = config.STATUS_AMBIGUOUS
        else:
            status = config.STATUS_NONE

        return Resolution(status=status, matches=matches, ranked=ranked)

    def _log_resolution(self, resolution: Resolution):
        if resolution.status == config.STATUS_MATCH:
            best = resolution.best
            self.logger.info("MATCH")
            self.logger.info(f"   Address:  {best.address.get_full_address()}")
            self.logger.info(f"   Score:    {best.score} (penalty {best.close_penalty})")
            self.logger.debug(f"   Matched:  {best.matches}")
        elif resolution.status == config.STATUS_AMBIGUOUS:
            self.logger.info(f"AMBIGUOUS ({len(resolution.ranked)} candidates)")
            self.logger.info("-" * 80)
            for idx, candidate in enumerate(resolution.ranked[:10], 1):
                self.logger.info(f"{idx:2d}. {candidate}")
        else:
            self.logger.info("No candidates for this postcode")

        self.logger.info("=" * 80)
