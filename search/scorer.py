"""
Scoring of a candidate address against the target address
"""
from models.tokenized_address import ScoredCandidate, TokenizedAddress
import config


def score(candidate: TokenizedAddress, target: TokenizedAddress) -> ScoredCandidate:
    """
    Scores one candidate against the target

    Every general token of the candidate found among the target's general
    tokens is a match. A match counts PRIMARY_TOKEN_WEIGHT if the token is
    also one of the candidate's own primary tokens, GENERAL_TOKEN_WEIGHT
    otherwise. Repeated tokens are counted once per occurrence.

    close_penalty = |matches - candidate token count|, i.e. how many of the
    candidate's tokens did not match.
    """
    target_tokens = set(target.tokens)
    primary_tokens = set(candidate.primary_tokens)

    token_count = len(candidate.tokens)
    match_count = 0
    total = 0
    matches = []

    for token in candidate.tokens:
        if token not in target_tokens:
            continue

        match_count += 1
        matches.append(token)
        if token in primary_tokens:
            total += config.PRIMARY_TOKEN_WEIGHT
        else:
            total += config.GENERAL_TOKEN_WEIGHT

    return ScoredCandidate(
        address=candidate.address,
        tokens=list(candidate.tokens),
        primary_tokens=list(candidate.primary_tokens),
        score=total,
        close_penalty=abs(match_count - token_count),
        matches=matches
    )
