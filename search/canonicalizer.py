"""
Address canonicalization: splits an address into general and primary tokens
"""
from models.address import Address
from models.tokenized_address import TokenizedAddress
from search.tokenizer import tokenize


def canonicalize(address: Address) -> TokenizedAddress:
    """
    Tokenizes the structural parts of an address

    General tokens come from the three descriptive lines joined with a space.
    Primary tokens are building name, building number and sub-building name,
    appended in that order (each group sorted on its own).
    """
    combined = " ".join([address.line_1, address.line_2, address.line_3])

    primary_tokens = (
        tokenize(address.building_name)
        + tokenize(address.building_number)
        + tokenize(address.sub_building_name)
    )

    return TokenizedAddress(
        address=address,
        tokens=tokenize(combined),
        primary_tokens=primary_tokens
    )
