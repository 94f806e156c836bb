"""
Address source interface
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from models.address import Address


class LookupFailure(Exception):
    """Candidate addresses could not be retrieved for a postcode"""

    def __init__(self, message: str, postcode: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.postcode = postcode
        self.status_code = status_code


def normalize_postcode(postcode: str) -> str:
    """Lowercases the postcode and removes all spaces: "PO5 2HX" -> "po52hx" """
    if not postcode:
        return ""
    return postcode.lower().replace(" ", "")


class AddressSource(ABC):
    """
    AddressSource retrieves every known address for a postcode.

    Implementations must raise LookupFailure when the lookup itself fails.
    An empty list means the postcode is known to have no addresses.
    """

    @abstractmethod
    def get_candidates(self, postcode: str) -> List[Address]:
        """
        Given a postcode, returns the list of candidate addresses.

        Raises LookupFailure if the candidates cannot be retrieved.
        """
