"""
Address source backed by the Ideal Postcodes HTTP API
"""
from typing import List, Optional
from urllib.parse import quote

import requests

from models.address import Address, AddressResult
from sources.base import AddressSource, LookupFailure
from utils.logger import Logger
import config


class IdealPostcodesSource(AddressSource):
    """GET {base_url}/postcodes/{postcode}?api_key=..."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.api_key = api_key if api_key is not None else config.IDEAL_POSTCODES_API_KEY
        self.base_url = (base_url or config.IDEAL_POSTCODES_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else config.LOOKUP_TIMEOUT
        self.session = session or requests.Session()
        self.logger = Logger()

    def get_candidates(self, postcode: str) -> List[Address]:
        if not postcode or not postcode.strip():
            raise LookupFailure("Postcode is empty", postcode=postcode)
        if not self.api_key:
            raise LookupFailure("Ideal Postcodes API key is not configured", postcode=postcode)

        url = f"{self.base_url}/postcodes/{quote(postcode.strip(), safe='')}"
        # The key is a query parameter, keep it out of the log line
        self.logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, params={'api_key': self.api_key}, timeout=self.timeout)
        except requests.RequestException as e:
            raise LookupFailure(f"Lookup request for '{postcode}' failed: {e}", postcode=postcode) from e

        try:
            data = response.json()
        except ValueError as e:
            if not response.ok:
                raise LookupFailure(f"Lookup for '{postcode}' returned HTTP {response.status_code}",
                                    postcode=postcode, status_code=response.status_code) from e
            raise LookupFailure(f"Lookup for '{postcode}' returned invalid JSON: {e}",
                                postcode=postcode, status_code=response.status_code) from e

        if not response.ok:
            message = data.get('message', '') if isinstance(data, dict) else ''
            reason = f"Lookup for '{postcode}' returned HTTP {response.status_code}"
            if message:
                reason += f": {message}"
            raise LookupFailure(reason, postcode=postcode, status_code=response.status_code)

        try:
            address_result = AddressResult.from_dict(data)
        except ValueError as e:
            raise LookupFailure(f"Unexpected lookup envelope for '{postcode}': {e}",
                                postcode=postcode, status_code=response.status_code) from e

        self.logger.debug(
            f"Lookup '{postcode}': code {address_result.code}, {len(address_result.result)} addresses"
        )
        return address_result.result
