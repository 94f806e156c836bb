"""
Address source backed by pre-fetched JSON files
"""
import json
import os
from typing import List, Optional

from models.address import Address, AddressResult
from sources.base import AddressSource, LookupFailure, normalize_postcode
from utils.logger import Logger
import config


class FlatFileAddressSource(AddressSource):
    """Reads <data_dir>/<normalized postcode>.json lookup envelopes"""

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = data_dir or config.DATA_DIR
        self.logger = Logger()

    def get_file_path(self, postcode: str) -> str:
        """Path of the file holding the addresses for a postcode"""
        return os.path.join(self.data_dir, f"{normalize_postcode(postcode)}{config.FLAT_FILE_EXTENSION}")

    def get_candidates(self, postcode: str) -> List[Address]:
        if not normalize_postcode(postcode):
            raise LookupFailure("Postcode is empty", postcode=postcode)

        file_path = self.get_file_path(postcode)
        self.logger.debug(f"Reading addresses for '{postcode}' from {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise LookupFailure(f"No address file for postcode '{postcode}': {file_path}",
                                postcode=postcode) from e
        except OSError as e:
            raise LookupFailure(f"Cannot read {file_path}: {e}", postcode=postcode) from e
        except json.JSONDecodeError as e:
            raise LookupFailure(f"Malformed JSON in {file_path}: {e}", postcode=postcode) from e

        try:
            address_result = AddressResult.from_dict(data)
        except ValueError as e:
            raise LookupFailure(f"Unexpected lookup envelope in {file_path}: {e}",
                                postcode=postcode) from e

        self.logger.debug(f"Loaded {len(address_result.result)} addresses for '{postcode}'")
        return address_result.result
