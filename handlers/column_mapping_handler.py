"""
Saving/loading of named column mapping schemes
"""
import json
import os
from typing import Dict, List, Optional
import config
from utils.logger import Logger


class ColumnMappingHandler:
    """Named {field: [column names]} schemes stored as JSON files"""

    def __init__(self, mappings_dir: Optional[str] = None):
        self.mappings_dir = mappings_dir or config.COLUMN_MAPPINGS_DIR
        self.logger = Logger()

    def _path(self, name: str) -> str:
        return os.path.join(self.mappings_dir, f"{name}.json")

    @staticmethod
    def safe_name(name: str) -> str:
        """Drops characters that are unsafe in a file name"""
        return "".join(c for c in name if c.isalnum() or c in (' ', '_', '-')).strip()

    def save_mapping(self, name: str, mapping: Dict[str, List[str]]) -> bool:
        """
        Saves a mapping scheme

        Args:
            name: Scheme name
            mapping: {field: [column names]}

        Returns:
            True on success
        """
        safe_name = self.safe_name(name)

        if not safe_name:
            return False

        try:
            os.makedirs(self.mappings_dir, exist_ok=True)
            with open(self._path(safe_name), 'w', encoding='utf-8') as f:
                json.dump(mapping, f, ensure_ascii=False, indent=2)
            return True
        except OSError as e:
            self.logger.error(f"Cannot save mapping '{name}': {e}")
            return False

    def load_mapping(self, name: str) -> Optional[Dict[str, List[str]]]:
        """
        Loads a mapping scheme

        Returns:
            The mapping or None if it does not exist or cannot be read
        """
        file_path = self._path(self.safe_name(name))

        if not os.path.exists(file_path):
            return None

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error(f"Cannot load mapping '{name}': {e}")
            return None

    def list_mappings(self) -> List[str]:
        """Names of saved schemes"""
        if not os.path.exists(self.mappings_dir):
            return []

        mappings = []
        for filename in os.listdir(self.mappings_dir):
            if filename.endswith('.json'):
                mappings.append(filename[:-5])

        return sorted(mappings)

    def delete_mapping(self, name: str) -> bool:
        """Deletes a scheme; True if it existed"""
        file_path = self._path(self.safe_name(name))

        if not os.path.exists(file_path):
            return False

        try:
            os.remove(file_path)
            return True
        except OSError as e:
            self.logger.error(f"Cannot delete mapping '{name}': {e}")
            return False
