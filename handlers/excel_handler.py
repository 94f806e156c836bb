"""
Spreadsheet handler (XLSX/CSV)
"""
import os
from typing import Dict, List, Optional

import pandas as pd

from models.address import Address
from utils.logger import Logger
import config


class ExcelHandler:
    """Loads a spreadsheet of addresses and writes resolution results back"""

    def __init__(self):
        self.df: Optional[pd.DataFrame] = None
        self.file_path = None
        self.column_mapping: Dict[str, List[str]] = dict(config.DEFAULT_COLUMN_MAPPING)
        self.logger = Logger()

    def load_file(self, file_path: str) -> pd.DataFrame:
        """Loads the file keeping every cell as text ("047" stays "047")"""
        _, ext = os.path.splitext(file_path)

        try:
            if ext.lower() == '.csv':
                self.df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
            else:
                self.df = pd.read_excel(file_path, dtype=str, keep_default_na=False)
        except Exception as e:
            self.logger.error(f"Cannot load file {file_path}: {e}")
            raise

        self.df = self.df.fillna("")

        # Drop fully empty rows
        if len(self.df):
            non_empty = self.df.apply(lambda row: any(str(v).strip() for v in row), axis=1)
            self.df = self.df[non_empty].reset_index(drop=True)

        self.file_path = file_path
        self.logger.info(f"Loaded file: {file_path}")
        self.logger.info(f"Rows: {len(self.df)}")
        self.logger.info(f"Columns: {len(self.df.columns)}")
        return self.df

    def save_file(self, file_path: str = None):
        """Saves the DataFrame, format chosen by extension"""
        if self.df is None:
            raise ValueError("No data to save")

        save_path = file_path or self.file_path
        if not save_path:
            raise ValueError("No path to save to")

        _, ext = os.path.splitext(save_path)
        if ext.lower() == '.xls':
            # no writer for .xls
            raise ValueError(f"XLS output is not supported, save as .xlsx: {save_path}")

        try:
            if ext.lower() == '.csv':
                self.df.to_csv(save_path, index=False)
            else:
                self.df.to_excel(save_path, index=False, engine='openpyxl')
        except Exception as e:
            self.logger.error(f"Cannot save file {save_path}: {e}")
            raise

        self.logger.info(f"File saved: {save_path}")

    def get_column_names(self):
        """Column names of the loaded file"""
        if self.df is None:
            return []
        return list(self.df.columns)

    def get_row_count(self) -> int:
        return 0 if self.df is None else len(self.df)

    def set_column_mapping(self, mapping: Dict[str, List[str]]):
        """
        Sets which columns feed each address field

        Args:
            mapping: {field: [column names]}, e.g. {'line_1': ['Flat', 'Street']}
        """
        unknown = [f for f in mapping if f not in config.DEFAULT_COLUMN_MAPPING]
        if unknown:
            raise ValueError(f"Unknown address fields in mapping: {unknown}")

        self.column_mapping = {f: list(cols) for f, cols in mapping.items()}
        self.logger.info(f"Column mapping set: {self.column_mapping}")

        if self.df is not None:
            missing = [c for cols in self.column_mapping.values() for c in cols if c not in self.df.columns]
            if missing:
                self.logger.warning(f"Mapped columns not in file: {missing}")

    def get_address_from_row(self, row_index: int) -> Address:
        """Builds an Address from a row"""
        if self.df is None:
            raise ValueError("File is not loaded")

        row = self.df.iloc[row_index]

        def get_value(field_id):
            """Joins the values of every column mapped to the field"""
            values = []
            for col_name in self.column_mapping.get(field_id, []):
                if col_name not in self.df.columns:
                    continue
                value = row[col_name]
                if pd.notna(value) and str(value).strip():
                    values.append(str(value).strip())
            return " ".join(values)

        return Address(**{field_id: get_value(field_id) for field_id in config.DEFAULT_COLUMN_MAPPING})

    def update_row(self, row_index: int, updates: Dict[str, str]):
        """
        Writes values into a row

        Args:
            row_index: Row index
            updates: {column name: value}; values are stored as text and
                missing columns are created
        """
        if self.df is None:
            raise ValueError("File is not loaded")

        for col_name, value in updates.items():
            if col_name not in self.df.columns:
                self.df[col_name] = ""
            self.df.at[row_index, col_name] = "" if value is None else str(value)

        self.logger.debug(f"Row {row_index} updated: {updates}")

    def get_row_data(self, row_index: int) -> dict:
        """Row as a dict"""
        if self.df is None:
            return {}

        return self.df.iloc[row_index].to_dict()
