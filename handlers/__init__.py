"""Handlers package"""
from .excel_handler import ExcelHandler
from .column_mapping_handler import ColumnMappingHandler
from .batch_processor import BatchProcessor

__all__ = ['ExcelHandler', 'ColumnMappingHandler', 'BatchProcessor']
