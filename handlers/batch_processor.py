"""
BatchProcessor - resolves every address of a loaded spreadsheet

Writes for each row:
- match_status: match | ambiguous | none | error
- match_score of the accepted candidate
- matched_address and the matched_<field> columns
"""
from typing import Callable, Dict, Optional

from handlers.excel_handler import ExcelHandler
from search.resolver import AddressResolver
from sources.base import LookupFailure
from utils.logger import Logger
import config


class BatchProcessor:
    """Row-by-row address resolution with statistics"""

    def __init__(self, excel_handler: ExcelHandler, resolver: AddressResolver):
        self.excel_handler = excel_handler
        self.resolver = resolver
        self.logger = Logger()

        self.is_stopped = False
        self.stats = self._empty_stats(0)

        # Callback (done, total)
        self.on_progress: Optional[Callable[[int, int], None]] = None

    @staticmethod
    def _empty_stats(total: int) -> Dict[str, int]:
        return {
            'total': total,
            'matched': 0,
            'ambiguous': 0,
            'not_found': 0,
            'skipped': 0,
            'errors': 0
        }

    def process(self, start_row: int = 0, end_row: Optional[int] = None,
                skip_processed: bool = False) -> Dict[str, int]:
        """
        Resolves rows [start_row, end_row)

        Args:
            start_row: First row
            end_row: Row to stop before (default: end of file)
            skip_processed: Leave rows already marked as matched untouched

        Returns:
            {'total', 'matched', 'ambiguous', 'not_found', 'skipped', 'errors'}
        """
        row_count = self.excel_handler.get_row_count()
        end_row = row_count if end_row is None else min(end_row, row_count)

        self.is_stopped = False
        self.stats = self._empty_stats(max(0, end_row - start_row))

        self.logger.info("=" * 80)
        self.logger.info("BATCH RESOLUTION")
        self.logger.info(f"   Rows: {start_row} - {end_row}")
        self.logger.info("=" * 80)

        for row_idx in range(start_row, end_row):
            if self.is_stopped:
                self.logger.info("Batch stopped")
                break

            if self.on_progress:
                self.on_progress(row_idx - start_row + 1, end_row - start_row)

            if skip_processed and self._is_row_already_processed(row_idx):
                self.stats['skipped'] += 1
                continue

            address = self.excel_handler.get_address_from_row(row_idx)

            try:
                resolution = self.resolver.validate(address)
            except LookupFailure as e:
                self.logger.error(f"Row {row_idx}: lookup failed: {e}")
                self.stats['errors'] += 1
                self._write_row(row_idx, config.STATUS_ERROR)
                continue

            if resolution.status == config.STATUS_MATCH:
                self.stats['matched'] += 1
            elif resolution.status == config.STATUS_AMBIGUOUS:
                self.stats['ambiguous'] += 1
            else:
                self.stats['not_found'] += 1

            best = resolution.best
            self._write_row(row_idx, resolution.status, best)
            self.logger.debug(f"Row {row_idx}: {resolution.status.upper()} - {address.get_full_address()}")

        self._log_final_stats()
        return self.stats

    def stop(self):
        """Stops processing before the next row"""
        self.is_stopped = True

    def _write_row(self, row_idx: int, status: str, best=None):
        updates = {
            config.RESULT_STATUS_COLUMN: status,
            config.RESULT_SCORE_COLUMN: best.score if best else "",
            config.RESULT_ADDRESS_COLUMN: best.address.get_full_address() if best else "",
        }
        matched_fields = best.address.to_dict() if best else {}
        for field_id in config.DEFAULT_COLUMN_MAPPING:
            updates[config.RESULT_FIELD_PREFIX + field_id] = matched_fields.get(field_id, "")

        self.excel_handler.update_row(row_idx, updates)

    def _is_row_already_processed(self, row_idx: int) -> bool:
        row = self.excel_handler.get_row_data(row_idx)
        return str(row.get(config.RESULT_STATUS_COLUMN, "")).strip() == config.STATUS_MATCH

    def _log_final_stats(self):
        """Logs the final statistics"""
        self.logger.info("=" * 80)
        self.logger.info("BATCH STATISTICS")
        self.logger.info("=" * 80)
        self.logger.info(f"Total rows:   {self.stats['total']}")
        self.logger.info(f"Matched:      {self.stats['matched']}")
        self.logger.info(f"Ambiguous:    {self.stats['ambiguous']}")
        self.logger.info(f"Not found:    {self.stats['not_found']}")
        self.logger.info(f"Skipped:      {self.stats['skipped']}")
        self.logger.info(f"Errors:       {self.stats['errors']}")
        self.logger.info("=" * 80)
