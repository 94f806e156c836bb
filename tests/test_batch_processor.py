import json
import os
import sys
import tempfile
import unittest

import pandas as pd

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from handlers.batch_processor import BatchProcessor
from handlers.column_mapping_handler import ColumnMappingHandler
from handlers.excel_handler import ExcelHandler
from models.address import Address
from search.resolver import AddressResolver
from sources.flat_file import FlatFileAddressSource

ROSE_TOWER = {
    "result": [
        {"line_1": "Flat 20", "line_2": "Rose Tower", "line_3": "62 Clarence Parade",
         "building_number": "62", "building_name": "Rose Tower",
         "sub_building_name": "Flat 20", "postcode": "PO5 2HX"},
        {"line_1": "Flat 21", "line_2": "Rose Tower", "line_3": "62 Clarence Parade",
         "building_number": "62", "building_name": "Rose Tower",
         "sub_building_name": "Flat 21", "postcode": "PO5 2HX"}
    ],
    "code": 2000,
    "message": "Success"
}

COLUMNS = ["client_id", "line_1", "line_2", "line_3", "building_number",
           "building_name", "sub_building_name", "postcode"]

ROWS = [
    ["c1", "Flat 20", "Rose Tower", "62 Clarence Parade", "", "", "", "PO5 2HX"],
    ["c2", "Rose Tower", "", "", "", "", "", "PO5 2HX"],
    ["c3", "1 Nowhere Lane", "", "", "", "", "", "ZZ1 1ZZ"],
    ["c4", "2 Missing Road", "", "", "", "", "", "XX9 9XX"],
]


class BatchTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.data_dir = os.path.join(self.tmp.name, "data")
        os.makedirs(self.data_dir)

        with open(os.path.join(self.data_dir, "po52hx.json"), 'w', encoding='utf-8') as f:
            json.dump(ROSE_TOWER, f)
        with open(os.path.join(self.data_dir, "zz11zz.json"), 'w', encoding='utf-8') as f:
            json.dump({"result": [], "code": 2000, "message": "Success"}, f)

        self.input_path = os.path.join(self.tmp.name, "clients.csv")
        pd.DataFrame(ROWS, columns=COLUMNS).to_csv(self.input_path, index=False)

    def tearDown(self):
        self.tmp.cleanup()


class TestExcelHandler(BatchTestCase):

    def test_load_csv_keeps_text(self):
        handler = ExcelHandler()
        handler.load_file(self.input_path)

        self.assertEqual(handler.get_row_count(), 4)
        self.assertEqual(handler.get_column_names(), COLUMNS)
        self.assertEqual(handler.get_address_from_row(0), Address(
            line_1="Flat 20", line_2="Rose Tower", line_3="62 Clarence Parade", postcode="PO5 2HX"
        ))

    def test_multi_column_mapping(self):
        path = os.path.join(self.tmp.name, "custom.csv")
        pd.DataFrame([["Flat 20", "62 Clarence Parade", "PO5 2HX"]],
                     columns=["Flat", "Street", "Postcode"]).to_csv(path, index=False)

        handler = ExcelHandler()
        handler.load_file(path)
        handler.set_column_mapping({'line_1': ['Flat', 'Street'], 'postcode': ['Postcode']})

        address = handler.get_address_from_row(0)
        self.assertEqual(address.line_1, "Flat 20 62 Clarence Parade")
        self.assertEqual(address.postcode, "PO5 2HX")
        self.assertEqual(address.line_2, "")

    def test_unknown_field_in_mapping(self):
        handler = ExcelHandler()
        with self.assertRaises(ValueError):
            handler.set_column_mapping({'city': ['City']})

    def test_xlsx_round_trip(self):
        handler = ExcelHandler()
        handler.load_file(self.input_path)
        xlsx_path = os.path.join(self.tmp.name, "clients.xlsx")
        handler.save_file(xlsx_path)

        reloaded = ExcelHandler()
        reloaded.load_file(xlsx_path)
        self.assertEqual(reloaded.get_row_count(), 4)
        self.assertEqual(reloaded.get_address_from_row(1).line_1, "Rose Tower")

    def test_update_row_creates_columns(self):
        handler = ExcelHandler()
        handler.load_file(self.input_path)
        handler.update_row(2, {'note': 'checked', 'score': 5})

        self.assertEqual(handler.get_row_data(2)['note'], 'checked')
        self.assertEqual(handler.get_row_data(2)['score'], '5')
        self.assertEqual(handler.get_row_data(0)['note'], '')

    def test_xls_output_rejected(self):
        handler = ExcelHandler()
        handler.load_file(self.input_path)
        xls_path = os.path.join(self.tmp.name, "clients.xls")

        with self.assertRaises(ValueError):
            handler.save_file(xls_path)
        self.assertFalse(os.path.exists(xls_path))

    def test_save_without_data(self):
        with self.assertRaises(ValueError):
            ExcelHandler().save_file(os.path.join(self.tmp.name, "out.csv"))


class TestColumnMappingHandler(BatchTestCase):

    def test_save_load_list_delete(self):
        handler = ColumnMappingHandler(mappings_dir=os.path.join(self.tmp.name, "mappings"))
        mapping = {'line_1': ['Flat', 'Street'], 'postcode': ['Postcode']}

        self.assertTrue(handler.save_mapping("crm export", mapping))
        self.assertEqual(handler.list_mappings(), ["crm export"])
        self.assertEqual(handler.load_mapping("crm export"), mapping)

        self.assertTrue(handler.delete_mapping("crm export"))
        self.assertIsNone(handler.load_mapping("crm export"))
        self.assertFalse(handler.delete_mapping("crm export"))

    def test_unsafe_names(self):
        handler = ColumnMappingHandler(mappings_dir=os.path.join(self.tmp.name, "mappings"))

        self.assertFalse(handler.save_mapping("../", {}))
        self.assertTrue(handler.save_mapping("../evil", {'line_1': ['A']}))
        self.assertEqual(handler.list_mappings(), ["evil"])


class TestBatchProcessor(BatchTestCase):

    def _processor(self):
        handler = ExcelHandler()
        handler.load_file(self.input_path)
        resolver = AddressResolver(FlatFileAddressSource(data_dir=self.data_dir))
        return handler, BatchProcessor(handler, resolver)

    def test_process_all_rows(self):
        handler, processor = self._processor()
        progress = []
        processor.on_progress = lambda done, total: progress.append((done, total))

        stats = processor.process()

        self.assertEqual(stats, {
            'total': 4, 'matched': 1, 'ambiguous': 1, 'not_found': 1, 'skipped': 0, 'errors': 1
        })
        self.assertEqual(progress[-1], (4, 4))

        statuses = [handler.get_row_data(i)['match_status'] for i in range(4)]
        self.assertEqual(statuses, ['match', 'ambiguous', 'none', 'error'])

        matched = handler.get_row_data(0)
        self.assertEqual(matched['matched_sub_building_name'], "Flat 20")
        self.assertEqual(matched['match_score'], "12")
        self.assertEqual(matched['matched_address'], "Flat 20, Rose Tower, 62 Clarence Parade, PO5 2HX")
        self.assertEqual(handler.get_row_data(1)['matched_address'], "")

    def test_results_saved(self):
        handler, processor = self._processor()
        processor.process()

        output_path = os.path.join(self.tmp.name, "resolved.csv")
        handler.save_file(output_path)

        df = pd.read_csv(output_path, dtype=str, keep_default_na=False)
        self.assertEqual(list(df['client_id']), ["c1", "c2", "c3", "c4"])
        self.assertEqual(list(df['match_status']), ['match', 'ambiguous', 'none', 'error'])
        self.assertEqual(df.loc[0, 'matched_line_1'], "Flat 20")

    def test_skip_processed(self):
        handler, processor = self._processor()
        processor.process()

        stats = processor.process(skip_processed=True)
        self.assertEqual(stats['skipped'], 1)
        self.assertEqual(stats['matched'], 0)
        self.assertEqual(handler.get_row_data(0)['match_status'], 'match')

    def test_stop(self):
        handler, processor = self._processor()

        def on_progress(done, total):
            if done == 2:
                processor.stop()

        processor.on_progress = on_progress
        stats = processor.process()

        self.assertEqual(stats['matched'], 1)
        self.assertEqual(stats['ambiguous'], 1)
        self.assertEqual(stats['not_found'], 0)
        self.assertEqual(stats['errors'], 0)
        self.assertEqual(handler.get_row_data(2)['match_status'], '')
        self.assertEqual(handler.get_row_data(3)['match_status'], '')

    def test_row_range(self):
        handler, processor = self._processor()
        stats = processor.process(start_row=1, end_row=3)

        self.assertEqual(stats['total'], 2)
        self.assertEqual(stats['ambiguous'], 1)
        self.assertEqual(stats['not_found'], 1)
        self.assertEqual(handler.get_row_data(0)['match_status'], '')


if __name__ == '__main__':
    unittest.main()
