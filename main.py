"""
Command line entry point

    address-resolver resolve --postcode "PO5 2HX" --line-1 "Flat 20" --line-2 "Rose Tower"
    address-resolver batch clients.xlsx -o clients_resolved.xlsx --source remote
"""
import argparse
import json
import sys
from typing import List, Optional

from handlers.batch_processor import BatchProcessor
from handlers.column_mapping_handler import ColumnMappingHandler
from handlers.excel_handler import ExcelHandler
from models.address import Address
from search.resolver import AddressResolver
from sources.base import AddressSource, LookupFailure
from sources.cached import CachedAddressSource
from sources.flat_file import FlatFileAddressSource
from sources.ideal_postcodes import IdealPostcodesSource
from utils.cache_manager import CacheManager
from utils.logger import Logger
import config

EXIT_MATCH = 0
EXIT_LOOKUP_FAILURE = 1
EXIT_NO_MATCH = 2
EXIT_USAGE_ERROR = 3


def build_source(args: argparse.Namespace) -> AddressSource:
    """Creates the address source selected on the command line"""
    if args.source == 'remote':
        source = IdealPostcodesSource(api_key=args.api_key)
        if args.no_cache:
            return source
        return CachedAddressSource(source, CacheManager())
    return FlatFileAddressSource(data_dir=args.data_dir)


def _add_source_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('--source', choices=['file', 'remote'], default='file',
                        help="where candidate addresses come from (default: file)")
    parser.add_argument('--data-dir', default=None,
                        help=f"directory of <postcode>.json files (default: {config.DATA_DIR})")
    parser.add_argument('--api-key', default=None,
                        help="Ideal Postcodes API key (default: $IDEAL_POSTCODES_API_KEY)")
    parser.add_argument('--no-cache', action='store_true',
                        help="do not cache remote lookups")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='address-resolver',
        description="Resolve a free-form UK address to the canonical record for its postcode"
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    resolve_parser = subparsers.add_parser('resolve', help="resolve a single address")
    resolve_parser.add_argument('--postcode', required=True)
    resolve_parser.add_argument('--line-1', default="")
    resolve_parser.add_argument('--line-2', default="")
    resolve_parser.add_argument('--line-3', default="")
    resolve_parser.add_argument('--building-number', default="")
    resolve_parser.add_argument('--building-name', default="")
    resolve_parser.add_argument('--sub-building-name', default="")
    resolve_parser.add_argument('--all', action='store_true',
                                help="include every ranked candidate in the output")
    _add_source_arguments(resolve_parser)

    batch_parser = subparsers.add_parser('batch', help="resolve every row of a spreadsheet")
    batch_parser.add_argument('input', help="CSV or XLSX file")
    batch_parser.add_argument('-o', '--output', default=None,
                              help="where to write the results (default: overwrite input)")
    batch_parser.add_argument('--mapping', default=None,
                              help="name of a saved column mapping scheme")
    batch_parser.add_argument('--skip-processed', action='store_true',
                              help="leave rows already marked as matched untouched")
    _add_source_arguments(batch_parser)

    return parser


def run_resolve(args: argparse.Namespace) -> int:
    address = Address(
        line_1=args.line_1,
        line_2=args.line_2,
        line_3=args.line_3,
        building_number=args.building_number,
        building_name=args.building_name,
        sub_building_name=args.sub_building_name,
        postcode=args.postcode
    )

    resolver = AddressResolver(build_source(args))
    resolution = resolver.validate(address)

    print(json.dumps(resolution.to_dict(include_ranked=args.all), indent=4))
    return EXIT_MATCH if resolution.status == config.STATUS_MATCH else EXIT_NO_MATCH


def run_batch(args: argparse.Namespace) -> int:
    logger = Logger()
    excel_handler = ExcelHandler()
    excel_handler.load_file(args.input)

    if args.mapping:
        mapping = ColumnMappingHandler().load_mapping(args.mapping)
        if mapping is None:
            logger.error(f"Column mapping '{args.mapping}' not found")
            return EXIT_USAGE_ERROR
        excel_handler.set_column_mapping(mapping)

    processor = BatchProcessor(excel_handler, AddressResolver(build_source(args)))
    processor.process(skip_processed=args.skip_processed)

    excel_handler.save_file(args.output)
    return EXIT_MATCH


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)
    logger = Logger()

    try:
        if args.command == 'resolve':
            return run_resolve(args)
        return run_batch(args)
    except LookupFailure as e:
        logger.error(f"Address lookup failed: {e}")
        return EXIT_LOOKUP_FAILURE


if __name__ == '__main__':
    sys.exit(main())
