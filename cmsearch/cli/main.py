# cmsearch/cli/main.py
import argparse
import json
import sys
from typing import List, Optional

from ..config import ConfigManager
from ..core.logging_config import LoggingManager
from ..error_handlers import handle_exceptions
from ..parsers import CMSearchParser

TSV_COLUMNS = ['sequence_id', 'hit_start', 'hit_end', 'strand',
               'model_start', 'model_end', 'score', 'raw_sequence_name']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cmsearch-parse',
        description='Extract alignments from Infernal cmsearch output'
    )
    parser.add_argument('input', type=str, help='cmsearch output file')

    # Global options
    parser.add_argument('--config', type=str, help='Path to configuration file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity (can be used multiple times)')
    parser.add_argument('--log-file', type=str,
                        help='Log to file in addition to stderr')
    parser.add_argument('--json', action='store_true',
                        help='Output results as JSON')

    # Parser settings, overriding the configuration file
    parser.add_argument('--minscore', type=float,
                        help='Only report hits scoring above this many bits')
    parser.add_argument('--cm', dest='model_identifier', type=str,
                        help='Covariance model name')
    parser.add_argument('--rfam', dest='accession', type=str,
                        help='Model accession, e.g. RF00168')
    parser.add_argument('--desc-tag', dest='descriptor_label', type=str,
                        help='Descriptor label for hit features')
    parser.add_argument('--motif-tag', dest='primary_tag', type=str,
                        help='Primary tag for both features')
    parser.add_argument('--source-tag', dest='source_label', type=str,
                        help='Source label for both features')
    parser.add_argument('--program-version', type=str,
                        help='cmsearch version stamped on the source tag')
    return parser


def format_row(record) -> str:
    values = [
        record.sequence_id, record.hit_start, record.hit_end,
        '+' if record.hit_strand > 0 else '-',
        record.model_start, record.model_end, f"{record.score:.2f}",
        record.raw_sequence_name
    ]
    return "\t".join(str(value) for value in values)


@handle_exceptions
def run(args: argparse.Namespace) -> int:
    config_manager = ConfigManager(args.config)

    # 0=config level, 1+=DEBUG
    logger = LoggingManager.configure(
        verbose=args.verbose > 0,
        log_file=args.log_file,
        component="cmsearch",
        config=config_manager.config
    )

    parser_config = config_manager.get_parser_config(
        minscore=args.minscore,
        model_identifier=args.model_identifier,
        accession=args.accession,
        descriptor_label=args.descriptor_label,
        primary_tag=args.primary_tag,
        source_label=args.source_label,
        program_version=args.program_version,
    )
    logger.info(f"Parsing {args.input} with minscore {parser_config.minscore}")

    count = 0
    with CMSearchParser.open(args.input, parser_config, LoggingManager.get_logger("parser")) as parser:
        if args.json:
            records = [record.to_dict() for record in parser]
            count = len(records)
            print(json.dumps(records, indent=2))
        else:
            print("\t".join(TSV_COLUMNS))
            for record in parser:
                print(format_row(record))
                count += 1

    logger.info(f"Reported {count} alignment(s) from {args.input}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for cmsearch-parse; returns the process exit code"""
    return run(build_parser().parse_args(argv))


if __name__ == '__main__':
    sys.exit(main())
