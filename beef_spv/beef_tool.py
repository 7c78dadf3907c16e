"""
BEEF Inspection and Verification Tool

Decodes BEEF envelopes, lists the merkle roots their BUMPs commit to, and runs
simplified payment verification against a merkle root oracle. Envelopes are
given as hex on the command line or as @path to a file holding the hex.
"""
import json
import sys
import argparse
import logging
from pathlib import Path

from bsv.chaintrackers import WhatsOnChainTracker

from beef_spv.beef import decode_beef
from beef_spv.config import Config
from beef_spv.errors import SPVError
from beef_spv.monitoring import SPVMonitor
from beef_spv.oracle import MerkleRootTable
from beef_spv.oracle_client import ChainTrackerVerifier, HTTPMerkleRootVerifier
from beef_spv.spv import verify_beef

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def read_envelope(source: str) -> str:
    """Hex from the argument itself, or from the file it names when prefixed with @."""
    if source.startswith('@'):
        return Path(source[1:]).read_text().strip()
    return source.strip()


def print_json(data):
    print(json.dumps(data, indent=2))


def decode_command(args) -> int:
    decoded = decode_beef(read_envelope(args.envelope))
    print_json(decoded.to_dict())
    return 0


def roots_command(args) -> int:
    decoded = decode_beef(read_envelope(args.envelope))
    items = decoded.get_merkle_roots_request()
    print_json([item.to_dict() for item in items])

    if args.table_out:
        table = MerkleRootTable({item.block_height: item.merkle_root for item in items})
        table.save(args.table_out)
    return 0


def build_oracle(args, config: Config):
    if args.roots_table:
        return MerkleRootTable.load(args.roots_table)
    if args.whatsonchain:
        return ChainTrackerVerifier(WhatsOnChainTracker(network=args.whatsonchain))
    if args.oracle_url:
        config.oracle.url = args.oracle_url
    return HTTPMerkleRootVerifier.from_config(config.oracle)


def verify_command(args) -> int:
    if args.config and Path(args.config).exists():
        config = Config.from_file(args.config)
    else:
        config = Config.default()

    oracle = build_oracle(args, config)

    monitor = None
    if config.monitoring.enabled:
        monitor = SPVMonitor.from_config(config.monitoring)
        monitor.start_server()

    try:
        verify_beef(read_envelope(args.envelope), oracle, config=config.spv, monitor=monitor)
    except SPVError as e:
        print_json(e.to_dict())
        return 1
    finally:
        if monitor is not None:
            monitor.update()
            monitor.stop_server()

    print_json({'valid': True})
    return 0


def sample_config_command(args) -> int:
    Config.default().to_file(args.output)
    print(f"Generated sample configuration at: {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BEEF Inspection and Verification Tool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_decode = subparsers.add_parser("decode", help="Print a decoded envelope as JSON")
    parser_decode.add_argument("envelope", type=str, help="BEEF hex, or @file")
    parser_decode.set_defaults(handler=decode_command)

    parser_roots = subparsers.add_parser("roots", help="Print the merkle roots an envelope's BUMPs commit to")
    parser_roots.add_argument("envelope", type=str, help="BEEF hex, or @file")
    parser_roots.add_argument("--table-out", type=str, help="Also save the roots as a known-answer table")
    parser_roots.set_defaults(handler=roots_command)

    parser_verify = subparsers.add_parser("verify", help="Run SPV on an envelope")
    parser_verify.add_argument("envelope", type=str, help="BEEF hex, or @file")
    oracle_group = parser_verify.add_mutually_exclusive_group()
    oracle_group.add_argument("--oracle-url", type=str, help="Block headers service accepting merkle root batches")
    oracle_group.add_argument("--roots-table", type=str, help="Known-answer table saved by 'roots --table-out'")
    oracle_group.add_argument("--whatsonchain", type=str, metavar="NETWORK",
                              help="Check roots against WhatsOnChain ('main' or 'test')")
    parser_verify.add_argument("--config", type=str, help="Path to config file")
    parser_verify.set_defaults(handler=verify_command)

    parser_sample = subparsers.add_parser("sample-config", help="Write the default configuration")
    parser_sample.add_argument("--output", type=str, default="beef_spv.json", help="Output file path")
    parser_sample.set_defaults(handler=sample_config_command)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except SPVError as e:
        print_json(e.to_dict())
        return 1
    except ValueError as e:
        logger.error(str(e))
        return 2


if __name__ == '__main__':
    sys.exit(main())
