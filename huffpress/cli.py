"""
Command line front end: compress a text file into FILE<suffix>, or restore
FILE<suffix> back to FILE.
"""

import argparse
import logging
import sys

from .config_loader import load_config
from .errors import HuffmanError
from .huffman import HuffmanCompressor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffpress", description="Simple compression using huffman coding"
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("-c", "--compress", metavar="FILE", help="compress FILE")
    action.add_argument("-d", "--decompress", metavar="FILE", help="decompress FILE")
    parser.add_argument("--config", metavar="PATH", help="YAML config file")
    return parser


def compress_file(path: str, compressor: HuffmanCompressor, suffix: str) -> str:
    with open(path, "r", encoding=compressor.encoding, newline="") as f:
        text = f.read()
    compressed = compressor.compress(text)
    output_path = path + suffix
    with open(output_path, "wb") as f:
        f.write(compressed)
    logger.info("Compressed %s (%d bytes) into %s (%d bytes)",
                path, len(text.encode(compressor.encoding)), output_path, len(compressed))
    return output_path


def decompress_file(path: str, compressor: HuffmanCompressor, suffix: str) -> str:
    if not path.endswith(suffix) or len(path) == len(suffix):
        raise ValueError(f"Input file must have the '{suffix}' extension: {path}")
    with open(path, "rb") as f:
        data = f.read()
    text = compressor.decompress(data)
    output_path = path[:-len(suffix)]
    with open(output_path, "w", encoding=compressor.encoding, newline="") as f:
        f.write(text)
    logger.info("Decompressed %s into %s", path, output_path)
    return output_path


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config["logging"]["level"],
                        format="%(levelname)s %(name)s: %(message)s")
    compressor = HuffmanCompressor(encoding=config["codec"]["encoding"])
    suffix = config["container"]["suffix"]

    try:
        if args.compress:
            output_path = compress_file(args.compress, compressor, suffix)
        else:
            output_path = decompress_file(args.decompress, compressor, suffix)
    except (HuffmanError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
