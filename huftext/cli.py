import argparse
import logging
import os
import sys

from .config_loader import load_config
from .errors import HuftextError
from .files import compress_file, decompress_file

logger = logging.getLogger("huftext")

TXT_EXTENSION = "txt"
HUF_EXTENSION = "huf"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huftext",
        description="Huffman text compressor: .txt files are compressed, .huf files are restored")
    parser.add_argument("filename", help="input file (.txt or .huf)")
    parser.add_argument("-o", "--output", help="output path (default: next to the input)")
    parser.add_argument("-c", "--config", help="YAML config file (default: $HUFTEXT_CONFIG)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every pipeline step")
    return parser


def run(filename, output=None, config=None):
    if not os.path.isfile(filename):
        raise FileNotFoundError("Could not find input file, please check if path is correct.")

    extension = os.path.splitext(filename)[1].lstrip(".")
    if extension == TXT_EXTENSION:
        dst = compress_file(filename, output, config)
    elif extension == HUF_EXTENSION:
        dst = decompress_file(filename, output, config)
    else:
        raise ValueError(f"Unsupported file extension: {extension}")

    before, after = os.path.getsize(filename), os.path.getsize(dst)
    if before:
        logger.info("%s: %d -> %d bytes (%.2f%%)", dst, before, after, 100.0 * after / before)
    return dst


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        level = logging.DEBUG if args.verbose else config["logging"]["level"]
        logging.basicConfig(
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            level=level,
        )
        dst = run(args.filename, args.output, config)
    except (HuftextError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(dst)
    return 0


if __name__ == "__main__":
    sys.exit(main())
