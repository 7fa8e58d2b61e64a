"""
figurecast CLI - Main entry point.

Encodes YAML/JSON documents into figure wire text and checks inbound wire
text, running the same codec lifecycle a WebSocket endpoint would.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional

import yaml

from figurecast_ws import (
    EncoderConfig,
    EndpointConfig,
    Figure,
    FigureDecoder,
    FigureEncoder,
    create_logger,
)
from figurecast_ws.schemas import parse_json_text


def load_document(document_path: str) -> Any:
    """
    Load a figure document.

    .json files are parsed as strict JSON; anything else goes through
    YAML safe_load (which also accepts most JSON).

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document cannot be parsed
    """
    path = Path(document_path)

    if not path.exists():
        raise FileNotFoundError(f"Document not found: {document_path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return parse_json_text(text).to_python()
        except (ValueError, RecursionError) as e:
            raise ValueError(f"Invalid JSON in {document_path}: {e}")

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {document_path}: {e}")


def encode_document(
    document_path: str,
    settings: EncoderConfig,
    endpoint: EndpointConfig
) -> str:
    """Wrap a document in a Figure and encode it with a full lifecycle."""
    figure = Figure(load_document(document_path))
    logger = create_logger("cli.encoder", level=settings.level)

    encoder = FigureEncoder(logger=logger, settings=settings)
    encoder.init(endpoint)
    try:
        return encoder.encode(figure)
    finally:
        encoder.destroy()


def decode_text(text: str, settings: EncoderConfig, endpoint: EndpointConfig) -> Figure:
    """Decode wire text with a full decoder lifecycle."""
    logger = create_logger("cli.decoder", level=settings.level)

    decoder = FigureDecoder(logger=logger, settings=settings)
    decoder.init(endpoint)
    try:
        return decoder.decode(text)
    finally:
        decoder.destroy()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="figurecast",
        description="figurecast CLI - Encode figures to WebSocket wire text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a YAML figure document to compact wire text
  figurecast encode figures/circle.yaml

  # Pretty-print with sorted keys
  figurecast encode figures/circle.json --pretty --sort-keys

  # Check that a captured message decodes
  figurecast decode captured/message.txt
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="YAML file with 'encoder' and 'endpoint' sections"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit structured codec logs on stderr"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    encode = subparsers.add_parser('encode', help='Encode a YAML/JSON document')
    encode.add_argument('document', help='Path to figure document')
    encode.add_argument('--pretty', action='store_true', help='Indent output by 2 spaces')
    encode.add_argument('--sort-keys', action='store_true', help='Sort object members')

    decode = subparsers.add_parser('decode', help='Validate and normalize wire text')
    decode.add_argument('message', help='Path to file holding one text message')

    # Also accepted after the subcommand
    for subparser in (encode, decode):
        subparser.add_argument(
            '--config',
            dest='command_config',
            default=None,
            help="YAML file with 'encoder' and 'endpoint' sections"
        )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config_path = args.command_config or args.config

    try:
        if config_path:
            settings = EncoderConfig.from_yaml(config_path)
            endpoint = EndpointConfig.from_yaml(config_path)
        else:
            settings = EncoderConfig()
            endpoint = EndpointConfig()

        if not args.verbose:
            settings = replace(settings, log_level="CRITICAL")

        if args.command == 'encode':
            if args.pretty:
                settings = replace(settings, indent=2)
            if args.sort_keys:
                settings = replace(settings, sort_keys=True)
            print(encode_document(args.document, settings, endpoint))

        elif args.command == 'decode':
            text = Path(args.message).read_text(encoding="utf-8").strip()
            figure = decode_text(text, settings, endpoint)
            print(f"type: {figure.figure_type or '-'}")
            print(figure.to_text(**settings.dump_options()))

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
