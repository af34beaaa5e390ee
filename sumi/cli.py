#!/usr/bin/env python3
"""
Generate an ink! wrapper module for an EVM contract ABI.

Usage:
    sumi --module-name erc20 --input ERC20.json --output lib.rs
    cat ERC20.json | sumi -m erc20 > lib.rs
    sumi -m erc20 -i ERC20.json --evm-id 0x0F --verbose
"""

import argparse
import os
import sys
from typing import List, Optional

from sumi import __version__
from sumi.core.config import DEFAULT_EVM_ID, EVM_ID_ENV_VAR
from sumi.core.errors import InputUnreadable, OutputUnwritable, SumiError
from sumi.core.generator import generate


def read_source(path: Optional[str]) -> str:
    """Read the whole ABI document, from stdin when no path is given"""
    try:
        if path is None:
            return sys.stdin.read()
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadable(f"cannot read {path or 'standard input'}: {e}") from e


def write_output(path: Optional[str], text: str) -> None:
    """Write the generated module, to stdout when no path is given"""
    try:
        if path is None:
            sys.stdout.write(text)
            sys.stdout.flush()
            return
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise OutputUnwritable(f"cannot write {path or 'standard output'}: {e}") from e


def report(result: dict) -> None:
    """Print what was generated on stderr"""
    functions = result["functions"]
    print(f"🔍 Found {len(functions)} functions to wrap", file=sys.stderr)
    for function in functions:
        print(f"   {function.selector_hex}  {function.signature}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sumi",
        description="Generate an ink! module forwarding calls to an EVM contract over XVM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
    # Read the ABI from a file, write the module to stdout
    sumi -m erc20 -i ERC20.json

    # Use another EVM ID (or set {EVM_ID_ENV_VAR})
    sumi -m erc20 -i ERC20.json -o lib.rs --evm-id 0x10
        """
    )

    parser.add_argument("-i", "--input", help="ABI JSON file (stdin if omitted)")
    parser.add_argument("-o", "--output", help="Output file (stdout if omitted)")
    parser.add_argument("-m", "--module-name", required=True, help="ink! module name to generate")
    parser.add_argument(
        "-e", "--evm-id",
        default=os.environ.get(EVM_ID_ENV_VAR, DEFAULT_EVM_ID),
        help=f"EVM ID to use in module (default: {DEFAULT_EVM_ID})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        source = read_source(args.input)
        result = generate(source, args.module_name, args.evm_id)

        if args.verbose:
            report(result)

        # Nothing is opened for writing before generation succeeded
        write_output(args.output, result["source"] + "\n")

    except SumiError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"✅ Generated module '{args.module_name}'", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
