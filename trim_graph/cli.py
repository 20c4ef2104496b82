#!/usr/bin/env python3

import argparse
import sys
import os
from .records import MalformedRecordError
from .trim import trim_gfa
from .utils import read_keep_list

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Remove the segments, links and jumps of a GFA file that no path or walk uses",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "graph_file",
        help="Input GFA file path"
    )

    parser.add_argument(
        "-p", "--paths_to_keep",
        help="File containing the names of the paths to keep, one per line (default: keep all paths)",
        metavar="FILE",
        default=None
    )

    parser.add_argument(
        "-o", "--output",
        help="Output path for the trimmed GFA file (default: standard output)",
        default=None
    )

    parser.add_argument(
        "--compressed",
        help="Read a gzipped GFA file",
        action="store_true",
        default=False
    )

    parser.add_argument(
        "-S", "--ignore_segments",
        help="Do not remove any segment lines",
        action="store_true",
        default=False
    )

    parser.add_argument(
        "-L", "--ignore_links",
        help="Do not remove any link lines",
        action="store_true",
        default=False
    )

    parser.add_argument(
        "-J", "--ignore_jumps",
        help="Do not remove any jump lines",
        action="store_true",
        default=False
    )

    parser.add_argument(
        "--log_path",
        help="Append time and memory usage of each pass to this file",
        default=None
    )

    parser.add_argument(
        "-q", "--quiet",
        help="Do not print progress",
        action="store_true",
        default=False
    )

    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    # Check if input file exists
    if not os.path.exists(args.graph_file):
        print(f"Error: GFA file '{args.graph_file}' not found", file=sys.stderr)
        sys.exit(1)
    if args.output is not None and not os.path.isdir(os.path.dirname(os.path.abspath(args.output))):
        print(f"Error: output directory for '{args.output}' not found", file=sys.stderr)
        sys.exit(1)

    try:
        keep_list = read_keep_list(args.paths_to_keep) if args.paths_to_keep is not None else None

        if not args.quiet:
            print(f"Trimming GFA file: {args.graph_file}", file=sys.stderr)
        trim_gfa(
            args.graph_file,
            output=args.output,
            keep_list=keep_list,
            compressed=args.compressed,
            ignore_segments=args.ignore_segments,
            ignore_links=args.ignore_links,
            ignore_jumps=args.ignore_jumps,
            verbose=not args.quiet,
            log_path=args.log_path
        )
    except FileNotFoundError as e:
        print(f"Error: file '{e.filename if e.filename is not None else e}' not found", file=sys.stderr)
        sys.exit(1)
    except MalformedRecordError as e:
        print(f"Error: {args.graph_file}: {e}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as e:
        # Only the list of paths is read as text
        print(f"Error: {args.paths_to_keep}: invalid UTF-8 at byte {e.start}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: could not read input: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
