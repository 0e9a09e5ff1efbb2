# src/domaincloud/cli.py
import sys
import argparse
import io
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path

# Module imports
from domaincloud import config
from domaincloud.core.clutter import strip
from domaincloud.core.cloud import generate_word_cloud
from domaincloud.core.frequency import FrequencyTable
from domaincloud.core.ignore import load_ignore_spec
from domaincloud.core.render import RenderMode, render
from domaincloud.core.scanner import InputScanner
from domaincloud.core.words import count_words
from domaincloud.errors import DomainCloudError, InputOpenError, StreamError
from domaincloud.models import InputSource


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog=config.PROJECT_NAME,
        description="Generate a word cloud from source files and show the domain as expressed by the code."
    )
    parser.add_argument("inputs", nargs="+", metavar="INPUT",
                        help="Source files or directories, '-' reads standard input")
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file, '-' for stdout (default: stdout for text, {input}_cloud.png for images)"
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-S", "--substitute-only", action="store_true",
                      help="Only remove comments and string literals, don't generate an image")
    mode.add_argument("-l", "--list", dest="list_mode", choices=[m.value for m in RenderMode],
                      default=None, help="Print the word list (alpha, freq or raw) instead of an image")

    parser.add_argument("-e", "--extensions", type=str, default="*",
                        help="Comma-separated file extensions used inside directories, or '*' for all")
    parser.add_argument("--ignore-file", type=str, default=None,
                        help="gitignore-style rules for directory inputs (default: built-in rules)")
    parser.add_argument("--renderer", type=str, default=config.RENDERER_PROGRAM,
                        help=f"Word cloud program (default: {config.RENDERER_PROGRAM})")
    parser.add_argument("--width", type=int, default=config.IMAGE_WIDTH, help="Image width")
    parser.add_argument("--height", type=int, default=config.IMAGE_HEIGHT, help="Image height")
    parser.add_argument("-V", "--version", action="version",
                        version=f"{config.PROJECT_NAME} ({config.VERSION})")
    return parser


def get_default_image_name(inputs) -> str:
    """Derives the image filename from the first named input."""
    for arg in inputs:
        if arg == config.STDIN_SENTINEL:
            continue
        name = Path(arg).resolve().stem
        if name:
            return f"{name.replace(' ', '_')}_cloud.png"
    return "domain_cloud.png"


def parse_extensions(raw: str) -> set:
    raw = raw.strip()
    if raw == "*":
        return {"*"}
    return {e.strip() for e in raw.split(",") if e.strip()}


@contextmanager
def _rewrap_std(stream):
    """
    Re-opens a standard stream with ENCODING_ERRORS so that bytes which are
    not UTF-8 pass through unchanged. The underlying stream is never closed.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        yield stream
        return
    wrapper = io.TextIOWrapper(buffer, encoding=config.ENCODING, errors=config.ENCODING_ERRORS)
    try:
        yield wrapper
    finally:
        wrapper.flush()
        wrapper.detach()


@contextmanager
def open_input(source: InputSource):
    """Opens one input for reading; stdin is used but never closed."""
    if source.is_stdin:
        with _rewrap_std(sys.stdin) as istr:
            yield istr
        return
    try:
        istr = open(source.path, "r", encoding=config.ENCODING, errors=config.ENCODING_ERRORS)
    except OSError as e:
        raise InputOpenError(source.label, e.strerror or str(e)) from e
    with istr:
        yield istr


@contextmanager
def open_output(target):
    if target is None or target == config.STDOUT_SENTINEL:
        sys.stdout.flush()
        with _rewrap_std(sys.stdout) as ostr:
            yield ostr
        return
    with open(target, "w", encoding=config.ENCODING, errors=config.ENCODING_ERRORS) as ostr:
        yield ostr


def process_inputs(sources, handle) -> int:
    """
    Calls `handle(istr)` for every source in turn.
    Failures are reported per input and do not stop the run.
    Returns the number of inputs processed without error.
    """
    processed = 0
    for source in sources:
        try:
            with open_input(source) as istr:
                handle(istr)
            processed += 1
        except InputOpenError as e:
            print(f"Error: {e}", file=sys.stderr)
        except StreamError as e:
            print(f"Error during processing of '{source.label}': {e}", file=sys.stderr)
    return processed


def print_summary(table: FrequencyTable, processed: int) -> None:
    print(f"Inputs:   {processed}")
    print(f"Words:    {len(table)} distinct, {table.total} total")
    print(f"\n--- Top {config.TOP_WORDS} Words ---")
    print(f"{'Rank':<5} | {'Count':<10} | {'Word'}")
    print("-" * 60)
    for i, token in enumerate(table.most_common(config.TOP_WORDS)):
        print(f"{i+1:<5} | {token.count:<10} | {token.text}")
    print("-" * 60)


def write_word_cloud(table: FrequencyTable, image_file: str, args) -> None:
    """Writes the raw word list to a temporary file and renders it."""
    fd, tmp_name = tempfile.mkstemp(prefix=".domaincloud_", suffix=".txt")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            render(f, table, RenderMode.RAW_REPEATED)
        generate_word_cloud(Path(tmp_name), image_file, args.renderer, args.width, args.height)
    finally:
        os.remove(tmp_name)


def main(argv=None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        extensions = parse_extensions(args.extensions)
        image_mode = not (args.substitute_only or args.list_mode)
        image_file = args.output or get_default_image_name(args.inputs)
        if image_mode and image_file == config.STDOUT_SENTINEL:
            print("Error: An image can't be written to stdout, use -o FILE", file=sys.stderr)
            sys.exit(1)

        # 2. Ignore rules, only used for directory inputs.
        # The output file of this run must never be read back as an input.
        if image_mode:
            output_path = Path(image_file)
        elif args.output and args.output != config.STDOUT_SENTINEL:
            output_path = Path(args.output)
        else:
            output_path = None
        ignore_file = Path(args.ignore_file) if args.ignore_file else None
        extra = [output_path.name] if output_path else None
        ignore_spec = load_ignore_spec(ignore_file, extra_patterns=extra)

        exclude = [output_path] if output_path else None
        scanner = InputScanner(ignore_spec, extensions, exclude=exclude)
        sources = scanner.scan(args.inputs)

        # 3a. Substitute only: cleaned text of every input, in order
        if args.substitute_only:
            with open_output(args.output) as ostr:
                process_inputs(sources, lambda istr: strip(istr, ostr))
            return

        # 3b. Count words over all inputs into one table
        table = FrequencyTable()
        processed = process_inputs(sources, lambda istr: count_words(istr, table))

        if args.list_mode:
            with open_output(args.output) as ostr:
                render(ostr, table, RenderMode(args.list_mode))
            return

        # 4. Word cloud
        print(f"--- {config.PROJECT_NAME} ---")
        print(f"Output:   {image_file}")
        print_summary(table, processed)

        if not len(table):
            print("No words found.")
            return

        write_word_cloud(table, image_file, args)
        print(f"\nSuccess! Word cloud written to: {image_file}")

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except MemoryError:
        print("Fatal: Out of memory while counting words.", file=sys.stderr)
        sys.exit(1)

    except (OSError, DomainCloudError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
