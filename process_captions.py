#!/usr/bin/env python3
import argparse
import logging
import os
import sys

from caption_io import (
    InputIOError,
    OutputIOError,
    captions_to_lines,
    read_lines,
    write_lines,
)
from caption_parser import parse_captions
from caption_transforms import (
    capitalize_first_letters,
    decapitalize,
    multiple_replace,
    remove_duplicate_words,
    remove_empty_captions,
    remove_multiple_spaces,
    trim_trailing_spaces,
)
from common import setup_logging
from run_paths import compute_caption_paths, resolve_output_path

# Order matters: earlier rules can create or destroy matches for later ones.
REPLACEMENTS = (
    ("you know", ""),
    ("peer to peer", "peer-to-peer"),
    ("client server", "client-server"),
    ("actually", ""),
    ("basically", ""),
    ("really", ""),
    ("i mean", ""),
    ("and and", "and"),
    ("then then", "then"),
    ("so so ", "so "),
    (" so so", " so"),
    ("TCP IP", "TCP-IP"),
    ("adopt", "adapt"),
    ("zoom", "Zoom"),
    ("washoe", "WashU"),
)


def run_pipeline(captions: list, replacements=REPLACEMENTS, verbose: bool = True) -> list:
    """
    Apply every cleanup pass in its fixed order and return the captions.

    Filler deletion leaves double spaces and untrimmed edges, so the
    whitespace passes must follow the replacements; casing runs last.
    """
    captions = remove_empty_captions(captions, verbose=verbose)
    multiple_replace(captions, replacements, verbose=verbose)
    remove_duplicate_words(captions, verbose=verbose)
    remove_multiple_spaces(captions, verbose=verbose)
    trim_trailing_spaces(captions, verbose=verbose)
    decapitalize(captions, verbose=verbose)
    capitalize_first_letters(captions, verbose=verbose)
    return captions


def print_captions(captions: list) -> None:
    print("Caption output:")
    for line in captions_to_lines(captions):
        print(line)
    print("Caption output end")


def load_captions(input_file) -> list:
    lines = read_lines(input_file)
    captions = parse_captions(lines)
    logging.info(f"Parsed {len(captions)} captions from {input_file}")
    return captions


def process_caption_file(input_file, output_file, overwrite: bool = True, verbose: bool = True) -> list:
    """Read, clean and write a caption file without any dialogs."""
    captions = run_pipeline(load_captions(input_file), verbose=verbose)
    write_lines(output_file, captions_to_lines(captions), overwrite=overwrite)
    return captions


def run_interactive(prompts, captions_dir: str, verbose: bool = True) -> int:
    """
    Drive one interactive session through the prompts collaborator, which
    provides choose_input_path, prompt_confirm, prompt_text and show_error.
    """
    try:
        input_file = prompts.choose_input_path(captions_dir)
    except prompts.UserCancelled:
        print("No caption file selected")
        return 0

    try:
        captions = load_captions(input_file)
    except InputIOError as e:
        logging.error(str(e))
        prompts.show_error("Input error", str(e))
        return 1

    captions = run_pipeline(captions, verbose=verbose)

    if prompts.prompt_confirm("Console preview", "Post caption preview to console?"):
        print_captions(captions)

    filename = prompts.prompt_text("Output filename (with extension):")
    if filename is None:
        print("No caption file generated")
    else:
        output_file = resolve_output_path(filename, captions_dir)
        try:
            write_lines(output_file, captions_to_lines(captions), overwrite=False)
        except OutputIOError as e:
            logging.error(str(e))
            prompts.show_error("Output error", str(e))
            return 1
        print(f"New caption file {os.path.basename(output_file)} generated")

    print("\nDone!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description='Clean up auto-generated SRT captions: drop fillers, fix spacing and casing'
    )
    p.add_argument('--input-file', help='Caption file to process; omit to pick one in a dialog')
    p.add_argument('--output-file', help='Where to write the cleaned captions (with --input-file)')
    p.add_argument('--preview', action='store_true', help='Print the cleaned captions to stdout')
    p.add_argument('--quiet', action='store_true', help='Do not print per-pass counts')
    p.add_argument('--captions-dir', help='Caption-files directory (overrides CAPTIONS_DIR)')
    return p


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if args.input_file and not args.output_file:
        p.error('--output-file is required with --input-file')

    paths = compute_caption_paths()
    captions_dir = args.captions_dir or paths['captions_dir']
    setup_logging(paths['log_file'])
    verbose = not args.quiet

    if not args.input_file:
        from gui import dialogs
        return run_interactive(dialogs, captions_dir, verbose=verbose)

    try:
        captions = process_caption_file(args.input_file, args.output_file, verbose=verbose)
    except (InputIOError, OutputIOError) as e:
        logging.error(f"Caption processing failed: {e}")
        return 1
    if args.preview:
        print_captions(captions)
    logging.info(f"Cleaned captions written to {args.output_file}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
