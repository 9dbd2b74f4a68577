#!/usr/bin/env python3
import os

from dotenv import load_dotenv

DEFAULT_CAPTIONS_DIR = 'captionfiles'
DEFAULT_LOG_FILE = os.path.join('logs', 'process_captions.log')


def compute_caption_paths(working_dir: str = None) -> dict:
    """
    Derive the locations the captions processor works with, relative to
    working_dir (the current directory by default). Values from a .env file
    or the environment take precedence.

    Returns a dict with keys:
      - working_dir
      - captions_dir (CAPTIONS_DIR, default working_dir/captionfiles)
      - log_file (CAPTIONS_LOG_FILE, default working_dir/logs/process_captions.log)
    """
    load_dotenv()
    working_dir = os.path.abspath(working_dir or os.getcwd())
    captions_dir = os.getenv('CAPTIONS_DIR') or DEFAULT_CAPTIONS_DIR
    log_file = os.getenv('CAPTIONS_LOG_FILE') or DEFAULT_LOG_FILE
    return {
        'working_dir': working_dir,
        'captions_dir': os.path.join(working_dir, captions_dir),
        'log_file': os.path.join(working_dir, log_file),
    }


def resolve_output_path(filename: str, captions_dir: str) -> str:
    """Place a bare output filename inside the caption-files directory."""
    if os.path.isabs(filename) or os.path.dirname(filename):
        return filename
    return os.path.join(captions_dir, filename)
