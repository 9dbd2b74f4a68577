"""Modal tkinter dialogs used by the interactive caption processor."""
import logging
import os
import tkinter as tk
from contextlib import contextmanager
from pathlib import Path
from tkinter import filedialog, messagebox, simpledialog
from typing import Optional

from .settings import load_settings, save_settings


class UserCancelled(Exception):
    """Raised when the user dismisses a dialog that has no sensible default."""


@contextmanager
def _hidden_root():
    # Dialogs need a Tk root; keep it off screen and tear it down afterwards
    root = tk.Tk()
    root.withdraw()
    try:
        yield root
    finally:
        root.destroy()


def choose_input_path(initial_dir: Optional[str] = None) -> Path:
    """
    Ask the user for a caption file to process.

    Starts in the directory used last time, falling back to initial_dir.
    Raises UserCancelled when the dialog is dismissed.
    """
    settings = load_settings()
    start_dir = settings.get("last_dir") or initial_dir
    if start_dir and not os.path.isdir(start_dir):
        start_dir = initial_dir if initial_dir and os.path.isdir(initial_dir) else None

    with _hidden_root() as root:
        path = filedialog.askopenfilename(
            parent=root,
            title="Select caption file",
            initialdir=start_dir,
            filetypes=[("Caption files", "*.srt *.txt"), ("All files", "*.*")],
        )
    if not path:
        raise UserCancelled("No caption file selected")

    settings["last_dir"] = os.path.dirname(path)
    try:
        save_settings(settings)
    except OSError as e:
        logging.warning(f"Could not save dialog settings: {e}")
    return Path(path)


def prompt_text(prompt: str) -> Optional[str]:
    """Ask for a line of text until something is entered; None if cancelled."""
    with _hidden_root() as root:
        while True:
            answer = simpledialog.askstring("Input", prompt, parent=root)
            if answer is None:
                return None
            if answer != "":
                return answer


def prompt_confirm(title: str, prompt: str) -> bool:
    with _hidden_root() as root:
        return bool(messagebox.askokcancel(title, prompt, parent=root))


def show_error(title: str, message: str) -> None:
    with _hidden_root() as root:
        messagebox.showerror(title, message, parent=root)
