import os
import sys
from typing import Iterator, TextIO, Tuple

def _eprintln(msg: str) -> None:
    print(msg, file=sys.stderr)

def validate_image_path(image: str) -> int:
    """
    Check that `image` can be written as a PPM bitmap.
    Return 0 when it can, non-zero (after printing the reason) otherwise.
    """
    if not image.lower().endswith(".ppm"):
        _eprintln(f"Error: output image must be a .ppm file: {image}")
        return 1
    out_dir = os.path.dirname(image) or "."
    if not os.path.isdir(out_dir):
        _eprintln(f"Error: output directory does not exist: {out_dir}")
        return 1
    if not os.access(out_dir, os.W_OK):
        _eprintln(f"Error: output directory is not writable: {out_dir}")
        return 1
    return 0

def validate_input_file(path: str) -> int:
    if not os.path.isfile(path):
        _eprintln(f"Error: input file not found: {path}")
        return 1
    if not os.access(path, os.R_OK):
        _eprintln(f"Error: input file is not readable: {path}")
        return 1
    return 0

def equation_lines(stream: TextIO) -> Iterator[Tuple[int, str]]:
    """Yield (lineno, text) for every non-blank line that is not a '#' comment."""
    for lineno, raw in enumerate(stream, start=1):
        text = raw.strip()
        if not text or text.startswith("#"):
            continue
        yield lineno, text
