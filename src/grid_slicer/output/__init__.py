"""
Module: output

Purpose:
    Deliver finished grid images: ZIP packaging with posting
    instructions, individual files, and a feed-grid preview.

Key Functions:
    - write_grid_zip(): ZIP with 1.jpg..4.jpg and README.txt
    - write_individual(): Separate files
    - render_grid_preview(): 2x2 preview image

Dependencies:
    - zipfile (std), PIL

Used By:
    - cli
"""

from .zip_writer import write_grid_zip, write_individual, generate_readme
from .preview import render_grid_preview

__all__ = [
    "write_grid_zip",
    "write_individual",
    "generate_readme",
    "render_grid_preview",
]
