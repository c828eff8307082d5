"""Locate region directories and package pairs on disk.

The data directory holds one sub-directory per region (US, JP, ...), each
full of .uasset/.uexp pairs.
"""

from pathlib import Path

from ff7r_text.parser.package import HEADER_SUFFIX


def find_regions(data_dir: Path) -> list[Path]:
    """Return region directories in name order, skipping dotfiles like .gitkeep."""
    return sorted(
        p for p in Path(data_dir).iterdir()
        if p.is_dir() and not p.name.startswith(".")
    )


def find_packages(region_dir: Path) -> list[Path]:
    """Return the .uasset files of a region in name order."""
    return sorted(
        p for p in Path(region_dir).iterdir()
        if p.is_file() and p.name.lower().endswith(HEADER_SUFFIX)
    )
