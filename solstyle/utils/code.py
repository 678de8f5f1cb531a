"""Solidity source discovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

log = logging.getLogger(__name__)

SOURCE_SUFFIX = ".sol"
WILDCARD = "*"


class DiscoveryError(FileNotFoundError):
    pass


def discover_sources(source_dir: str | Path, names: Iterable[str] = (WILDCARD,)) -> List[Path]:
    """Return the Solidity files to check, in the order they should be checked.

    ``"*"`` among ``names`` walks ``source_dir`` recursively; otherwise each
    name resolves to ``<source_dir>/<name>.sol`` and must exist.
    """

    root = Path(source_dir)
    if not root.is_dir():
        raise DiscoveryError(f"Source directory not found: {root}")

    names = list(names)
    if WILDCARD in names:
        files = list(_walk(root))
    else:
        files = []
        for name in names:
            path = root / f"{name}{SOURCE_SUFFIX}"
            if not path.is_file():
                raise DiscoveryError(f"Contract {path.name} not found in {root}/")
            files.append(path)
    log.info("Found %d contract(s) to check", len(files))
    return files


def _walk(directory: Path) -> Iterator[Path]:
    for path in sorted(directory.iterdir(), key=lambda item: item.name):
        if path.is_dir():
            yield from _walk(path)
        elif path.suffix == SOURCE_SUFFIX and path.is_file():
            yield path
