"""
File operations for Software Quality Metrics.

Directory walking, source normalization and report persistence. Nothing here
is called by the metrics core; it only feeds it lines and stores its output.
"""

import os
from collections.abc import Generator, Iterable
from pathlib import Path

from .exceptions import FileAccessError, InvalidPathError
from .models import SourceFile


def normalize_lines(text: str) -> tuple[str, ...]:
    """Strip and lower-case every line, dropping blank ones."""
    stripped_lines = []
    for line in text.splitlines():
        stripped_line = line.strip().lower()
        if stripped_line:
            stripped_lines.append(stripped_line)
    return tuple(stripped_lines)


def read_source_file(filepath: Path, encoding: str = "utf-8", errors: str = "replace") -> SourceFile:
    """
    Read a source file and normalize its lines.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        SourceFile with lower-cased name and extension

    Raises:
        FileAccessError: If file cannot be read
    """
    filepath = Path(filepath)
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")

    filename = filepath.name.lower()
    return SourceFile(
        filepath=str(filepath.parent),
        filename=filename,
        file_extension=os.path.splitext(filename)[1],
        lines=normalize_lines(text),
    )


def iter_source_files(
    root_dir: Path,
    extensions: Iterable[str],
    skip_dirs: Iterable[str] = (),
    follow_symlinks: bool = False,
) -> Generator[Path, None, None]:
    """
    Walk a directory tree and yield files with a handled extension.

    Args:
        root_dir: Directory to scan
        extensions: Extensions to keep, matched case-insensitively
        skip_dirs: Directory names pruned from the walk (exact match)
        follow_symlinks: Whether to descend into symlinked directories

    Yields:
        Paths of matching files, in walk order

    Raises:
        InvalidPathError: If root_dir is missing or not a directory
    """
    root_dir = Path(root_dir)
    if not root_dir.exists():
        raise InvalidPathError(root_dir, "does not exist")
    if not root_dir.is_dir():
        raise InvalidPathError(root_dir, "not a directory")

    handled = tuple(ext.lower() for ext in extensions)
    skipped = set(skip_dirs)

    for root, dirs, files in os.walk(root_dir, followlinks=follow_symlinks):
        # prune in place so os.walk does not descend
        dirs[:] = sorted(d for d in dirs if d not in skipped)

        for name in sorted(files):
            # same rule as read_source_file, so ".sql" alone has no extension
            if os.path.splitext(name)[1].lower() in handled:
                yield Path(root) / name


def write_text_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write text to a file, creating parent directories.

    Raises:
        FileAccessError: If file cannot be written
    """
    filepath = Path(filepath)
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")
