"""Dialect rule bundles: the single source of truth for per-language rules.

Adding a new dialect:
  1. Build a Dialect entry and pass it to register_dialect().
  2. That's it. The classifier, segmenter and scorers pick it up.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from .exceptions import UnsupportedDialectError

SignaturePredicate = Callable[[str], bool]
NameExtractor = Callable[[str], str]


# ── Signature detection building blocks ────────────────────────────


def _starts_with_def(line: str) -> bool:
    return line.startswith("def ")


def _def_name(line: str) -> str:
    # "def meow(name: str) -> str:" -> "meow"
    return line[4:].split("(")[0]


def _is_function_assignment(line: str) -> bool:
    return "function(" in line and "{" in line


def _assigned_name(line: str) -> str:
    # "meow <- function(name) {" -> "meow"
    return line.split("<-")[0].strip()


@dataclass(frozen=True)
class Dialect:
    """Everything the metrics pipeline needs to know about a dialect.

    Attributes:
        name: Registry key
        extensions: Lower-case extensions including the dot
        line_comment: Prefix marking a single-line comment
        block_start: Markers opening a block comment
        block_stop: Markers closing a block comment
        docstring_markers: Bare-line markers subject to the docstring
            heuristic (a marker alone on a line opens a block only when the
            preceding line holds ``definition_keyword``)
        definition_keyword: Substring identifying a function definition line
        complexity_keywords: Substrings counted as decision points
        signature_style: "keyword", "brace" or "flat"
        is_signature: Predicate for a function signature line
        extract_name: Pulls the function identifier out of a signature line
        flat_chunk_name: Chunk name used when signature_style is "flat"
    """

    name: str
    extensions: tuple[str, ...]
    line_comment: str
    block_start: tuple[str, ...]
    block_stop: tuple[str, ...]
    docstring_markers: tuple[str, ...] = ()
    definition_keyword: Optional[str] = None
    complexity_keywords: tuple[str, ...] = ()
    signature_style: str = "flat"
    is_signature: Optional[SignaturePredicate] = field(default=None, compare=False)
    extract_name: Optional[NameExtractor] = field(default=None, compare=False)
    flat_chunk_name: str = "none"

    def __post_init__(self) -> None:
        if self.signature_style not in ("keyword", "brace", "flat"):
            raise ValueError(f"Unknown signature_style: {self.signature_style!r}")
        if self.signature_style != "flat" and (
            self.is_signature is None or self.extract_name is None
        ):
            raise ValueError(
                f"Dialect {self.name!r} needs is_signature and extract_name "
                f"for signature_style {self.signature_style!r}"
            )

    @property
    def has_functions(self) -> bool:
        return self.signature_style != "flat"


_TRIPLE_QUOTES = ("'''", '"""')


# ── Dialect definitions ────────────────────────────────────────────

PYTHON = Dialect(
    name="python",
    extensions=(".py",),
    line_comment="#",
    block_start=_TRIPLE_QUOTES,
    block_stop=_TRIPLE_QUOTES,
    docstring_markers=_TRIPLE_QUOTES,
    definition_keyword="def ",
    complexity_keywords=(
        "if ",
        "elif ",
        "for ",
        "while ",
        "except",
        "with ",
        "assert ",
        "and ",
        "or ",
        "map(",
        "lambda ",
    ),
    signature_style="keyword",
    is_signature=_starts_with_def,
    extract_name=_def_name,
)

R = Dialect(
    name="r",
    extensions=(".r",),
    line_comment="#",
    block_start=_TRIPLE_QUOTES,
    block_stop=_TRIPLE_QUOTES,
    docstring_markers=_TRIPLE_QUOTES,
    definition_keyword="function(",
    complexity_keywords=("if ", "else if ", "while ", "for "),
    signature_style="brace",
    is_signature=_is_function_assignment,
    extract_name=_assigned_name,
)

SQL = Dialect(
    name="sql",
    extensions=(".sql",),
    line_comment="--",
    block_start=("/*",),
    block_stop=("*/",),
    complexity_keywords=(
        "select ",
        "from ",
        "where ",
        "join ",
        "inner join ",
        "left join ",
        "right join ",
        "outer join ",
        "union ",
        "except ",
        "intersect ",
    ),
    signature_style="flat",
)

DIALECTS: dict[str, Dialect] = {}
_BY_EXTENSION: dict[str, Dialect] = {}


def register_dialect(dialect: Dialect) -> Dialect:
    """Register a dialect under its name and each of its extensions."""
    DIALECTS[dialect.name] = dialect
    for ext in dialect.extensions:
        _BY_EXTENSION[ext.lower()] = dialect
    return dialect


for _dialect in (PYTHON, R, SQL):
    register_dialect(_dialect)


def get_all_known_extensions() -> list[str]:
    """Return every registered extension, sorted."""
    return sorted(_BY_EXTENSION)


def get_dialect(name: str) -> Dialect:
    """Look up a dialect by registry name.

    Raises:
        UnsupportedDialectError: If no dialect is registered under ``name``
    """
    dialect = DIALECTS.get(name)
    if dialect is None:
        raise UnsupportedDialectError(name, get_all_known_extensions())
    return dialect


def dialect_for_extension(extension: str) -> Dialect:
    """Resolve the dialect for a file extension (case-insensitive).

    Raises:
        UnsupportedDialectError: If the extension has no registered dialect
    """
    dialect = _BY_EXTENSION.get(extension.lower())
    if dialect is None:
        raise UnsupportedDialectError(extension, get_all_known_extensions())
    return dialect


def resolve_dialect(dialect) -> Dialect:
    """Accept a Dialect, a registry name, or an extension."""
    if isinstance(dialect, Dialect):
        return dialect
    if dialect.startswith("."):
        return dialect_for_extension(dialect)
    return get_dialect(dialect)
