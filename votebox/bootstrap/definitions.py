"""Loading of poll and option definitions from tab-separated files."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from votebox.core.constants import CATEGORIES, POLLS_FILE
from votebox.core.exceptions import DefinitionError
from votebox.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PollDefinition:
    id: int
    title: str
    message: str


@dataclass(frozen=True)
class OptionDefinition:
    id: int
    name: str
    link: str
    votes: int = 0


@dataclass(frozen=True)
class Definitions:
    """Everything read from the data directory at startup."""

    polls: Tuple[PollDefinition, ...]
    # category name -> options of that category, in file order
    options: Dict[str, Tuple[OptionDefinition, ...]] = field(default_factory=dict)


def _read_rows(path: Path, width: int) -> Iterator[Tuple[int, List[str]]]:
    """Yield (line number, fields) for every non-blank line of ``path``."""
    with path.open(encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            attributes = line.split("\t")
            if len(attributes) != width:
                raise DefinitionError(
                    f"{path}:{lineno}: line [{line}] does not contain {width} attributes."
                )
            yield lineno, attributes


def _parse_int(path: Path, lineno: int, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise DefinitionError(f"{path}:{lineno}: '{value}' is not an integer.") from None


def _require(path: Path) -> Path:
    if not path.is_file():
        raise DefinitionError(f"File {path} does not exist.")
    return path


def read_polls(path: Path) -> List[PollDefinition]:
    """Read ``id<TAB>title<TAB>message`` lines."""
    polls = []
    for lineno, (poll_id, title, message) in _read_rows(_require(path), 3):
        polls.append(PollDefinition(_parse_int(path, lineno, poll_id), title, message))
    return polls


def create_results_file(path: Path, ids: List[int]) -> None:
    """Write a results file giving every id zero votes."""
    with path.open("w", encoding="utf-8") as f:
        for option_id in ids:
            f.write(f"{option_id}\t0\n")
    logger.info("results_file_created", path=str(path), entries=len(ids))


def read_results(path: Path) -> Dict[int, int]:
    """Read ``id<TAB>votes`` lines into a mapping."""
    results = {}
    for lineno, (option_id, votes) in _read_rows(path, 2):
        results[_parse_int(path, lineno, option_id)] = _parse_int(path, lineno, votes)
    return results


def read_options(definitions_path: Path, results_path: Path) -> List[OptionDefinition]:
    """
    Read an option definition file and attach the vote counts from its
    results file.

    A missing results file is created with zero votes for every option.
    Options not listed in the results file start with zero votes.

    Option names must be unique within a file. The database stores one
    option per (poll, name), so a repeated name is skipped when seeding.
    """
    rows = []
    for lineno, (option_id, name, link) in _read_rows(_require(definitions_path), 3):
        rows.append((_parse_int(definitions_path, lineno, option_id), name, link))

    if not results_path.exists():
        create_results_file(results_path, [row[0] for row in rows])
    results = read_results(results_path)

    return [
        OptionDefinition(option_id, name, link, results.get(option_id, 0))
        for option_id, name, link in rows
    ]


def load_definitions(data_dir: Path) -> Definitions:
    """
    Load the polls file and the definition and results files of every
    category from ``data_dir``.

    Raises:
        DefinitionError: if a required file is missing or malformed
    """
    polls = read_polls(data_dir / POLLS_FILE)

    options = {}
    for category in CATEGORIES:
        options[category.name] = tuple(
            read_options(
                data_dir / category.definitions_file,
                data_dir / category.results_file,
            )
        )

    logger.info(
        "definitions_loaded",
        data_dir=str(data_dir),
        polls=len(polls),
        options={name: len(items) for name, items in options.items()},
    )
    return Definitions(polls=tuple(polls), options=options)
