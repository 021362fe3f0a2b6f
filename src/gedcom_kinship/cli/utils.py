from __future__ import annotations

import time
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console

from gedcom_kinship.config import get_config
from gedcom_kinship.diagram.layout import CellFactory, graded_box, name_box
from gedcom_kinship.parsing import parse_gedcom_file
from gedcom_kinship.registry.entities import Individual
from gedcom_kinship.registry.gedcom import Gedcom

console = Console()

Ask = Callable[[str], str]
Say = Callable[[str], None]


def load_gedcom(path: Path, *, strict: bool = False, verbose: bool = False) -> Gedcom:
    """
    Load and parse a GEDCOM file.

    ``strict`` falls back to the ``parser.strict`` configuration value.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    strict = strict or bool(get_config().parser.get("strict", False))

    t0 = time.perf_counter()
    gedcom = parse_gedcom_file(path, strict=strict)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return gedcom


def diagram_cell_factory(*, plain: bool = False) -> CellFactory:
    """Box factory for relationship diagrams, following the ``diagram`` config."""
    diagram_cfg = get_config().diagram
    margin = int(diagram_cfg.get("margin", 1))

    if plain or not diagram_cfg.get("grades", True):
        return partial(name_box, margin=margin)
    return partial(graded_box, margin=margin, colored=bool(diagram_cfg.get("color", True)))


def select_individual(
    gedcom: Gedcom,
    label: str,
    ask: Ask,
    say: Say,
    fragment: Optional[str] = None,
) -> Optional[Individual]:
    """
    Pick one individual by a name fragment.

    The fragment is asked for when not given. Several matches are listed
    with 1-based numbers and the user picks one; no match or an invalid
    pick returns None.
    """
    if fragment is None:
        fragment = ask(f"Name of the {label} person")

    matches: List[Individual] = gedcom.find_individuals_by_name(fragment)
    if not matches:
        say(f"No individual found matching '{fragment}'")
        return None
    if len(matches) == 1:
        return matches[0]

    say(f"Found {len(matches)} individuals matching '{fragment}':")
    for index, individual in enumerate(matches, start=1):
        say(f"  {index}. {individual.display_name} ({individual.id})")

    choice = ask(f"Number of the {label} person")
    try:
        index = int(str(choice).strip())
    except ValueError:
        index = 0

    if not 1 <= index <= len(matches):
        say(f"Invalid selection: {choice}")
        return None
    return matches[index - 1]
