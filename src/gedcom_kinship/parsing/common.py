from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from gedcom_kinship.core.exceptions import ConfirmedFlagError
from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.entities import MultimediaLink

log = get_logger(__name__)

Fields = Dict[str, Any]


def store(fields: Fields, key: str, convert: Optional[Callable[[str], Any]] = None):
    """Handler that records a line value under ``key`` in a builder dict."""

    def handler(value: str) -> None:
        fields[key] = convert(value) if convert else value

    return handler


def multimedia_handler(links: List[MultimediaLink]):
    return lambda value: links.append(MultimediaLink(value))


def parse_confirmed_flag(value: str) -> bool:
    """
    Decode an event occurrence flag such as ``1 DEAT Y``.

    ``"Y"`` means the event is known to have happened, an empty value means
    nothing is asserted.
    """
    if value == "Y":
        return True
    if value == "":
        return False
    raise ConfirmedFlagError(f"Invalid confirmed flag: {value!r}")


def parse_optional_int(value: str, what: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        log.warning(f"Could not parse {what} {value!r} as a number")
        return None
