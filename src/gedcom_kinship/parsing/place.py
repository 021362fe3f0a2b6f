from __future__ import annotations

from typing import Dict, List

from gedcom_kinship.loader import LineStream
from gedcom_kinship.registry.entities import Address, Place

from .common import Fields, store

NEGATIVE_HEMISPHERES = {"S", "W"}

# Repeatable contact fields; GEDCOM puts them beside ADDR, not under it.
CONTACT_TAGS = {
    "PHON": "phone_numbers",
    "EMAIL": "emails",
    "FAX": "faxes",
    "WWW": "websites",
}


def parse_coordinate(value: str) -> float:
    """
    Parse a MAP coordinate such as ``N18.150944`` or ``W168.150944``.

    The leading hemisphere letter is dropped before the number is read;
    southern and western values come back negative.
    """
    value = value.strip()
    degrees = float(value[1:])
    return -degrees if value[:1].upper() in NEGATIVE_HEMISPHERES else degrees


def parse_place(name: str, stream: LineStream) -> Place:
    fields: Fields = {}
    notes: List[str] = []

    stream.parse_by_tag({
        "MAP": lambda _: fields.update(parse_coordinates(stream)),
        "NOTE": notes.append,
    })

    return Place(name=name, notes=tuple(notes), **fields)


def parse_coordinates(stream: LineStream) -> Fields:
    fields: Fields = {}

    stream.parse_by_tag({
        "LATI": store(fields, "latitude", parse_coordinate),
        "LONG": store(fields, "longitude", parse_coordinate),
    })

    return fields


def parse_address(address_line: str, stream: LineStream) -> Address:
    """
    Parse an ADDR structure.

    Two passes: the structured lines nested under ADDR, then every
    PHON/EMAIL/FAX/WWW line that immediately follows at ADDR's depth or
    deeper, up to the first other tag.
    """
    depth = stream.current().depth
    fields: Fields = {}
    contacts: Dict[str, List[str]] = {key: [] for key in CONTACT_TAGS.values()}

    stream.parse_by_tag({
        "ADR1": store(fields, "address1"),
        "ADR2": store(fields, "address2"),
        "ADR3": store(fields, "address3"),
        "CITY": store(fields, "city"),
        "STAE": store(fields, "state"),
        "POST": store(fields, "postal_code"),
        "CTRY": store(fields, "country"),
    })

    while stream.has_next():
        upcoming = stream.peek()
        if not upcoming.is_well_formed() or upcoming.depth < depth:
            break
        key = CONTACT_TAGS.get(upcoming.tag)
        if key is None:
            break
        contacts[key].append(upcoming.content)
        stream.advance()

    return Address(
        address_line=address_line or None,
        **fields,
        **{key: tuple(values) for key, values in contacts.items()},
    )
