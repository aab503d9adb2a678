"""
Static field dictionaries and the value decode table.

Loads the packaged JSON data once, at import, into read-only mappings:
one tag -> field name dictionary per protocol version, plus a single
version-agnostic tag -> {name, values} table used to decode enumerated
values.
"""

import json
import logging
import os
from types import MappingProxyType

from fix_decoder.fix_tags import VALUES_FILE, VERSION_FILES, FixVersion

logger = logging.getLogger("fix_decoder.dictionary")

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


def _load_json(file_name):
    with open(os.path.join(DATA_DIR, file_name), "r", encoding="utf-8") as f:
        return json.load(f)


def _normalise_tag(tag):
    return str(int(tag))


def build_field_dictionary(definition):
    """Invert a dataset's field list into a read-only tag -> name mapping."""
    names = {}
    for field in definition.get("Fields", []):
        names[_normalise_tag(field["Tag"])] = field["Name"]
    return MappingProxyType(names)


def build_value_table(definition):
    """Normalise the value decode dataset into tag -> {"name", "values"}."""
    table = {}
    for tag, entry in definition.items():
        table[_normalise_tag(tag)] = MappingProxyType({
            "name": entry.get("Name"),
            "values": MappingProxyType(dict(entry.get("Values") or {})),
        })
    return MappingProxyType(table)


def _load_dictionaries():
    dictionaries = {}
    for version, file_name in VERSION_FILES.items():
        dictionaries[version] = build_field_dictionary(_load_json(file_name))
        logger.debug("Loaded %d fields for %s", len(dictionaries[version]), version)
    return MappingProxyType(dictionaries)


DICTIONARIES = _load_dictionaries()
VALUE_TABLE = build_value_table(_load_json(VALUES_FILE))


def dictionary_for(version):
    """Field dictionary for a protocol version (FIX.4.4 for anything unknown)."""
    return DICTIONARIES.get(version, DICTIONARIES[FixVersion.DEFAULT])


def field_name(dictionary, tag):
    """Name of the tag in the given dictionary, or None when it is not defined there."""
    return dictionary.get(tag)


def value_table_name(tag, table=VALUE_TABLE):
    """Canonical field name the value table carries for a tag, if any."""
    entry = table.get(tag)
    if entry is None:
        return None
    return entry["name"]


def lookup_label(tag, raw_value, table=VALUE_TABLE):
    """Label the value table gives this tag/value pair, or None."""
    entry = table.get(tag)
    if entry is None:
        return None
    return entry["values"].get(raw_value)


def decode_value(tag, raw_value, table=VALUE_TABLE):
    """Human label for an enumerated value.

    Returns "" when the tag has no enumeration, and
    "Unknown value for tag N" when the value is not one of its members.
    """
    entry = table.get(tag)
    if entry is None or not entry["values"]:
        return ""
    label = entry["values"].get(raw_value)
    if label is None:
        return f"Unknown value for tag {tag}"
    return label
