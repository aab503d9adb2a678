"""
Decode pipeline.

Responsibility: Turn a raw FIX string into an ordered list of annotated fields.
Functions: decode(), annotate_field(), display_name(), message_type_summary()
"""

import logging

from fix_decoder.fix_dictionary import (
    VALUE_TABLE,
    decode_value,
    dictionary_for,
    field_name,
    lookup_label,
    value_table_name,
)
from fix_decoder.fix_message import AnnotatedField, DecodedMessage
from fix_decoder.fix_parser import (
    MISSING_EQUALS_EMPTY,
    EmptyInputError,
    extract_tag,
    parse_delimiter,
    resolve_delimiter,
    tokenize,
)
from fix_decoder.fix_tags import VERSION_FILES, WELL_KNOWN_MSG_TYPES, FixTag, FixVersion
from fix_decoder.fix_version import resolve_version

logger = logging.getLogger("fix_decoder.decoder")

UNKNOWN_MESSAGE_TYPE = "Unknown Message Type"
UNKNOWN_TAG_MARKER = "(*)"


class DecoderConfig:
    def __init__(self, delimiter=None, on_missing_equals=MISSING_EQUALS_EMPTY,
                 default_version=FixVersion.DEFAULT):
        if default_version not in VERSION_FILES:
            raise ValueError(f"No dictionary for default version {default_version!r}")
        # None means: infer from the message text
        self.delimiter = parse_delimiter(delimiter)
        self.on_missing_equals = on_missing_equals
        self.default_version = default_version


DEFAULT_CONFIG = DecoderConfig()


def display_name(dictionary, tag, value, table=VALUE_TABLE):
    """Name shown for a field.

    MsgType with a well-known value gets the message name spelled out.
    Tags missing from the version's dictionary are flagged with "(*)",
    using the value table's name for the tag when it has one.
    """
    if tag == FixTag.MSG_TYPE and value in WELL_KNOWN_MSG_TYPES:
        return f"MsgType ({WELL_KNOWN_MSG_TYPES[value]})"

    name = field_name(dictionary, tag)
    if name is not None:
        return name

    fallback = value_table_name(tag, table)
    if fallback:
        return f"{fallback} {UNKNOWN_TAG_MARKER}"
    return f"Tag {tag} {UNKNOWN_TAG_MARKER}"


def annotate_field(dictionary, tag, value):
    return AnnotatedField(
        tag=tag,
        tag_name=display_name(dictionary, tag, value),
        value=value,
        decoded_value=decode_value(tag, value),
    )


def message_type_summary(fields):
    """Human label for the message's first MsgType, from the value table.

    Accepts (tag, value) pairs or AnnotatedField objects.
    """
    pairs = [(f.tag, f.value) if isinstance(f, AnnotatedField) else f for f in fields]
    msg_type = extract_tag(pairs, FixTag.MSG_TYPE)
    if msg_type is None:
        return UNKNOWN_MESSAGE_TYPE
    return lookup_label(FixTag.MSG_TYPE, msg_type) or UNKNOWN_MESSAGE_TYPE


def decode(raw_str, delimiter=None, config=None):
    """Decode a raw FIX message.

    Raises EmptyInputError for empty or whitespace-only input; anything
    else decodes, with unknown versions, tags and values flagged in the
    output rather than raised. An explicit delimiter other than pipe or
    SOH is a ValueError.
    """
    if not raw_str or not raw_str.strip():
        raise EmptyInputError()

    config = config or DEFAULT_CONFIG
    if delimiter is None:
        delimiter = config.delimiter

    delim = resolve_delimiter(raw_str, delimiter)
    pairs = tokenize(raw_str, delim, on_missing_equals=config.on_missing_equals)

    version = resolve_version(pairs, default=config.default_version)
    dictionary = dictionary_for(version)
    logger.debug("Decoding %d fields as %s (delimiter %r)", len(pairs), version, delim)

    fields = [annotate_field(dictionary, tag, value) for tag, value in pairs]
    return DecodedMessage(
        fields=fields,
        version=version,
        delimiter=delim,
        msg_type_summary=message_type_summary(pairs),
    )
