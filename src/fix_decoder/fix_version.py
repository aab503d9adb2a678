"""
Protocol version resolution.

Responsibility: Decide which field dictionary applies to a tokenized message.
"""

import logging

from fix_decoder.fix_tags import VERSION_FILES, FixTag, FixVersion

logger = logging.getLogger("fix_decoder.version")


def available_versions():
    """The supported BeginString values, oldest first."""
    return list(VERSION_FILES)


def resolve_version(fields, default=FixVersion.DEFAULT):
    """Return the protocol version named by the first non-empty tag 8.

    Falls back to `default` when tag 8 is missing or names a version we
    have no dictionary for. Never raises.
    """
    for tag, value in fields:
        if tag == FixTag.BEGIN_STRING and value:
            version = value.strip()
            if version in VERSION_FILES:
                return version
            logger.warning("Unrecognised BeginString %r, using %s", version, default)
            return default

    logger.debug("No BeginString found, using %s", default)
    return default
