"""
Decode result types.

Responsibility: To hold the decoded view of a single message
AnnotatedField: one field (tag, display name, raw value, decoded value)
DecodedMessage: the ordered fields plus the version, delimiter and message type summary
"""


class AnnotatedField:

    __slots__ = ("tag", "tag_name", "value", "decoded_value")

    def __init__(self, tag: str, tag_name: str, value: str, decoded_value: str = ""):
        self.tag = tag
        self.tag_name = tag_name
        self.value = value
        self.decoded_value = decoded_value

    def as_dict(self) -> dict:
        return {
            "tag": self.tag,
            "tagName": self.tag_name,
            "value": self.value,
            "decodedValue": self.decoded_value,
        }

    def __eq__(self, other):
        if not isinstance(other, AnnotatedField):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash((self.tag, self.tag_name, self.value, self.decoded_value))

    def __repr__(self):
        return (f"AnnotatedField(tag={self.tag!r}, tag_name={self.tag_name!r}, "
                f"value={self.value!r}, decoded_value={self.decoded_value!r})")


class DecodedMessage:

    def __init__(self, fields, version: str, delimiter: str, msg_type_summary: str):
        self.fields = list(fields)
        self.version = version
        self.delimiter = delimiter
        self.msg_type_summary = msg_type_summary

    def __iter__(self):
        return iter(self.fields)

    def __len__(self):
        return len(self.fields)

    def __getitem__(self, index):
        return self.fields[index]

    def get_field(self, tag: str):
        """Return the first field with the given tag, or None."""
        for field in self.fields:
            if field.tag == tag:
                return field
        return None

    def as_dict(self) -> dict:
        return {
            "version": self.version,
            "delimiter": self.delimiter,
            "msgType": self.msg_type_summary,
            "fields": [field.as_dict() for field in self.fields],
        }
