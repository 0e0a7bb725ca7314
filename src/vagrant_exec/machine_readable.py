"""
Decoder for Vagrant's ``--machine-readable`` output.

Every line has the shape::

    timestamp,target,type,data[,data...]

``target`` is a machine name, or empty for records that are not specific to
one machine. Commas and newlines inside a data field are written as
placeholder tokens (``%!(VAGRANT_COMMA)`` and a literal ``\\n`` by default),
so the only real commas on a line are field separators.

Vagrant does not escape the tokens themselves, so a field that already
contains token text (a Windows path such as ``C:\\new`` for instance) cannot
be told apart from an escaped one. Decoding follows Vagrant; the encoder
rejects such values instead of producing output that decodes differently.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from vagrant_exec.exceptions import EntryNotFoundError, MalformedRecordError
from vagrant_exec.models import VAGRANT_COMMA, VAGRANT_NEWLINE


@dataclass(frozen=True)
class Record:
    """One parsed line of machine-readable output."""

    timestamp: int
    target: str
    type: str
    data: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "data", tuple(self.data))


def escape_field(value: str, comma_token: str = VAGRANT_COMMA, newline_token: str = VAGRANT_NEWLINE) -> str:
    """Replace commas and newlines in *value* with their placeholder tokens.

    Raises ValueError when *value* already contains one of the tokens.
    """
    for token in (comma_token, newline_token):
        if token in value:
            raise ValueError(f"cannot encode {value!r}: it contains the placeholder {token!r}")
    return value.replace(",", comma_token).replace("\n", newline_token)


def unescape_field(value: str, comma_token: str = VAGRANT_COMMA, newline_token: str = VAGRANT_NEWLINE) -> str:
    """Reverse :func:`escape_field`."""
    return value.replace(comma_token, ",").replace(newline_token, "\n")


def encode_data(
    fields: Sequence[str], comma_token: str = VAGRANT_COMMA, newline_token: str = VAGRANT_NEWLINE
) -> str:
    """Join *fields* into the data portion of a machine-readable line.

    A lone empty field is rejected: it encodes to the same empty string as
    no fields at all.
    """
    if list(fields) == [""]:
        raise ValueError("cannot encode a single empty field")
    return ",".join(escape_field(f, comma_token, newline_token) for f in fields)


def decode_data(
    raw: str, comma_token: str = VAGRANT_COMMA, newline_token: str = VAGRANT_NEWLINE
) -> List[str]:
    """Split the data portion of a line into its unescaped fields.

    >>> decode_data("info,2.3.0%!(VAGRANT_COMMA) installed")
    ['info', '2.3.0, installed']
    >>> decode_data("")
    []
    """
    if raw == "":
        return []
    return [unescape_field(part, comma_token, newline_token) for part in raw.split(",")]


def parse_line(
    line: str,
    line_number: Optional[int] = None,
    comma_token: str = VAGRANT_COMMA,
    newline_token: str = VAGRANT_NEWLINE,
) -> Record:
    """Parse a single machine-readable line into a :class:`Record`."""
    parts = line.split(",", 3)
    if len(parts) < 4:
        raise MalformedRecordError(line, "expected at least 3 commas", line_number)

    raw_timestamp, target, record_type, raw_data = parts
    try:
        timestamp = int(raw_timestamp)
    except ValueError:
        raise MalformedRecordError(line, f"invalid timestamp {raw_timestamp!r}", line_number)
    if not record_type:
        raise MalformedRecordError(line, "missing record type", line_number)

    return Record(
        timestamp=timestamp,
        target=target,
        type=record_type,
        data=tuple(decode_data(raw_data, comma_token, newline_token)),
    )


def parse_machine_readable(
    output: Union[bytes, str],
    comma_token: str = VAGRANT_COMMA,
    newline_token: str = VAGRANT_NEWLINE,
) -> List[Record]:
    """Parse the full output of a ``--machine-readable`` command.

    Records come back in input order. Any malformed line aborts the whole
    parse with :class:`MalformedRecordError`.
    """
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")

    lines = output.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    records: List[Record] = []
    for number, line in enumerate(lines, start=1):
        records.append(parse_line(line.rstrip("\r"), number, comma_token, newline_token))
    return records


def pluck_entry_data(records: Iterable[Record], entry_type: str) -> List[str]:
    """Return a copy of the data of the first record of *entry_type*."""
    for record in records:
        if record.type == entry_type:
            return list(record.data)
    raise EntryNotFoundError(entry_type)
