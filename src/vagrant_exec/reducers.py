"""
Fold parsed machine-readable records into machine statuses and plugins.
"""

import re
from typing import Dict, Iterable, List, Optional

import structlog

from vagrant_exec.exceptions import PluginFormatError
from vagrant_exec.machine_readable import Record
from vagrant_exec.models import VAGRANT_COMMA, MachineState, MachineStatus, Plugin

_log = structlog.get_logger(__name__)

PROVIDER_NAME = "provider-name"
STATE = "state"
UI = "ui"
VERSION_INSTALLED = "version-installed"


def build_statuses(records: Iterable[Record]) -> List[MachineStatus]:
    """Build one :class:`MachineStatus` per distinct non-empty target.

    The first record seen for a target creates its entry; ``provider-name``
    and ``state`` records fill it in and every other type is ignored. The
    result follows first-seen order, but callers that need a stable order
    should sort it themselves.
    """
    statuses: Dict[str, MachineStatus] = {}
    for record in records:
        if not record.target:
            continue

        status = statuses.get(record.target)
        if status is None:
            status = MachineStatus(name=record.target)
            statuses[record.target] = status

        if record.type == PROVIDER_NAME and record.data:
            status.provider = record.data[0]
        elif record.type == STATE:
            status.state = MachineState.from_string(record.data[0] if record.data else None)

    return list(statuses.values())


def plugin_pattern(comma_token: str = VAGRANT_COMMA) -> re.Pattern:
    """Compile the ``NAME (VERSION, LOCATION)`` pattern.

    Vagrant sometimes renders the comma in the parenthetical as its own
    escape token, so both forms are accepted.
    """
    separator = f"(?:,|{re.escape(comma_token)})"
    return re.compile(rf"^([\w.-]+)\s\((.*?){separator}\s*([a-z]+)\)$")


def parse_plugin_description(description: str, pattern: Optional[re.Pattern] = None) -> Plugin:
    """Parse a rendered plugin description such as ``vagrant-share (1.1.3, global)``."""
    match = (pattern or plugin_pattern()).match(description.strip())
    if match is None:
        raise PluginFormatError(description)
    name, version, location = match.groups()
    return Plugin(name=name, version=version.strip(), location=location)


def extract_plugins(
    records: Iterable[Record],
    comma_token: str = VAGRANT_COMMA,
    log: Optional[structlog.stdlib.BoundLogger] = None,
) -> List[Plugin]:
    """Collect plugins from the ``ui`` records of ``plugin list`` output.

    Records whose description does not match are skipped so one odd line
    does not hide the rest of the listing.
    """
    if log is None:
        log = _log
    pattern = plugin_pattern(comma_token)
    plugins: List[Plugin] = []
    for record in records:
        if record.type != UI:
            continue
        if len(record.data) < 2:
            log.debug("plugin_record_skipped", reason="missing description", data=list(record.data))
            continue
        try:
            plugins.append(parse_plugin_description(record.data[1], pattern))
        except PluginFormatError as e:
            log.debug("plugin_record_skipped", reason=str(e))
    return plugins
