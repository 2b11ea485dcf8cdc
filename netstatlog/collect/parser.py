"""Turn filtered netstat output into a :class:`StatRecord`."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from netstatlog.exceptions import NoStatisticsAvailable, UnexpectedFormat
from netstatlog.models import StatRecord

# Last two columns of the line: inbound and outbound byte counters.
# Leading columns differ between netstat flavours and are ignored.
# ASCII digits only: int() would also accept other Unicode digits.
LINE_PATTERN = re.compile(r"([0-9]+)\s+([0-9]+)$")


def parse_stat(raw_text: str, now: datetime | None = None) -> StatRecord:
    """Parse the first line of ``raw_text`` into a record dated ``now`` (UTC by default).

    Raises :class:`NoStatisticsAvailable` when the text has no content and
    :class:`UnexpectedFormat` when the first line does not end with two
    whitespace-separated integers. Lines after the first are ignored.
    """
    if not raw_text.strip():
        raise NoStatisticsAvailable("No statistics can be retrieved from netstat.")

    line = raw_text.split("\n")[0]
    m = LINE_PATTERN.search(line)
    if m is None or len(m.groups()) != 2:
        raise UnexpectedFormat(f"netstat output does not match expected pattern: {line!r}")

    if now is None:
        now = datetime.now(timezone.utc)

    return StatRecord(
        date=now.date(),
        in_bytes=int(m.group(1), 10),
        out_bytes=int(m.group(2), 10),
    )
