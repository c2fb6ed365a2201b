"""Parameters of the task attachments query."""

from __future__ import annotations

from dataclasses import dataclass, field

from wrike.params.common import url_field


@dataclass(kw_only=True)
class Date:
    """A date range, sent as ``<key>[Start]`` and ``<key>[End]``."""

    start: str = field(default="", metadata=url_field("Start"))
    end: str = field(default="", metadata=url_field("End"))


@dataclass(kw_only=True)
class QueryTaskAttachments:
    """Parameters of the task attachments query; unset values are left out."""

    versions: bool | None = field(default=None, metadata=url_field("versions", True))
    start_date: Date | None = field(default=None, metadata=url_field("startDate", True))
    with_urls: bool | None = field(default=None, metadata=url_field("withUrls", True))