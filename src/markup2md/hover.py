#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/hover.py
"""Hover text for issue-tracker tickets.

A ticket's description is wiki markup. It is converted to markdown and
embedded below a short header with the ticket title, status and assignee::

    # <title>
    ---
    <status> | <assignee>

    ---
    <description as markdown>

A description that cannot be parsed is embedded as-is, so building the hover
text never fails because of the description.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from markup2md.api import transpile_or_fallback
from markup2md.constants import DEFAULT_TICKET_ASSIGNEE, DEFAULT_TICKET_DESCRIPTION, DEFAULT_TICKET_TITLE
from markup2md.exceptions import ValidationError
from markup2md.options.transpile import TranspileOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TicketSummary:
    """The ticket fields shown in hover text.

    Parameters
    ----------
    key : str
        Ticket key, e.g. ``"AUTO-12"``
    status : str
        Workflow status name
    title : str or None, default = None
        Ticket summary line
    assignee : str or None, default = None
        Display name of the assignee
    description : str or None, default = None
        Description in wiki markup

    """

    key: str
    status: str
    title: Optional[str] = None
    assignee: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_fields(cls, key: str, fields: Mapping[str, Any]) -> TicketSummary:
        """Build a summary from an issue's ``fields`` mapping as returned by the tracker's REST API.

        Reads ``summary``, ``description``, ``status.name`` and
        ``assignee.displayName``; every field but status may be missing or null.

        Raises
        ------
        ValidationError
            If the status name is missing or not a string

        """
        status = fields.get("status") or {}
        status_name = status.get("name") if isinstance(status, Mapping) else None
        if not isinstance(status_name, str):
            raise ValidationError(
                f"Ticket {key} has no status name", parameter_name="status", parameter_value=status_name
            )

        assignee = fields.get("assignee")
        assignee_name = assignee.get("displayName") if isinstance(assignee, Mapping) else None

        return cls(
            key=key,
            status=status_name,
            title=fields.get("summary"),
            assignee=assignee_name,
            description=fields.get("description"),
        )


def render_ticket_hover(ticket: TicketSummary, options: Optional[TranspileOptions] = None) -> str:
    """Build the markdown hover text for a ticket.

    Parameters
    ----------
    ticket : TicketSummary
        Ticket to describe
    options : TranspileOptions, optional
        Options for converting the description. Parse failures always fall
        back to the raw description regardless of ``options.on_error``.

    Returns
    -------
    str
        Markdown hover text

    """
    title = ticket.title if ticket.title is not None else DEFAULT_TICKET_TITLE
    assignee = ticket.assignee if ticket.assignee is not None else DEFAULT_TICKET_ASSIGNEE

    if ticket.description is None:
        description = DEFAULT_TICKET_DESCRIPTION
    else:
        logger.debug("Transpiling description of %s", ticket.key)
        description = transpile_or_fallback(ticket.description, options, on_error="raw")

    return f"# {title}\n---\n{ticket.status} | {assignee}\n\n---\n{description}\n"
