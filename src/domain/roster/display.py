"""Display metadata for roster enums, kept out of the entities themselves."""

from __future__ import annotations

from typing import Final

from domain.roster.match import EventType, MatchStatus
from domain.roster.player import PlayerRole

ROLE_ICONS: Final[dict[PlayerRole, str]] = {
    PlayerRole.SNIPER: "scope",
    PlayerRole.SCOUT: "binoculars",
    PlayerRole.SUPPORT: "shield",
    PlayerRole.ASSAULT: "bolt.fill",
    PlayerRole.MEDIC: "cross.case.fill",
    PlayerRole.CAPTAIN: "star.fill",
}

STATUS_COLORS: Final[dict[MatchStatus, str]] = {
    MatchStatus.SCHEDULED: "yellow",
    MatchStatus.IN_PROGRESS: "green",
    MatchStatus.COMPLETED: "blue",
    MatchStatus.CANCELLED: "red",
}

EVENT_LABELS: Final[dict[EventType, str]] = {
    EventType.ELIMINATION: "Elimination",
    EventType.OBJECTIVE_CAPTURE: "Objective Capture",
    EventType.RESUPPLY: "Resupply",
    EventType.TEAM_REVIVE: "Team Revive",
    EventType.FLAG_PICKUP: "Flag Pickup",
    EventType.FLAG_DROP: "Flag Drop",
}


def role_icon(role: PlayerRole) -> str:
    return ROLE_ICONS[role]


def status_color(status: MatchStatus) -> str:
    return STATUS_COLORS[status]


def event_label(event_type: EventType) -> str:
    return EVENT_LABELS[event_type]


__all__ = [
    "EVENT_LABELS",
    "ROLE_ICONS",
    "STATUS_COLORS",
    "event_label",
    "role_icon",
    "status_color",
]
