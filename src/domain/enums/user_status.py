"""Lifecycle status of a user-role assignment."""

from enum import Enum


class UserStatus(str, Enum):
    """Assignment status.

    ACTIVE: user can act with the role.
    INVITATION_SENT: role assigned, invitation not yet accepted.
    """

    ACTIVE = "active"
    INVITATION_SENT = "invitation_sent"
