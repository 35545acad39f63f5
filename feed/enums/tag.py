"""Tag enumerations."""

from enum import Enum


class TagState(str, Enum):
    """What the tagger did with the thing they tagged someone in."""

    TODO = "todo"
    COMPLETED = "completed"


class TagStatus(str, Enum):
    """Answer of the tagged user."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
