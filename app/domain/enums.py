"""Domain enumerations for the todo application.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task progress status.

    A plain attribute with no enforced transition graph: any status may be
    replaced by any other on update.
    """

    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]
