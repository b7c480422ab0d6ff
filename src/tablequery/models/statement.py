"""Built statement value object."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Statement:
    """SQL text paired with the values for its ``?`` placeholders.

    Attributes:
        sql: SQL with ``?`` placeholders for parameterized execution.
        params: Ordered values matching the ``?`` placeholders in *sql*.
    """

    sql: str
    params: list[Any] = field(default_factory=list)

    def display(self) -> str:
        """Render the statement with its values for logs and diagnostics.

        Returns:
            ``"<sql> [v1, v2]"``, or just the SQL when there are no values.
        """
        if not self.params:
            return self.sql
        return f"{self.sql} [{', '.join(str(value) for value in self.params)}]"
