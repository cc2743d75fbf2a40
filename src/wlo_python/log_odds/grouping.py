"""Grouping metadata for Polars frames.

Polars frames carry no grouping state, so a grouped table is modelled as a
frame plus a tag naming its grouping columns. The log-odds computation works
on the bare frame and reattaches the tag unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

import polars as pl


@dataclass(frozen=True, eq=False)
class GroupedFrame:
    """A Polars DataFrame tagged with grouping column names.

    Attributes:
        frame: Row/column data
        groups: Names of the grouping columns, in grouping order
    """

    frame: pl.DataFrame
    groups: tuple[str, ...]

    def __post_init__(self) -> None:
        missing = [g for g in self.groups if g not in self.frame.columns]
        if missing:
            msg = f"Grouping column(s) {missing} not found in frame"
            raise ValueError(msg)

    def with_frame(self, frame: pl.DataFrame) -> GroupedFrame:
        """Return a copy with new data and the same groups."""
        return GroupedFrame(frame=frame, groups=self.groups)


def group_by(df: pl.DataFrame, *columns: str) -> GroupedFrame:
    """Tag a frame with grouping columns."""
    return GroupedFrame(frame=df, groups=tuple(columns))


def ungroup(table: pl.DataFrame | GroupedFrame) -> tuple[pl.DataFrame, tuple[str, ...]]:
    """Split a table into its frame and grouping columns (empty if ungrouped)."""
    if isinstance(table, GroupedFrame):
        return table.frame, table.groups
    return table, ()
