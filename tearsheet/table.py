"""Tabular presentation of statistics."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable

from tabulate import tabulate


def format_decimal(value: float) -> str:
    """Format a number with three decimal places."""
    if math.isnan(value):
        return "NaN"
    return f"{value:.3f}"


@dataclass
class Table:
    """A header row followed by rows of string cells."""

    titles: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    def render(self) -> str:
        """Return the table drawn as a text grid."""
        return tabulate(
            self.rows, headers=self.titles, tablefmt="grid", disable_numparse=True
        )

    def __str__(self) -> str:
        return self.render()


class TableBuilder(ABC):
    """Something that can describe itself as a table row with titles."""

    @abstractmethod
    def titles(self) -> list[str]:
        """Return the column titles."""

    @abstractmethod
    def row(self) -> list[str]:
        """Return the cells of this object's row."""

    def table(self, id_cell: str) -> Table:
        """Return a one-row table whose first column holds ``id_cell``."""
        return Table(titles=["", *self.titles()], rows=[[id_cell, *self.row()]])

    def table_with(
        self, id_cell: str, another: "TableBuilder", another_id: str
    ) -> Table:
        """Return a table with this row followed by another builder's row."""
        return Table(
            titles=["", *self.titles()],
            rows=[[id_cell, *self.row()], [another_id, *another.row()]],
        )


def combine(builders: Iterable[tuple[str, TableBuilder]]) -> Table:
    """Combine (id, builder) pairs into one table titled by the first builder."""
    table = Table()
    for index, (identifier, builder) in enumerate(builders):
        if index == 0:
            table.titles = ["", *builder.titles()]
        table.rows.append([identifier, *builder.row()])
    return table