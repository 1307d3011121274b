"""
Table layout synthesis

Tables become longtable environments. The column specification cannot be
written when the table opens (the column count is only known once the
header row has been seen), so a placeholder token is emitted and replaced
with equal-width columns when the table closes.
"""

from typing import Optional, TYPE_CHECKING

from .output import OutputBuffer
from .log import LOG

if TYPE_CHECKING:
    from ..config.settings import AppSettings


CELL_SEPARATOR = " & "
# Rows retract only the '& ' of the trailing separator
SEPARATOR_RETRACT = 2


class TableLayout:
    """
    Table emission and column specification synthesis

    Attributes:
        settings: Source of the placeholder token and column spec builder
        cells: Header cells counted in the current table
        start: Output offset where the current table's preamble begins
    """

    def __init__(self, settings: "AppSettings") -> None:
        self.settings = settings
        self.cells = 0
        self.start: Optional[int] = None

    def preamble_emit(self, out: OutputBuffer) -> None:
        """Open a table: group, longtable with placeholder spec, double rule"""
        self.start = len(out)
        lines = [
            "\n",
            r"\begingroup",
            r"\setlength{\LTleft}{-20cm plus -1fill}",
            r"\setlength{\LTright}{\LTleft}",
            r"\begin{longtable}{" + self.settings.table_placeholder + "}",
            r"\hline",
            r"\hline",
            "\n",
        ]
        for line in lines:
            out.append(line)
            out.append("\n")

    def headCell_open(self, out: OutputBuffer) -> None:
        out.append(r"\bfseries{")

    def cell_close(self, out: OutputBuffer, in_head: bool) -> None:
        if in_head:
            out.append("}")
            self.cells += 1
        out.append(CELL_SEPARATOR)

    def head_close(self, out: OutputBuffer) -> None:
        out.retract(SEPARATOR_RETRACT)
        out.append("\\\\")
        out.append("\n")
        out.append(r"\hline")
        out.append("\n")

    def row_close(self, out: OutputBuffer) -> None:
        out.retract(SEPARATOR_RETRACT)
        out.append("\\\\")
        out.append(r"\arrayrulecolor{lightgray}\hline")
        out.append("\n")

    def table_close(self, out: OutputBuffer) -> None:
        """Close the table and substitute its column specification"""
        lines = [
            r"\arrayrulecolor{black}\hline",
            r"\end{longtable}",
            r"\endgroup",
            "\n",
        ]
        for line in lines:
            out.append(line)
            out.append("\n")

        columns = self.settings.columnSpec_make(self.cells)
        LOG(f"Table closed with {self.cells} columns", level=2)
        out.replaceFrom(self.start or 0, self.settings.table_placeholder, columns)
        self.cells = 0
        self.start = None
