"""
Custom DataTable widget for displaying returns
"""

from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual.message import Message
from textual.widgets import DataTable

from returns_tracker.models.return_record import ReturnRecord
from returns_tracker.utils.formatters import DEFAULT_DATE_FORMAT, clip, format_date

COLUMNS = ("Tracking", "Store", "Channel", "Created", "Updated")


class ReturnTable(DataTable):
    """
    DataTable for return records that asks for more rows near the bottom
    """

    class NearEnd(Message):
        """The cursor reached the last few rows"""
        def __init__(self, row: int) -> None:
            super().__init__()
            self.row = row

    def __init__(
        self,
        *,
        threshold: int = 3,
        date_format: str = DEFAULT_DATE_FORMAT,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True
        self.threshold = threshold
        self.date_format = date_format
        self._records: Tuple[ReturnRecord, ...] = ()

    def on_mount(self) -> None:
        """Set up the widget when mounted"""
        self.add_class("returns-table")
        self.add_columns(*COLUMNS)

    @property
    def records(self) -> Tuple[ReturnRecord, ...]:
        return self._records

    def show_records(self, records: Sequence[ReturnRecord]) -> None:
        """
        Display ``records``. When they extend what is already shown only the
        new rows are added, so the cursor stays put while paging.
        """
        records = tuple(records)
        shown = len(self._records)
        if len(records) >= shown and records[:shown] == self._records:
            new_rows = records[shown:]
        else:
            self.clear()
            shown = 0
            new_rows = records

        for offset, record in enumerate(new_rows):
            self.add_row(*self._cells(record), key=str(shown + offset))
        self._records = records

    def _cells(self, record: ReturnRecord) -> Tuple[Text, str, str, str, str]:
        updated = format_date(record.updated_at, self.date_format) if record.was_updated else ""
        return (
            Text(record.tracking, style="bold"),
            clip(record.store.name),
            clip(record.channel.name),
            format_date(record.created_at, self.date_format),
            updated,
        )

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if self.row_count and event.cursor_row >= self.row_count - self.threshold:
            self.post_message(self.NearEnd(event.cursor_row))
