"""
Comparison table widget.

Displays the rows of a RatioTable in a scrollable grid, with a heading row
at the start of every magnitude bucket section.
"""

import webbrowser
from typing import Callable, Dict, List, Optional, Tuple

import customtkinter as ctk

from src.services.dto import BucketSection, ScaleRow
from src.utils.constants import (
    BUCKET_COSMIC,
    BUCKET_GALACTIC,
    BUCKET_HUMAN,
    BUCKET_MICRO,
    BUCKET_PLANETARY,
    BUCKET_SOLAR,
    BUCKET_TRAVEL,
)

# (light, dark) heading colors per bucket
BUCKET_COLORS: Dict[str, Tuple[str, str]] = {
    BUCKET_MICRO: ("#d9f2e6", "#1f4d38"),
    BUCKET_HUMAN: ("#dcebfa", "#1f3a57"),
    BUCKET_TRAVEL: ("#fdf0d5", "#5a4620"),
    BUCKET_PLANETARY: ("#e8e0f7", "#3d2f5c"),
    BUCKET_SOLAR: ("#fde2d8", "#5c2d1f"),
    BUCKET_GALACTIC: ("#e0e0f0", "#2b2b4d"),
    BUCKET_COSMIC: ("#d6d6d6", "#1a1a1a"),
}

# Column widths: object, size (m), size (unit), scaled size, nearest object
COLUMN_WIDTHS = [220, 120, 140, 140, 200]


def row_values(row: ScaleRow) -> List[str]:
    """Cell texts of a row, in column order."""
    return [
        row.name,
        row.size_in_meter_text,
        row.size_in_unit_text,
        row.scaled_size_text,
        row.nearest_name,
    ]


class ScaleTable(ctk.CTkFrame):
    """
    Scrollable, sectioned comparison table.

    Clicking an object name opens its reference URL.
    """

    def __init__(
        self,
        parent,
        headers: List[str],
        on_open_url: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the table.

        Args:
            parent: Parent widget
            headers: Localized column headers
            on_open_url: Callback used to open an object URL (defaults to
                the system web browser)
        """
        super().__init__(parent)

        self._on_open_url = on_open_url or webbrowser.open
        self._header_labels: List[ctk.CTkLabel] = []
        self.sections: List[BucketSection] = []

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._create_header(headers)
        self._create_data_frame()

    def _create_header(self, headers: List[str]):
        """Create the table header row."""
        header_frame = ctk.CTkFrame(self, fg_color=("gray85", "gray25"))
        header_frame.grid(row=0, column=0, sticky="ew")

        for i, (text, width) in enumerate(zip(headers, COLUMN_WIDTHS)):
            label = ctk.CTkLabel(
                header_frame,
                text=text,
                width=width,
                anchor="w",
                font=ctk.CTkFont(weight="bold"),
            )
            label.grid(row=0, column=i, padx=5, pady=8, sticky="w")
            self._header_labels.append(label)

    def _create_data_frame(self):
        """Create the scrollable frame for data rows."""
        self.scrollable_frame = ctk.CTkScrollableFrame(self)
        self.scrollable_frame.grid(row=1, column=0, sticky="nsew")

        for i, width in enumerate(COLUMN_WIDTHS):
            self.scrollable_frame.grid_columnconfigure(i, minsize=width)

    def set_headers(self, headers: List[str]) -> None:
        """Update the column header texts (e.g., after a language change)."""
        for label, text in zip(self._header_labels, headers):
            label.configure(text=text)

    def set_sections(self, sections: List[BucketSection], section_titles: Dict[str, str]) -> None:
        """
        Replace the displayed rows.

        Args:
            sections: Bucket sections in display order
            section_titles: Localized heading text per bucket
        """
        self.sections = sections
        for widget in self.scrollable_frame.winfo_children():
            widget.destroy()

        grid_row = 0
        for section in sections:
            self._create_section_heading(grid_row, section.bucket, section_titles.get(section.bucket, section.bucket))
            grid_row += 1
            for row in section.rows:
                self._create_row(grid_row, row)
                grid_row += 1

    def clear(self) -> None:
        """Remove every row."""
        self.set_sections([], {})

    def _create_section_heading(self, grid_row: int, bucket: str, title: str):
        heading = ctk.CTkLabel(
            self.scrollable_frame,
            text=title,
            anchor="w",
            fg_color=BUCKET_COLORS.get(bucket, ("gray80", "gray30")),
            corner_radius=4,
            font=ctk.CTkFont(weight="bold"),
        )
        heading.grid(row=grid_row, column=0, columnspan=len(COLUMN_WIDTHS), padx=2, pady=(8, 2), sticky="ew")

    def _create_row(self, grid_row: int, row: ScaleRow):
        tooltips = [None, None, f"{row.unit_name}: {row.unit_description}",
                    f"{row.scaled_unit_name}: {row.scaled_unit_description}", None]
        for col_index, (text, width) in enumerate(zip(row_values(row), COLUMN_WIDTHS)):
            cell = ctk.CTkLabel(self.scrollable_frame, text=text, width=width, anchor="w")
            cell.grid(row=grid_row, column=col_index, padx=5, pady=2, sticky="w")

            if col_index == 0 and row.url:
                cell.configure(text_color=("#1f538d", "#6fa8dc"), cursor="hand2")
                cell.bind("<Button-1>", lambda e, url=row.url: self._on_open_url(url))
            elif tooltips[col_index]:
                # Hovering shows the unit name and description
                cell.bind("<Enter>", lambda e, c=cell, t=tooltips[col_index]: c.configure(text=t))
                cell.bind("<Leave>", lambda e, c=cell, v=text: c.configure(text=v))
