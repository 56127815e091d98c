"""
Main application window for Scale Compare.

Provides the comparison window: a language selector, two type-ahead object
selectors, the size ratio and the sectioned comparison table.
"""

import customtkinter as ctk

from src.services.resource_loader import CatalogBundle
from src.utils.constants import (
    APP_NAME,
    APP_VERSION,
    BUCKET_LABELS,
    LABEL_FIRST_OBJECT,
    LABEL_LANGUAGE,
    LABEL_RATIO,
    LABEL_SECOND_OBJECT,
    LABEL_TITLE,
    TABLE_COLUMN_LABELS,
)
from src.ui.widgets.scale_table import ScaleTable
from src.ui.widgets.type_ahead_combobox import TypeAheadComboBox


class ScaleWindow(ctk.CTk):
    """
    Main application window.

    Every label with an id is re-resolved when the language changes; the
    table is rebuilt whenever either selection changes.
    """

    def __init__(self, bundle: CatalogBundle, significant_digits: int = 4):
        """
        Initialize the main window.

        Args:
            bundle: Loaded catalogs
            significant_digits: Significant digits of displayed sizes
        """
        super().__init__()

        self.bundle = bundle
        self.presenter = bundle.presenter(significant_digits)
        # (widget, label id) pairs refreshed on language change
        self._labelled_widgets = []

        self.geometry("1000x750")
        self.minsize(800, 500)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=0)  # Selectors
        self.grid_rowconfigure(1, weight=0)  # Ratio
        self.grid_rowconfigure(2, weight=1)  # Table
        self.grid_rowconfigure(3, weight=0)  # Status bar

        self._create_selectors()
        self._create_ratio()
        self._create_table()
        self._create_status_bar()

        self.refresh_labels()
        self.update_status(f"{len(bundle.objects)} objects, {len(bundle.units)} units")

    def _add_label(self, parent, label_id: int, **kwargs) -> ctk.CTkLabel:
        label = ctk.CTkLabel(parent, text="", **kwargs)
        self._labelled_widgets.append((label, label_id))
        return label

    def _create_selectors(self):
        frame = ctk.CTkFrame(self)
        frame.grid(row=0, column=0, padx=10, pady=(10, 5), sticky="ew")
        frame.grid_columnconfigure((1, 3), weight=1)

        self._add_label(frame, LABEL_FIRST_OBJECT).grid(row=0, column=0, padx=5, pady=5)
        self.first_selector = TypeAheadComboBox(frame, values=[], command=self._on_selection_changed)
        self.first_selector.grid(row=0, column=1, padx=5, pady=5, sticky="ew")

        self._add_label(frame, LABEL_SECOND_OBJECT).grid(row=0, column=2, padx=5, pady=5)
        self.second_selector = TypeAheadComboBox(frame, values=[], command=self._on_selection_changed)
        self.second_selector.grid(row=0, column=3, padx=5, pady=5, sticky="ew")

        self._add_label(frame, LABEL_LANGUAGE).grid(row=0, column=4, padx=5, pady=5)
        labels = self.bundle.labels
        self.language_menu = ctk.CTkOptionMenu(
            frame,
            values=list(labels.supported_languages),
            command=self._on_language_changed,
            width=70,
        )
        self.language_menu.set(labels.current_language)
        self.language_menu.grid(row=0, column=5, padx=5, pady=5)

    def _create_ratio(self):
        frame = ctk.CTkFrame(self, fg_color="transparent")
        frame.grid(row=1, column=0, padx=10, pady=5, sticky="ew")
        self._add_label(frame, LABEL_RATIO, font=ctk.CTkFont(size=16)).pack(side="left", padx=5)
        self.ratio_label = ctk.CTkLabel(frame, text="", font=ctk.CTkFont(size=16, weight="bold"))
        self.ratio_label.pack(side="left", padx=5)

    def _create_table(self):
        self.table = ScaleTable(self, headers=self._column_headers())
        self.table.grid(row=2, column=0, padx=10, pady=5, sticky="nsew")

    def _create_status_bar(self):
        """Create the status bar at the bottom of the window."""
        self.status_frame = ctk.CTkFrame(self, height=30)
        self.status_frame.grid(row=3, column=0, sticky="ew", padx=10, pady=(0, 10))

        self.status_label = ctk.CTkLabel(self.status_frame, text="Ready", anchor="w")
        self.status_label.pack(side="left", padx=10, fill="x", expand=True)

    def _column_headers(self):
        return [self.bundle.labels.resolve(label_id) for label_id in TABLE_COLUMN_LABELS]

    def _section_titles(self):
        labels = self.bundle.labels
        return {bucket: labels.resolve(label_id) for bucket, label_id in BUCKET_LABELS.items()}

    def _on_language_changed(self, lang: str):
        self.bundle.labels.current_language = lang
        self.first_selector.set("")
        self.second_selector.set("")
        self.refresh_labels()

    def _on_selection_changed(self, _value: str):
        self.refresh_table()

    def refresh_labels(self):
        """Re-localize every label, the selection lists and the table."""
        labels = self.bundle.labels
        self.title(f"{labels.resolve(LABEL_TITLE)} - {APP_NAME} v{APP_VERSION}")
        for widget, label_id in self._labelled_widgets:
            widget.configure(text=labels.resolve(label_id))
        self.table.set_headers(self._column_headers())

        names = self.bundle.object_names()
        self.first_selector.reset_values(names)
        self.second_selector.reset_values(names)
        self.refresh_table()

    def refresh_table(self):
        """Rebuild the comparison table from the current selections."""
        table = self.presenter.build_by_name(
            self.first_selector.get(),
            self.second_selector.get(),
        )
        if table is None:
            self.ratio_label.configure(text="")
            self.table.clear()
            return
        self.ratio_label.configure(text=table.ratio_text)
        self.table.set_sections(table.sections, self._section_titles())
        self.update_status(f"{table.first.get_name(table.language)} : {table.second.get_name(table.language)}")

    def update_status(self, message: str):
        """
        Update the status bar message.

        Args:
            message: Status message to display
        """
        self.status_label.configure(text=message)
