"""
Widget exports for the UI package.
"""

from src.ui.widgets.scale_table import ScaleTable
from src.ui.widgets.type_ahead_combobox import TypeAheadComboBox, filter_values

__all__ = [
    "ScaleTable",
    "TypeAheadComboBox",
    "filter_values",
]
