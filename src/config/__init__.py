from .settings import Settings, get_settings, settings
from .table_names import TableNames

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "TableNames",
]
