import os

from coordinate_validator import validators_for


class AppState:
    def __init__(self, table, file_path, save_dir=None):
        self.table = table
        self.file_path = file_path
        self._save_dir = save_dir
        self.row_validator, self.column_validator = validators_for(table)

    @property
    def save_dir(self) -> str:
        if self._save_dir:
            return self._save_dir
        return os.path.dirname(os.path.abspath(self.file_path)) if self.file_path else "."
