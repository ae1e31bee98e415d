class CsvManError(Exception):
    """Base class for every error the table tool raises."""


class SourceNotFoundError(CsvManError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found, current directory : {path}")


class TableIOError(CsvManError):
    pass


class InputError(CsvManError):
    def __str__(self):
        return f"Input error: {self.args[0] if self.args else ''}"


class ValidationError(CsvManError):
    def __str__(self):
        return f"Validation error: {self.args[0] if self.args else ''}"


class CellIndexError(CsvManError, IndexError):
    pass


class MenuReset(CsvManError):
    """Current command was abandoned; go back to the main menu untouched."""

    def __str__(self):
        return "Menu selected"
