from dataclasses import dataclass
from typing import Optional, Union

from coordinate_validator import AxisValidator
from errors import InputError, MenuReset, ValidationError
from table import Coordinate, Window


@dataclass(frozen=True)
class Continue:
    value: str


@dataclass(frozen=True)
class Abort:
    pass


Entry = Union[Continue, Abort]


class InteractionController:
    """Collects validated one-based indices from the user.

    Typing the menu keyword at any index prompt abandons the current command
    by raising MenuReset. Bad numbers are reported and asked for again.
    """

    RETRY_MESSAGE = "Invalid input, please try again."

    def __init__(
        self,
        console,
        row_validator: AxisValidator,
        column_validator: AxisValidator,
        menu_keyword: str = "menu",
    ):
        self.console = console
        self.row_validator = row_validator
        self.column_validator = column_validator
        self.menu_keyword = menu_keyword

    def read_entry(self, prompt: Optional[str] = None) -> Entry:
        if prompt is not None:
            self.console.write(prompt)
        text = self.console.read_line().strip()
        if text == self.menu_keyword:
            return Abort()
        return Continue(text)

    def _parse_index(self, text: str) -> int:
        if not (text.isascii() and text.isdigit()):
            raise InputError("Invalid input. Please enter a valid number.")
        return int(text)

    def read_index(self, validator: AxisValidator, prompt: str) -> int:
        while True:
            self.console.write(prompt)
            entry = self.read_entry(f"{validator.description}:\n")
            if isinstance(entry, Abort):
                raise MenuReset()
            try:
                value = self._parse_index(entry.value)
                validator.validate(value)
            except (InputError, ValidationError):
                self.console.write(self.RETRY_MESSAGE)
                continue
            return value

    def read_coordinate(self, row_prompt: str, column_prompt: str) -> Coordinate:
        row = self.read_index(self.row_validator, row_prompt)
        col = self.read_index(self.column_validator, column_prompt)
        return Coordinate(row - 1, col - 1)

    def read_single_cell(self) -> Coordinate:
        return self.read_coordinate("\nEnter row index.", "\nEnter column index.")

    def read_window(self) -> Window:
        start = self.read_coordinate(
            "\nEnter starting row index.", "Enter starting column index."
        )
        end = self.read_coordinate("\nEnter end row index.", "Enter end column index.")
        return Window.ordered(start, end)

    def confirm(self, question: str) -> bool:
        self.console.write(question)
        return self.console.read_line().strip().lower() == "y"

    def read_text(self, prompt: str) -> str:
        self.console.write(prompt)
        return self.console.read_line().strip()
