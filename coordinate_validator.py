from enum import Enum

from errors import ValidationError


class Axis(Enum):
    ROW = "Row"
    COLUMN = "Column"


class AxisValidator:
    """Inclusive one-based bound for a single axis."""

    def __init__(self, axis: Axis, upper: int, lower: int = 1):
        self.axis = axis
        self.lower = lower
        self.upper = upper

    @property
    def description(self) -> str:
        return f"{self.axis.value} numbers range from {self.lower} to {self.upper}"

    def validate(self, value: int) -> None:
        if not (self.lower <= value <= self.upper):
            raise ValidationError(
                f"{self.axis.value} out of bounds ({self.lower}-{self.upper})"
            )

    def __repr__(self):
        return f"AxisValidator({self.axis.name}, {self.lower}-{self.upper})"


def validators_for(table) -> tuple[AxisValidator, AxisValidator]:
    rows, cols = table.dimensions
    return AxisValidator(Axis.ROW, rows), AxisValidator(Axis.COLUMN, cols)
