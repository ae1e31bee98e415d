import os

from errors import MenuReset
from row_io import CsvRowHandler
from table import PLACEHOLDER, Table


def _finish(console, message=None):
    if message is not None:
        console.write(message)
    console.error("Returning to main menu...")
    console.pause()


def display_table(table: Table, console, separator: str = ","):
    console.write("\n")
    for line in table.display(separator):
        console.write(line)


def show_window(table: Table, controller, console):
    window = controller.read_window()
    for row in table.read_window(window):
        console.write(", ".join(row))
    _finish(console)


def delete_cell(table: Table, controller, console, placeholder: str = PLACEHOLDER):
    coord = controller.read_single_cell()
    question = f"\nAre you sure you want to delete this cell {table.cell(coord)!r}? [y/n]: "
    if not controller.confirm(question):
        console.write("Operation cancelled.")
        raise MenuReset()
    table.delete_cell(coord, placeholder)
    _finish(console, "Successfully deleted cell.")


def modify_cell(table: Table, controller, console):
    coord = controller.read_single_cell()
    question = f"\nAre you sure you want to modify this cell {table.cell(coord)!r}? [y/n]: "
    if not controller.confirm(question):
        console.write("Operation cancelled.")
        raise MenuReset()
    value = controller.read_text("Enter the new value for the cell:")
    table.write_cell(coord, value)
    _finish(console, "Successfully modified cell.")


def resolve_save_path(name: str, save_dir: str) -> str:
    if not name.lower().endswith(".csv"):
        name += ".csv"
    return os.path.join(save_dir, name)


def save_table(table: Table, controller, console, save_dir: str = ".", delimiter: str = ","):
    name = controller.read_text("Enter the name for the new or existing CSV file:")
    path = resolve_save_path(name, save_dir)
    table.save(CsvRowHandler(path, delimiter))
    _finish(console, f"Data saved to CSV file: {path}")
    return path
