import mutations
from errors import CsvManError, MenuReset
from interaction import InteractionController

MENU_TEXT = """
 == CSV Manager ==

1. Display Entire File
2. Paginate File
3. Delete Field
4. Update Field
5. Create New CSV File

Please enter your selection using the corresponding menu number only or enter "q" or "quit" to exit:"""


class Orchestrator:
    COMMANDS = {
        "1": "display",
        "2": "paginate",
        "3": "delete",
        "4": "update",
        "5": "save",
    }
    QUIT = {"q", "quit"}
    NEEDS_CELLS = {"paginate", "delete", "update"}

    def __init__(self, state, console, config=None):
        self.state = state
        self.console = console
        self.config = config or {}
        self.controller = InteractionController(
            console,
            state.row_validator,
            state.column_validator,
            menu_keyword=self.config.get("MENU_KEYWORD", "menu"),
        )

    def _show_menu(self):
        self.console.write(MENU_TEXT)

    def _dispatch(self, command: str):
        table = self.state.table
        if command in self.NEEDS_CELLS and table.is_empty:
            self.console.error("The table is empty.")
            return
        if command == "display":
            mutations.display_table(table, self.console, self.config.get("DELIMITER", ","))
        elif command == "paginate":
            mutations.show_window(table, self.controller, self.console)
        elif command == "delete":
            mutations.delete_cell(
                table, self.controller, self.console, self.config.get("PLACEHOLDER", "_")
            )
        elif command == "update":
            mutations.modify_cell(table, self.controller, self.console)
        elif command == "save":
            mutations.save_table(
                table,
                self.controller,
                self.console,
                save_dir=self.state.save_dir,
                delimiter=self.config.get("DELIMITER", ","),
            )

    def handle(self, selection: str) -> bool:
        """Run one menu selection. Returns False once the user quits."""
        selection = selection.strip()
        if selection in self.QUIT:
            self.console.write("Exiting the program.")
            return False

        command = self.COMMANDS.get(selection)
        if command is None:
            self.console.write("Unrecognized command. Please try again.")
            return True

        try:
            self._dispatch(command)
        except MenuReset:
            self.console.error("Returning to main menu...")
            self.console.pause()
        except CsvManError as e:
            self.console.error(f"Error: {e}")
        return True

    def run(self):
        while True:
            self._show_menu()
            try:
                selection = self.console.read_line()
                if not self.handle(selection):
                    break
            except EOFError:
                self.console.write("Exiting the program.")
                break
