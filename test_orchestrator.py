import os
import tempfile
import unittest

from app_state import AppState
from dummy_console import DummyConsole
from orchestrator import Orchestrator
from row_io import CsvRowHandler
from table import Table


class OrchestratorTests(unittest.TestCase):
    def _run(self, lines, rows=None, save_dir=None, config=None):
        table = Table(rows if rows is not None else [["a", "b"], ["c", "d"]])
        state = AppState(table, None, save_dir=save_dir)
        console = DummyConsole(lines)
        Orchestrator(state, console, config).run()
        return table, console

    def test_quit(self):
        _, console = self._run(["q"])
        self.assertEqual(console.out[-1], "Exiting the program.")

    def test_unknown_and_empty_selection_keep_looping(self):
        _, console = self._run(["9", "", "quit"])
        self.assertEqual(console.out.count("Unrecognized command. Please try again."), 2)
        self.assertEqual(console.out[-1], "Exiting the program.")

    def test_end_of_input_exits(self):
        _, console = self._run([])
        self.assertEqual(console.out[-1], "Exiting the program.")

    def test_menu_reset_returns_to_menu_without_changes(self):
        table, console = self._run(["3", "menu", "4", "1", "menu", "q"])
        self.assertEqual(table.rows, [["a", "b"], ["c", "d"]])
        self.assertEqual(console.err.count("Returning to main menu..."), 2)
        self.assertFalse(any(e.startswith("Error:") for e in console.err))

    def test_delete_and_update_commands(self):
        table, _ = self._run(["3", "1", "1", "y", "4", "2", "2", "y", "Z", "q"])
        self.assertEqual(table.rows, [["_", "b"], ["c", "Z"]])

    def test_configured_placeholder(self):
        table, _ = self._run(["3", "1", "2", "y", "q"], config={"PLACEHOLDER": "-"})
        self.assertEqual(table.rows, [["a", "-"], ["c", "d"]])

    def test_misordered_window_is_reported_and_loop_continues(self):
        _, console = self._run(["2", "2", "2", "1", "1", "q"])
        self.assertTrue(any(e.startswith("Error: Validation error") for e in console.err))
        self.assertEqual(console.out[-1], "Exiting the program.")

    def test_empty_table_skips_cell_commands(self):
        _, console = self._run(["3", "q"], rows=[])
        self.assertIn("The table is empty.", console.err)

    def test_save_command_writes_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            table, console = self._run(["5", "out", "q"], save_dir=tmp)
            path = os.path.join(tmp, "out.csv")
            self.assertEqual(Table.load(CsvRowHandler(path)), table)

    def test_save_failure_is_reported_and_loop_continues(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "missing")
            _, console = self._run(["5", "out", "q"], save_dir=missing)
        self.assertTrue(any(e.startswith("Error: Could not write") for e in console.err))
        self.assertEqual(console.out[-1], "Exiting the program.")


if __name__ == "__main__":
    unittest.main()
