import csv
import os

import pandas as pd

from errors import SourceNotFoundError, TableIOError


class CsvRowHandler:
    """Reads and writes rows of text fields for one delimited file."""

    def __init__(self, path: str, delimiter: str = ","):
        self.path = path
        self.delimiter = delimiter

    def read_rows(self) -> list[list[str]]:
        if not os.path.exists(self.path):
            raise SourceNotFoundError(self.path)

        try:
            df = pd.read_csv(
                self.path,
                sep=self.delimiter,
                header=None,
                dtype=str,
                keep_default_na=False,
                na_values=[],
            )
        except pd.errors.EmptyDataError:
            return []
        except FileNotFoundError as e:
            raise SourceNotFoundError(self.path) from e
        except (pd.errors.ParserError, UnicodeDecodeError, OSError, ValueError) as e:
            raise TableIOError(f"Could not read {self.path}: {e}") from e

        # no string parses as NA, so NaN only marks fields missing from a short row
        if df.isna().to_numpy().any():
            raise TableIOError(
                f"Could not read {self.path}: rows have fewer fields than the first row"
            )
        return [list(row) for row in df.itertuples(index=False, name=None)]

    def write_rows(self, rows: list[list[str]]) -> None:
        df = pd.DataFrame(rows, dtype=object)
        # a lone blank or whitespace field would otherwise be skipped as a blank line
        quoting = csv.QUOTE_ALL if df.shape[1] == 1 else csv.QUOTE_MINIMAL
        try:
            df.to_csv(
                self.path,
                sep=self.delimiter,
                header=False,
                index=False,
                quoting=quoting,
            )
        except (OSError, ValueError) as e:
            raise TableIOError(f"Could not write {self.path}: {e}") from e
