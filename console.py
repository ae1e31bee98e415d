import sys
import time


class Console:
    """Blocking line-oriented terminal I/O."""

    def __init__(self, stdin=None, stdout=None, stderr=None, pause_seconds: float = 2):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.pause_seconds = pause_seconds

    def read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout, flush=True)

    def error(self, text: str) -> None:
        print(text, file=self.stderr, flush=True)

    def pause(self) -> None:
        if self.pause_seconds > 0:
            time.sleep(self.pause_seconds)
