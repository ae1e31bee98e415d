class DummyConsole:
    """Scripted stand-in for Console used by the tests."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.out = []
        self.err = []
        self.pauses = 0

    def read_line(self):
        if not self.lines:
            raise EOFError("end of input")
        return self.lines.pop(0)

    def write(self, text=""):
        self.out.append(text)

    def error(self, text):
        self.err.append(text)

    def pause(self):
        self.pauses += 1
