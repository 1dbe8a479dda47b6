from typing import Any, Iterator, List, Optional

from .reader import RuneReader, Source
from .runebuffer import RuneBuffer


class DrainError(Exception):
    def __init__(self, message: str, written: int) -> None:
        super().__init__(message)
        self.written = written


class SinkWriteError(DrainError):
    def __init__(self, written: int) -> None:
        super().__init__(f"Write to sink failed after {written} units", written)


class Scanner:
    """
    Wraps text at word boundaries whenever a line would exceed a fixed number
    of characters. Newlines are preserved, including consecutive and trailing
    newlines, while trailing whitespace is stripped from every line. Words
    longer than the width are split at exactly the width.

    The scanner takes ownership of its source, which should not be read from
    by anything else afterwards. It is not safe to share a scanner between
    threads.
    """

    def __init__(self, source: Source, width: int) -> None:
        if width <= 0:
            raise ValueError(f"Width must be a positive integer, got {width}")

        if hasattr(source, "readRune") and hasattr(source, "unreadRune"):
            self.__reader: Any = source
        else:
            self.__reader = RuneReader(source)

        self.__width = width
        self.__prefix = ""
        self.__tabWidth = 4

        # Scan state.
        self.__done = False
        self.__err: Optional[Exception] = None
        self.__line = RuneBuffer()
        self.__word = RuneBuffer()
        self.__space = RuneBuffer()
        self.__indent = 0
        self.__needNewline = False
        self.__skipNextWS = False

    @property
    def width(self) -> int:
        return self.__width

    @property
    def prefix(self) -> str:
        return self.__prefix

    @property
    def tabWidth(self) -> int:
        return self.__tabWidth

    def setPrefix(self, prefix: str) -> None:
        """
        Sets a string to prefix each future line with. The prefix is not applied
        to empty lines, and its length does not count against the width.
        """
        self.__prefix = prefix

    def setTabWidth(self, width: int) -> None:
        if width < 0:
            raise ValueError(f"Tab width cannot be negative, got {width}")
        self.__tabWidth = width

    @property
    def __lineChars(self) -> int:
        # Width already committed to the current line, not counting the prefix.
        return self.__line.count - self.__indent

    def __takeLine(self) -> str:
        line = self.__line.text
        self.__line.reset()
        self.__indent = 0
        return line

    def __flushWord(self) -> None:
        if not self.__word.count:
            return

        if not self.__line.count:
            self.__line.writeString(self.__prefix)
            self.__indent = len(self.__prefix)

        self.__space.writeTo(self.__line)
        self.__word.writeTo(self.__line)

    def __peek(self) -> str:
        try:
            char = self.__reader.readRune()
            if char:
                self.__reader.unreadRune()
        except Exception as e:
            self.__err = e
            raise
        return char

    def __checkWidth(self) -> None:
        # Commit the line if we've reached the maximum width.
        if self.__lineChars + self.__word.count + self.__space.count < self.__width:
            return

        following = self.__peek()

        # Flush if the word can't get any longer, or the next character breaks it.
        if (
            self.__word.count == self.__width
            or not following
            or following.isspace()
        ):
            self.__flushWord()

        if following and following != "\n" and self.__space.count < self.__width:
            # We had some non-whitespace chars, so start a new line for the next write.
            self.__needNewline = True

        self.__skipNextWS = True
        self.__space.reset()

    def readLine(self) -> Optional[str]:
        """
        Reads a single wrapped line, not including the newline. Returns None once
        the input is exhausted, and keeps returning None on every call after
        that. At least one line is always returned, even for empty input, and
        input ending in a newline produces a final empty line.

        Tabs are converted to spaces, aligned on multiples of the tab width.
        Any exception raised while reading the source is re-raised here, and
        again on every later call.
        """
        if self.__err is not None:
            raise self.__err
        if self.__done:
            return None

        if self.__word.count:
            # The character that ended the last line never got measured. At a
            # width of one it already fills this line on its own.
            self.__checkWidth()

        while True:
            try:
                char = self.__reader.readRune()
            except Exception as e:
                # Partial wrap state can't be resumed after the source fails.
                self.__err = e
                raise

            if not char:
                break

            if char.isspace():
                self.__flushWord()

                if char == "\n":
                    self.__skipNextWS = False
                    self.__space.reset()
                    return self.__takeLine()

                if self.__skipNextWS:
                    continue

                if char == "\t":
                    # Replace tabs with spaces while preserving alignment.
                    if self.__tabWidth > 0:
                        count = self.__tabWidth - self.__lineChars % self.__tabWidth
                        self.__space.writeString(" " * count)
                else:
                    self.__space.writeRune(char)
            else:
                self.__word.writeRune(char)
                self.__skipNextWS = False

                if self.__needNewline:
                    # The last line was cut, and this is the first thing after it.
                    self.__needNewline = False
                    return self.__takeLine()

            self.__checkWidth()

        self.__flushWord()
        self.__done = True
        return self.__takeLine()

    def readLines(self) -> List[str]:
        return list(self)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readLine()
            if line is None:
                return
            yield line

    def writeTo(self, sink: Any) -> int:
        """
        Writes every remaining line to sink, separated by newlines, and returns
        the number of units the sink reports writing. If reading the source
        fails, a DrainError carrying the count written so far is raised, chained
        to the original exception. Failures of the sink itself raise the
        SinkWriteError flavor of it.
        """
        written = 0
        firstLine = True

        while True:
            try:
                line = self.readLine()
            except Exception as e:
                raise DrainError(f"Reading source failed after {written} units", written) from e
            if line is None:
                return written

            chunks = [line] if firstLine else ["\n", line]
            firstLine = False

            for chunk in chunks:
                try:
                    count = sink.write(chunk)
                except Exception as e:
                    raise SinkWriteError(written) from e
                written += len(chunk) if count is None else count
