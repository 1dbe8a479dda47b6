class RuneBuffer:
    """
    An append-only text buffer which keeps its content UTF-8 encoded and
    tracks how many codepoints it holds, so callers can ask for the character
    length of a fragment without decoding and re-scanning it.
    """

    def __init__(self) -> None:
        self.__buf = bytearray()
        self.__count = 0

    @property
    def count(self) -> int:
        return self.__count

    @property
    def nbytes(self) -> int:
        return len(self.__buf)

    @property
    def text(self) -> str:
        return self.__buf.decode("utf-8")

    def writeRune(self, char: str) -> int:
        if len(char) != 1:
            raise ValueError(f"Expected a single codepoint, got {char!r}")

        data = char.encode("utf-8")
        self.__buf.extend(data)
        self.__count += 1
        return len(data)

    def writeString(self, text: str) -> int:
        data = text.encode("utf-8")
        self.__buf.extend(data)
        self.__count += len(text)
        return len(data)

    def writeTo(self, other: "RuneBuffer") -> int:
        # Splice our whole contents onto the end of the other buffer, leaving us empty.
        written = len(self.__buf)
        other.__buf.extend(self.__buf)
        other.__count += self.__count
        self.reset()
        return written

    def reset(self) -> None:
        self.__buf = bytearray()
        self.__count = 0

    def __len__(self) -> int:
        return self.__count

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return "RuneBuffer(text={!r}, count={})".format(self.text, self.__count)
