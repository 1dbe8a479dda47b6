import codecs
from typing import IO, Iterable, Iterator, Optional, Union


Source = Union[str, bytes, IO[str], IO[bytes], Iterable[str], Iterable[bytes]]


class RuneReader:
    """
    Pulls codepoints one at a time out of a string, a file-like object or an
    iterable of chunks, with room to push back exactly one codepoint. An empty
    string from readRune() means the source is exhausted. Exceptions raised by
    the underlying source are passed straight through to the caller.
    """

    CHUNK_SIZE: int = 4096

    def __init__(self, source: Source) -> None:
        self.__chunks: Iterator[str] = self.__decode(source)
        self.__chunk = ""
        self.__pos = 0
        self.__canUnread = False
        self.__eof = False

    def __raw(self, source: Source) -> Iterator[Union[str, bytes]]:
        if isinstance(source, (str, bytes, bytearray)):
            yield source
        elif hasattr(source, "read"):
            while True:
                chunk = source.read(self.CHUNK_SIZE)  # type: ignore
                if not chunk:
                    return
                yield chunk
        else:
            yield from source

    def __decode(self, source: Source) -> Iterator[str]:
        # Binary input may split a multi-byte sequence across chunks, so keep a
        # decoder around that remembers the partial sequence.
        decoder = codecs.getincrementaldecoder("utf-8")()

        for chunk in self.__raw(source):
            if isinstance(chunk, (bytes, bytearray)):
                chunk = decoder.decode(bytes(chunk))
            if chunk:
                yield chunk

        tail = decoder.decode(b"", final=True)
        if tail:
            yield tail

    def readRune(self) -> str:
        while self.__pos >= len(self.__chunk):
            if self.__eof:
                self.__canUnread = False
                return ""

            chunk: Optional[str] = next(self.__chunks, None)
            if chunk is None:
                self.__eof = True
            else:
                self.__chunk = chunk
                self.__pos = 0

        char = self.__chunk[self.__pos]
        self.__pos += 1
        self.__canUnread = True
        return char

    def unreadRune(self) -> None:
        if not self.__canUnread:
            raise ValueError("Can only unread directly after reading a codepoint!")

        self.__pos -= 1
        self.__canUnread = False

    def peekRune(self) -> str:
        char = self.readRune()
        if char:
            self.unreadRune()
        return char
