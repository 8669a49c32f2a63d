import logging
import time
from collections import deque
from typing import BinaryIO, Deque, Iterator, Optional

from chunkio.consts import DEFAULT_CHUNK_SIZE, DEFAULT_IDLE_DELAY, DEFAULT_MAX_IDLE_READS
from chunkio.errors import ReadStalled, handle_exception


logger = logging.getLogger(__name__)


class ChunkReader:
    """Reads a byte source in fixed-size chunks until end-of-stream.

    ``source.read(size)`` returning ``b""`` marks end-of-stream, ``None`` means
    no data is available yet (non-blocking sources).
    """
    def __init__(
        self,
        source: BinaryIO,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_idle_reads: int = DEFAULT_MAX_IDLE_READS,
        idle_delay: float = DEFAULT_IDLE_DELAY
    ):
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive, got {}".format(chunk_size))
        self._source = source
        self._chunk_size = chunk_size
        self._max_idle_reads = max_idle_reads
        self._idle_delay = idle_delay
        self._eof = False

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def eof(self) -> bool:
        return self._eof

    def read(self) -> Optional[bytes]:
        """Returns the next chunk, or None once the source is exhausted.

        :raises ReadFailure: if the source raised an I/O error
        :raises ReadStalled: if the source kept returning no data
        """
        idle_reads = 0
        while not self._eof:
            with handle_exception():
                chunk = self._source.read(self._chunk_size)

            if chunk is None:
                idle_reads += 1
                if idle_reads > self._max_idle_reads:
                    raise ReadStalled(data="{} reads without data".format(idle_reads))
                time.sleep(self._idle_delay)
                continue

            if not chunk:
                logger.debug("End of stream")
                self._eof = True
                break

            logger.debug("read into data: %r", chunk)
            return chunk
        return None

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read()
            if chunk is None:
                return
            yield chunk


class ChunkedLineReader:
    """Reassembles newline-delimited lines from a chunked byte source"""
    def __init__(self, source: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE, **kwargs):
        self._chunks = ChunkReader(source, chunk_size, **kwargs)
        self._line_buffer = bytes()
        self._lines: Deque[bytes] = deque()

    def readline(self) -> Optional[bytes]:
        """Returns the next line without its terminator, or None after the last one."""
        while not self._lines:
            chunk = self._chunks.read()
            if chunk is None:
                return self._flush()
            self._feed(chunk)
        return self._lines.popleft()

    def _feed(self, chunk: bytes):
        parts = chunk.split(b"\n")
        for part in parts[:-1]:
            self._lines.append(self._line_buffer + part)
            self._line_buffer = bytes()
        self._line_buffer += parts[-1]
        logger.debug("content of line buffer: %r", self._line_buffer)

    def _flush(self) -> Optional[bytes]:
        if not self._line_buffer:
            return None
        line, self._line_buffer = self._line_buffer, bytes()
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line
