import logging
import sys
from typing import BinaryIO, Optional

from chunkio.consts import DEFAULT_CHUNK_SIZE, DEFAULT_FILENAME, LOG_FORMAT, OUTPUT_TAG, Mode
from chunkio.errors import OpenFailure, ReaderError, open_source
from chunkio.reader import ChunkReader, ChunkedLineReader


logger = logging.getLogger(__name__)


def write_record(out: BinaryIO, record: bytes):
    out.write(OUTPUT_TAG + record + b"\n")
    out.flush()


def print_lines(source: BinaryIO, out: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
    for line in ChunkedLineReader(source, chunk_size):
        write_record(out, line)


def print_chunks(source: BinaryIO, out: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
    for chunk in ChunkReader(source, chunk_size):
        write_record(out, chunk)


def run(path=DEFAULT_FILENAME, mode=Mode.Lines, out: Optional[BinaryIO] = None, chunk_size=DEFAULT_CHUNK_SIZE) -> int:
    """Prints the content of ``path`` and returns the process exit code.

    :param path: file to read
    :param mode: :class:`~chunkio.consts.Mode` selecting reassembled lines or raw chunks
    :param out: binary stream receiving the records, standard output by default
    :param chunk_size: bytes requested per read call
    """
    if out is None:
        out = sys.stdout.buffer

    printer = print_lines if mode == Mode.Lines else print_chunks
    try:
        with open_source(path) as source:
            printer(source, out, chunk_size)
    except OpenFailure as error:
        logger.error("Error open file. Errormessage: %s", error.data)
        return 1
    except ReaderError as error:
        logger.error("Error reading file: %s", error.data)
        return 1
    return 0


def main(mode, argv=None):
    """Entry point shared by both program variants.

    :param mode: :class:`~chunkio.consts.Mode` to print with
    :param argv: command line arguments, the optional first one being the input path
    """
    if argv is None:
        argv = sys.argv
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    path = argv[1] if len(argv) > 1 else DEFAULT_FILENAME
    try:
        exit_code = run(path, mode)
    except Exception:
        logger.exception("Error while reading %s", path)
        exit_code = 1
    sys.exit(exit_code)


def lines_main():
    main(Mode.Lines)


def chunks_main():
    main(Mode.Chunks)
