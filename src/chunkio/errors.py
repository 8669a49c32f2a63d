import logging
from contextlib import contextmanager


logger = logging.getLogger(__name__)


class ReaderError(Exception):
    def __init__(self, code, message, data=None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message)

    def __eq__(self, other):
        if not isinstance(other, ReaderError):
            return NotImplemented
        return self.code == other.code and self.message == other.message and self.data == other.data

    def __hash__(self):
        return hash((self.code, self.message))

    def __str__(self):
        if self.data is None:
            return self.message
        return "{}: {}".format(self.message, self.data)


class UnknownError(ReaderError):
    def __init__(self, data=None):
        super().__init__(0, "Unknown error", data)


class OpenFailure(ReaderError):
    def __init__(self, message="Error open file", data=None):
        super().__init__(100, message, data)


class ReadFailure(ReaderError):
    def __init__(self, message="Error reading file", data=None):
        super().__init__(101, message, data)


class ReadStalled(ReadFailure):
    def __init__(self, message="Source made no progress", data=None):
        ReaderError.__init__(self, 102, message, data)


@contextmanager
def handle_exception():
    """
    Context manager translating I/O related exceptions
    to custom :mod:`~chunkio.errors`.
    """
    try:
        yield
    except ReaderError:
        raise
    except OSError as error:
        raise ReadFailure(data=str(error)) from error


@contextmanager
def open_source(path):
    """Opens ``path`` for binary reading; the handle is closed on every exit path.

    :raises OpenFailure: if the file cannot be opened
    """
    try:
        source = open(path, "rb")
    except OSError as error:
        raise OpenFailure(data=str(error)) from error
    logger.debug("Opened %s", path)
    with source:
        yield source
