from enum import Enum


class Mode(Enum):
    """What gets printed for the input"""
    Lines = "lines"
    Chunks = "chunks"


#: Size of the scratch buffer passed to a single read call.
DEFAULT_CHUNK_SIZE = 8
#: Input file read when no path is given.
DEFAULT_FILENAME = "message.txt"
#: Prefix of every record printed to standard output.
OUTPUT_TAG = b"read: "
#: Consecutive reads without progress tolerated before giving up.
DEFAULT_MAX_IDLE_READS = 100
#: Pause in seconds between reads that returned no data.
DEFAULT_IDLE_DELAY = 0.01
#: Format of the diagnostic log written to stderr by the entry points.
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
