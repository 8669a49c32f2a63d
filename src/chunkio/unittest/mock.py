def chunks_of(data, chunk_size, eof=True):
    """Splits ``data`` the way a blocking source hands it out to ``read(chunk_size)``.

    Meant as ``side_effect`` of a mocked ``read``; ends with ``b""`` unless ``eof`` is False.
    """
    chunks = [data[i:i + chunk_size] for i in range(0, len(data), chunk_size)]
    if eof:
        chunks.append(b"")
    return chunks


def idle_reads(count):
    """Reads of a non-blocking source with no data available."""
    return [None] * count
