from chunkio.consts import OUTPUT_TAG


def get_records(out):
    """Returns what was printed after each ``read: `` tag, in order."""
    data = out.getvalue()
    assert data.startswith(OUTPUT_TAG) or not data
    return [record[:-1] for record in data.split(OUTPUT_TAG)[1:]]
