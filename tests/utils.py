from lazyrange import Range


def materialize(r: Range) -> list[int]:
    # enumerate through the indexing primitive rather than __iter__
    return [r.at(i) for i in range(r.length)]


def list_at(values: list, index: int):
    if -len(values) <= index < len(values):
        return values[index]
    return None


def clamp(index, length):
    if index < 0:
        return max(index + length, 0)
    return min(index, length)


def scan_index_of(values: list, value, from_index=0) -> int:
    for i in range(clamp(from_index, len(values)), len(values)):
        if values[i] == value:
            return i
    return -1


def scan_last_index_of(values: list, value, from_index=None) -> int:
    if from_index is None:
        from_index = len(values) - 1
    elif from_index >= 0:
        from_index = min(from_index, len(values) - 1)
    else:
        from_index = len(values) + from_index
    for i in range(from_index, -1, -1):
        if values[i] == value:
            return i
    return -1


def list_spliced(values: list, start, delete_count, *items) -> list:
    ret = list(values)
    lo = clamp(start, len(values))
    ret[lo : lo + max(delete_count, 0)] = items
    return ret
