maxsize = 9223372036854775807
minsize = -maxsize - 1


def in_int64_range(value: int) -> bool:
    return minsize <= value <= maxsize
