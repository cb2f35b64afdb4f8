"""Day 9: compacting a disk map and computing its checksum."""

from __future__ import annotations

from dataclasses import dataclass


def _sizes(disk_map: str) -> list[int]:
    disk_map = disk_map.strip()
    if not disk_map:
        raise ValueError("empty disk map")
    return [int(digit) for digit in disk_map]


def _span_checksum(start: int, length: int, file_id: int) -> int:
    """Sum of position * id over length blocks beginning at start."""
    return file_id * length * (2 * start + length - 1) // 2


def _last_file_index(count: int) -> int:
    return count - 2 + count % 2


def checksum_fragmented(disk_map: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    sizes = _sizes(disk_map)
    first = 0
    last = _last_file_index(len(sizes))
    position = 0
    checksum = 0
    while first < last:
        checksum += _span_checksum(position, sizes[first], first // 2)
        position += sizes[first]
        first += 1
        while sizes[first] > 0 and first < last:
            if sizes[last] <= sizes[first]:
                checksum += _span_checksum(position, sizes[last], last // 2)
                position += sizes[last]
                sizes[first] -= sizes[last]
                last -= 2
            else:
                checksum += _span_checksum(position, sizes[first], last // 2)
                sizes[last] -= sizes[first]
                position += sizes[first]
                sizes[first] = 0
        first += 1
    if first == last:
        checksum += _span_checksum(position, sizes[first], first // 2)
    return checksum


@dataclass
class _Span:
    start: int
    length: int


def checksum_whole_files(disk_map: str) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    sizes = _sizes(disk_map)
    files: list[_Span] = []
    gaps: list[_Span] = []
    position = 0
    for index, size in enumerate(sizes):
        (gaps if index % 2 else files).append(_Span(position, size))
        position += size

    checksum = 0
    for file_id in range(len(files) - 1, 0, -1):
        file = files[file_id]
        gap = next((gap for gap in gaps[:file_id] if gap.length >= file.length), None)
        if gap is not None:
            file.start = gap.start
            gap.start += file.length
            gap.length -= file.length
        checksum += _span_checksum(file.start, file.length, file_id)
    return checksum


def part1(text: str) -> int:
    return checksum_fragmented(text.splitlines()[0] if text else text)


def part2(text: str) -> int:
    return checksum_whole_files(text.splitlines()[0] if text else text)