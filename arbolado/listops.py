"""Small operations on lists of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def format_list(items: Iterable[object]) -> str:
    """Render every element followed by a single space."""
    return "".join(f"{item} " for item in items)


def reverse_list(items: Iterable[int]) -> list[int]:
    """Return a new list holding the elements in reverse order."""
    return list(reversed(list(items)))


def common_elements(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the elements of ``first`` that also appear in ``second``.

    The order and repetitions of ``first`` are kept.
    """
    pool = list(second)
    return [item for item in first if item in pool]


def insert_after(items: Sequence[int], position: int, value: int) -> list[int]:
    """Return a copy of ``items`` with ``value`` placed after the element at
    1-based ``position``.

    A negative position leaves the list unchanged; a position at or past the
    end appends the value. Position 0 on a non-empty list inserts nothing.
    """
    result = list(items)
    if position < 0:
        return result
    if position >= len(result):
        result.append(value)
    elif position > 0:
        result.insert(position, value)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration of the list operations."""
    numbers = [1, 2, 3, 4, 5]
    print(f"Lista antes de invertir:\t{format_list(numbers)}")
    numbers = reverse_list(numbers)
    print(f"Lista después de invertir:\t{format_list(numbers)}")

    other = [1, 8, 3]
    common = common_elements(numbers, other)
    print()
    print(f"Lista: {format_list(numbers)}")
    print(f"Otra_lista: {format_list(other)}")
    print(f"Comunes: {format_list(common)}")

    element = 15
    position = 2
    print()
    print(
        f"Vamos a insertar el elemento {element} tras el elemento "
        f"{position} en la lista {format_list(numbers)}"
    )
    numbers = insert_after(numbers, position, element)
    print(f"Nueva lista: {format_list(numbers)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())