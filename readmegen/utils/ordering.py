"""
List Reordering

Input-agnostic reorder operations shared by drag-and-drop style moves ("drop source on
target") and keyboard style moves ("move up one"). Both return new lists and leave the
input untouched.
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def move_item(items: Sequence[T], source: T, target: T) -> List[T]:
    """
    Move source to the position currently held by target.

    The source is removed first, then inserted at the index the target had before the
    removal. Moving down therefore lands the source after the target, moving up lands it
    before the target.

    Args:
        items: Ordered items (unique)
        source: Item being moved
        target: Item whose position the source takes

    Returns:
        New list. Equal to the input when source or target is missing.

    Examples:
        >>> move_item(["a", "b", "c"], "a", "c")
        ['b', 'c', 'a']
        >>> move_item(["a", "b", "c"], "c", "a")
        ['c', 'a', 'b']
    """
    result = list(items)
    if source not in result or target not in result:
        return result

    source_index = result.index(source)
    target_index = result.index(target)

    moved = result.pop(source_index)
    result.insert(target_index, moved)
    return result


def shift_item(items: Sequence[T], item: T, offset: int) -> List[T]:
    """
    Move an item by offset positions, clamped to the list bounds.

    Args:
        items: Ordered items (unique)
        item: Item to move
        offset: Negative moves towards the front, positive towards the back

    Returns:
        New list. Equal to the input when the item is missing or the move is clamped away.
    """
    result = list(items)
    if item not in result:
        return result

    index = result.index(item)
    new_index = max(0, min(len(result) - 1, index + offset))
    if new_index == index:
        return result

    return move_item(result, item, result[new_index])
