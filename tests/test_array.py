import pytest

from pycos.array import ItemArray
from pycos.errors import CosError, ErrorCode
from pycos.utils import round_capacity


def test_new_array_is_empty_with_minimum_capacity():
    array = ItemArray()
    assert len(array) == 0
    assert array.capacity == 4


def test_capacity_hint_is_rounded():
    array = ItemArray(capacity_hint=10)
    assert array.capacity == round_capacity(10)
    assert array.capacity >= 10


def test_append_and_getitem():
    array = ItemArray()
    array.append("a")
    array.append("b")
    assert len(array) == 2
    assert array[0] == "a"
    assert array[1] == "b"
    assert list(array) == ["a", "b"]


def test_getitem_out_of_range():
    array = ItemArray()
    array.append(1)
    assert array[0] == 1
    with pytest.raises(CosError) as info:
        array.__getitem__(1)
    assert info.value.code is ErrorCode.OUT_OF_RANGE
    assert list(array) == [1]


def test_growth_keeps_capacity_above_count():
    array = ItemArray()
    for value in range(20):
        array.append(value)
        assert array.capacity >= len(array)
    assert list(array) == list(range(20))


def test_insert_in_middle_shifts_items():
    array = ItemArray()
    array.extend([1, 2, 5])
    array.insert_items(2, [3, 4])
    assert list(array) == [1, 2, 3, 4, 5]
    array.insert(0, 0)
    assert list(array) == [0, 1, 2, 3, 4, 5]


def test_insert_past_end_is_invalid():
    array = ItemArray()
    array.append(1)
    with pytest.raises(CosError) as info:
        array.insert(2, 9)
    assert info.value.code is ErrorCode.INVALID_ARGUMENT
    assert list(array) == [1]


def test_insert_empty_items_anywhere_is_noop():
    array = ItemArray()
    array.insert_items(7, [])
    assert len(array) == 0


def test_remove_items():
    array = ItemArray()
    array.extend(range(6))
    array.remove_items(1, 3)
    assert list(array) == [0, 4, 5]
    array.remove(0)
    assert list(array) == [4, 5]


def test_remove_out_of_range():
    array = ItemArray()
    array.extend([1, 2])
    with pytest.raises(CosError) as info:
        array.remove(2)
    assert info.value.code is ErrorCode.INVALID_ARGUMENT


def test_remove_last_on_empty():
    array = ItemArray()
    with pytest.raises(CosError) as info:
        array.remove_last()
    assert info.value.code is ErrorCode.OUT_OF_RANGE


def test_remove_last():
    array = ItemArray()
    array.extend(["x", "y"])
    array.remove_last()
    assert list(array) == ["x"]


def test_pop_returns_last():
    array = ItemArray()
    array.extend([10, 20, 30])
    assert array.pop() == 30
    assert array.pop() == 20
    assert list(array) == [10]


def test_pop_on_empty():
    array = ItemArray()
    with pytest.raises(CosError) as info:
        array.pop()
    assert info.value.code is ErrorCode.OUT_OF_RANGE


def test_retain_and_release_callbacks():
    retained = []
    released = []
    array = ItemArray(retain=retained.append, release=released.append)
    array.extend(["a", "b", "c"])
    assert retained == ["a", "b", "c"]
    array.remove(1)
    assert released == ["b"]
    array.close()
    assert released == ["b", "a", "c"]
    assert len(array) == 0


def test_context_manager_releases_items():
    released = []
    with ItemArray(release=released.append) as array:
        array.extend([1, 2])
    assert released == [1, 2]


def test_iteration_is_snapshot():
    array = ItemArray()
    array.extend([1, 2, 3])
    seen = []
    for item in array:
        seen.append(item)
        if item == 1:
            array.append(4)
    assert seen == [1, 2, 3]
    assert list(array) == [1, 2, 3, 4]