from vardump.skip import STOP, SkipItem, skip_items


def _never_skip(index, size):
    return 0


def _show_front(count):
    def skip_size(index, size):
        if index < count:
            return 0
        if index == count:
            return size() - count
        return STOP

    return skip_size


def test_no_skipping_visits_everything():
    items = ["a", "b", "c"]
    result = list(skip_items(items, _never_skip))
    assert [item.value for item in result] == items
    assert [item.index for item in result] == list(range(len(items)))
    assert not any(item.skip for item in result)


def test_skip_item_unpacks():
    skip, value, index = next(skip_items([10], _never_skip))
    assert (skip, value, index) == (False, 10, 0)


def test_show_front_marks_one_skipped_item():
    items = list(range(8))
    result = list(skip_items(items, _show_front(3)))
    assert [item.value for item in result] == items[:4]
    assert [item.skip for item in result] == [False, False, False, True]


def test_stop_ends_iteration():
    def skip_size(index, size):
        return STOP if index == 1 else 0

    result = list(skip_items("abcd", skip_size))
    assert result == [SkipItem(False, "a", 0), SkipItem(True, "b", 1)]


def test_jump_moves_index_forward():
    def skip_size(index, size):
        return 2 if index == 0 else 0

    result = list(skip_items([5, 6, 7, 8], skip_size))
    assert [(item.value, item.index) for item in result] == [(5, 0), (7, 2), (8, 3)]
    assert result[0].skip is True


def test_jump_past_end_finishes():
    def skip_size(index, size):
        return size() + 5

    result = list(skip_items([1, 2], skip_size))
    assert len(result) == 1
    assert result[0].skip is True


def test_works_with_generators_and_size():
    seen_sizes = []

    def skip_size(index, size):
        seen_sizes.append(size())
        return 0

    result = list(skip_items((x * 2 for x in range(3)), skip_size))
    assert [item.value for item in result] == [0, 2, 4]
    assert set(seen_sizes) == {3}


def test_empty_input_yields_nothing():
    assert list(skip_items([], _never_skip)) == []