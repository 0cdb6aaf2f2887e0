import pytest

from algokit.linked_list import (
    ListNode,
    delete_all_duplicates,
    delete_duplicates,
    detect_cycle,
    from_values,
    get_intersection_node,
    has_cycle,
    insertion_sort_list,
    is_palindrome,
    kth_node_from_end,
    kth_to_last,
    merge_two_lists,
    middle_node,
    partition,
    remove_elements,
    reverse_list,
    to_values,
)


def _nodes(head):
    out = []
    while head is not None:
        out.append(head)
        head = head.next
    return out


def _cyclic(values, entry):
    head = from_values(values)
    nodes = _nodes(head)
    nodes[-1].next = nodes[entry]
    return head, nodes


def test_round_trip():
    values = [4, 8, 15, 16, 23, 42]
    assert to_values(from_values(values)) == values


def test_from_empty_is_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_nodes_compare_by_identity():
    assert ListNode(1) is not ListNode(1)
    assert (ListNode(1) == ListNode(1)) is False


@pytest.mark.parametrize("values", [[], [7], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


def test_reverse_reuses_nodes():
    head = from_values([1, 2, 3])
    original = _nodes(head)
    reversed_nodes = _nodes(reverse_list(head))
    assert reversed_nodes == original[::-1]
    assert all(a is b for a, b in zip(reversed_nodes, original[::-1]))


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node(values):
    head = from_values(values)
    nodes = _nodes(head)
    assert middle_node(head) is nodes[len(nodes) // 2]


def test_middle_of_empty():
    assert middle_node(None) is None


@pytest.mark.parametrize(
    "a, b",
    [([1, 2, 4], [1, 3, 4]), ([], [0]), ([5], []), ([], []), ([1, 1, 9], [2, 3])],
)
def test_merge_two_lists(a, b):
    merged = merge_two_lists(from_values(a), from_values(b))
    assert to_values(merged) == sorted(a + b)


def test_merge_tie_takes_second_list_first():
    first = from_values([1])
    second = from_values([1])
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


def test_remove_elements():
    head = from_values([1, 2, 6, 3, 4, 5, 6])
    assert to_values(remove_elements(head, 6)) == [1, 2, 3, 4, 5]


def test_remove_elements_all_removed():
    assert remove_elements(from_values([7, 7, 7, 7]), 7) is None


def test_remove_elements_absent_value_keeps_list():
    values = [1, 2, 3]
    assert to_values(remove_elements(from_values(values), 9)) == values


@pytest.mark.parametrize("values", [[], [1], [1, 1, 2], [1, 1, 2, 3, 3], [2, 2, 2]])
def test_delete_duplicates(values):
    result = to_values(delete_duplicates(from_values(values)))
    assert result == sorted(set(values))


def test_delete_all_duplicates():
    head = from_values([1, 2, 3, 3, 4, 4, 5])
    assert to_values(delete_all_duplicates(head)) == [1, 2, 5]


def test_delete_all_duplicates_leading_run():
    head = from_values([1, 1, 1, 2, 3])
    result = to_values(delete_all_duplicates(head))
    assert result == [2, 3]


def test_delete_all_duplicates_everything_repeated():
    assert delete_all_duplicates(from_values([1, 1, 2, 2])) is None
    assert delete_all_duplicates(None) is None


def test_delete_all_duplicates_no_repeats():
    values = [1, 2, 3]
    assert to_values(delete_all_duplicates(from_values(values))) == values


def test_has_cycle():
    head, _ = _cyclic([3, 2, 0, -4], 1)
    assert has_cycle(head) is True
    assert has_cycle(from_values([1, 2, 3])) is False
    assert has_cycle(None) is False


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


@pytest.mark.parametrize("entry", [0, 1, 3])
def test_detect_cycle(entry):
    head, nodes = _cyclic([3, 2, 0, -4], entry)
    assert detect_cycle(head) is nodes[entry]


def test_detect_cycle_none():
    assert detect_cycle(from_values([1, 2])) is None
    assert detect_cycle(None) is None


def test_get_intersection_node():
    shared = from_values([8, 4, 5])
    head_a = from_values([4, 1])
    _nodes(head_a)[-1].next = shared
    head_b = from_values([5, 6, 1])
    _nodes(head_b)[-1].next = shared
    assert get_intersection_node(head_a, head_b) is shared
    assert get_intersection_node(head_b, head_a) is shared


def test_get_intersection_node_disjoint():
    assert get_intersection_node(from_values([1, 2]), from_values([1, 2])) is None
    assert get_intersection_node(None, from_values([1])) is None


@pytest.mark.parametrize(
    "values", [[], [1], [4, 2, 1, 3], [-1, 5, 3, 4, 0], [2, 2, 1, 1, 3], [5, 4, 3, 2, 1]]
)
def test_insertion_sort_list(values):
    assert to_values(insertion_sort_list(from_values(values))) == sorted(values)


def test_insertion_sort_reuses_nodes():
    head = from_values([3, 1, 2])
    original = set(map(id, _nodes(head)))
    result = insertion_sort_list(head)
    assert set(map(id, _nodes(result))) == original


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([1], True),
        ([1, 2, 2, 1], True),
        ([1, 2, 3, 2, 1], True),
        ([1, 2], False),
        ([1, 2, 3, 1], False),
    ],
)
def test_is_palindrome(values, expected):
    head = from_values(values)
    assert is_palindrome(head) is expected
    assert to_values(head) == values


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_kth_to_last(k):
    values = [1, 2, 3, 4, 5]
    assert kth_to_last(from_values(values), k) == values[-k]


def test_kth_to_last_errors():
    head = from_values([1, 2, 3])
    with pytest.raises(IndexError):
        kth_to_last(head, 0)
    with pytest.raises(IndexError):
        kth_to_last(head, 4)
    with pytest.raises(ValueError):
        kth_to_last(head, -1)


@pytest.mark.parametrize("cnt", [1, 2, 5])
def test_kth_node_from_end(cnt):
    head = from_values([1, 2, 3, 4, 5])
    nodes = _nodes(head)
    assert kth_node_from_end(head, cnt) is nodes[-cnt]


def test_kth_node_from_end_zero_and_errors():
    head = from_values([1, 2])
    assert kth_node_from_end(head, 0) is None
    with pytest.raises(IndexError):
        kth_node_from_end(head, 3)
    with pytest.raises(ValueError):
        kth_node_from_end(head, -2)


def test_partition():
    head = from_values([1, 4, 3, 2, 5, 2])
    assert to_values(partition(head, 3)) == [1, 2, 2, 4, 3, 5]


@pytest.mark.parametrize("x", [0, 2, 3, 10])
def test_partition_invariants(x):
    values = [3, 5, 8, 5, 10, 2, 1]
    result = to_values(partition(from_values(values), x))
    small = [v for v in result if v < x]
    assert result[: len(small)] == small
    assert sorted(result) == sorted(values)
    assert not has_cycle(partition(from_values(values), x))


def test_partition_empty():
    assert partition(None, 3) is None