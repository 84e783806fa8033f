import pytest

from structkit.hashing import (
    ChainedHashTable,
    DoubleHashingTable,
    HashTableFullError,
    LinearProbingTable,
    QuadraticProbingTable,
)

SAMPLE_KEYS = [10, 20, 15, 7]


def _sample_tables(capacity=7):
    return [
        LinearProbingTable(capacity),
        QuadraticProbingTable(capacity),
        DoubleHashingTable(capacity),
    ]


def _fill(table, keys=SAMPLE_KEYS):
    for key in keys:
        table.insert(key)
    return table


# --- chaining -------------------------------------------------------------


def test_chained_keys_land_in_their_bucket():
    keys = [15, 11, 27, 8, 12]
    table = ChainedHashTable(7)
    for key in keys:
        table.insert(key)
    buckets = table.buckets()
    assert len(buckets) == 7
    for key in keys:
        assert key in buckets[key % 7]
    assert len(table) == len(keys)


def test_chained_bucket_keeps_insertion_order():
    table = ChainedHashTable(7)
    for key in [15, 11, 27, 8, 12]:
        table.insert(key)
    assert table.buckets()[15 % 7] == (15, 8)


def test_chained_search_and_remove():
    table = ChainedHashTable(7)
    for key in [15, 11, 27, 8, 12]:
        table.insert(key)
    assert 12 in table
    table.remove(12)
    assert 12 not in table
    assert len(table) == 4


def test_chained_remove_absent_is_ignored():
    table = ChainedHashTable(7)
    table.insert(15)
    table.remove(99)
    assert table.buckets()[1] == (15,)
    assert len(table) == 1


def test_chained_remove_middle_of_chain():
    table = ChainedHashTable(7)
    for key in [1, 8, 15]:
        table.insert(key)
    table.remove(8)
    assert table.buckets()[1] == (1, 15)


def test_chained_render():
    table = ChainedHashTable(7)
    for key in [15, 11, 27, 8, 12]:
        table.insert(key)
    lines = table.render().splitlines()
    assert len(lines) == 7
    assert lines[0] == "Index 0: NULL"
    assert lines[1] == "Index 1: 15 -> 8 -> NULL"


def test_chained_rejects_non_positive_size():
    with pytest.raises(ValueError):
        ChainedHashTable(0)


# --- open addressing, shared behaviour -------------------------------------


def test_open_insert_and_search():
    for table in _sample_tables():
        for key in SAMPLE_KEYS:
            table.insert(key)
        assert len(table) == len(SAMPLE_KEYS)
        for key in SAMPLE_KEYS:
            assert key in table
        assert 99 not in table
        assert sorted(s for s in table.slots() if s is not None) == sorted(SAMPLE_KEYS)


def test_open_source_example_layout():
    for table in _sample_tables():
        for key in SAMPLE_KEYS:
            table.insert(key)
        assert table.slots() == (7, 15, None, 10, None, None, 20)


def test_open_remove():
    for table in _sample_tables():
        for key in SAMPLE_KEYS:
            table.insert(key)
        table.remove(15)
        assert 15 not in table
        assert len(table) == 3
        assert 15 not in table.slots()


def test_open_remove_missing_raises():
    for table in _sample_tables():
        for key in SAMPLE_KEYS:
            table.insert(key)
        with pytest.raises(KeyError):
            table.remove(99)


def test_open_full_table_raises():
    for table in _sample_tables(2):
        table.insert(0)
        table.insert(1)
        with pytest.raises(HashTableFullError):
            table.insert(2)
        assert len(table) == 2


def test_open_render():
    for table in _sample_tables():
        for key in SAMPLE_KEYS:
            table.insert(key)
        lines = table.render().splitlines()
        assert len(lines) == 7
        for index, (line, slot) in enumerate(zip(lines, table.slots())):
            expected = -1 if slot is None else slot
            assert line == f"{index}: {expected}"


def test_open_render_pinned_values():
    table = LinearProbingTable(7)
    for key in SAMPLE_KEYS:
        table.insert(key)
    assert table.render().splitlines()[0] == "0: 7"
    assert table.render().splitlines()[2] == "2: -1"


def test_open_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        LinearProbingTable(0)
    with pytest.raises(ValueError):
        QuadraticProbingTable(0)
    with pytest.raises(ValueError):
        DoubleHashingTable(0)


# --- scheme-specific behaviour ---------------------------------------------


def test_linear_collision_goes_to_next_slot():
    table = LinearProbingTable(7)
    table.insert(3)
    table.insert(10)
    assert table.slots()[3] == 3
    assert table.slots()[4] == 10


def test_linear_fills_every_slot():
    keys = [0, 7, 14, 21, 28, 35, 42]
    table = LinearProbingTable(7)
    for key in keys:
        table.insert(key)
    assert None not in table.slots()
    assert all(key in table for key in keys)


def test_quadratic_collision_keeps_all_keys():
    keys = [0, 7, 14]
    table = _fill(QuadraticProbingTable(7), keys)
    assert all(key in table for key in keys)
    assert len(set(s for s in table.slots() if s is not None)) == 3


def test_quadratic_unreachable_slots_raise():
    table = QuadraticProbingTable(7)
    for key in [0, 7, 14, 21, 28]:
        table.insert(key)
    assert len(table) < 7
    with pytest.raises(HashTableFullError):
        table.insert(35)


def test_double_hashing_collision_uses_step():
    table = DoubleHashingTable(7)
    table.insert(10)
    table.insert(3)
    assert 3 in table
    assert 10 in table
    assert table.slots()[3] == 10


def test_double_hashing_stuck_probe_raises():
    table = DoubleHashingTable(7)
    table.insert(0)
    # step for 7 is a multiple of the capacity, so it can only try slot 0
    with pytest.raises(HashTableFullError):
        table.insert(7)
    assert len(table) == 1