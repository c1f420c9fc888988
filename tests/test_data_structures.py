import pytest

from algorithms.fifo_queue import fifo_queue
from algorithms.hash_table import BUCKET_COUNT, bucket_index, hash_table
from algorithms.linked_list import linked_list
from algorithms.payloads import StructureKind
from algorithms.stack import stack

from conftest import assert_well_formed

GENERATORS = [linked_list, stack, fifo_queue, hash_table]


@pytest.mark.parametrize("gen", GENERATORS, ids=lambda f: f.__name__)
def test_trace_contract(gen, sample_input):
    steps = list(gen(sample_input))

    assert_well_formed(steps)
    assert steps[0].operation == "initialize"
    assert steps[-1].operation == "complete"
    assert all(s.array == [5, 3, 8, 4, 2, 1, 9] for s in steps)


@pytest.mark.parametrize("gen", GENERATORS, ids=lambda f: f.__name__)
def test_deterministic(gen, sample_input):
    assert list(gen(sample_input)) == list(gen(sample_input))


@pytest.mark.parametrize("gen", GENERATORS, ids=lambda f: f.__name__)
def test_empty_input(gen):
    steps = list(gen([]))
    assert_well_formed(steps)


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
def test_linked_list_head_inserts_reverse(sample_input):
    steps = list(linked_list(sample_input))
    last_head_insert = [s for s in steps if s.operation == "insertAtHead"][-1]

    assert last_head_insert.structure_kind == StructureKind.LINKED_LIST
    assert last_head_insert.structure.values_in_order() == [8, 3, 5]


def test_linked_list_tail_inserts_append(sample_input):
    steps = list(linked_list(sample_input))
    last_tail_insert = [s for s in steps if s.operation == "insertAtTail"][-1]

    assert last_tail_insert.structure.values_in_order() == [8, 3, 5, 4, 2, 1]


def test_linked_list_search_and_delete(sample_input):
    steps = list(linked_list(sample_input))
    messages = [s.message for s in steps]

    assert "Found 4 at index 3" in messages
    deleted = [s for s in steps if s.deleted_node is not None]
    assert len(deleted) == 1
    # 5 was the first value appended, so it lives in arena slot 0
    assert deleted[0].deleted_node == 0
    assert steps[-1].structure.values_in_order() == [8, 3, 4, 2, 1]


def test_linked_list_delete_at_head():
    steps = list(linked_list([1]))
    messages = [s.message for s in steps]

    assert "Value 1 found at the head" in messages
    assert steps[-1].structure.values_in_order() == []


def test_linked_list_to_dict_keeps_arena():
    d = list(linked_list([1, 2]))[-1].to_dict()
    assert d["structureKind"] == "linkedList"
    assert [n["id"] for n in d["nodes"]] == [0, 1]


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def test_stack_is_lifo():
    steps = list(stack(["a", "b", "c", "d", "e"]))
    popped = [s.popped_value for s in steps if s.popped_value is not None]

    assert popped == ["e", "d", "c"]


def test_stack_push_limit(sample_input):
    steps = list(stack(sample_input))
    pushed = [s for s in steps if s.message.startswith("Pushed")]

    assert len(pushed) == 5
    assert pushed[-1].structure.items == (5, 3, 8, 4, 2)
    assert pushed[-1].highlight_index == 4


def test_stack_clears_leftovers(sample_input):
    steps = list(stack(sample_input))
    messages = [s.message for s in steps]

    assert "Stack is not empty" in messages
    assert "Stack cleared" in messages
    assert steps[-1].structure.items == ()


def test_stack_pops_only_what_it_has():
    steps = list(stack([1, 2]))
    popped = [s.popped_value for s in steps if s.popped_value is not None]

    assert popped == [2, 1]
    assert "Stack is empty" in [s.message for s in steps]
    assert "Clearing the stack" not in [s.message for s in steps]


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def test_queue_is_fifo():
    steps = list(fifo_queue(["a", "b", "c", "d", "e"]))
    dequeued = [s.dequeued_value for s in steps if s.dequeued_value is not None]

    assert dequeued == ["a", "b", "c"]


def test_queue_front_and_clear(sample_input):
    steps = list(fifo_queue(sample_input))
    messages = [s.message for s in steps]

    assert "Front element is 5" in messages
    assert "Queue cleared" in messages
    assert steps[-1].structure_kind == StructureKind.QUEUE
    assert steps[-1].structure.items == ()


# ---------------------------------------------------------------------------
# Hash table
# ---------------------------------------------------------------------------
def test_bucket_index():
    assert bucket_index(23) == 3
    assert bucket_index(7.9) == 7
    assert BUCKET_COUNT == 10


def test_hash_table_inserts_into_buckets(sample_input):
    steps = list(hash_table(sample_input))
    inserted = [s for s in steps if s.message.startswith("Added new key-value pair")]
    final = steps[-1].structure

    assert len(inserted) == 7
    assert final.size == BUCKET_COUNT
    assert [e.key for e in final.buckets[5]] == [5]
    # arr[1] == 3 is deleted at the end
    assert final.buckets[3] == ()


def test_hash_table_get_then_delete(sample_input):
    messages = [s.message for s in hash_table(sample_input)]

    assert 'Found value "Value-5" for key 5' in messages
    assert "Deleted key 3 from bucket 3" in messages


def test_hash_table_updates_existing_key():
    steps = list(hash_table([12, 12]))
    messages = [s.message for s in steps]

    assert "Key 12 already exists, updating value to Value-12" in messages
    assert "Key 12 not found for deletion" not in messages
    assert steps[-1].structure.buckets[2] == ()


def test_hash_table_collisions_chain():
    steps = list(hash_table([1, 11, 21]))
    bucket = steps[-1].structure.buckets[1]

    # 11 was deleted, 1 and 21 remain chained
    assert [e.key for e in bucket] == [1, 21]


def test_hash_table_starts_empty():
    first = list(hash_table([1]))[0]
    assert first.structure.buckets == ()
    assert first.structure.size == 0
