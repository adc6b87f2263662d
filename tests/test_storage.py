import threading

from models.campus import Event
from server.storage import InMemoryRecordStore


def test_seeded_records():
    store = InMemoryRecordStore()

    assert len(store.get_events()) == 3
    assert len(store.get_deadlines()) == 2
    assert [t.tutor for t in store.get_tutoring_sessions()] == ["Dr. Sarah Johnson", "Prof. Michael Chen"]
    assert store.get_chat_messages() == []


def test_unseeded_store_is_empty():
    store = InMemoryRecordStore(seed=False)
    snapshot = store.snapshot()
    assert snapshot.events == [] and snapshot.deadlines == [] and snapshot.tutoring_sessions == []


def test_chat_messages_keep_insertion_order():
    store = InMemoryRecordStore(seed=False)
    first = store.create_chat_message("hello", is_ai=False)
    second = store.create_chat_message("hi, how can I help?", is_ai=True)

    assert store.get_chat_messages() == [first, second]
    assert first.id != second.id
    assert first.role == "user" and second.role == "assistant"


def test_snapshot_is_a_copy():
    store = InMemoryRecordStore()
    snapshot = store.snapshot()
    store.create_event(Event(title="Open Mic", date="Nov 9", time="8 PM", location="Cafe", category="Arts"))

    assert len(snapshot.events) == 3
    assert len(store.get_events()) == 4


def test_concurrent_writes_are_all_kept():
    store = InMemoryRecordStore(seed=False)

    def write(n):
        for i in range(50):
            store.create_chat_message(f"{n}-{i}", is_ai=False)

    threads = [threading.Thread(target=write, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.get_chat_messages()) == 200
