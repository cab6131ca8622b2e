import json
import threading

import pytest

from postboard.db.store import JsonCollection, JsonStore, StorageError, next_id


def test_initialize_seeds_empty_collections(tmp_path) -> None:
    store = JsonStore(tmp_path / 'data')

    store.initialize()

    assert json.loads((tmp_path / 'data' / 'users.json').read_text()) == []
    assert json.loads((tmp_path / 'data' / 'posts.json').read_text()) == []


def test_initialize_keeps_existing_records(tmp_path) -> None:
    data_dir = tmp_path / 'data'
    data_dir.mkdir()
    (data_dir / 'users.json').write_text('[{"id": 1, "username": "ann"}]')

    JsonStore(data_dir).initialize()

    assert json.loads((data_dir / 'users.json').read_text()) == [{'id': 1, 'username': 'ann'}]


def test_missing_file_reads_as_empty(tmp_path) -> None:
    assert JsonCollection(tmp_path / 'nothing.json').read() == []


def test_write_replaces_whole_collection(tmp_path) -> None:
    collection = JsonCollection(tmp_path / 'posts.json')
    collection.write([{'id': 1}, {'id': 2}])

    collection.write([{'id': 3}])

    assert collection.read() == [{'id': 3}]
    assert list(tmp_path.iterdir()) == [tmp_path / 'posts.json']


def test_malformed_file_raises_storage_error(tmp_path) -> None:
    path = tmp_path / 'posts.json'
    path.write_text('{not json')

    with pytest.raises(StorageError):
        JsonCollection(path).read()


def test_non_array_file_raises_storage_error(tmp_path) -> None:
    path = tmp_path / 'posts.json'
    path.write_text('{"id": 1}')

    with pytest.raises(StorageError):
        JsonCollection(path).read()


def test_update_writes_back_mutations(tmp_path) -> None:
    collection = JsonCollection(tmp_path / 'posts.json')
    collection.write([{'id': 1, 'likes': 0}])

    with collection.update() as records:
        records[0]['likes'] += 1

    assert collection.read() == [{'id': 1, 'likes': 1}]


def test_update_discards_changes_when_block_raises(tmp_path) -> None:
    collection = JsonCollection(tmp_path / 'posts.json')
    collection.write([{'id': 1, 'likes': 0}])

    with pytest.raises(RuntimeError):
        with collection.update() as records:
            records[0]['likes'] = 99
            raise RuntimeError('boom')

    assert collection.read() == [{'id': 1, 'likes': 0}]


def test_concurrent_updates_are_not_lost(tmp_path) -> None:
    collection = JsonCollection(tmp_path / 'posts.json')
    collection.write([{'id': 1, 'likes': 0}])

    def bump() -> None:
        for _ in range(10):
            with collection.update() as records:
                records[0]['likes'] += 1

    workers = [threading.Thread(target=bump) for _ in range(8)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    assert collection.read()[0]['likes'] == 80


def test_next_id_is_unique_even_within_the_same_millisecond(monkeypatch) -> None:
    monkeypatch.setattr('postboard.db.store.time.time', lambda: 1_700_000_000.0)

    assert next_id([]) == 1_700_000_000_000
    assert next_id([{'id': 1_700_000_000_000}]) == 1_700_000_000_001
