from __future__ import annotations

import pytest

from pykeydb import remote
from pykeydb.remote import LOADING, NOT_ASKED, Failure, Loading, NotAsked, Success

ID1 = remote.Id[str, int]("id1")
ID2 = remote.Id[str, int]("id2")
ID3 = remote.Id[str, int]("id3")


def _mixed() -> remote.Db[str, int]:
    return remote.Db.empty().succeed(ID1, 1).loading(ID2).fail(ID3, "boom")


def test_empty_reports_not_asked() -> None:
    db: remote.Db[str, int] = remote.Db.empty()
    assert db.get(ID1) == NotAsked()
    assert db.get(ID1).is_not_asked
    assert len(db) == 0


def test_not_asked_round_trip() -> None:
    db = remote.Db.empty().loading(ID1)
    assert db.get(ID1) == Loading()

    assert db.remove(ID1).get(ID1) == NOT_ASKED
    assert db.insert(ID1, NOT_ASKED).get(ID1) == NOT_ASKED
    assert db.insert(ID1, NOT_ASKED) == remote.Db.empty()
    assert ID1 not in db.remove(ID1)


def test_setters() -> None:
    db = _mixed()
    assert db.get(ID1) == Success(1)
    assert db.get(ID2) == LOADING
    assert db.get(ID3) == Failure("boom")
    assert db.get(ID1).is_success
    assert db.get(ID3).is_failure


def test_insert_general_setter() -> None:
    db = remote.Db.empty().insert(ID1, Success(5)).insert(ID2, Failure("nope"))
    assert db.get(ID1) == Success(5)
    assert db.get(ID2) == Failure("nope")


def test_never_mutates_receiver() -> None:
    db = remote.Db.empty().loading(ID1)
    db.succeed(ID1, 3)
    db.remove(ID1)
    assert db.get(ID1) == LOADING


def test_many_setters_later_entries_win() -> None:
    db = remote.Db.empty().succeed_many([(ID1, 1), (ID2, 2), (ID1, 3)])
    assert db.get(ID1) == Success(3)
    assert db.get(ID2) == Success(2)

    db = db.loading_many([ID2, ID3])
    assert db.get(ID2) == LOADING
    assert db.get(ID3) == LOADING

    db = db.fail_many([(ID1, "a"), (ID1, "b")])
    assert db.get(ID1) == Failure("b")


def test_update_feeds_not_asked_for_absent_keys() -> None:
    seen: list[object] = []

    def _start(state: remote.RemoteData[str, int]) -> remote.RemoteData[str, int]:
        seen.append(state)
        return LOADING if state.is_not_asked else state

    db = remote.Db.empty().update(ID1, _start)
    assert seen == [NOT_ASKED]
    assert db.get(ID1) == LOADING

    assert db.update(ID1, lambda _state: NOT_ASKED) == remote.Db.empty()
    assert db.update(ID1, lambda _state: Success(4)).get(ID1) == Success(4)


def test_get_with_id_and_get_many() -> None:
    db = _mixed()
    assert db.get_with_id(ID2) == (ID2, LOADING)
    missing = remote.Id[str, int]("missing")
    assert db.get_many([ID3, missing, ID1]) == [(ID3, Failure("boom")), (missing, NOT_ASKED), (ID1, Success(1))]


def test_map_only_touches_success() -> None:
    mapped = _mixed().map(lambda x: x * 10)
    assert mapped.get(ID1) == Success(10)
    assert mapped.get(ID2) == LOADING
    assert mapped.get(ID3) == Failure("boom")
    assert mapped.ids() == [ID1, ID2, ID3]


def test_map_error_only_touches_failure() -> None:
    mapped = _mixed().map_error(str.upper)
    assert mapped.get(ID1) == Success(1)
    assert mapped.get(ID2) == LOADING
    assert mapped.get(ID3) == Failure("BOOM")


def test_map_item_only_transforms_success() -> None:
    db = _mixed()
    assert db.map_item(ID1, lambda x: x + 1).get(ID1) == Success(2)
    assert db.map_item(ID2, lambda x: x + 1) == db
    assert db.map_item(ID3, lambda x: x + 1) == db
    assert db.map_item(remote.Id[str, int]("absent"), lambda x: x + 1) == db


def test_remote_data_helpers() -> None:
    assert Success(2).map(lambda x: x + 1) == Success(3)
    assert Failure("e").map(lambda x: x + 1) == Failure("e")
    assert Failure("e").map_error(str.upper) == Failure("E")
    assert LOADING.map_error(str.upper) == LOADING
    assert Success(2).with_default(0) == 2
    assert NOT_ASKED.with_default(0) == 0
    assert LOADING.is_loading


def test_non_state_values_are_rejected_on_write() -> None:
    db = _mixed()

    with pytest.raises(TypeError):
        db.insert(ID1, 5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        db.update(ID2, lambda _state: "done")  # type: ignore[arg-type,return-value]
    with pytest.raises(TypeError):
        remote.Db({ID1: None})  # type: ignore[dict-item]

    assert db.get(ID1) == Success(1)
    assert remote.Db({ID1: NOT_ASKED, ID2: LOADING}).ids() == [ID2]
