from concurrent.futures import ThreadPoolExecutor

import pytest

from blog_node.app_state import Comment, CommentStore


def test_append_then_list_for(comment_store):
    for n in range(1, 4):
        c = comment_store.append(7, f"c{n}")
        seq = comment_store.list_for(7)
        assert seq[-1] == c
        assert [x.id for x in seq] == list(range(1, n + 1))


def test_ids_are_scoped_per_post(comment_store):
    a1 = comment_store.append(1, "a")
    b1 = comment_store.append(2, "b")
    a2 = comment_store.append(1, "c")
    assert (a1.id, a2.id) == (1, 2)
    assert b1.id == 1
    assert len(comment_store) == 3


def test_list_for_unknown_post_is_empty(comment_store):
    assert comment_store.list_for(42) == []
    comment_store.append(1, "x")
    assert comment_store.list_for(42) == []


def test_post_existence_not_checked(comment_store):
    c = comment_store.append(999, "orphan")
    assert c == Comment(id=1, post_id=999, text="orphan")


def test_scenario_two_comments_on_post_two(post_store, comment_store):
    for title in ("A", "B", "C"):
        post_store.insert(title, "")
    assert {p.id for p in post_store.list()} == {1, 2, 3}

    comment_store.append(2, "x")
    comment_store.append(2, "y")
    assert [c.to_dict() for c in comment_store.list_for(2)] == [
        {"id": 1, "post_id": 2, "text": "x"},
        {"id": 2, "post_id": 2, "text": "y"},
    ]


def test_list_for_returns_copy(comment_store):
    comment_store.append(1, "x")
    seq = comment_store.list_for(1)
    seq.clear()
    assert len(comment_store.list_for(1)) == 1


def test_concurrent_appends_keep_per_post_sequences():
    store = CommentStore()
    jobs = [(i % 3, f"t{i}") for i in range(150)]
    with ThreadPoolExecutor(max_workers=12) as pool:
        list(pool.map(lambda job: store.append(*job), jobs))
    for post_id in range(3):
        seq = store.list_for(post_id)
        assert [c.id for c in seq] == list(range(1, 51))
        assert all(c.post_id == post_id for c in seq)


@pytest.mark.parametrize("bad_id", ["abc", None, [1]])
def test_bad_id_type_leaves_store_usable(comment_store, bad_id):
    with pytest.raises((TypeError, ValueError)):
        comment_store.list_for(bad_id)
    with pytest.raises((TypeError, ValueError)):
        comment_store.append(bad_id, "x")
    assert not comment_store.guard.poisoned
    assert comment_store.append(1, "x").id == 1
    assert [c.text for c in comment_store.list_for(1)] == ["x"]
