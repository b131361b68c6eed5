import pytest

from labstructs.indexed_list import IndexedList


def _filled(values) -> IndexedList:
    lst = IndexedList()
    for v in values:
        lst.append(v)
    return lst


def _cursor_values(lst: IndexedList) -> list:
    it = lst.iterator()
    out = []
    while it.valid():
        out.append(it.element())
        it.advance()
    return out


def test_short_scenario():
    lista = _filled([1, 2, 3, 4, 5])
    lista2 = _filled([1, 2, 3, 4, 5])
    assert lista.remove_all(lista2) == 5
    assert lista.remove_all(lista2) == 0
    assert lista.is_empty()

    lista.append(1)
    assert len(lista) == 1
    lista.insert(0, 2)
    assert len(lista) == 2
    it = lista.iterator()
    assert it.valid()
    it.advance()
    assert it.element() == 1
    it.first()
    assert it.element() == 2
    assert lista.find(1) == 1
    assert lista.set(1, 3) == 1
    assert lista.get(1) == 3
    assert lista.pop(0) == 2
    assert len(lista) == 1


def test_create():
    lista = IndexedList()
    assert lista.is_empty()
    it = lista.iterator()
    assert not it.valid()
    with pytest.raises(ValueError):
        it.advance()
    assert len(lista) == 0


def test_add():
    lista = _filled([1])
    assert not lista.is_empty()
    assert len(lista) == 1
    assert lista.get(0) == 1
    with pytest.raises(IndexError):
        lista.get(2)

    for i in range(101):
        lista.append(i)
        lista.insert(len(lista) - 1, i)
        with pytest.raises(IndexError):
            lista.insert((i + 2) * 2, i)
        assert len(lista) == 2 * (i + 1) + 1

    values = _cursor_values(lista)
    assert values == [1] + [v for v in range(101) for _ in range(2)]
    it = lista.iterator()
    for _ in values:
        it.advance()
    assert not it.valid()
    with pytest.raises(ValueError):
        it.element()
    it.first()
    assert it.valid()
    assert it.element() == 1

    assert [lista.get(i) for i in range(1, len(lista), 2)] == list(range(101))


def test_modify_remove_find():
    lista = _filled(range(101))
    assert len(lista) == 101
    assert lista.find(50) == 50
    assert lista.find(100) == 100
    assert lista.pop(100) == 100
    with pytest.raises(IndexError):
        lista.pop(100)
    assert len(lista) == 100
    assert lista.find(100) == -1
    assert lista.find(99) == 99

    for i in range(100):
        lista.set(i, 99 - i)
    assert lista.get(99) == 0
    assert lista.find(99) == 0
    assert lista.find(0) == 99
    assert lista.find(50) == 49
    with pytest.raises(IndexError):
        lista.set(-1, -1)

    assert _cursor_values(lista) == list(range(99, -1, -1))

    for i in range(99, -1, -1):
        lista.pop(i)
        assert len(lista) == i
    assert lista.is_empty()
    assert not lista.iterator().valid()


@pytest.mark.parametrize(
    "action",
    [
        lambda lst: lst.get(0),
        lambda lst: lst.set(0, 7),
        lambda lst: lst.insert(1, 7),
        lambda lst: lst.pop(0),
    ],
)
def test_empty_list_rejects_positional_access(action):
    with pytest.raises(IndexError):
        action(IndexedList())


@pytest.mark.parametrize("action", [lambda lst: lst.get(-1), lambda lst: lst.insert(-1, 9)])
def test_negative_index_rejected(action):
    lista = _filled([4, 5, 6])
    with pytest.raises(IndexError):
        action(lista)
    assert list(lista) == [4, 5, 6]


def test_insert_on_empty_at_zero():
    lista = IndexedList()
    lista.insert(0, 42)
    assert list(lista) == [42]
    assert lista.find(42) == 0


def test_insert_in_middle_shifts_following():
    lista = _filled([10, 20, 30])
    lista.insert(1, 15)
    assert list(lista) == [10, 15, 20, 30]
    assert [lista.find(v) for v in (20, 30)] == [2, 3]
    assert lista.get(1) == 15


def test_pop_keeps_stored_indices_of_others():
    lista = _filled([10, 20, 30])
    assert lista.pop(1) == 20
    assert lista.find(30) == 2
    assert lista.get(1) == 30
    assert list(lista) == [10, 30]


def test_remove_all_partial():
    lista = _filled([1, 2, 3, 4])
    other = _filled([2, 4, 9])
    assert lista.remove_all(other) == 2
    assert list(lista) == [1, 3]
    assert list(other) == [2, 4, 9]


def test_iter_matches_cursor():
    lista = _filled([3, 1, 2])
    assert _cursor_values(lista) == list(lista) == [3, 1, 2]