from textgrid.buffer import ListLineStore, TextBuffer


def test_list_store_primitives() -> None:
    store = ListLineStore(["hello", "world"])

    tail = store.truncate(0, 2)
    store.insert(1, tail)
    store.extend(0, "!")
    store.set_char(2, 0, "W")
    store.delete_char(2, 4)

    assert tail == "llo"
    assert store.read_all() == ["he!", "llo", "Worl"]
    assert store.remove(1) == "llo"
    assert store.line_count() == 2
    assert store.width(1) == 4


def test_read_all_returns_new_strings() -> None:
    store = ListLineStore(["a"])

    first = store.read_all()
    store.write(0, "b")

    assert first == ["a"]
    assert store.read(0) == "b"


def test_buffer_accepts_custom_store() -> None:
    store = ListLineStore(["seed"])
    buffer = TextBuffer(["more"], store=store)

    buffer.split_line_at(1, 2)

    assert buffer.get_lines() == ["seed", "mo", "re"]
    assert store.line_count() == 3
