import pytest

from codeembed.source.local_store import LocalStore


@pytest.fixture
def store(tmp_path):
    (tmp_path / "notes").mkdir()
    (tmp_path / "notes" / "example.py").write_text("print('hi')\n", encoding="utf-8")
    (tmp_path / "crlf.txt").write_bytes(b"a\r\nb\r\n")
    return LocalStore(tmp_path)


def test_reads_relative_entry(store):
    assert store.read("notes/example.py") == "print('hi')\n"


def test_leading_slash_is_ignored(store):
    assert store.exists("/notes/example.py")


def test_line_endings_are_preserved(store):
    assert store.read("crlf.txt") == "a\r\nb\r\n"


def test_directories_are_not_entries(store):
    assert not store.exists("notes")
    with pytest.raises(FileNotFoundError):
        store.read("notes")


def test_missing_entry(store):
    assert not store.exists("missing.py")
    with pytest.raises(FileNotFoundError):
        store.read("missing.py")


def test_paths_outside_root_are_not_found(store, tmp_path):
    outside = tmp_path.parent / "outside.txt"
    outside.write_text("secret", encoding="utf-8")

    assert not store.exists("../outside.txt")


@pytest.mark.asyncio
async def test_read_async(store):
    assert await store.read_async("notes/example.py") == "print('hi')\n"


def test_path_with_nul_byte_is_not_found(store):
    assert store.locate("notes/a\x00b.py") is None
    with pytest.raises(FileNotFoundError):
        store.read("a\x00b.py")


def test_symlink_loop_is_not_found(store, tmp_path):
    (tmp_path / "loop-a").symlink_to(tmp_path / "loop-b")
    (tmp_path / "loop-b").symlink_to(tmp_path / "loop-a")

    assert not store.exists("loop-a")
    with pytest.raises(FileNotFoundError):
        store.read("loop-a")
