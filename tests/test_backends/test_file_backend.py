"""Tests for VirtualFileBackend — on-disk layout, sync and failure behavior."""

import locale
import threading

import pytest

from prefstore import InvalidKeyError, PreferenceStore, VirtualFileBackend

# ── on-disk format ───────────────────────────────────────────


def test_one_file_per_key(file_store, namespace):
    file_store.set_int("score", 1200)
    file_store.set_float("volume", 0.25)
    file_store.set_string("name", "Ada")

    assert sorted(p.name for p in namespace.path.iterdir()) == ["name", "score", "volume"]
    assert (namespace.path / "score").read_text(encoding="utf-8") == "1200"
    assert (namespace.path / "volume").read_text(encoding="utf-8") == "0.25"
    assert (namespace.path / "name").read_text(encoding="utf-8") == "Ada"


def test_namespace_directory_is_sanitized(file_store, tmp_path):
    file_store.set_int("k", 1)
    assert (tmp_path / "idbfs" / "MyCo" / "Game2" / "k").is_file()


def test_write_creates_directory(file_store, namespace):
    assert not namespace.path.exists()
    file_store.set_string("k", "v")
    assert namespace.path.is_dir()


def test_string_newlines_preserved_on_disk(file_store, namespace):
    file_store.set_string("k", "a\r\nb\n")
    assert (namespace.path / "k").read_bytes() == b"a\r\nb\n"


# ── malformed contents ───────────────────────────────────────


@pytest.mark.parametrize("text", ["", "abc", "1,5", "1_000", "12abc"])
def test_malformed_numeric_returns_default(file_store, namespace, text):
    namespace.path.mkdir(parents=True)
    (namespace.path / "k").write_text(text, encoding="utf-8")

    assert file_store.get_int("k", 7) == 7
    assert file_store.get_float("k", 7.5) == 7.5
    assert file_store.has_key("k")


def test_undecodable_bytes_return_default(file_store, namespace):
    namespace.path.mkdir(parents=True)
    (namespace.path / "k").write_bytes(b"\xff\xfe12")

    assert file_store.get_int("k", 7) == 7
    assert file_store.get_float("k", 7.5) == 7.5
    assert file_store.get_string("k") == "\ufffd\ufffd12"


def test_utf8_bom_is_ignored(file_store, namespace):
    namespace.path.mkdir(parents=True)
    (namespace.path / "k").write_bytes(b"\xef\xbb\xbf42")

    assert file_store.get_int("k", 7) == 42
    assert file_store.get_string("k") == "42"


def test_oversized_digit_string_returns_default(file_store, namespace):
    namespace.path.mkdir(parents=True)
    (namespace.path / "k").write_text("1" * 5000, encoding="utf-8")
    assert file_store.get_int("k", 7) == 7


def test_int_file_readable_as_float(file_store):
    file_store.set_int("k", 3)
    assert file_store.get_float("k") == 3.0


def test_externally_written_scientific_float(file_store, namespace):
    namespace.path.mkdir(parents=True)
    (namespace.path / "k").write_text("2.5e-3\n", encoding="utf-8")
    assert file_store.get_float("k") == 0.0025


def test_int_overflow_on_disk_returns_default(file_store, namespace):
    namespace.path.mkdir(parents=True)
    (namespace.path / "k").write_text("99999999999", encoding="utf-8")
    assert file_store.get_int("k", -1) == -1


# ── sync ─────────────────────────────────────────────────────


def test_sync_after_every_write(file_store, sync):
    file_store.set_int("a", 1)
    file_store.set_float("b", 1.0)
    file_store.set_string("c", "1")
    assert sync.calls == 3


def test_reads_do_not_sync(file_store, sync):
    file_store.set_int("a", 1)
    file_store.get_int("a")
    file_store.get_string("missing")
    file_store.has_key("a")
    assert sync.calls == 1


def test_sync_after_deletes(file_store, sync):
    file_store.set_int("a", 1)
    file_store.delete_key("a")
    assert sync.calls == 2
    file_store.delete_key("a")
    assert sync.calls == 2
    file_store.delete_all()
    assert sync.calls == 3


def test_failed_sync_result_is_ignored(namespace, failing_sync):
    store = PreferenceStore(VirtualFileBackend(namespace, sync=failing_sync))
    store.set_int("a", 5)
    assert store.get_int("a") == 5
    assert failing_sync.calls == 1


def test_default_sync_is_noop(namespace):
    store = PreferenceStore(VirtualFileBackend(namespace))
    store.set_int("a", 5)
    assert store.get_int("a") == 5


# ── delete_all ───────────────────────────────────────────────


def test_delete_all_keeps_directory(file_store, namespace):
    file_store.set_int("a", 1)
    file_store.set_int("b", 2)
    file_store.delete_all()
    assert namespace.path.is_dir()
    assert list(namespace.path.iterdir()) == []


def test_delete_all_skips_subdirectories(file_store, namespace):
    file_store.set_int("a", 1)
    (namespace.path / "nested").mkdir()
    file_store.delete_all()
    assert [p.name for p in namespace.path.iterdir()] == ["nested"]


def test_delete_all_leaves_other_namespaces(tmp_path, sync):
    from prefstore import Namespace

    mine = PreferenceStore(
        VirtualFileBackend(Namespace.from_identity("Org", "One", mount_point=tmp_path), sync=sync)
    )
    theirs = PreferenceStore(
        VirtualFileBackend(Namespace.from_identity("Org", "Two", mount_point=tmp_path), sync=sync)
    )
    mine.set_int("k", 1)
    theirs.set_int("k", 2)

    mine.delete_all()
    assert not mine.has_key("k")
    assert theirs.get_int("k") == 2


# ── keys ─────────────────────────────────────────────────────


@pytest.mark.parametrize("key", ["", ".", "..", "a/b", "../escape", "a\\b", "nul\x00"])
def test_invalid_keys_rejected(file_store, namespace, key):
    with pytest.raises(InvalidKeyError):
        file_store.set_int(key, 1)
    with pytest.raises(InvalidKeyError):
        file_store.get_int(key)
    assert not namespace.path.exists()


def test_dotted_keys_are_fine(file_store):
    file_store.set_string("ui.theme", "dark")
    file_store.set_string(".hidden", "yes")
    assert file_store.get_string("ui.theme") == "dark"
    assert file_store.get_string(".hidden") == "yes"


# ── I/O errors ───────────────────────────────────────────────


def test_io_errors_propagate(tmp_path, sync):
    from prefstore import Namespace

    blocker = tmp_path / "blocked"
    blocker.write_text("i am a file", encoding="utf-8")
    ns = Namespace.from_identity("Org", "App", mount_point=blocker)
    store = PreferenceStore(VirtualFileBackend(ns, sync=sync))

    with pytest.raises(OSError):
        store.set_int("k", 1)
    assert sync.calls == 0


# ── environment ──────────────────────────────────────────────

_COMMA_LOCALES = ["de_DE.UTF-8", "de_DE.utf8", "fr_FR.UTF-8", "nl_NL.UTF-8", "de_DE", "German"]


@pytest.fixture
def comma_locale():
    saved = locale.setlocale(locale.LC_ALL)
    for name in _COMMA_LOCALES:
        try:
            locale.setlocale(locale.LC_ALL, name)
        except locale.Error:
            continue
        if locale.localeconv()["decimal_point"] == ",":
            break
    else:
        locale.setlocale(locale.LC_ALL, saved)
        pytest.skip("no locale with a comma decimal separator is installed")
    yield
    locale.setlocale(locale.LC_ALL, saved)


def test_float_round_trip_under_comma_locale(comma_locale, file_store, namespace):
    file_store.set_float("k", 0.1)
    assert (namespace.path / "k").read_text(encoding="utf-8") == "0.1"
    assert file_store.get_float("k") == 0.1


def test_concurrent_writers_distinct_keys(file_store):
    def writer(n):
        for i in range(50):
            file_store.set_string(f"key{n}", f"{n}-{i}-" + "x" * n)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for n in range(8):
        assert file_store.get_string(f"key{n}") == f"{n}-49-" + "x" * n
