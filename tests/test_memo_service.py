import logging
import os
import re
import shutil

from services.memo_service import MemoService
from tests_helpers import read_file, write_file

TIMESTAMP_NAME = re.compile(r"^memo_\d{8}_\d{6}\.txt$")


def test_save_then_load_round_trip(memo_service):
    """保存した内容がそのまま読み込めることを確認する。"""
    samples = {
        "plain": "hello",
        "empty": "",
        "multiline": "line1\nline2\r\nline3\r",
        "unicode": "메모 テスト 😀",
        "  padded  ": "trailing whitespace \n\n",
    }
    for name, content in samples.items():
        filename = memo_service.save_memo(content, name)
        assert filename == name.strip() + ".txt"
        assert memo_service.load_memo(filename) == content


def test_save_none_content_writes_empty_file(memo_service, storage_service):
    filename = memo_service.save_memo(None, "nothing")
    assert read_file(storage_service.base_path, filename) == ""


def test_save_truncates_existing_content(memo_service, storage_service):
    memo_service.save_memo("a much longer original body", "note")
    memo_service.save_memo("short", "note")
    assert read_file(storage_service.base_path, "note.txt") == "short"


def test_save_keeps_given_extension_as_part_of_name(memo_service):
    assert memo_service.save_memo("x", "a.txt") == "a.txt.txt"


def test_save_without_name_uses_timestamp(memo_service):
    for name in [None, "", "   \t"]:
        filename = memo_service.save_memo("body", name)
        assert filename == "memo_20240506_070809.txt"
        assert TIMESTAMP_NAME.match(filename)


def test_timestamp_name_differs_from_explicit_names(memo_service):
    explicit = memo_service.save_memo("a", "meeting")
    generated = memo_service.save_memo("b")
    assert generated != explicit
    assert memo_service.list_memos() == sorted([explicit, generated])


def test_same_second_saves_overwrite_silently(memo_service):
    """同一秒内の名前なし保存は同じファイルを上書きする。"""
    first = memo_service.save_memo("first")
    second = memo_service.save_memo("second")
    assert first == second
    assert memo_service.load_memo(first) == "second"
    assert memo_service.list_memos() == [first]


def test_save_with_real_clock_matches_pattern(storage_service):
    service = MemoService(storage_service=storage_service)
    assert TIMESTAMP_NAME.match(service.save_memo("now"))


def test_save_rejects_path_in_name(memo_service, storage_service, caplog):
    with caplog.at_level(logging.WARNING):
        assert memo_service.save_memo("x", "../outside") is None
    assert not os.path.exists(os.path.join(os.path.dirname(storage_service.base_path), "outside.txt"))
    assert caplog.records


def test_save_recreates_removed_directory(memo_service, storage_service):
    shutil.rmtree(storage_service.base_path)
    assert memo_service.save_memo("again", "back") == "back.txt"
    assert memo_service.load_memo("back.txt") == "again"


def test_save_failure_is_logged(memo_service, storage_service, caplog):
    os.mkdir(os.path.join(storage_service.base_path, "taken.txt"))
    with caplog.at_level(logging.ERROR):
        assert memo_service.save_memo("x", "taken") is None
    assert any(r.levelno == logging.ERROR and r.exc_info for r in caplog.records)


def test_list_is_sorted_and_only_txt_files(memo_service, storage_service):
    base = storage_service.base_path
    for name in ["b.txt", "a.txt", "C.txt", "notes.md", "txt", "archive.txt.bak"]:
        write_file(base, name)
    os.mkdir(os.path.join(base, "folder.txt"))

    assert memo_service.list_memos() == ["C.txt", "a.txt", "b.txt"]


def test_list_empty_directory(memo_service):
    assert memo_service.list_memos() == []


def test_list_after_directory_removed(memo_service, storage_service):
    shutil.rmtree(storage_service.base_path)
    assert memo_service.list_memos() == []
    assert os.path.isdir(storage_service.base_path)


def test_list_failure_returns_empty(memo_service, monkeypatch, caplog):
    def broken_scandir(path):
        raise PermissionError("denied")

    monkeypatch.setattr(os, "scandir", broken_scandir)
    with caplog.at_level(logging.ERROR):
        assert memo_service.list_memos() == []
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_load_missing_returns_empty_string(memo_service):
    assert memo_service.load_memo("missing.txt") == ""


def test_load_reads_externally_written_file(memo_service, storage_service):
    write_file(storage_service.base_path, "external.txt", "from outside")
    assert memo_service.load_memo("external.txt") == "from outside"


def test_load_invalid_utf8_returns_empty_string(memo_service, storage_service, caplog):
    with open(os.path.join(storage_service.base_path, "binary.txt"), "wb") as f:
        f.write(b"\xff\xfe\xfa")
    with caplog.at_level(logging.ERROR):
        assert memo_service.load_memo("binary.txt") == ""
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_load_rejects_path_traversal(memo_service, storage_service):
    write_file(os.path.dirname(storage_service.base_path), "secret.txt", "secret")
    assert memo_service.load_memo("../secret.txt") == ""


def test_load_data_returns_memo(memo_service):
    memo_service.save_memo("body", "item")
    memo = memo_service.load_data("item.txt")
    assert memo.filename == "item.txt"
    assert memo.content == "body"
    assert memo_service.load_data("absent.txt") is None


def test_delete_true_once_then_false(memo_service, storage_service):
    """既存ファイルの削除は一度だけTrueを返し、二度目はFalseになることを確認する。"""
    memo_service.save_memo("bye", "gone")
    assert memo_service.delete_memo("gone.txt") is True
    assert not os.path.exists(os.path.join(storage_service.base_path, "gone.txt"))
    assert memo_service.delete_memo("gone.txt") is False


def test_delete_missing_returns_false(memo_service):
    assert memo_service.delete_memo("never.txt") is False


def test_delete_failure_returns_false(memo_service, storage_service, caplog):
    os.mkdir(os.path.join(storage_service.base_path, "dir.txt"))
    with caplog.at_level(logging.ERROR):
        assert memo_service.delete_memo("dir.txt") is False
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_rename_success(memo_service, storage_service):
    memo_service.save_memo("old content", "old")

    assert memo_service.rename_memo("old.txt", "new") is True

    assert memo_service.load_memo("new.txt") == "old content"
    assert not os.path.exists(os.path.join(storage_service.base_path, "old.txt"))
    assert memo_service.list_memos() == ["new.txt"]


def test_rename_refuses_to_overwrite(memo_service):
    """変更後の名前が既に存在する場合は失敗し、両方のファイルが変更されないことを確認する。"""
    memo_service.save_memo("A", "a")
    memo_service.save_memo("B", "b")

    assert memo_service.rename_memo("a.txt", "b") is False

    assert memo_service.load_memo("a.txt") == "A"
    assert memo_service.load_memo("b.txt") == "B"


def test_rename_missing_source(memo_service):
    assert memo_service.rename_memo("missing.txt", "other") is False
    assert memo_service.list_memos() == []


def test_rename_to_same_name_fails(memo_service):
    memo_service.save_memo("same", "same")
    assert memo_service.rename_memo("same.txt", "same") is False
    assert memo_service.load_memo("same.txt") == "same"


def test_rename_rejects_blank_or_nested_target(memo_service):
    memo_service.save_memo("x", "src")
    assert memo_service.rename_memo("src.txt", "") is False
    assert memo_service.rename_memo("src.txt", "   ") is False
    assert memo_service.rename_memo("src.txt", "../escape") is False
    assert memo_service.list_memos() == ["src.txt"]


def test_rename_failure_returns_false(memo_service, monkeypatch, caplog):
    memo_service.save_memo("x", "src")

    def broken_rename(src, dst):
        raise OSError("disk error")

    monkeypatch.setattr(os, "rename", broken_rename)
    with caplog.at_level(logging.ERROR):
        assert memo_service.rename_memo("src.txt", "dst") is False
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_operations_log_through_injected_logger(storage_service, caplog):
    custom = logging.getLogger("tests.memo")
    service = MemoService(storage_service=storage_service, logger=custom)
    with caplog.at_level(logging.DEBUG, logger="tests.memo"):
        service.save_memo("body", "logged")
        service.load_memo("logged.txt")
    messages = [r.getMessage() for r in caplog.records if r.name == "tests.memo"]
    assert any("logged.txt" in m for m in messages)
    assert any("body" in m for m in messages)


def test_rename_to_unencodable_names_returns_false(memo_service):
    """NUL文字や単独サロゲートを含む変更後の名前でも例外にならずFalseを返すことを確認する。"""
    memo_service.save_memo("keep", "src")

    assert memo_service.rename_memo("src.txt", "bad\x00name") is False
    assert memo_service.rename_memo("src.txt", "bad\ud800") is False

    assert memo_service.list_memos() == ["src.txt"]
    assert memo_service.load_memo("src.txt") == "keep"


def test_unencodable_names_never_raise(memo_service):
    for name in ["nul\x00.txt", "lone\ud800.txt"]:
        assert memo_service.load_memo(name) == ""
        assert memo_service.delete_memo(name) is False
        assert memo_service.rename_memo(name, "other") is False
    assert memo_service.save_memo("x", "nul\x00") is None


def test_load_and_rename_log_resolved_paths(memo_service, storage_service, caplog):
    memo_service.save_memo("body", "before")
    with caplog.at_level(logging.DEBUG):
        memo_service.load_memo("before.txt")
        memo_service.rename_memo("before.txt", "after")
        memo_service.list_memos()
    messages = [r.getMessage() for r in caplog.records]
    assert any(os.path.join(storage_service.base_path, "before.txt") in m and "True" in m for m in messages)
    assert any(os.path.join(storage_service.base_path, "after.txt") in m for m in messages)
    assert any(storage_service.base_path in m and "True" in m for m in messages if "before" not in m and "after" not in m)
