import pytest

from quadkit.files import FileError, load_file, load_string, set_pc_assets_folder


@pytest.fixture(autouse=True)
def reset_assets_folder():
    set_pc_assets_folder(None)
    yield
    set_pc_assets_folder(None)


def test_load_file_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    payload = bytes(range(256))
    target.write_bytes(payload)
    assert load_file(str(target)) == payload


def test_assets_folder_prefix(tmp_path):
    (tmp_path / "nice_texture.png").write_bytes(b"png")
    set_pc_assets_folder(str(tmp_path))
    assert load_file("nice_texture.png") == b"png"


def test_missing_file_raises_file_error(tmp_path):
    set_pc_assets_folder(str(tmp_path))
    with pytest.raises(FileError) as info:
        load_file("absent.txt")
    assert info.value.path == str(tmp_path / "absent.txt")
    assert str(info.value).startswith("Couldn't load file ")
    assert isinstance(info.value.kind, OSError)


def test_load_string_utf8(tmp_path):
    target = tmp_path / "text.txt"
    target.write_text("héllo", encoding="utf-8")
    assert load_string(str(target)) == "héllo"


def test_load_string_is_lossy(tmp_path):
    target = tmp_path / "bad.txt"
    target.write_bytes(b"ab\xff")
    assert load_string(str(target)) == "ab\ufffd"