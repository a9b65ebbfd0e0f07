import pytest

from bentods.filedata import FileData, FileDataError


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"\x00\x01hello\xff")
    return path


def test_load_reads_whole_file(sample):
    fd = FileData()
    fd.load(sample)
    assert fd.data == sample.read_bytes()
    assert fd.length == len(sample.read_bytes())
    assert fd.is_valid()


def test_constructor_loads(sample):
    fd = FileData(sample)
    assert fd.data == sample.read_bytes()


def test_accepts_string_path(sample):
    fd = FileData(str(sample))
    assert fd.data == sample.read_bytes()


def test_empty_instance_is_invalid():
    fd = FileData()
    assert not fd.is_valid()
    assert fd.length == 0


def test_unload_clears(sample):
    fd = FileData(sample)
    fd.unload()
    assert fd.data is None
    assert fd.length == 0
    assert not fd.is_valid()


def test_reload_replaces_contents(sample, tmp_path):
    other = tmp_path / "other.bin"
    other.write_bytes(b"different")
    fd = FileData(sample)
    fd.load(other)
    assert fd.data == b"different"


def test_missing_file_raises(tmp_path):
    fd = FileData()
    with pytest.raises(FileDataError):
        fd.load(tmp_path / "missing.bin")
    assert not fd.is_valid()


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with pytest.raises(FileDataError):
        FileData(path)


def test_empty_filename_raises():
    with pytest.raises(FileDataError):
        FileData().load("")


def test_failed_load_discards_previous(sample, tmp_path):
    fd = FileData(sample)
    with pytest.raises(FileDataError):
        fd.load(tmp_path / "missing.bin")
    assert fd.data is None