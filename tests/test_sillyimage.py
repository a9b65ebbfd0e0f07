import pytest
from hypothesis import given
from hypothesis import strategies as st

from bentods.sillyimage import (
    HEADER,
    METADATA_SIZE,
    ImageType,
    SillyImage,
    SillyImageError,
    SillyImageMetadata,
)


def write_image(path, payload=b"\x01\x02\x03\x04", **fields):
    meta = SillyImageMetadata(**fields)
    path.write_bytes(meta.pack() + payload)
    return path


def test_header_spells_sillyimg():
    assert HEADER.to_bytes(8, "little") == b"sillyimg"


def test_pack_layout():
    packed = SillyImageMetadata(width=8, height=16).pack()
    assert len(packed) == METADATA_SIZE == 20
    assert packed[:8] == b"sillyimg"


@given(
    version=st.integers(0, 255),
    fmt=st.integers(0, 255),
    paletteid=st.integers(0, 255),
    width=st.integers(0, 0xFFFF),
    height=st.integers(0, 0xFFFF),
    compression=st.integers(0, 255),
    length=st.integers(0, 0xFFFFFFFF),
)
def test_metadata_round_trip(version, fmt, paletteid, width, height, compression, length):
    meta = SillyImageMetadata(HEADER, version, fmt, paletteid, width, height, compression, length)
    assert SillyImageMetadata.parse(meta.pack()) == meta


def test_parse_too_short():
    with pytest.raises(SillyImageError):
        SillyImageMetadata.parse(b"silly")


def test_pack_out_of_range():
    with pytest.raises(ValueError):
        SillyImageMetadata(width=1 << 16).pack()


def test_load_image(tmp_path):
    payload = bytes(range(64))
    path = write_image(
        tmp_path / "a.sillyimg", payload, format=4, paletteid=3, width=8, height=8, length=64
    )
    img = SillyImage(path)
    assert img.is_valid()
    assert img.format is ImageType.INDEXED_256
    assert (img.width, img.height, img.paletteid) == (8, 8, 3)
    assert img.data == payload


@pytest.mark.parametrize("fmt", list(range(8)))
def test_every_valid_format_loads(tmp_path, fmt):
    img = SillyImage(write_image(tmp_path / "f.sillyimg", format=fmt))
    assert img.format == ImageType(fmt)


def test_invalid_format(tmp_path):
    img = SillyImage()
    with pytest.raises(SillyImageError):
        img.load(write_image(tmp_path / "f.sillyimg", format=8))
    assert not img.is_valid()
    assert img.format is ImageType.INVALID


def test_invalid_header(tmp_path):
    with pytest.raises(SillyImageError):
        SillyImage(write_image(tmp_path / "h.sillyimg", header=0))


def test_invalid_version(tmp_path):
    with pytest.raises(SillyImageError):
        SillyImage(write_image(tmp_path / "v.sillyimg", version=1))


def test_metadata_only_is_too_short(tmp_path):
    with pytest.raises(SillyImageError):
        SillyImage(write_image(tmp_path / "s.sillyimg", payload=b""))


def test_missing_file(tmp_path):
    img = SillyImage()
    with pytest.raises(SillyImageError):
        img.load(tmp_path / "missing.sillyimg")
    assert not img.is_valid()


def test_unload_resets(tmp_path):
    img = SillyImage(write_image(tmp_path / "a.sillyimg", format=1, width=16, height=32))
    img.unload()
    assert not img.is_valid()
    assert img.data is None
    assert (img.width, img.height) == (0, 0)


def test_failed_reload_clears_previous(tmp_path):
    img = SillyImage(write_image(tmp_path / "a.sillyimg", format=2, width=8, height=8))
    with pytest.raises(SillyImageError):
        img.load(write_image(tmp_path / "b.sillyimg", version=3))
    assert img.data is None
    assert img.width == 0