import hashlib

from xlsxcore.mediafile import MediaFile


def test_contents_and_hash():
    media = MediaFile(b"\x89PNG data", "png", "image/png")
    assert media.contents == b"\x89PNG data"
    assert media.suffix == "png"
    assert media.mime_type == "image/png"
    assert media.hash_key == hashlib.md5(b"\x89PNG data").digest()


def test_same_contents_same_hash():
    assert MediaFile(b"abc", "png", "image/png").hash_key == MediaFile(
        b"abc", "jpeg", "image/jpeg"
    ).hash_key


def test_file_name_only():
    media = MediaFile(file_name="xl/media/image1.png")
    assert media.file_name == "xl/media/image1.png"
    assert media.hash_key == b""
    assert media.contents == b""


def test_index_starts_invalid():
    media = MediaFile(b"x", "png", "image/png")
    assert media.index_valid is False
    assert media.index == 0


def test_set_index():
    media = MediaFile(b"x", "png", "image/png")
    media.set_index(3)
    assert media.index_valid is True
    assert media.index == 3


def test_set_invalidates_index():
    media = MediaFile(b"x", "png", "image/png")
    media.set_index(2)
    media.set(b"yz", "jpeg", "image/jpeg")
    assert media.index_valid is False
    assert media.contents == b"yz"
    assert media.suffix == "jpeg"
    assert media.hash_key == hashlib.md5(b"yz").digest()