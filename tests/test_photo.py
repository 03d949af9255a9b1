"""Tests for photo storage in the cache directory."""
import pytest

from inventory_service.errors import PhotoNotFound
from inventory_service.photo import PhotoStorage, make_filename


@pytest.fixture
def photos(tmp_path):
    return PhotoStorage(tmp_path / "cache")


class TestFilenames:

    def test_filename_has_field_and_extension(self):
        name = make_filename("Holiday.JPG", field="photo")
        assert name.startswith("photo-")
        assert name.endswith(".jpg")
        assert len(name.split("-")) == 3

    def test_filename_without_original_name(self):
        assert "." not in make_filename(None)

    def test_filenames_are_unique(self):
        names = {make_filename("a.png") for _ in range(200)}
        assert len(names) == 200


class TestPhotoStorage:

    def test_creates_cache_dir(self, tmp_path):
        target = tmp_path / "nested" / "cache"
        PhotoStorage(target)
        assert target.is_dir()

    def test_save_and_read(self, photos):
        filename = photos.save(b"\x89PNG data", "shelf.png")
        assert (photos.cache_dir / filename).read_bytes() == b"\x89PNG data"
        assert photos.read(filename) == b"\x89PNG data"

    def test_missing_file_raises(self, photos):
        with pytest.raises(PhotoNotFound):
            photos.path_for("photo-1-abc.jpg")

    def test_no_reference_raises(self, photos):
        with pytest.raises(PhotoNotFound):
            photos.path_for(None)

    def test_path_outside_cache_rejected(self, photos, tmp_path):
        (tmp_path / "secret.txt").write_text("nope")
        with pytest.raises(PhotoNotFound):
            photos.path_for("../secret.txt")

    def test_discard(self, photos):
        filename = photos.save(b"data", "a.jpg")
        assert photos.discard(filename) is True
        assert not (photos.cache_dir / filename).exists()
        assert photos.discard(filename) is False
        assert photos.discard(None) is False

    @pytest.mark.parametrize("filename, expected", [
        ("photo-1-a.png", "image/png"),
        ("photo-1-a.JPEG", "image/jpeg"),
        ("photo-1-a.webp", "image/webp"),
        ("photo-1-a.bin", "image/jpeg"),
        ("photo-1-a", "image/jpeg"),
    ])
    def test_content_type(self, filename, expected):
        assert PhotoStorage.content_type(filename) == expected
