"""Tests for generated image export."""

import base64

import pytest

from job_post_studio.export import data_url, decode_image, image_filename, save_images

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")


class TestDecodeImage:
    def test_plain_base64(self):
        assert decode_image(PNG_B64) == PNG_BYTES

    def test_data_url(self):
        assert decode_image(data_url(PNG_B64)) == PNG_BYTES

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid base64"):
            decode_image("not base64!!")


class TestSaveImages:
    def test_file_names_are_one_based(self):
        assert image_filename(0) == "generated_image_1.png"
        assert image_filename(4) == "generated_image_5.png"

    def test_writes_every_image(self, tmp_path):
        paths = save_images([PNG_B64, PNG_B64], tmp_path / "out")
        assert [p.name for p in paths] == ["generated_image_1.png", "generated_image_2.png"]
        assert paths[1].read_bytes() == PNG_BYTES

    def test_empty(self, tmp_path):
        assert save_images([], tmp_path) == []
