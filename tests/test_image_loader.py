"""Tests for loading images from folders and JSON manifests."""

import base64
import json
import os

import pytest

from propgallery.core.image_loader import load_directory, load_images, load_manifest, scan_image_files
from propgallery.core.images import EncodedPayload
from shared_fixtures import make_png_bytes

PNG_B64 = base64.b64encode(make_png_bytes()).decode('ascii')


class TestScanImageFiles:

    def test_finds_images_sorted(self, test_image_dir):
        names = [os.path.basename(p) for p in scan_image_files(str(test_image_dir))]
        assert names == ["front_elevation.jpg", "kitchen-island.png", "rear_garden.gif"]

    def test_exclude_patterns(self, test_image_dir):
        names = [os.path.basename(p) for p in scan_image_files(str(test_image_dir), "*.GIF; kitchen*")]
        assert names == ["front_elevation.jpg"]

    def test_missing_directory(self, tmp_path):
        assert scan_image_files(str(tmp_path / "nope")) == []

    def test_not_recursive(self, test_image_dir):
        nested = test_image_dir / "archive"
        nested.mkdir()
        (nested / "old.jpg").write_bytes(make_png_bytes(image_format='JPEG'))
        assert len(scan_image_files(str(test_image_dir))) == 3


class TestLoadDirectory:

    def test_records_from_folder(self, test_image_dir):
        records = load_directory(str(test_image_dir))
        assert [r.caption for r in records] == ["front elevation", "kitchen island", "rear garden"]
        assert [r.order for r in records] == [0, 1, 2]
        assert [r.mime_type for r in records] == ["image/jpeg", "image/png", "image/gif"]
        assert all(isinstance(r.payload, EncodedPayload) for r in records)
        assert records[0].filename == "front_elevation.jpg"

    def test_ids_are_stable_and_unique(self, test_image_dir):
        first = [r.id for r in load_directory(str(test_image_dir))]
        second = [r.id for r in load_directory(str(test_image_dir))]
        assert first == second
        assert len(set(first)) == 3
        assert all(len(i) == 8 for i in first)


class TestLoadManifest:

    def write_manifest(self, tmp_path, rows):
        path = tmp_path / "images.json"
        path.write_text(json.dumps(rows))
        return str(path)

    def test_sorted_by_order_and_inactive_dropped(self, tmp_path):
        path = self.write_manifest(tmp_path, [
            {"id": "c", "base64Data": PNG_B64, "mimeType": "image/png", "order": 3},
            {"id": "a", "base64Data": PNG_B64, "mimeType": "image/png", "order": 1},
            {"id": "x", "base64Data": PNG_B64, "mimeType": "image/png", "order": 0, "isActive": False},
            {"id": "b", "base64Data": PNG_B64, "mimeType": "image/png", "order": 2},
        ])
        assert [r.id for r in load_manifest(path)] == ["a", "b", "c"]

    def test_equal_order_is_stable(self, tmp_path):
        path = self.write_manifest(tmp_path, [
            {"id": "first", "base64Data": PNG_B64, "mimeType": "image/png", "order": 1},
            {"id": "second", "base64Data": PNG_B64, "mimeType": "image/png", "order": 1},
        ])
        assert [r.id for r in load_manifest(path)] == ["first", "second"]

    def test_null_and_non_integer_order_use_position(self, tmp_path):
        path = self.write_manifest(tmp_path, [
            {"id": "late", "base64Data": PNG_B64, "mimeType": "image/png", "order": 5},
            {"id": "null", "base64Data": PNG_B64, "mimeType": "image/png", "order": None},
            {"id": "text", "base64Data": PNG_B64, "mimeType": "image/png", "order": "first"},
            {"id": "flag", "base64Data": PNG_B64, "mimeType": "image/png", "order": True},
        ])
        records = load_manifest(path)
        assert [r.id for r in records] == ["null", "text", "flag", "late"]
        assert [r.order for r in records] == [1, 2, 3, 5]

    def test_malformed_rows_survive_as_invalid(self, tmp_path):
        path = self.write_manifest(tmp_path, [
            {"id": "ok", "base64Data": PNG_B64, "mimeType": "image/png"},
            {"id": "broken", "base64Data": "", "mimeType": "image/png"},
        ])
        records = load_manifest(path)
        assert [r.is_valid for r in records] == [True, False]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_manifest(str(path))

    def test_not_a_list(self, tmp_path):
        path = self.write_manifest(tmp_path, {"images": []})
        with pytest.raises(ValueError):
            load_manifest(path)


class TestLoadImages:

    def test_dispatches_to_folder(self, test_image_dir):
        assert len(load_images(str(test_image_dir))) == 3

    def test_dispatches_to_manifest(self, tmp_path):
        path = tmp_path / "listing.json"
        path.write_text(json.dumps([{"base64Data": PNG_B64, "mimeType": "image/png"}]))
        assert len(load_images(str(path))) == 1

    def test_rejects_other_paths(self, tmp_path):
        other = tmp_path / "photo.png"
        other.write_bytes(make_png_bytes())
        with pytest.raises(ValueError):
            load_images(str(other))
