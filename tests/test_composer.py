"""Tests for transformation URL composition."""

import logging
from unittest.mock import patch

import pytest

from blog_images.core.composer import build_transformation_url
from blog_images.core.models import TransformationDescriptor

PHOTO_URL = "https://cdn.example.com/img/photo.jpg"


class TestBuildTransformationUrl:
    """Tests for build_transformation_url."""

    @pytest.mark.parametrize(
        "url",
        [PHOTO_URL, "", "not a url", "https://cdn.example.com/img/tr:w-10/photo.jpg"],
    )
    def test_empty_transformations_return_url_unchanged(self, url):
        """Test composing with nothing is a no-op."""
        assert build_transformation_url(url, []) == url

    def test_all_empty_descriptors_return_url_unchanged(self):
        """Test descriptors that encode to nothing leave the URL alone."""
        assert build_transformation_url(PHOTO_URL, [{}, TransformationDescriptor()]) == PHOTO_URL

    def test_inserts_segment_before_file_name(self):
        """Test a new tr: segment goes right before the file name."""
        result = build_transformation_url(PHOTO_URL, [{"width": 300, "height": 200}])
        assert result == "https://cdn.example.com/img/tr:w-300,h-200/photo.jpg"

    def test_multiple_descriptors_are_colon_joined(self):
        """Test several descriptors share one segment in order."""
        result = build_transformation_url(
            PHOTO_URL, [{"width": 300}, {}, {"effect": "grayscale"}]
        )
        assert result == "https://cdn.example.com/img/tr:w-300:e-grayscale/photo.jpg"

    def test_merges_into_existing_segment(self):
        """Test new parameters are prepended to an existing tr: segment."""
        first = build_transformation_url(PHOTO_URL, [{"width": 300, "height": 200}])
        second = build_transformation_url(first, [{"effect": "grayscale"}])

        assert second == "https://cdn.example.com/img/tr:e-grayscale:w-300,h-200/photo.jpg"
        assert second.count("tr:") == 1
        assert second.endswith("/photo.jpg")
        marker_segment = second.split("/")[-2]
        for token in ("w-300", "h-200", "e-grayscale"):
            assert token in marker_segment

    def test_repeated_composition_keeps_single_segment(self):
        """Test composing the same list twice folds into one segment."""
        transformations = [{"width": 300}, {"effect": "grayscale"}]
        once = build_transformation_url(PHOTO_URL, transformations)
        twice = build_transformation_url(once, transformations)

        assert twice.count("/tr:") == 1
        segment = twice.split("/")[-2]
        assert segment == "tr:w-300:e-grayscale:w-300:e-grayscale"

    def test_overlay_layer(self):
        """Test a text overlay becomes a single l-text...l-end token."""
        result = build_transformation_url(
            PHOTO_URL,
            [{"overlayText": "Sale!", "gravity": "north_west", "overlayTextFontSize": 24}],
        )
        segment = result.split("/")[-2]
        token = segment[len("tr:"):]
        assert ":" not in token
        parts = token.split(",")
        assert parts[0] == "l-text"
        assert parts[-1] == "l-end"
        assert "lfo-top_left" in parts
        assert "fs-24" in parts
        assert "i-Sale!" in parts

    def test_overlay_text_with_slash_does_not_split_path(self):
        """Test escaped overlay text keeps the URL's segment count."""
        result = build_transformation_url(PHOTO_URL, [{"overlayText": "a/b,c"}])
        assert len(result.split("/")) == len(PHOTO_URL.split("/")) + 1
        assert result.endswith("/photo.jpg")

    def test_does_not_mutate_inputs(self):
        """Test the caller's list and mappings are left untouched."""
        transformations = [{"width": 300}, {"overlayText": "Hi"}]
        snapshot = [dict(t) for t in transformations]
        build_transformation_url(PHOTO_URL, transformations)
        assert transformations == snapshot

    def test_url_without_slashes(self):
        """Test a bare file name gets the segment prepended."""
        assert build_transformation_url("photo.jpg", [{"width": 10}]) == "tr:w-10/photo.jpg"

    def test_empty_url(self):
        """Test an empty URL degrades without raising."""
        assert build_transformation_url("", [{"width": 10}]) == "tr:w-10/"

    def test_url_with_trailing_slash(self):
        """Test the segment goes before the empty last component."""
        result = build_transformation_url("https://cdn.example.com/img/", [{"width": 10}])
        assert result == "https://cdn.example.com/img/tr:w-10/"

    def test_only_first_marker_is_extended(self):
        """Test a URL with two tr: segments only has the first one extended."""
        url = "https://cdn.example.com/tr:w-1/img/tr:h-2/photo.jpg"
        result = build_transformation_url(url, [{"effect": "grayscale"}])
        assert result == "https://cdn.example.com/tr:e-grayscale:w-1/img/tr:h-2/photo.jpg"


class TestMalformedTransformations:
    """Tests that bad descriptor values never make composition fail."""

    @pytest.mark.parametrize(
        "transformation",
        [
            {"width": 0},
            {"effect": 5},
            {"width": "300px"},
            None,
            "w-300",
        ],
    )
    def test_unusable_transformation_leaves_url_unchanged(self, transformation):
        """Test values that cannot be encoded are absorbed."""
        assert build_transformation_url(PHOTO_URL, [transformation]) == PHOTO_URL

    def test_invalid_padding_keeps_overlay_layer(self):
        """Test a bad overlay field is dropped while the layer survives."""
        result = build_transformation_url(
            PHOTO_URL, [{"overlayText": "Hi", "overlayTextPadding": -1}]
        )
        assert result == (
            "https://cdn.example.com/img/tr:l-text,i-Hi,tg-bold,lx-20,ly-20,l-end/photo.jpg"
        )

    def test_valid_fields_survive_next_to_invalid_ones(self):
        """Test only the failing fields are dropped."""
        result = build_transformation_url(
            PHOTO_URL, [{"width": -1, "height": 200}, {"cropMode": 3, "effect": "grayscale"}]
        )
        assert result == "https://cdn.example.com/img/tr:h-200:e-grayscale/photo.jpg"


class TestBareMarkerSegment:
    """Tests pinning the fallback for a tr: segment with no parameters."""

    def test_bare_marker_gets_trailing_colon(self):
        """Test the splice still applies to an empty tr: segment."""
        url = "https://cdn.example.com/img/tr:/photo.jpg"
        result = build_transformation_url(url, [{"width": 300}])
        assert result == "https://cdn.example.com/img/tr:w-300:/photo.jpg"

    def test_bare_marker_at_end_of_url(self):
        """Test a URL ending in a bare marker does not raise."""
        result = build_transformation_url("https://cdn.example.com/tr:", [{"width": 1}])
        assert result == "https://cdn.example.com/tr:w-1:"

    def test_bare_marker_logs_warning(self):
        """Test the bare marker case is reported."""
        with patch("blog_images.core.composer.logger") as mock_logger:
            build_transformation_url(
                "https://cdn.example.com/img/tr:/photo.jpg", [{"width": 300}]
            )
            mock_logger.warning.assert_called_once()

    def test_marker_with_parameters_does_not_warn(self):
        """Test normal merges are not reported as warnings."""
        with patch("blog_images.core.composer.logger") as mock_logger:
            build_transformation_url(
                "https://cdn.example.com/img/tr:w-10/photo.jpg", [{"height": 300}]
            )
            mock_logger.warning.assert_not_called()

    def test_composer_logger_is_package_child(self):
        """Test the composer logs through the package logger hierarchy."""
        from blog_images.core import composer

        assert isinstance(composer.logger, logging.Logger)
        assert composer.logger.name == "blog-images.composer"
