"""
tests/test_format_plugins.py -- Tests for the converter registry and the
format_convert skill
"""

import inspect
from pathlib import Path
from unittest.mock import patch

import pytest

from skills.format_convert import convert
from sozi_export.renderer.format_plugins import (
    FormatConverter,
    PDFConverter,
    PPTXConverter,
    VideoConverter,
    get_converter,
)
from sozi_export.services.converter import ConversionResult


class TestFormatPlugins:
    def test_pdf_converter_can_convert(self):
        c = PDFConverter()
        assert c.can_convert("pdf") is True
        assert c.can_convert("PDF") is True
        assert c.can_convert("pptx") is False

    def test_pptx_converter_can_convert(self):
        c = PPTXConverter()
        assert c.can_convert("pptx") is True
        assert c.can_convert("PPTX") is True
        assert c.can_convert("pdf") is False

    def test_video_converter_accepts_video_and_ogv(self):
        c = VideoConverter()
        assert c.can_convert("video") is True
        assert c.can_convert("ogv") is True
        assert c.can_convert("mp4") is False

    def test_get_converter_pdf(self):
        assert isinstance(get_converter("pdf"), PDFConverter)

    def test_get_converter_pptx(self):
        assert isinstance(get_converter("pptx"), PPTXConverter)

    def test_get_converter_video(self):
        assert isinstance(get_converter("video"), VideoConverter)

    def test_get_converter_unknown_raises(self):
        with pytest.raises(ValueError, match="No converter available"):
            get_converter("docx")

    def test_pdf_converter_delegates(self):
        expected = ConversionResult(output_path=Path("a.pdf"), success=True)
        with patch(
            "sozi_export.renderer.format_plugins.convert_to_pdf", return_value=expected
        ) as conv:
            assert PDFConverter().convert(Path("a.html"), {"paper": "a3paper"}) is expected
        conv.assert_called_once_with(Path("a.html"), {"paper": "a3paper"}, tools=None)


class TestFormatConvertSkill:
    def test_output_path_passed_as_option(self):
        expected = ConversionResult(output_path=Path("out/deck.pptx"), success=True)
        with patch(
            "sozi_export.renderer.format_plugins.convert_to_pptx", return_value=expected
        ) as conv:
            result = convert("talk.html", "pptx", output_path="out/deck.pptx", wide=True)
        assert result is expected
        conv.assert_called_once_with(
            Path("talk.html"), {"output": "out/deck.pptx", "wide": True}, tools=None
        )

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            convert("talk.html", "gif")


class TestConverterSignatures:
    @pytest.mark.parametrize("cls", [PDFConverter, PPTXConverter, VideoConverter])
    def test_convert_matches_protocol(self, cls):
        expected = inspect.signature(FormatConverter.convert)
        assert inspect.signature(cls.convert) == expected
