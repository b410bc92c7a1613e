import asyncio
import builtins
import threading
import pytest
from types import SimpleNamespace
from unittest.mock import patch
from menucard.ocr import client as ocr_client

class FakeVisionClient:
    """Records where text_detection ran and returns a canned response"""

    def __init__(self, annotations=None, error_message=""):
        self.annotations = annotations or []
        self.error_message = error_message
        self.calls = []

    def text_detection(self, image, timeout=None):
        self.calls.append({"image": image, "timeout": timeout, "thread": threading.get_ident()})
        return SimpleNamespace(
            error=SimpleNamespace(message=self.error_message),
            text_annotations=self.annotations
        )

FAKE_VISION = SimpleNamespace(Image=lambda content: ("image", content))

class TestDetectText:
    """Unit tests for the Vision text detection wrapper"""

    def test_returns_first_annotation(self):
        """Full text comes from the first annotation"""
        fake_client = FakeVisionClient(annotations=[
            SimpleNamespace(description="Samosa ₹50\nChai ₹20"),
            SimpleNamespace(description="Samosa"),
        ])

        with patch.object(ocr_client, "load_vision", return_value=FAKE_VISION), \
             patch.object(ocr_client, "get_vision_client", return_value=fake_client):
            text = asyncio.run(ocr_client.detect_text(b"photo"))

        assert text == "Samosa ₹50\nChai ₹20"
        assert fake_client.calls[0]["image"] == ("image", b"photo")

    def test_runs_off_event_loop_thread(self):
        """The blocking SDK call runs in a worker thread"""
        fake_client = FakeVisionClient(annotations=[SimpleNamespace(description="Chai ₹20")])
        loop_thread = threading.get_ident()

        with patch.object(ocr_client, "load_vision", return_value=FAKE_VISION), \
             patch.object(ocr_client, "get_vision_client", return_value=fake_client):
            asyncio.run(ocr_client.detect_text(b"photo"))

        assert fake_client.calls[0]["thread"] != loop_thread

    def test_no_annotations(self):
        """No detections give None"""
        fake_client = FakeVisionClient()

        with patch.object(ocr_client, "load_vision", return_value=FAKE_VISION), \
             patch.object(ocr_client, "get_vision_client", return_value=fake_client):
            assert asyncio.run(ocr_client.detect_text(b"photo")) is None

    def test_api_error(self):
        """Errors reported in the response are raised"""
        fake_client = FakeVisionClient(error_message="quota exceeded")

        with patch.object(ocr_client, "load_vision", return_value=FAKE_VISION), \
             patch.object(ocr_client, "get_vision_client", return_value=fake_client):
            with pytest.raises(Exception, match="Vision API error: quota exceeded"):
                asyncio.run(ocr_client.detect_text(b"photo"))

    def test_missing_sdk(self, monkeypatch):
        """A missing SDK raises the descriptive ImportError"""
        real_import = builtins.__import__

        def fake_import(name, *args, **kwargs):
            if name.startswith("google.cloud"):
                raise ModuleNotFoundError(f"No module named '{name}'")
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(builtins, "__import__", fake_import)

        with pytest.raises(ImportError, match="google-cloud-vision package is required"):
            asyncio.run(ocr_client.detect_text(b"photo"))
