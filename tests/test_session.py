"""
Тесты состояния сеанса редактирования (FadeSession).
"""

import io

import numpy as np
import pytest
from PIL import Image

from fadeforge.errors import NoImageLoadedError, UnsupportedFormatError
from fadeforge.gradient_settings import DEFAULT_SETTINGS, GradientSettings, GradientShape
from fadeforge.image_operations import composite
from fadeforge.session import FadeSession


@pytest.fixture(scope="module", autouse=True)
def qt_core_app():
    """Сигналы QObject работают внутри экземпляра QCoreApplication."""
    from PySide6.QtCore import QCoreApplication
    yield QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def session():
    return FadeSession()


@pytest.fixture
def loaded_session(session, opaque_image):
    session.set_image(opaque_image, "holiday.jpg")
    return session


class TestImageLifecycle:

    def test_new_session_is_empty(self, session):
        assert not session.has_image()
        assert session.settings == DEFAULT_SETTINGS

    def test_render_without_image(self, session):
        with pytest.raises(NoImageLoadedError):
            session.render()
        with pytest.raises(NoImageLoadedError):
            session.export_png()

    def test_set_image_emits_signal(self, session, opaque_image):
        events = []
        session.image_changed.connect(lambda: events.append("image"))
        session.set_image(opaque_image, "a.png")
        session.clear_image()
        assert events == ["image", "image"]
        assert not session.has_image()

    def test_load_bytes(self, session, png_bytes):
        session.load_bytes(png_bytes, "noise.png")
        assert session.has_image()
        assert session.source_image.size == (64, 64)
        assert session.file_name == "noise.png"

    def test_failed_load_keeps_previous_state(self, loaded_session):
        before = loaded_session.source_image
        with pytest.raises(UnsupportedFormatError):
            loaded_session.load_bytes(b"garbage")
        assert loaded_session.source_image is before
        assert loaded_session.file_name == "holiday.jpg"

    def test_load_file(self, session, tmp_path, opaque_image):
        path = tmp_path / "scene.webp.png"
        opaque_image.save(path)
        session.load_file(str(path))
        assert session.file_name == "scene.webp.png"
        assert session.export_file_name() == "scene.webp-fade.png"


class TestSettings:

    def test_update_emits_only_on_change(self, session):
        received = []
        session.settings_changed.connect(received.append)
        session.update_settings(angle=90)
        session.update_settings(angle=90)
        session.update_settings(shape="radial")
        assert len(received) == 2
        assert received[-1].shape is GradientShape.RADIAL
        assert session.settings.angle == 90

    def test_set_settings_from_dict(self, session):
        session.set_settings({"angle": 10, "fade_start": 0, "fade_end": 50, "invert": True, "shape": "linear"})
        assert session.settings == GradientSettings(angle=10, fade_start=0, fade_end=50, invert=True)

    def test_reset(self, session):
        session.update_settings(invert=True, fade_end=99)
        session.reset_settings()
        assert session.settings == DEFAULT_SETTINGS


class TestRenderAndExport:

    def test_render_uses_current_settings(self, loaded_session, opaque_image):
        loaded_session.update_settings(shape="radial", fade_start=0, fade_end=100)
        expected = composite(opaque_image, loaded_session.settings)
        np.testing.assert_array_equal(np.array(loaded_session.render()), np.array(expected))

    def test_render_does_not_touch_source(self, loaded_session):
        before = np.array(loaded_session.source_image).copy()
        loaded_session.render()
        np.testing.assert_array_equal(np.array(loaded_session.source_image), before)

    def test_export_png(self, loaded_session):
        data = loaded_session.export_png()
        with Image.open(io.BytesIO(data)) as exported:
            assert exported.format == "PNG"
            assert exported.size == (40, 40)
            assert exported.mode == "RGBA"

    def test_export_file_name(self, loaded_session):
        assert loaded_session.export_file_name() == "holiday-fade.png"

    def test_save(self, loaded_session, tmp_path):
        target = tmp_path / loaded_session.export_file_name()
        saved = loaded_session.save(str(target))
        assert saved == str(target)
        assert target.exists()
