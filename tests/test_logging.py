"""Tests for loguru-based application logging."""

from loguru import logger

from gallery_mover.config import MoverSettings


class TestSetupLogging:
    def setup_method(self):
        logger.remove()

    def teardown_method(self):
        logger.remove()

    def test_setup_creates_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        settings = MoverSettings(_env_file=None, log_dir=log_dir)
        settings.setup_logging(sink=lambda msg: None)
        assert log_dir.exists()

    def test_setup_adds_file_sink(self, tmp_path):
        log_dir = tmp_path / "logs"
        settings = MoverSettings(_env_file=None, log_dir=log_dir)
        settings.setup_logging(sink=lambda msg: None)
        logger.bind(component="test").info("hello from test")
        content = settings.log_file.read_text()
        assert "hello from test" in content

    def test_component_context_in_file(self, tmp_path):
        settings = MoverSettings(_env_file=None, log_dir=tmp_path)
        settings.setup_logging(sink=lambda msg: None)
        logger.bind(component="mover").info("moving")
        content = settings.log_file.read_text()
        assert "mover" in content

    def test_default_component_empty(self, tmp_path):
        settings = MoverSettings(_env_file=None, log_dir=tmp_path)
        settings.setup_logging(sink=lambda msg: None)
        logger.info("no component bound")
        assert "no component bound" in settings.log_file.read_text()

    def test_console_sink_receives_records(self, tmp_path):
        received: list[str] = []
        settings = MoverSettings(_env_file=None, log_dir=tmp_path)
        settings.setup_logging(sink=received.append)
        logger.warning("shown on console")
        assert any("shown on console" in line for line in received)

    def test_console_sink_respects_level(self, tmp_path):
        received: list[str] = []
        settings = MoverSettings(_env_file=None, log_dir=tmp_path, log_level="warning")
        settings.setup_logging(sink=received.append)
        logger.info("too quiet")
        assert received == []

    def test_verbose_enables_debug(self, tmp_path):
        received: list[str] = []
        settings = MoverSettings(_env_file=None, log_dir=tmp_path, verbose=True)
        settings.setup_logging(sink=received.append)
        logger.debug("debug detail")
        assert any("debug detail" in line for line in received)
