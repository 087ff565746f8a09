import logging

import pytest

from app.logging.logger import Log


class TestLog:
    def test_renders_context_pairs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="anuvadakah"):
            Log.info("Loaded upload", modality="pdf", size=12)
        assert "Loaded upload [modality=pdf size=12]" in caplog.text

    def test_plain_message_without_context(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="anuvadakah"):
            Log.warning("Strategy failed")
        assert caplog.records[-1].getMessage() == "Strategy failed"

    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("anuvadakah").level == logging.DEBUG
