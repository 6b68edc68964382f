import asyncio
import logging

import pytest

from core.logging_config import log_latency


class TestLogLatency:

    def test_sync_success(self, caplog):
        caplog.set_level(logging.INFO)

        @log_latency("demo.sync")
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"
        assert "demo.sync took" in caplog.text

    def test_async_success(self, caplog):
        caplog.set_level(logging.INFO)

        @log_latency("demo.async")
        async def double(x):
            return x * 2

        assert asyncio.run(double(4)) == 8
        assert "demo.async took" in caplog.text

    def test_failure_is_logged_and_reraised(self, caplog):
        caplog.set_level(logging.INFO)

        @log_latency("demo.fail")
        def explode():
            raise RuntimeError("kaboom")

        with pytest.raises(RuntimeError, match="kaboom"):
            explode()
        assert "demo.fail failed after" in caplog.text
        assert "kaboom" in caplog.text
