from recording_logger import LEVELS, RecordingLogger


class TestLifecycle:
    def test_fresh_logger_is_empty(self, recording_logger):
        assert recording_logger.items == []

    def test_connect_then_close(self, recording_logger):
        recording_logger.connect()
        recording_logger.close()
        assert recording_logger.items == ["connect", "close"]

    def test_instances_do_not_share_items(self):
        first = RecordingLogger()
        second = RecordingLogger()
        first.connect()
        assert second.items == []


class TestLeveledCalls:
    def test_every_level_has_a_method(self, recording_logger):
        for level in LEVELS:
            getattr(recording_logger, level)("message")
        assert recording_logger.items == [[level, "message"] for level in LEVELS]

    def test_info_captures_tags_and_message(self, recording_logger):
        tags = ["info", "foo"]
        recording_logger.info(tags, "hello")
        assert recording_logger.items == [["info", tags, "hello"]]
        # Arguments are stored by identity, not copied
        assert recording_logger.items[0][1] is tags

    def test_structured_and_multiple_arguments(self, recording_logger):
        data = {"a": 1, "nested": {"b": [1, 2]}}
        recording_logger.warning("one", data, 3, None)
        assert recording_logger.items == [["warning", "one", data, 3, None]]

    def test_keyword_arguments_are_captured(self, recording_logger):
        extra = {"a": 1}
        recording_logger.info("msg", extra=extra, exc_info=True)
        assert recording_logger.items == [["info", "msg", {"extra": extra, "exc_info": True}]]
        assert recording_logger.items[0][2]["extra"] is extra

    def test_keywords_named_like_parameters(self, recording_logger):
        recording_logger.error(self="x", level="y")
        recording_logger.log(level=3)
        assert recording_logger.items == [
            ["error", {"self": "x", "level": "y"}],
            ["log", {"level": 3}],
        ]

    def test_no_arguments(self, recording_logger):
        recording_logger.debug()
        assert recording_logger.items == [["debug"]]

    def test_call_order_is_preserved(self, recording_logger):
        recording_logger.connect()
        recording_logger.error("e")
        recording_logger.info("i")
        recording_logger.error("e")
        recording_logger.close()
        assert len(recording_logger.items) == 5
        assert recording_logger.items == [
            "connect",
            ["error", "e"],
            ["info", "i"],
            ["error", "e"],
            "close",
        ]

    def test_leveled_filters_lifecycle_tags(self, recording_logger):
        recording_logger.connect()
        recording_logger.info("a")
        recording_logger.debug("b")
        assert recording_logger.leveled() == [["info", "a"], ["debug", "b"]]
        assert recording_logger.leveled("debug") == [["debug", "b"]]

    def test_clear(self, recording_logger):
        recording_logger.connect()
        recording_logger.clear()
        assert recording_logger.items == []


class TestErrorSignal:
    def test_signal_receivers_are_called(self, recording_logger):
        received = []

        def receiver(sender, **kwargs):
            received.append((sender, kwargs))

        recording_logger.on_error.connect(receiver)
        recording_logger.on_error.send(recording_logger, error="boom")
        assert received == [(recording_logger, {"error": "boom"})]

    def test_logger_never_sends_by_itself(self, recording_logger):
        received = []

        def receiver(sender, **kwargs):
            received.append(kwargs)

        recording_logger.on_error.connect(receiver)
        recording_logger.connect()
        recording_logger.error("x")
        recording_logger.close()
        assert received == []
