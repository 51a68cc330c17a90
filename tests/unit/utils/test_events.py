"""
ChangeEvent 单元测试
"""

from xmlconf.utils.events import ChangeEvent


class TestChangeEvent:
    """订阅、注销与触发"""

    def test_fire_calls_each_handler_once(self):
        event = ChangeEvent()
        calls = []
        event.subscribe(lambda sender, name: calls.append(("a", sender, name)))
        event.subscribe(lambda sender, name: calls.append(("b", sender, name)))

        event.fire("owner", "settings")

        assert sorted(calls) == [("a", "owner", "settings"), ("b", "owner", "settings")]

    def test_handles_are_unique(self):
        event = ChangeEvent()
        h1 = event.subscribe(lambda s, n: None)
        h2 = event.subscribe(lambda s, n: None)

        assert h1 != h2
        assert len(event) == 2

    def test_unsubscribe(self):
        event = ChangeEvent()
        calls = []
        handle = event.subscribe(lambda s, n: calls.append(n))

        assert event.unsubscribe(handle) is True
        assert event.unsubscribe(handle) is False

        event.fire(None, "settings")
        assert calls == []

    def test_failing_handler_does_not_block_others(self):
        """单个回调异常不影响其他回调"""
        event = ChangeEvent()
        calls = []

        def bad_handler(sender, name):
            raise RuntimeError("boom")

        event.subscribe(bad_handler)
        event.subscribe(lambda s, n: calls.append(n))

        event.fire(None, "settings")

        assert calls == ["settings"]

    def test_unsubscribe_during_fire(self):
        """回调中注销自身是安全的"""
        event = ChangeEvent()
        calls = []
        handles = {}

        def once(sender, name):
            calls.append(name)
            event.unsubscribe(handles["once"])

        handles["once"] = event.subscribe(once)

        event.fire(None, "settings")
        event.fire(None, "settings")

        assert calls == ["settings"]
