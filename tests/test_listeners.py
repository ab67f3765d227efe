from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from properdata.errors import KeyNotFound, MalformedQuotedValue, NoListenersRegistered
from properdata.listeners import (
    Listener,
    ListenerKind,
    ListenerRegistry,
    boolean_listener,
    double_listener,
    float_listener,
    integer_listener,
    string_listener,
)
from properdata.properties_file import PropertiesFile


class TestListenerRegistry(unittest.TestCase):
    def test_dispatch_only_matching_kind_in_registration_order(self) -> None:
        registry = ListenerRegistry()
        calls: list[tuple[str, str, object]] = []
        registry.register(integer_listener(lambda k, v: calls.append(("int-1", k, v))))
        registry.register(string_listener(lambda k, v: calls.append(("str", k, v))))
        registry.register(integer_listener(lambda k, v: calls.append(("int-2", k, v))))
        registry.register(boolean_listener(lambda k, v: calls.append(("bool", k, v))))

        invoked = registry.dispatch(ListenerKind.INTEGER, "age", 42)

        self.assertEqual(invoked, 2)
        self.assertEqual(calls, [("int-1", "age", 42), ("int-2", "age", 42)])

    def test_decorator_registers_and_returns_function(self) -> None:
        registry = ListenerRegistry()
        seen: list[float] = []

        @registry.on(ListenerKind.DOUBLE)
        def on_double(key: str, value: float) -> None:
            seen.append(value)

        self.assertEqual(len(registry), 1)
        self.assertIs(registry.listeners[0].callback, on_double)
        self.assertEqual(registry.listeners[0].label, "on_double")
        registry.dispatch(ListenerKind.DOUBLE, "ratio", 0.5)
        self.assertEqual(seen, [0.5])

    def test_listener_exception_aborts_remaining_dispatch(self) -> None:
        registry = ListenerRegistry()
        calls: list[str] = []

        def boom(key: str, value: str) -> None:
            raise RuntimeError("listener failed")

        registry.register(string_listener(lambda k, v: calls.append("before")))
        registry.register(string_listener(boom))
        registry.register(string_listener(lambda k, v: calls.append("after")))

        with self.assertRaises(RuntimeError):
            registry.dispatch(ListenerKind.STRING, "k", "v")
        self.assertEqual(calls, ["before"])

    def test_empty_registry(self) -> None:
        registry = ListenerRegistry()

        self.assertFalse(registry)
        with self.assertRaises(NoListenersRegistered):
            registry.ensure_not_empty()
        registry.register(float_listener(lambda k, v: None))
        registry.ensure_not_empty()
        registry.clear()
        self.assertEqual(len(registry), 0)

    def test_register_rejects_plain_callables(self) -> None:
        with self.assertRaises(TypeError):
            ListenerRegistry().register(lambda k, v: None)

    def test_listener_registered_during_dispatch_waits_for_next_dispatch(self) -> None:
        registry = ListenerRegistry()
        calls: list[str] = []

        def late(key: str, value: bool) -> None:
            calls.append("late")

        def registering(key: str, value: bool) -> None:
            calls.append("first")
            registry.register(boolean_listener(late))

        registry.register(boolean_listener(registering, name="registering"))
        registry.dispatch(ListenerKind.BOOLEAN, "flag", True)
        self.assertEqual(calls, ["first"])


class TestReadWithListener(unittest.TestCase):
    def setUp(self) -> None:
        tmp_dir = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, tmp_dir, ignore_errors=True)
        path = tmp_dir / "events.proper"
        path.write_text(
            'name="John"\nraw=John\nage=42\nratio=0.25\nscale=1.5\nenabled=TRUE\n',
            encoding="utf-8",
        )
        self.registry = ListenerRegistry()
        self.props = PropertiesFile(path, registry=self.registry)
        self.addCleanup(self.props.close)
        self.calls: list[tuple[ListenerKind, str, object]] = []
        for kind in ListenerKind:
            self.registry.register(
                Listener(kind, lambda k, v, kind=kind: self.calls.append((kind, k, v)))
            )

    def test_each_kind_reaches_its_listener(self) -> None:
        self.props.get_string_with_listener("name")
        self.props.get_integer_with_listener("age")
        self.props.get_double_with_listener("ratio")
        self.props.get_float_with_listener("scale")
        self.props.get_boolean_with_listener("enabled")

        self.assertEqual(
            self.calls,
            [
                (ListenerKind.STRING, "name", "John"),
                (ListenerKind.INTEGER, "age", 42),
                (ListenerKind.DOUBLE, "ratio", 0.25),
                (ListenerKind.FLOAT, "scale", 1.5),
                (ListenerKind.BOOLEAN, "enabled", True),
            ],
        )

    def test_string_listener_read_requires_quotes(self) -> None:
        with self.assertRaises(MalformedQuotedValue):
            self.props.get_string_with_listener("raw")
        self.assertEqual(self.calls, [])

    def test_failed_read_invokes_nothing(self) -> None:
        with self.assertRaises(KeyNotFound):
            self.props.get_integer_with_listener("missing")
        self.assertEqual(self.calls, [])

    def test_no_listeners_fails_before_reading(self) -> None:
        self.registry.clear()

        with self.assertRaises(NoListenersRegistered):
            # the key is missing too; the empty registry is reported first
            self.props.get_integer_with_listener("missing")

    def test_handle_owns_a_registry_by_default(self) -> None:
        other = PropertiesFile(self.props.path)
        self.addCleanup(other.close)

        self.assertIsNot(other.registry, self.registry)
        self.assertEqual(len(other.registry), 0)
        received: list[int] = []
        other.registry.register(integer_listener(lambda k, v: received.append(v)))
        other.get_integer_with_listener("age")
        self.assertEqual(received, [42])
        self.registry.clear()
        other.registry.register(double_listener(lambda k, v: None))
        self.assertEqual(len(self.registry), 0)


if __name__ == "__main__":
    unittest.main()
