from unittest import TestCase
from unittest.mock import Mock

from event_dispatch import EventDispatcher, ListenerProvider
from event_dispatch.core.domain.services.interfaces import ListenerProviderInterface
from tests.helpers.mocks import InvokableListener, SimpleEvent, StoppableEvent


def _provider_mock(*listeners) -> Mock:
    provider = Mock(spec=ListenerProviderInterface)
    provider.get_listeners_for_event.return_value = list(listeners)
    return provider


class EventDispatcherTests(TestCase):
    def test_correctly_passes_event_to_listener(self):
        event = SimpleEvent()
        listener = Mock()
        provider = _provider_mock(listener)

        result = EventDispatcher(provider).dispatch(event)

        provider.get_listeners_for_event.assert_called_once_with(event)
        listener.assert_called_once_with(event)
        self.assertIs(result, event)

    def test_stopped_event_not_provided_to_next_listener(self):
        event = StoppableEvent()
        listener = Mock(side_effect=lambda e: e.stop_propagation())
        never_reached = Mock()

        result = EventDispatcher(_provider_mock(listener, never_reached)).dispatch(event)

        listener.assert_called_once_with(event)
        never_reached.assert_not_called()
        self.assertIs(result, event)
        self.assertTrue(event.is_propagation_stopped())

    def test_already_stopped_event_reaches_no_listener(self):
        event = StoppableEvent()
        event.stop_propagation()
        listener = Mock()

        EventDispatcher(_provider_mock(listener)).dispatch(event)

        listener.assert_not_called()

    def test_non_stoppable_event_reaches_every_listener(self):
        event = SimpleEvent()
        listeners = [Mock() for _ in range(3)]

        EventDispatcher(_provider_mock(*listeners)).dispatch(event)

        for listener in listeners:
            listener.assert_called_once_with(event)

    def test_listener_error_propagates_after_partial_delivery(self):
        event = SimpleEvent()
        first = Mock()
        failing = Mock(side_effect=RuntimeError("boom"))
        last = Mock()

        with self.assertRaises(RuntimeError) as ctx:
            EventDispatcher(_provider_mock(first, failing, last)).dispatch(event)

        self.assertEqual(str(ctx.exception), "boom")
        first.assert_called_once_with(event)
        last.assert_not_called()

    def test_stop_halts_lazy_iteration(self):
        consumed = []

        def listeners():
            for name in ("first", "second"):
                consumed.append(name)
                yield Mock(side_effect=lambda e: e.stop_propagation())

        provider = Mock(spec=ListenerProviderInterface)
        provider.get_listeners_for_event.return_value = listeners()

        EventDispatcher(provider).dispatch(StoppableEvent())

        # o segundo listener é retirado do gerador, mas nunca chamado
        self.assertEqual(consumed, ["first", "second"])


class EventDispatcherIntegrationTests(TestCase):
    def test_dispatch_through_listener_provider(self):
        calls = []

        def high(event: StoppableEvent) -> None:
            calls.append("high")

        def low(event: StoppableEvent) -> None:
            calls.append("low")
            event.stop_propagation()

        def never(event: StoppableEvent) -> None:
            calls.append("never")

        provider = ListenerProvider()
        provider.add_listener(low, 10)
        provider.add_listener(never, 1)
        provider.add_listener(high, 500)

        EventDispatcher(provider).dispatch(StoppableEvent())

        self.assertEqual(calls, ["high", "low"])

    def test_invokable_listener_receives_event(self):
        listener = InvokableListener()
        provider = ListenerProvider()
        provider.add_listener(listener)
        event = SimpleEvent()

        EventDispatcher(provider).dispatch(event)

        self.assertEqual(listener.received, [event])
