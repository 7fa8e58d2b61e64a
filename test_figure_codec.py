"""
Test figure codecs and publisher (without a real transport).

The host transport is simulated: init/encode/destroy are called directly
and the publisher's send callable appends to a list.

Usage:
    pytest test_figure_codec.py
    python test_figure_codec.py
"""

import json
import logging
import threading

import pytest

from figurecast_ws import (
    CodecState,
    DecodingError,
    EncoderConfig,
    EncodingError,
    EndpointConfig,
    Figure,
    FigureDecoder,
    FigureEncoder,
    FigurePublisher,
    LifecycleViolation,
    LogEvent,
    StructuredLogger,
)


CIRCLE = {"type": "circle", "radius": 5, "center": {"x": 1.0, "y": 2.0}}
CIRCLE_TEXT = '{"type":"circle","radius":5,"center":{"x":1.0,"y":2.0}}'


class _Capture(logging.Handler):
    """Collects structured log entries as dicts."""

    def __init__(self):
        super().__init__()
        self.entries = []

    def emit(self, record):
        self.entries.append(json.loads(record.getMessage()))

    def events(self):
        return [entry['event'] for entry in self.entries]


def _capturing_logger(name, level=logging.INFO):
    logger = StructuredLogger(component=name, level=level, logger_name=f"figurecast_ws.test.{name}")
    capture = _Capture()
    logger.logger.addHandler(capture)
    # keep test output quiet
    logger.logger.propagate = False
    return logger, capture


def _ready_encoder(**kwargs):
    logger, _ = _capturing_logger("encoder")
    encoder = FigureEncoder(logger=logger, **kwargs)
    encoder.init(EndpointConfig(path="/figures"))
    return encoder


def test_encode_circle_example():
    encoder = _ready_encoder()
    assert encoder.encode(Figure(CIRCLE)) == CIRCLE_TEXT
    encoder.destroy()


def test_encode_is_deterministic():
    encoder = _ready_encoder()
    figure = Figure({"b": [3, 2, 1], "a": {"y": None, "x": "é"}})
    first = encoder.encode(figure)
    second = encoder.encode(figure)
    assert first == second
    assert json.loads(first) == figure.get_json()


def test_lifecycle_states():
    logger, capture = _capturing_logger("lifecycle")
    encoder = FigureEncoder(logger=logger)
    endpoint = EndpointConfig(path="/draw")

    assert encoder.state is CodecState.UNINITIALIZED
    encoder.init(endpoint)
    assert encoder.state is CodecState.READY
    assert encoder.config is endpoint
    encoder.destroy()
    assert encoder.state is CodecState.DESTROYED

    assert capture.events() == [
        LogEvent.CODEC_INITIALIZED.value,
        LogEvent.CODEC_DESTROYED.value,
    ]


def test_encode_before_init_fails():
    logger, capture = _capturing_logger("early")
    encoder = FigureEncoder(logger=logger)
    with pytest.raises(LifecycleViolation):
        encoder.encode(Figure(CIRCLE))
    assert LogEvent.LIFECYCLE_VIOLATION.value in capture.events()


def test_encode_after_destroy_fails():
    encoder = _ready_encoder()
    encoder.destroy()
    with pytest.raises(LifecycleViolation):
        encoder.encode(Figure(CIRCLE))


def test_invalid_lifecycle_transitions():
    encoder = _ready_encoder()
    with pytest.raises(LifecycleViolation):
        encoder.init(None)
    encoder.destroy()
    with pytest.raises(LifecycleViolation):
        encoder.destroy()
    with pytest.raises(LifecycleViolation):
        encoder.init(None)

    logger, _ = _capturing_logger("fresh")
    with pytest.raises(LifecycleViolation):
        FigureEncoder(logger=logger).destroy()


def test_encode_rejects_missing_value():
    logger, capture = _capturing_logger("null")
    encoder = FigureEncoder(logger=logger)
    encoder.init(None)

    with pytest.raises(EncodingError):
        encoder.encode(Figure())
    with pytest.raises(EncodingError):
        encoder.encode({"type": "circle"})
    with pytest.raises(EncodingError):
        encoder.encode(Figure({"bad": {1, 2}}))

    stats = encoder.get_stats()
    assert stats['error_count'] == 3
    assert stats['message_count'] == 0
    assert capture.events().count(LogEvent.ENCODING_ERROR.value) == 3

    # errors do not end the READY phase
    assert encoder.encode(Figure(CIRCLE)) == CIRCLE_TEXT


def test_encode_with_settings():
    figure = Figure({"b": 2, "a": 1})
    assert _ready_encoder(settings=EncoderConfig(sort_keys=True)).encode(figure) == '{"a":1,"b":2}'
    assert _ready_encoder(settings=EncoderConfig(indent=2)).encode(figure) == '{\n  "b": 2,\n  "a": 1\n}'


def test_per_message_logging_is_debug():
    logger, capture = _capturing_logger("quiet", level=logging.INFO)
    encoder = FigureEncoder(logger=logger)
    encoder.init(None)
    encoder.encode(Figure(CIRCLE))
    assert LogEvent.FIGURE_ENCODED.value not in capture.events()

    logger.set_level(logging.DEBUG)
    encoder.encode(Figure(CIRCLE))
    encoded = [e for e in capture.entries if e['event'] == LogEvent.FIGURE_ENCODED.value]
    assert len(encoded) == 1
    assert encoded[0]['level'] == 'DEBUG'
    assert encoded[0]['metadata']['figure_type'] == 'circle'
    assert encoded[0]['metadata']['length'] == len(CIRCLE_TEXT)


def test_concurrent_encode():
    encoder = _ready_encoder()
    figure = Figure(CIRCLE)
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            text = encoder.encode(figure)
            with lock:
                results.append(text)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 400
    assert set(results) == {CIRCLE_TEXT}
    assert encoder.get_stats()['message_count'] == 400


def test_decoder_round_trip():
    encoder = _ready_encoder()
    logger, _ = _capturing_logger("decoder")
    decoder = FigureDecoder(logger=logger)
    decoder.init(None)

    text = encoder.encode(Figure(CIRCLE))
    assert decoder.will_decode(text)
    figure = decoder.decode(text)
    assert figure.figure_type == "circle"
    assert figure == Figure(CIRCLE)
    assert encoder.encode(figure) == text


def test_decoder_rejects_bad_text():
    logger, capture = _capturing_logger("bad_decoder")
    decoder = FigureDecoder(logger=logger)
    decoder.init(None)

    assert not decoder.will_decode('{"type": "circle"')
    assert not decoder.will_decode('{"r": NaN}')
    with pytest.raises(DecodingError):
        decoder.decode('{"type": "circle"')
    assert decoder.get_stats()['error_count'] == 1
    assert LogEvent.DECODING_ERROR.value in capture.events()

    decoder.destroy()
    with pytest.raises(LifecycleViolation):
        decoder.decode('{}')
    with pytest.raises(LifecycleViolation):
        decoder.will_decode('{}')


def test_decoder_requires_init():
    logger, capture = _capturing_logger("fresh_decoder")
    decoder = FigureDecoder(logger=logger)
    assert decoder.state is CodecState.UNINITIALIZED

    with pytest.raises(LifecycleViolation, match="uninitialized"):
        decoder.decode('{}')
    with pytest.raises(LifecycleViolation):
        decoder.will_decode('{}')
    assert capture.events().count(LogEvent.LIFECYCLE_VIOLATION.value) == 2

    decoder.init(None)
    assert decoder.decode('{}').to_text() == '{}'


def test_publisher_sends_encoded_text():
    logger, capture = _capturing_logger("publisher", level=logging.DEBUG)
    sent = []
    publisher = FigurePublisher(send=sent.append, logger=logger, config=EndpointConfig())

    with publisher:
        assert publisher.is_open()
        assert publisher.publish_figure(Figure(CIRCLE))
        assert not publisher.publish_figure(Figure())

    assert sent == [CIRCLE_TEXT]
    assert not publisher.is_open()
    assert publisher.get_stats() == {
        'published_count': 1,
        'failed_count': 1,
        'encoder_state': 'destroyed',
    }
    assert LogEvent.FIGURE_PUBLISHED.value in capture.events()


def test_publisher_send_failure_is_reported():
    logger, capture = _capturing_logger("broken_pipe")

    def send(text):
        raise ConnectionError("socket closed")

    publisher = FigurePublisher(send=send, logger=logger)
    publisher.open()
    assert publisher.publish_figure(Figure(CIRCLE)) is False
    assert publisher.get_stats()['failed_count'] == 1
    assert LogEvent.SEND_ERROR.value in capture.events()
    publisher.close()


def test_publisher_requires_open():
    logger, _ = _capturing_logger("closed")
    publisher = FigurePublisher(send=lambda text: None, logger=logger)
    with pytest.raises(LifecycleViolation):
        publisher.publish_figure(Figure(CIRCLE))


def main():
    """Run all tests."""
    tests = [
        test_encode_circle_example,
        test_encode_is_deterministic,
        test_lifecycle_states,
        test_encode_before_init_fails,
        test_encode_after_destroy_fails,
        test_invalid_lifecycle_transitions,
        test_encode_rejects_missing_value,
        test_encode_with_settings,
        test_per_message_logging_is_debug,
        test_concurrent_encode,
        test_decoder_round_trip,
        test_decoder_rejects_bad_text,
        test_decoder_requires_init,
        test_publisher_sends_encoded_text,
        test_publisher_send_failure_is_reported,
        test_publisher_requires_open,
    ]
    for test in tests:
        test()
        print(f"✓ {test.__name__}")
    print("✅ ALL CODEC TESTS PASSED")


if __name__ == "__main__":
    main()
