import math

import pytest

from chatter_broadcaster.emitters import MessageEmitter, TransformEmitter, format_payload


def test_payload_format():
    assert format_payload('Bob', 0) == 'Hello...This is Bob 0'
    assert format_payload('Saumil', 42) == 'Hello...This is Saumil 42'


def test_message_emitter_publishes_and_logs(context, sink):
    received = []
    context.bus.subscribe('chatter', received.append)
    emitter = MessageEmitter(context, 'Bob')

    msg = emitter.emit(3)
    context.poll_pending_events()

    assert msg.data == 'Hello...This is Bob 3'
    assert [m.data for m in received] == ['Hello...This is Bob 3']
    assert sink.messages('INFO') == ['Hello...This is Bob 3']


def test_message_backlog_drops_oldest(context):
    received = []
    context.bus.subscribe('chatter', received.append)
    emitter = MessageEmitter(context, 'Bob')

    for count in range(1001):
        emitter.emit(count)
    context.poll_pending_events()

    assert len(received) == 1000
    assert received[0].data == 'Hello...This is Bob 1'
    assert received[-1].data == 'Hello...This is Bob 1000'


def test_transform_values(context):
    transform = TransformEmitter(context).emit()

    c, s = math.cos(0.785), math.sin(0.785)
    rotation = transform.transform.rotation
    translation = transform.transform.translation

    assert transform.header.frame_id == 'world'
    assert transform.child_frame_id == 'talk'
    assert (translation.x, translation.y, translation.z) == (1.0, 1.0, 1.0)
    assert rotation.x == pytest.approx(s * c * (c - s))
    assert rotation.y == pytest.approx(s * c * (c + s))
    assert rotation.z == pytest.approx(s * c * (c - s))
    assert rotation.w == pytest.approx(c ** 3 + s ** 3)
    norm = math.sqrt(rotation.x ** 2 + rotation.y ** 2 + rotation.z ** 2 + rotation.w ** 2)
    assert norm == pytest.approx(1.0)


def test_only_stamp_changes_between_ticks(context, clock):
    received = []
    context.bus.subscribe('tf', received.append)
    emitter = TransformEmitter(context)

    emitter.emit()
    clock.advance(0.1)
    emitter.emit()
    context.poll_pending_events()

    first, second = received
    assert first.transform == second.transform
    assert first.transform is not second.transform
    assert second.header.stamp.to_float() == pytest.approx(first.header.stamp.to_float() + 0.1)


def test_rotation_components_are_plain_floats(context):
    # geometry_msgs setters reject numpy scalars
    rotation = TransformEmitter(context).build().transform.rotation
    assert all(type(v) is float for v in (rotation.x, rotation.y, rotation.z, rotation.w))
