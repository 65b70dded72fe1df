"""
Per-tick emitters: the chatter greeting and the world -> talk transform.
"""

from scipy.spatial.transform import Rotation as R

from .messages import ChatterMessage, Header, Quaternion, StampedTransform, Transform, Vector3

CHATTER_TOPIC = 'chatter'
CHATTER_QUEUE_DEPTH = 1000

PARENT_FRAME = 'world'
CHILD_FRAME = 'talk'
TRANSLATION = (1.0, 1.0, 1.0)
ROLL = PITCH = YAW = 1.57  # radians


def format_payload(name, count):
    return f'Hello...This is {name} {count}'


class MessageEmitter:
    """Publishes the counter-stamped greeting on 'chatter'."""

    def __init__(self, context, name):
        self.name = name
        self.log = context.diagnostics
        self.publisher = context.create_publisher(CHATTER_TOPIC, CHATTER_QUEUE_DEPTH)

    def emit(self, count) -> ChatterMessage:
        msg = ChatterMessage(data=format_payload(self.name, count))
        self.log.info(msg.data)
        # Overflow is handled by the publisher queue (oldest dropped)
        self.publisher.publish(msg)
        return msg


class TransformEmitter:
    """Broadcasts the fixed world -> talk transform with a fresh stamp."""

    def __init__(self, context):
        self.context = context
        self.broadcaster = context.create_transform_broadcaster()
        # Extrinsic xyz, same convention as tf setRPY; as_quat() is (x, y, z, w)
        x, y, z, w = R.from_euler('xyz', [ROLL, PITCH, YAW]).as_quat()
        self.rotation = Quaternion(x=float(x), y=float(y), z=float(z), w=float(w))

    def build(self) -> StampedTransform:
        x, y, z = TRANSLATION
        return StampedTransform(
            header=Header(stamp=self.context.now(), frame_id=PARENT_FRAME),
            child_frame_id=CHILD_FRAME,
            transform=Transform(
                translation=Vector3(x=x, y=y, z=z),
                rotation=Quaternion(
                    x=self.rotation.x,
                    y=self.rotation.y,
                    z=self.rotation.z,
                    w=self.rotation.w,
                ),
            ),
        )

    def emit(self) -> StampedTransform:
        transform = self.build()
        self.broadcaster.send_transform(transform)
        return transform
