"""
ROS 2 Bus Context

Backs the broadcaster with a real rclpy node:
- 'chatter' publisher with KEEP_LAST history (drop-oldest once full)
- tf2_ros TransformBroadcaster on /tf
- node clock for stamps
- spin_once(timeout_sec=0) as the non-blocking event poll

Local message dataclasses are converted to ROS interfaces here and
nowhere else.
"""

import rclpy
from rclpy.node import Node
from rclpy.qos import QoSProfile, ReliabilityPolicy, HistoryPolicy

from std_msgs.msg import String
from geometry_msgs.msg import TransformStamped
from tf2_ros import TransformBroadcaster

from .context import BusContext
from .diagnostics import LoggerSink
from .messages import Time


def to_ros_string(msg):
    ros_msg = String()
    ros_msg.data = msg.data
    return ros_msg


def to_ros_transform(msg):
    t = TransformStamped()
    t.header.stamp.sec = msg.header.stamp.sec
    t.header.stamp.nanosec = msg.header.stamp.nanosec
    t.header.frame_id = msg.header.frame_id
    t.child_frame_id = msg.child_frame_id

    t.transform.translation.x = msg.transform.translation.x
    t.transform.translation.y = msg.transform.translation.y
    t.transform.translation.z = msg.transform.translation.z

    t.transform.rotation.x = msg.transform.rotation.x
    t.transform.rotation.y = msg.transform.rotation.y
    t.transform.rotation.z = msg.transform.rotation.z
    t.transform.rotation.w = msg.transform.rotation.w
    return t


class RosStringPublisher:
    def __init__(self, publisher):
        self.publisher = publisher

    def publish(self, message):
        self.publisher.publish(to_ros_string(message))


class RosTransformBroadcaster:
    def __init__(self, broadcaster: TransformBroadcaster):
        self.broadcaster = broadcaster

    def send_transform(self, transform):
        self.broadcaster.sendTransform(to_ros_transform(transform))


class RosBusContext(BusContext):
    """Context backed by an rclpy node. rclpy must already be initialized."""

    def __init__(self, node_name='talker'):
        self.node = Node(node_name)
        super().__init__(LoggerSink(self.node.get_logger()))

    def create_publisher(self, topic, depth):
        qos = QoSProfile(
            reliability=ReliabilityPolicy.RELIABLE,
            history=HistoryPolicy.KEEP_LAST,
            depth=depth
        )
        return RosStringPublisher(self.node.create_publisher(String, topic, qos))

    def create_transform_broadcaster(self):
        return RosTransformBroadcaster(TransformBroadcaster(self.node))

    def now(self):
        stamp = self.node.get_clock().now().to_msg()
        return Time(sec=stamp.sec, nanosec=stamp.nanosec)

    def poll_pending_events(self):
        rclpy.spin_once(self.node, timeout_sec=0.0)

    def ok(self):
        return super().ok() and rclpy.ok()

    def close(self):
        self.diagnostics.info('Shutting down talker')
        self.node.destroy_node()
