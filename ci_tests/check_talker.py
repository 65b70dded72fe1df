#!/usr/bin/env python3
"""
CI Check: Talker Output Validation
Run against a live talker. Exits non-zero on failure.
"""
import math
import re
import sys
import time
import rclpy
from rclpy.node import Node
from std_msgs.msg import String
from tf2_msgs.msg import TFMessage

PAYLOAD = re.compile(r'^Hello\.\.\.This is (.+) (\d+)$')


class TalkerCheck(Node):
    def __init__(self):
        super().__init__('check_talker')
        self.messages = []
        self.transforms = []
        self.create_subscription(String, '/chatter', self.chatter_cb, 1000)
        self.create_subscription(TFMessage, '/tf', self.tf_cb, 100)

    def chatter_cb(self, msg):
        self.messages.append(msg.data)

    def tf_cb(self, msg):
        for t in msg.transforms:
            if t.header.frame_id == 'world' and t.child_frame_id == 'talk':
                self.transforms.append(t)

    def run(self, duration=3.0):
        start = time.time()
        while (time.time() - start) < duration:
            rclpy.spin_once(self, timeout_sec=0.1)

        if len(self.messages) < 2:
            self.get_logger().error(f"FAIL: Only {len(self.messages)} chatter messages received")
            return 1
        self.get_logger().info(f"PASS: Received {len(self.messages)} chatter messages")

        # TEST: payload format and consecutive counters
        counts = []
        for data in self.messages:
            match = PAYLOAD.match(data)
            if not match:
                self.get_logger().error(f"FAIL: Unexpected payload '{data}'")
                return 1
            counts.append(int(match.group(2)))
        for prev, cur in zip(counts, counts[1:]):
            if cur != prev + 1:
                self.get_logger().error(f"FAIL: Counter jumped from {prev} to {cur}")
                return 1
        self.get_logger().info("PASS: Payload format and counter sequence")

        if not self.transforms:
            self.get_logger().error("FAIL: No world -> talk transform received")
            return 1

        # TEST: fixed translation, unit quaternion, non-decreasing stamps
        prev_stamp = 0.0
        for t in self.transforms:
            tr = t.transform.translation
            if (tr.x, tr.y, tr.z) != (1.0, 1.0, 1.0):
                self.get_logger().error(f"FAIL: Translation changed to ({tr.x}, {tr.y}, {tr.z})")
                return 1
            q = t.transform.rotation
            norm = math.sqrt(q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w)
            if abs(norm - 1.0) > 1e-6:
                self.get_logger().error(f"FAIL: Rotation not normalized ({norm:.6f})")
                return 1
            stamp = t.header.stamp.sec + t.header.stamp.nanosec * 1e-9
            if stamp < prev_stamp:
                self.get_logger().error("FAIL: Transform stamps went backwards")
                return 1
            prev_stamp = stamp
        self.get_logger().info(f"PASS: {len(self.transforms)} transforms constant and in order")

        return 0


def main():
    rclpy.init()
    node = TalkerCheck()
    result = node.run()
    node.destroy_node()
    rclpy.shutdown()
    sys.exit(result)

if __name__ == '__main__':
    main()
