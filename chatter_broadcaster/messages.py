"""
Message Definitions (Local mirrors of ROS 2 interfaces)

Simplified Python classes mirroring the structure of:
- std_msgs/String
- geometry_msgs/TransformStamped

The ROS context converts these into the real interfaces at the edge,
so the broadcast logic never imports rclpy.
"""

from dataclasses import dataclass, field

# === Primitives ===

@dataclass
class Time:
    sec: int = 0
    nanosec: int = 0

    @staticmethod
    def from_float(timestamp: float):
        t = Time()
        t.sec = int(timestamp)
        t.nanosec = int((timestamp - int(timestamp)) * 1e9)
        return t

    def to_float(self) -> float:
        return self.sec + self.nanosec * 1e-9

@dataclass
class Header:
    stamp: Time = field(default_factory=Time)
    frame_id: str = ""

# === Geometry ===

@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

@dataclass
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

@dataclass
class Transform:
    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)

# === Outbound Messages ===

@dataclass
class ChatterMessage:
    data: str = ""

@dataclass
class StampedTransform:
    header: Header = field(default_factory=Header)
    child_frame_id: str = ""
    transform: Transform = field(default_factory=Transform)
