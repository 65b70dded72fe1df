"""
Chatter Broadcaster - Package Init

This package:
- Publishes a sequence-numbered greeting on 'chatter' at a fixed rate
- Broadcasts a constant world -> talk transform every tick
- Validates its positional arguments (name, frequency) before starting

This package does NOT:
- Implement the pub/sub middleware (rclpy or the local MessageBus does)
- Subscribe to anything or serve requests
"""
