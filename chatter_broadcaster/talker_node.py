"""
Talker Node

Publishes "Hello...This is <name> <count>" on /chatter and broadcasts a
fixed world -> talk transform on /tf at the configured rate.

Usage:
    ros2 run chatter_broadcaster talker [name] [frequency_hz]
"""

import sys

import rclpy
from rclpy.signals import SignalHandlerOptions
from rclpy.utilities import remove_ros_args

from .broadcast_loop import BroadcastLoop
from .config import configure
from .context import install_shutdown_handlers
from .ros_context import RosBusContext


def main(args=None):
    # Signals only set the shutdown flag; the loop checks it between ticks
    rclpy.init(args=args, signal_handler_options=SignalHandlerOptions.NO)
    argv = remove_ros_args(args=sys.argv if args is None else args)[1:]

    context = None
    exit_code = 0
    try:
        context = RosBusContext('talker')
        install_shutdown_handlers(context)
        config = configure(argv, context)
        exit_code = BroadcastLoop(context, config).run()
    except KeyboardInterrupt:
        pass
    finally:
        if context is not None:
            context.close()
        if rclpy.ok():
            rclpy.shutdown()

    return exit_code


if __name__ == '__main__':
    sys.exit(main())
