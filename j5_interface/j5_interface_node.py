#!/usr/bin/env python3
"""
J5 example node.

Publishes a constant velocity command on /j5_cmd at 10 Hz and logs the J5
status messages received on /j5_status.

    ros2 run j5_interface j5_interface [linearVelocity] [angularVelocity]

linearVelocity is the forward velocity in m/s (default 0.0, limited to +/-3.0),
angularVelocity the turn rate in rad/s (default 0.0, limited to +/-1.0).
The J5 will attempt to perform the commanded motion but does not guarantee
that it is achieved exactly.
"""
import sys
import threading

import rclpy
from rclpy.exceptions import ROSInterruptException
from rclpy.executors import MultiThreadedExecutor
from rclpy.node import Node
from rclpy.utilities import remove_ros_args
from geometry_msgs.msg import Twist
from j5_msgs.msg import J5Status

from j5_interface.command import build_command
from j5_interface.config import DEFAULT_CONFIG
from j5_interface.control_loop import CancellationToken, PublishLoop
from j5_interface.status import StatusHandler


def to_twist(command):
    msg = Twist()
    # body coordinates, x is forward linear motion
    msg.linear.x = command.linear_speed
    # rotation around the z axis
    msg.angular.z = command.angular_rate
    # all other fields are ignored by the J5
    return msg


class J5Interface(Node):
    def __init__(self, config=DEFAULT_CONFIG):
        super().__init__(config.NODE_NAME)
        self.config = config

        # Publisher to the J5 velocity command topic
        self.publisher_ = self.create_publisher(Twist, config.CMD_TOPIC, config.QUEUE_DEPTH)

        # J5 status feedback
        self.subscriber_ = self.create_subscription(
            J5Status,
            config.STATUS_TOPIC,
            StatusHandler(self.get_logger()),
            config.QUEUE_DEPTH
        )

    def publish_command(self, command):
        self.publisher_.publish(to_twist(command))


def main(args=None):
    if args is None:
        args = sys.argv
    config = DEFAULT_CONFIG

    # everything that isn't a ROS argument is a velocity command parameter
    command = build_command(remove_ros_args(args), config)

    rclpy.init(args=args)
    node = J5Interface(config)

    token = CancellationToken()
    node.context.on_shutdown(token.cancel)

    loop = PublishLoop(node.publish_command, node.get_logger(), command)
    node.get_logger().info(
        f'Commanding linear={command.linear_speed}, angular={command.angular_rate} '
        f'on {config.CMD_TOPIC} at {config.LOOP_RATE} Hz, status from {config.STATUS_TOPIC}')

    # callbacks and the rate timer are serviced from a background executor
    executor = MultiThreadedExecutor()
    executor.add_node(node)
    spin_thread = threading.Thread(target=executor.spin, daemon=True)
    spin_thread.start()
    rate = node.create_rate(config.LOOP_RATE)

    def stop_executor():
        executor.shutdown()
        spin_thread.join(timeout=1.0)

    loop.start()
    try:
        loop.run(lambda: rclpy.ok() and not token.cancelled, rate.sleep)
    except (KeyboardInterrupt, ROSInterruptException):
        pass
    finally:
        # exit status is 0 whatever happens during teardown
        loop.stop(stop_executor, node.destroy_node, rclpy.try_shutdown)


if __name__ == '__main__':
    main()
