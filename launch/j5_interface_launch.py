#!/usr/bin/env python3

import launch
import launch_ros.actions
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration

def generate_launch_description():
    linear_arg = DeclareLaunchArgument(
        'linear_velocity',
        default_value='0.0',
        description='Forward velocity command in m/s'
    )
    angular_arg = DeclareLaunchArgument(
        'angular_velocity',
        default_value='0.0',
        description='Turn rate command in rad/s'
    )

    j5_node = launch_ros.actions.Node(
        package='j5_interface',
        executable='j5_interface',
        name='j5_interface',
        output='screen',
        arguments=[
            LaunchConfiguration('linear_velocity'),
            LaunchConfiguration('angular_velocity')
        ]
    )

    return launch.LaunchDescription([
        linear_arg,
        angular_arg,
        j5_node
    ])
