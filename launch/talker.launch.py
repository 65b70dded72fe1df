"""
Talker Launch File

Starts the talker node which:
- Publishes the greeting on /chatter
- Broadcasts world -> talk on /tf

Name and frequency are passed through as positional arguments.
"""
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():
    return LaunchDescription([
        DeclareLaunchArgument(
            'name',
            default_value='Saumil',
            description='Name included in every chatter message'
        ),
        DeclareLaunchArgument(
            'frequency',
            default_value='10',
            description='Publish rate in Hz (positive integer)'
        ),

        Node(
            package='chatter_broadcaster',
            executable='talker',
            name='talker',
            output='screen',
            arguments=[
                LaunchConfiguration('name'),
                LaunchConfiguration('frequency'),
            ]
        ),
    ])
