from setuptools import setup, find_packages
import os
from glob import glob

package_name = 'chatter_broadcaster'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['tests']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'),
            glob('launch/*.py')),
    ],
    install_requires=['setuptools', 'scipy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Robot Team',
    maintainer_email='robot@example.com',
    description='Periodic chatter publisher and world -> talk transform broadcaster',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'talker = chatter_broadcaster.talker_node:main',
            'talker_local = chatter_broadcaster.local_talker:main',
        ],
    },
)
