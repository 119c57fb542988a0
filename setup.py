from setuptools import setup, find_packages
import version

setup(
    name="ble-advertising",
    packages=find_packages(exclude=("test",)),
    version=version.version,
    license="LGPLv3",
    install_requires=[
        "typedargs>=1.0.0,<2"
    ],
    extras_require={
        'test': ["pytest>=6"]
    },
    python_requires=">=3.7,<4",
    entry_points={'console_scripts': ['ble-advert-decode = ble_advertising.scripts.decode_advert:main'],
                  'iotile.config_variables': ['ble_advertising = ble_advertising.config_variables:get_variables']},
    description="BLE Advertisement Decoding Package",
    author="Arch Systems",
    author_email="info@archsys.io",
    url="http://github.com/iotile/coretools",
    keywords=["ble", "bluetooth", "advertisement", "iotile"],
    classifiers=[
        "Programming Language :: Python",
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: GNU Library or Lesser General Public License (LGPL)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    long_description="""\
BLE Advertisement Decoding Library
----------------------------------

Decodes Bluetooth Low-Energy advertisements into a single normalized record,
whether they arrive as raw advertisement bytes (Android) or as a pre-parsed
CoreBluetooth advertisement dictionary (iOS).
"""
)
