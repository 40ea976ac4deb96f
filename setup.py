from setuptools import setup, find_packages

setup(
    name="arc_summary",
    version="0.3.0",
    description="Human-readable report of the ZFS ARC statistics on Linux",
    license="BSD-2-Clause",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: BSD License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Filesystems",
        "Topic :: System :: Monitoring",
    ],
    keywords=[
        "ZFS",
        "OpenZFS",
        "ARC",
        "kstat",
    ],

    packages=find_packages(include=["arc_summary", "arc_summary.*"]),
    include_package_data=True,
    python_requires=">=3.6",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "arc_summary = arc_summary._cli:main",
        ],
    },
    zip_safe=False,
    test_suite="arc_summary.test",
)

# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
