from setuptools import setup

setup(
    name="proton-caller",
    version="1.3.0",
    packages=["proton_caller"],
    python_requires=">=3.8",
    description="Run any Windows program through Valve's Proton",
    long_description="Command line launcher that resolves a Proton install from "
    "the STEAM and PC_COMMON environment variables and runs a program with it.",
    license="MIT",
    data_files=[("share/proton-caller", ["share/HELP"])],
    entry_points={
        "console_scripts": ["proton-call=proton_caller.cli:main"],
    },
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Environment :: Console",
        "Operating System :: POSIX :: Linux",
        "Topic :: Games/Entertainment",
    ],
)
