from setuptools import setup


setup(
    name="streamwrap",
    version="0.1.0",
    description="Streaming word-wrap engine and command line tool",
    author="streamwrap developers",
    license="Public Domain",
    packages=[
        "streamwrap",
    ],
    install_requires=[
        req for req in open("requirements.txt").read().split("\n") if len(req) > 0
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">3.8",
    entry_points={
        "console_scripts": [
            "streamwrap = streamwrap.__main__:cli",
        ],
    },
)
