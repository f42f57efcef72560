from setuptools import setup, find_packages

setup(
    name="bppscan",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Report the bits-per-pixel ratio of image files under a directory.",
    long_description=open("README.md").read() if __file__ else "",
    long_description_content_type="text/markdown",
    install_requires=[
        "Pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "bppscan=bppscan.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
