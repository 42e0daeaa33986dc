from setuptools import setup, find_packages

setup(
    name="git-aiadd",
    version="1.0.0",
    description="git add wrapper with a toggleable AI development mode driven by ai.gitignore",
    author="Maze",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "click>=8.0.0",
        "colorama>=0.4.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "git-aiadd=aiadd.cli:main",
        ],
    },
    python_requires=">=3.9",
)
