from setuptools import setup, find_packages

setup(
    name="workout_analytics",
    version="1.0.0",
    packages=find_packages(include=["workout_analytics", "workout_analytics.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
)
