from setuptools import setup, find_packages

setup(
    name="neuronlayout",
    version="0.1.0",
    description="Neuron classification state for a 2D neuron layout editor",
    author="neuronlayout Contributors",
    license="MIT",
    packages=find_packages(include=["neuronlayout", "neuronlayout.*"]),
    python_requires=">=3.8",
    install_requires=[
        "torch>=1.12.0",
        "numpy>=1.21.0",
        "PyQt5>=5.15.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=3.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
)
