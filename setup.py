from setuptools import setup, find_packages

setup(
    name="chunkio",
    version="0.1",
    description="Chunked file reading with line reassembly across chunk boundaries",
    author='chunkio team',
    packages=find_packages("src"),
    package_dir={'': 'src'},
    python_requires=">=3.7",
    extras_require={
        "test": [
            "pytest>=7.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "chunkio-lines=chunkio.cli:lines_main",
            "chunkio-chunks=chunkio.cli:chunks_main"
        ]
    }
)
